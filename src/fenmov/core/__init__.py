"""Core module containing the run orchestrator."""

from .runner import ExitCode, MoveRunner, RunSummary, run_moves

__all__ = [
    "ExitCode",
    "MoveRunner",
    "RunSummary",
    "run_moves",
]
