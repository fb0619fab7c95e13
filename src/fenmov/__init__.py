"""
fenmov - traverse a folder hierarchy and move the files found into a target path.

Files are relocated with the operating system's rename primitive, one at a
time, with a configurable policy for per-file errors.
"""

__version__ = "0.1.1"
__license__ = "MIT"

from .config import ConflictPolicy, MoveArguments
from .core import ExitCode, MoveRunner, RunSummary, run_moves
from .errors import (
    FenmovError,
    InvalidSourceError,
    InvalidTargetError,
    MoveError,
    TraversalError,
)
from .mover import FileMover, MoveResult
from .traverser import FileTraverser, TraversalResult, traverse
from .utils.logging import get_logger

__all__ = [
    "get_logger",
    # Arguments
    "MoveArguments",
    "ConflictPolicy",
    # Traverser
    "FileTraverser",
    "TraversalResult",
    "traverse",
    # Mover
    "FileMover",
    "MoveResult",
    # Runner
    "MoveRunner",
    "RunSummary",
    "ExitCode",
    "run_moves",
    # Errors
    "FenmovError",
    "InvalidSourceError",
    "InvalidTargetError",
    "TraversalError",
    "MoveError",
]
