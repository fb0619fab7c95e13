"""Mover module for relocating files into the target directory."""

from .mover import FileMover, MoveResult

__all__ = [
    "FileMover",
    "MoveResult",
]
