"""Traverser module for enumerating files to move."""

from .traverser import FileTraverser, TraversalResult, traverse

__all__ = [
    "FileTraverser",
    "TraversalResult",
    "traverse",
]
