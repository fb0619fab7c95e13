"""Command-line entry point for fenmov."""

from .main import cli

__all__ = ["cli"]
