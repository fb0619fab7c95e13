"""Exception types raised by fenmov."""

from pathlib import Path


class FenmovError(Exception):
    """Base error for fenmov."""


class InvalidSourceError(FenmovError):
    """Source path is missing, relative, or neither a file nor a directory."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"The source must be a valid absolute path or file name: {path}")


class InvalidTargetError(FenmovError):
    """Target path is missing, relative, or not a directory."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"The target must be a valid absolute directory path: {path}")


class TraversalError(FenmovError):
    """A directory under the source root could not be read."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read {path}: {cause}")


class MoveError(FenmovError):
    """A single file could not be relocated into the target directory."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Error {cause} occurred while moving file {path}")
