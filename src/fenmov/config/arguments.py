"""Validated invocation arguments for a single move run."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from ..errors import InvalidSourceError, InvalidTargetError
from .models import ConflictPolicy


def validate_source(path: Path | str) -> Path:
    """
    Check that the source is an absolute path to an existing file or directory.

    Raises:
        InvalidSourceError: If the path is relative or does not exist.
    """
    path = Path(path)
    if path.is_absolute() and (path.is_dir() or path.is_file()):
        return path
    raise InvalidSourceError(path)


def validate_target(path: Path | str) -> Path:
    """
    Check that the target is an absolute path to an existing directory.

    Raises:
        InvalidTargetError: If the path is relative, missing, or not a directory.
    """
    path = Path(path)
    if path.is_absolute() and path.is_dir():
        return path
    raise InvalidTargetError(path)


class MoveArguments(BaseModel):
    """
    Arguments of one fenmov invocation.

    Built once from the command line and immutable afterwards. Validation
    errors propagate as InvalidSourceError / InvalidTargetError.
    """

    model_config = ConfigDict(frozen=True)

    source: Path
    target: Path
    recursive: bool = False
    skip_error: bool = False
    on_conflict: ConflictPolicy = ConflictPolicy.FAIL

    @field_validator("source", mode="before")
    @classmethod
    def check_source(cls, v) -> Path:
        return validate_source(v)

    @field_validator("target", mode="before")
    @classmethod
    def check_target(cls, v) -> Path:
        return validate_target(v)
