"""Mover component that relocates files with the operating system's rename primitive."""

import errno
import os
from dataclasses import dataclass
from pathlib import Path

from ..config.models import ConflictPolicy
from ..errors import MoveError
from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class MoveResult:
    """Result of a file move operation."""

    source_path: Path
    destination_path: Path

    success: bool
    error: MoveError | None = None

    @property
    def filename(self) -> str:
        """Base name of the moved file."""
        return self.source_path.name

    @property
    def error_message(self) -> str | None:
        """Human-readable error, if the move failed."""
        return str(self.error) if self.error is not None else None


class FileMover:
    """
    Moves files into a single target directory, keeping their base names.

    Moves are plain renames: same-filesystem moves are atomic and
    cross-filesystem moves fail with whatever error the OS reports.
    """

    def __init__(self, target_dir: Path, on_conflict: ConflictPolicy = ConflictPolicy.FAIL):
        """
        Initialize the file mover.

        Args:
            target_dir: Directory that receives the files
            on_conflict: What to do when the destination already exists
        """
        self.target_dir = Path(target_dir)
        self.on_conflict = ConflictPolicy(on_conflict)

    def destination_for(self, source: Path) -> Path:
        """Destination path for ``source`` inside the target directory."""
        return self.target_dir / Path(source).name

    def _check_destination(self, source: Path, destination: Path):
        """Raise OSError when the destination may not be written."""
        if not os.path.lexists(destination):
            return

        if destination.resolve() == source.resolve():
            raise OSError(errno.EEXIST, "File is already in the target directory", str(destination))

        if self.on_conflict is ConflictPolicy.FAIL:
            raise FileExistsError(errno.EEXIST, "Destination already exists", str(destination))

        if destination.is_dir():
            raise IsADirectoryError(errno.EISDIR, "Destination is a directory", str(destination))

    def move(self, source: Path) -> MoveResult:
        """
        Move a file into the target directory.

        Args:
            source: File to move

        Returns:
            MoveResult with operation status
        """
        source = Path(source)
        destination = self.destination_for(source)

        try:
            self._check_destination(source, destination)
            if self.on_conflict is ConflictPolicy.OVERWRITE:
                os.replace(source, destination)
            else:
                os.rename(source, destination)

        except OSError as e:
            error = MoveError(source, e)
            logger.error(str(error))
            return MoveResult(
                source_path=source,
                destination_path=destination,
                success=False,
                error=error,
            )

        logger.info(
            f"Moved file {source.name} from path {source.parent} to target path {self.target_dir}"
        )
        return MoveResult(source_path=source, destination_path=destination, success=True)
