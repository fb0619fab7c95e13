"""Traverser that enumerates the regular files under a source root."""

from dataclasses import dataclass, field
from pathlib import Path

from ..errors import TraversalError
from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class TraversalResult:
    """Files found under a root, plus any unreadable entries that were skipped."""

    root: Path
    files: list[Path] = field(default_factory=list)
    errors: list[TraversalError] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        """Number of entries skipped because they could not be read."""
        return len(self.errors)


class FileTraverser:
    """
    Walks a source root depth-first and collects regular files.

    Only the immediate entries of the root are examined unless ``recursive``
    is set. Directories, symlinks to directories and other special entries are
    never collected, and symlinked directories are not descended into.
    """

    def __init__(self, recursive: bool = False, skip_errors: bool = False):
        """
        Initialize the traverser.

        Args:
            recursive: Enumerate files at every depth instead of depth 1 only
            skip_errors: Skip unreadable entries instead of aborting
        """
        self.recursive = recursive
        self.skip_errors = skip_errors

    def _list_dir(self, folder: Path) -> list[Path]:
        """List a directory's entries sorted by name."""
        return sorted(folder.iterdir())

    def _handle_error(self, path: Path, cause: OSError, result: TraversalResult):
        """Raise or record a traversal error according to skip_errors."""
        error = TraversalError(path, cause)
        if not self.skip_errors:
            raise error from cause
        logger.warning(f"Skipping unreadable entry {path}: {cause}")
        result.errors.append(error)

    def _classify(self, entry: Path) -> str | None:
        """Return "dir", "file" or None for an entry; may raise OSError."""
        if entry.is_symlink() and entry.is_dir():
            return None
        if entry.is_dir():
            return "dir"
        if entry.is_file():
            return "file"
        return None

    def _walk(self, folder: Path, result: TraversalResult):
        try:
            entries = self._list_dir(folder)
        except OSError as e:
            self._handle_error(folder, e, result)
            return

        for entry in entries:
            try:
                kind = self._classify(entry)
            except OSError as e:
                self._handle_error(entry, e, result)
                continue

            if kind == "dir":
                if self.recursive:
                    self._walk(entry, result)
            elif kind == "file":
                result.files.append(entry)

    def scan(self, root: Path) -> TraversalResult:
        """
        Enumerate the files under ``root``.

        Args:
            root: Directory to walk, or a single file

        Returns:
            TraversalResult with every file found, in walk order

        Raises:
            TraversalError: If an entry cannot be read and skip_errors is off
        """
        root = Path(root)
        result = TraversalResult(root=root)

        try:
            root_is_file = root.is_file()
        except OSError as e:
            self._handle_error(root, e, result)
            return result

        if root_is_file:
            result.files.append(root)
        else:
            self._walk(root, result)

        logger.debug(
            f"Traversed {root} (recursive={self.recursive}): "
            f"{len(result.files)} file(s), {result.skipped_count} skipped entr(ies)"
        )
        return result


def traverse(root: Path, recursive: bool, skip_errors: bool = False) -> list[Path]:
    """
    Convenience function returning only the list of files under ``root``.

    Args:
        root: Directory to walk, or a single file
        recursive: Enumerate files at every depth
        skip_errors: Skip unreadable entries instead of aborting

    Returns:
        List of file paths
    """
    return FileTraverser(recursive=recursive, skip_errors=skip_errors).scan(root).files
