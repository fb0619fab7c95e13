"""Run orchestrator: traverse the source once, then move every file found."""

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

from ..config.arguments import MoveArguments
from ..errors import TraversalError
from ..mover import FileMover, MoveResult
from ..traverser import FileTraverser
from ..utils.logging import get_logger

logger = get_logger(__name__)


class ExitCode(IntEnum):
    """Process exit status of a fenmov run."""

    OK = 0
    STOPPED_ON_ERROR = 1
    USAGE_ERROR = 2
    TRAVERSAL_FAILED = 3


@dataclass
class RunSummary:
    """Outcome of a move run."""

    total_files: int = 0
    moved: int = 0
    failures: list[MoveResult] = field(default_factory=list)
    traversal_errors: list[TraversalError] = field(default_factory=list)
    stopped_early: bool = False

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def attempted(self) -> int:
        return self.moved + self.failed

    @property
    def untouched(self) -> int:
        """Files never attempted because the run stopped early."""
        return self.total_files - self.attempted

    @property
    def exit_code(self) -> ExitCode:
        if self.stopped_early:
            return ExitCode.STOPPED_ON_ERROR
        return ExitCode.OK


class MoveRunner:
    """
    Drives one fenmov run.

    Pipeline: traverse source (eagerly) -> move each file in order -> summary.
    Per-file failures are skipped when ``skip_error`` is set; otherwise the
    loop stops at the first failure and the remaining files stay in place.
    """

    def __init__(self, arguments: MoveArguments):
        self.arguments = arguments
        self.traverser = FileTraverser(
            recursive=arguments.recursive,
            skip_errors=arguments.skip_error,
        )
        self.mover = FileMover(arguments.target, on_conflict=arguments.on_conflict)

    def collect(self) -> tuple[list[Path], list[TraversalError]]:
        """
        Materialize the full file list before anything is moved.

        Raises:
            TraversalError: If the source cannot be walked and skip_error is off
        """
        result = self.traverser.scan(self.arguments.source)
        return result.files, result.errors

    def run(self) -> RunSummary:
        """
        Execute the run.

        Returns:
            RunSummary with counts and failures

        Raises:
            TraversalError: If traversal fails and skip_error is off
        """
        files, traversal_errors = self.collect()
        summary = RunSummary(total_files=len(files), traversal_errors=traversal_errors)

        logger.debug(f"Found {len(files)} file(s) under {self.arguments.source}")

        for file_path in files:
            result = self.mover.move(file_path)

            if result.success:
                summary.moved += 1
                continue

            summary.failures.append(result)
            if not self.arguments.skip_error:
                summary.stopped_early = True
                logger.warning(
                    f"Stopping after error; {summary.untouched} file(s) left untouched"
                )
                break

        return summary


def run_moves(arguments: MoveArguments) -> RunSummary:
    """Convenience wrapper around MoveRunner."""
    return MoveRunner(arguments).run()
