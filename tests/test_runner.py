"""Tests for the run orchestrator."""

from unittest.mock import patch

import pytest

from fenmov.config import MoveArguments
from fenmov.core import ExitCode, MoveRunner, RunSummary, run_moves
from fenmov.errors import TraversalError
from fenmov.traverser import FileTraverser


class TestRunSummary:
    """Tests for RunSummary."""

    def test_empty_summary(self):
        """Test a run with nothing to do."""
        summary = RunSummary()
        assert summary.moved == 0
        assert summary.failed == 0
        assert summary.untouched == 0
        assert summary.exit_code is ExitCode.OK

    def test_stopped_early_exit_code(self):
        """Test that an early stop maps to a distinct exit code."""
        summary = RunSummary(total_files=5, moved=1, stopped_early=True)
        assert summary.exit_code is ExitCode.STOPPED_ON_ERROR
        assert summary.exit_code != 0


class TestMoveRunner:
    """Tests for MoveRunner."""

    def test_moves_depth_one_files(self, tree, target):
        """Test a non-recursive run."""
        summary = run_moves(MoveArguments(source=tree, target=target))

        assert summary.total_files == 2
        assert summary.moved == 2
        assert (target / "a.txt").exists()
        assert (target / "b.txt").exists()
        assert (tree / "sub" / "c.txt").exists()

    def test_moves_all_files_recursively(self, tree, target):
        """Test a recursive run flattens the tree into the target."""
        summary = run_moves(MoveArguments(source=tree, target=target, recursive=True))

        assert summary.moved == 4
        assert sorted(p.name for p in target.iterdir()) == ["a.txt", "b.txt", "c.txt", "d.txt"]
        # Directories stay behind
        assert (tree / "sub" / "deeper").is_dir()

    def test_single_file_source(self, tree, target):
        """Test that a file given as source is moved on its own."""
        summary = run_moves(MoveArguments(source=tree / "a.txt", target=target))

        assert summary.moved == 1
        assert (target / "a.txt").exists()
        assert (tree / "b.txt").exists()

    def test_stops_on_first_error(self, five_files, target):
        """Test that a failure on the 2nd of 5 files stops the loop."""
        (target / "2.txt").write_text("already here")

        summary = run_moves(MoveArguments(source=five_files, target=target))

        assert summary.moved == 1
        assert summary.failed == 1
        assert summary.stopped_early
        assert summary.untouched == 3
        assert summary.exit_code is ExitCode.STOPPED_ON_ERROR
        for name in ["2.txt", "3.txt", "4.txt", "5.txt"]:
            assert (five_files / name).exists()
        assert not (five_files / "1.txt").exists()

    def test_skip_error_attempts_every_file(self, five_files, target):
        """Test that skip_error continues past the failing file."""
        (target / "2.txt").write_text("already here")

        summary = run_moves(MoveArguments(source=five_files, target=target, skip_error=True))

        assert summary.moved == 4
        assert summary.failed == 1
        assert summary.attempted == 5
        assert not summary.stopped_early
        assert summary.exit_code is ExitCode.OK
        assert summary.failures[0].source_path == five_files / "2.txt"
        assert (five_files / "2.txt").exists()

    def test_traversal_is_eager(self, five_files, target):
        """Test that the full file list exists before the first move."""
        runner = MoveRunner(MoveArguments(source=five_files, target=target))
        seen_lengths = []
        original_move = runner.mover.move

        def move(path):
            seen_lengths.append(len(list(five_files.iterdir())))
            return original_move(path)

        with patch.object(runner.mover, "move", side_effect=move):
            summary = runner.run()

        assert summary.total_files == 5
        assert seen_lengths == [5, 4, 3, 2, 1]

    def test_traversal_error_is_fatal_without_skip(self, tree, target):
        """Test that an unreadable directory aborts the run before any move."""

        def list_dir(self, folder):
            if folder.name == "sub":
                raise PermissionError(13, "Permission denied", str(folder))
            return sorted(folder.iterdir())

        with patch.object(FileTraverser, "_list_dir", autospec=True, side_effect=list_dir):
            with pytest.raises(TraversalError):
                run_moves(MoveArguments(source=tree, target=target, recursive=True))

        assert list(target.iterdir()) == []

    def test_traversal_error_skipped_with_skip_error(self, tree, target):
        """Test that skip_error also skips unreadable directories."""

        def list_dir(self, folder):
            if folder.name == "sub":
                raise PermissionError(13, "Permission denied", str(folder))
            return sorted(folder.iterdir())

        with patch.object(FileTraverser, "_list_dir", autospec=True, side_effect=list_dir):
            summary = run_moves(
                MoveArguments(source=tree, target=target, recursive=True, skip_error=True)
            )

        assert summary.moved == 2
        assert len(summary.traversal_errors) == 1
        assert (tree / "sub" / "c.txt").exists()
