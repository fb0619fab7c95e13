"""Command-line interface for fenmov using Click."""

import sys
from pathlib import Path
from typing import Optional

import click
from click.core import ParameterSource
from rich.markup import escape

from .. import __version__
from ..config import (
    ConfigManager,
    ConflictPolicy,
    MoveArguments,
    validate_source,
    validate_target,
)
from ..core import ExitCode, MoveRunner
from ..errors import InvalidSourceError, InvalidTargetError, TraversalError
from ..utils.logging import get_console, get_logger, setup_logging

console = get_console()
logger = get_logger(__name__)


def _check_source(ctx, param, value: Optional[Path]) -> Optional[Path]:
    if value is None:
        return value
    try:
        return validate_source(value)
    except InvalidSourceError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e


def _check_target(ctx, param, value: Optional[Path]) -> Optional[Path]:
    if value is None:
        return value
    try:
        return validate_target(value)
    except InvalidTargetError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e


def _flag_or_config(ctx: click.Context, name: str, value: bool, config_value: bool) -> bool:
    """Use the config value unless the flag was given on the command line."""
    if ctx.get_parameter_source(name) in (None, ParameterSource.DEFAULT):
        return config_value
    return value


@click.command(name="fenmov")
@click.version_option(version=__version__, prog_name="fenmov")
@click.option(
    "--recursive/--no-recursive",
    "-r",
    is_flag=True,
    help="Traverses folder recursively (--no-recursive overrides the config file)",
)
@click.option(
    "--source",
    "-s",
    required=True,
    type=click.Path(path_type=Path),
    callback=_check_source,
    help="Sets source path name from where files are needed to be moved",
)
@click.option(
    "--target",
    "-t",
    required=True,
    type=click.Path(path_type=Path),
    callback=_check_target,
    help="Sets target path where files will be moved",
)
@click.option(
    "--skip-error/--no-skip-error",
    "-e",
    is_flag=True,
    help="Skip error while moving files (--no-skip-error overrides the config file)",
)
@click.option(
    "--on-conflict",
    type=click.Choice([p.value for p in ConflictPolicy]),
    default=None,
    help="What to do when the target already holds a file with the same name (default: fail)",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
@click.pass_context
def cli(
    ctx: click.Context,
    recursive: bool,
    source: Path,
    target: Path,
    skip_error: bool,
    on_conflict: Optional[str],
    config_path: Optional[Path],
    verbose: bool,
):
    """
    Traverse a folder hierarchy in search of files and move them to a target path.

    Both SOURCE and TARGET must be absolute paths. Files are renamed into
    TARGET keeping their base names; directories are never moved.

    \b
    Exit status:
        0  all files attempted
        1  stopped after a move error (use --skip-error to continue)
        2  invalid arguments or configuration
        3  the source folder could not be traversed
    """
    try:
        config = ConfigManager(config_path).load()
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]✗ Configuration error:[/bold red] {escape(str(e))}")
        sys.exit(int(ExitCode.USAGE_ERROR))

    setup_logging(
        level="DEBUG" if verbose else config.logging.level,
        log_dir=config.logging.log_dir,
        max_bytes=config.logging.max_bytes,
        backup_count=config.logging.backup_count,
        console_enabled=config.logging.console_enabled,
        file_enabled=config.logging.file_enabled,
    )

    arguments = MoveArguments(
        source=source,
        target=target,
        recursive=_flag_or_config(ctx, "recursive", recursive, config.moving.recursive),
        skip_error=_flag_or_config(ctx, "skip_error", skip_error, config.moving.skip_error),
        on_conflict=on_conflict or config.moving.on_conflict,
    )
    logger.debug(f"Arguments - {arguments!r}")

    try:
        summary = MoveRunner(arguments).run()
    except TraversalError as e:
        console.print(f"[bold red]✗ Traversal failed:[/bold red] {escape(str(e))}")
        console.print("Number of file(s) moved = 0")
        sys.exit(int(ExitCode.TRAVERSAL_FAILED))

    for error in summary.traversal_errors:
        console.print(f"[yellow]⚠ Skipped:[/yellow] {escape(str(error))}")

    if summary.stopped_early:
        console.print(
            f"[red]Stopped after an error; {summary.untouched} file(s) left untouched.[/red]"
        )
    elif summary.failed:
        console.print(f"[yellow]{summary.failed} file(s) could not be moved.[/yellow]")

    console.print(f"Number of file(s) moved = {summary.moved}")

    if summary.exit_code != ExitCode.OK:
        sys.exit(int(summary.exit_code))


if __name__ == "__main__":
    cli()
