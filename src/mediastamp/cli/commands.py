"""CLI commands for mediastamp.

This module implements all user-facing CLI commands: rename, groups,
extensions and config (``version`` lives with the app in ``mediastamp.cli``).
- Uses Typer for declarative CLI structure and option parsing.
- All output is routed through Rich Console for consistent, styled UX.
- ``rename`` is a dry run unless ``--exec`` is given. A dry run walks the
  same classification and rename protocol against a no-op filesystem.

Design:
- Annotated is used for CLI argument/option definitions.
- Exit codes are defined as an Enum: 0 on success, 1 when the path cannot be
  collected, 2 when any rename in the run failed.
- Metadata is read on a background collector while a progress bar runs; the
  renames themselves happen on the main thread, one group at a time.
"""

import sys
from enum import Enum
from pathlib import Path
from typing import Annotated, Dict, List, Optional, Sequence

import typer

from mediastamp.cli import app, console, err_console
from mediastamp.cli.console import ConsoleManager, create_default_progress
from mediastamp.cli.renderer import (
    DRY_RUN_BANNER,
    ConsoleNotifier,
    group_to_json,
    render_groups,
    render_summary,
)
from mediastamp.core.collector import MetadataCollector
from mediastamp.core.grouper import classify_records
from mediastamp.core.notifier import Notifier, RecordingNotifier
from mediastamp.core.pipeline import process_groups
from mediastamp.core.scanner import collect_files, list_extensions
from mediastamp.fs.operations import filesystem_for
from mediastamp.metadata.base import MetadataProvider
from mediastamp.metadata.exiftool import ExiftoolProvider
from mediastamp.models.core import FileRecord, TimestampCandidates
from mediastamp.models.group import (
    GroupVariant,
    ImageGroup,
    LiveImageGroup,
    VideoGroup,
)
from mediastamp.utils.config import get_exiftool_command, set_exiftool_command
from mediastamp.utils.debug import debug, setup_logger
from mediastamp.utils.json import dumps


class ExitCode(int, Enum):
    """Exit codes for CLI commands."""

    SUCCESS = 0
    ERROR = 1
    RENAME_FAILED = 2


# Path argument shared by every command that reads a tree
TARGET_PATH = Annotated[
    Path,
    typer.Argument(
        help="File or directory to process (defaults to the current directory)",
    ),
]

EXECUTE = Annotated[
    bool,
    typer.Option(
        "--exec",
        help="Rename files on disk. Without it, only show what would happen.",
    ),
]

EXIFTOOL = Annotated[
    Optional[str],
    typer.Option(
        "--exiftool",
        help="exiftool executable to run (overrides MEDIASTAMP_EXIFTOOL_COMMAND "
        "and the config file)",
    ),
]

JSON_OUTPUT = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Output results in JSON format",
    ),
]

NO_OVERWRITE = Annotated[
    bool,
    typer.Option(
        "--no-overwrite",
        help="Fail (and roll back the group) instead of replacing an existing file",
    ),
]


def _collect(path: Path) -> List[FileRecord]:
    """Collect records under *path*, exiting with ExitCode.ERROR on failure."""
    try:
        return collect_files(path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(ExitCode.ERROR)


def _prefetch(
    provider: MetadataProvider,
    groups: Sequence[GroupVariant],
    *,
    quiet: bool,
) -> Dict[str, TimestampCandidates]:
    """Read timestamps for every renamable group behind a progress bar."""
    renamable = [
        g for g in groups if isinstance(g, (ImageGroup, VideoGroup, LiveImageGroup))
    ]
    prefetched: Dict[str, TimestampCandidates] = {}
    if not renamable:
        return prefetched

    collector = MetadataCollector(provider)
    with create_default_progress(err_console, disable=quiet) as progress:
        task = progress.add_task(
            "Reading metadata", total=len(renamable), filename=""
        )
        collector.start(renamable)
        try:
            for collected in collector.results():
                prefetched[collected.group.key] = collected.timestamps
                progress.update(
                    task, advance=1, filename=collected.group.governing.path.name
                )
        except KeyboardInterrupt:
            collector.cancel()
            raise
    return prefetched


@app.command()
def rename(  # noqa: PLR0913
    path: TARGET_PATH = Path("."),
    execute: EXECUTE = False,
    exiftool: EXIFTOOL = None,
    json_output: JSON_OUTPUT = False,
    no_overwrite: NO_OVERWRITE = False,
) -> None:
    """Rename every file group under PATH after its capture timestamp."""
    root = path.resolve()
    records = _collect(root)
    groups = classify_records(records)
    banner = DRY_RUN_BANNER.format(path=root)

    command = get_exiftool_command(exiftool)
    debug(f"rename: {len(records)} files, {len(groups)} groups, exiftool={command}")
    provider = ExiftoolProvider(command)
    fs = filesystem_for(execute, overwrite=not no_overwrite)

    with ConsoleManager(soft_wrap=True) as out, ConsoleManager(
        soft_wrap=True, stderr=True
    ) as err:
        if not execute and not json_output:
            out.print(banner, markup=False)

        prefetched = _prefetch(provider, groups, quiet=json_output)
        recorder = RecordingNotifier()
        notifier: Notifier = recorder if json_output else ConsoleNotifier(out, err)
        summary = process_groups(groups, provider, fs, notifier, prefetched)

        if json_output:
            payload = {
                "dry_run": not execute,
                "events": [e.model_dump(mode="json") for e in recorder.events],
                "summary": summary.model_dump(mode="json"),
            }
            sys.stdout.write(dumps(payload) + "\n")
        else:
            render_summary(summary, console=out)
            if not execute:
                out.print(banner, markup=False)

    if summary.failed:
        raise typer.Exit(ExitCode.RENAME_FAILED)


@app.command()
def groups(
    path: TARGET_PATH = Path("."),
    json_output: JSON_OUTPUT = False,
) -> None:
    """Show how files under PATH are grouped, without reading any metadata."""
    variants = classify_records(_collect(path.resolve()))
    if json_output:
        sys.stdout.write(dumps([group_to_json(g) for g in variants]) + "\n")
        return
    with ConsoleManager(soft_wrap=True) as out:
        render_groups(variants, console=out)


@app.command()
def extensions(path: TARGET_PATH = Path(".")) -> None:
    """List the distinct file extensions found under PATH."""
    root = path.resolve()
    try:
        found = list_extensions(root)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(ExitCode.ERROR)
    if not found:
        console.print("[yellow]No file extensions found.[/yellow]")
        return
    for ext in found:
        console.print(ext, markup=False, highlight=False)


@app.command("config")
def config_command(
    exiftool: Annotated[
        Optional[str],
        typer.Option(
            "--exiftool",
            help="Persist this exiftool executable as the default",
        ),
    ] = None,
) -> None:
    """Show or set the persisted configuration."""
    if exiftool is not None:
        set_exiftool_command(exiftool)
        console.print(f"Default exiftool command set to: [bold]{exiftool}[/bold]")
        return
    console.print(f"exiftool.command = [bold]{get_exiftool_command()}[/bold]")


def main() -> None:
    """Main entry point for the CLI."""
    setup_logger()
    app()


if __name__ == "__main__":
    main()
