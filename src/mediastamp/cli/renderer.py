"""Renderer for CLI output.

This module turns rename events and group classifications into console output.
- ConsoleNotifier prints one line per file outcome. Failures go to stderr.
- render_groups shows a classification preview as a Rich table.
- group_to_json gives the JSON shape used by ``groups --json``.
- render_summary prints the totals of a rename run.
"""

from pathlib import Path
from typing import Any, Dict, Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mediastamp.core.notifier import Notifier
from mediastamp.models.group import (
    GroupVariant,
    ImageGroup,
    LiveImageGroup,
    UncertainGroup,
    VideoGroup,
)
from mediastamp.models.rename import OutcomeKind, RunSummary

DRY_RUN_BANNER = "DRY RUN:: run `rename --exec '{path}'` to commit"


class ConsoleNotifier(Notifier):
    """Notifier printing each outcome as a Rich console line.

    Args:
        console: Console for successful renames and skipped files.
        err_console: Console for failed renames and rollbacks. Defaults to
            *console*.
    """

    def __init__(self, console: Console, err_console: Console | None = None) -> None:
        self.console = console
        self.err_console = err_console or console

    def rename_success(self, old: Path, new: Path) -> None:
        self.console.print(f"{escape(str(old))} -> [green]{escape(str(new))}[/green]")

    def rename_error(self, old: Path, err: str) -> None:
        self.err_console.print(f"{escape(str(old))} -> [red]{escape(err)}[/red]")

    def rollback_success(self, new: Path, old: Path) -> None:
        self.err_console.print(
            f"{escape(str(new))} -> {escape(str(old))} [yellow](ROLLBACK)[/yellow]"
        )

    def rollback_error(self, new: Path, err: str) -> None:
        self.err_console.print(
            f"[bold red]ERROR:[/bold red] rolling back the {escape(str(new))}: "
            f"{escape(err)}"
        )

    def uncertain(self, path: Path) -> None:
        self.console.print(
            f"{escape(str(path))} -> [yellow]Uncertain Primary file[/yellow]"
        )

    def unsupported(self, path: Path) -> None:
        self.console.print(f"{escape(str(path))} -> [cyan]Unsupported file[/cyan]")

    def no_timestamp(self, path: Path) -> None:
        self.console.print(
            f"{escape(str(path))} -> [magenta]No clear timestamp found[/magenta]"
        )


def group_to_json(group: GroupVariant) -> Dict[str, Any]:
    """Return the JSON-ready form of a classified group.

    Shape: ``{"type", "key", "image" | "video" | "primary", "config"}`` with
    paths as strings.
    """
    data: Dict[str, Any] = {"type": group.kind, "key": group.key}
    if isinstance(group, (ImageGroup, LiveImageGroup)):
        data["image"] = str(group.image.path)
    if isinstance(group, (VideoGroup, LiveImageGroup)):
        data["video"] = str(group.video.path)
    if isinstance(group, UncertainGroup):
        data["primary"] = [str(record.path) for record in group.primary]
    data["config"] = [str(record.path) for record in group.config]
    return data


def render_groups(
    groups: Iterable[GroupVariant], console: Console | None = None
) -> None:
    """Render a classification preview as a table.

    Args:
        groups: Classified groups, in run order.
        console: Optional Console instance to use for rendering.
    """
    console = console or Console()

    table = Table(title="File groups")
    table.add_column("Type", style="bold")
    table.add_column("Key", style="cyan")
    table.add_column("Primary", style="green")
    table.add_column("Config", style="yellow")

    type_styles = {
        "Image": "green",
        "Video": "green",
        "LiveImage": "green bold",
        "Uncertain": "yellow",
        "Unsupported": "dim",
    }

    total = 0
    for group in groups:
        total += 1
        primary = [record for record in group.members() if record.is_primary]
        table.add_row(
            group.kind,
            group.key,
            "\n".join(str(record.relative_path) for record in primary),
            "\n".join(str(record.relative_path) for record in group.config),
            style=type_styles.get(group.kind, "white"),
        )

    console.print(table)
    console.print(f"Total groups: {total}")


def render_summary(summary: RunSummary, console: Console | None = None) -> None:
    """Print the totals of a rename run."""
    console = console or Console()
    console.print(
        f"Renamed {summary.file_count} file(s) in {summary.group_count} group(s)"
    )
    skipped = sum(
        summary.by_outcome.get(kind, 0)
        for kind in (
            OutcomeKind.UNCERTAIN,
            OutcomeKind.UNSUPPORTED,
            OutcomeKind.NO_TIMESTAMP,
        )
    )
    if skipped:
        console.print(f"Skipped files: {skipped}", style="yellow")
    errors = summary.by_outcome.get(OutcomeKind.ERROR, 0)
    if errors:
        console.print(f"Groups rolled back: {errors}", style="red bold")
    stranded = summary.by_outcome.get(OutcomeKind.ROLLBACK_ERROR, 0)
    if stranded:
        console.print(
            f"Files left renamed after a failed rollback: {stranded}",
            style="bright_red bold",
        )
