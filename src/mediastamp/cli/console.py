"""Rich console setup shared by the CLI commands.

Rich output can be turned off with the global ``--no-rich`` flag or by setting
``MEDIASTAMP_NO_RICH=1``; the flag only sets the variable, so both paths end up
here. With Rich off, consoles print plain text with no colour or highlighting,
which keeps piped output and test snapshots stable.
"""

from __future__ import annotations

import os
from contextlib import AbstractContextManager
from typing import Any

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.traceback import install as install_rich_traceback

__all__ = [
    "ConsoleManager",
    "FilenameColumn",
    "create_default_progress",
    "make_console",
    "rich_enabled",
]

NO_RICH_ENV = "MEDIASTAMP_NO_RICH"


def rich_enabled() -> bool:
    """False when MEDIASTAMP_NO_RICH is set to a truthy value."""
    return os.getenv(NO_RICH_ENV, "0").strip().lower() not in {"1", "true", "yes"}


def make_console(*, use_rich: bool | None = None, **kwargs: Any) -> Console:
    """Build a Console, plain when Rich is disabled.

    Args:
        use_rich: Force Rich on or off; ``None`` follows MEDIASTAMP_NO_RICH.
        **kwargs: Forwarded to :class:`rich.console.Console`.
    """
    if use_rich is None:
        use_rich = rich_enabled()
    if not use_rich:
        kwargs.setdefault("color_system", None)
        kwargs.setdefault("force_terminal", False)
        kwargs.setdefault("highlight", False)
    return Console(**kwargs)


class ConsoleManager(AbstractContextManager):
    """Yield a configured console for the duration of a command.

    Pretty tracebacks are routed to the managed console. Exceptions are never
    swallowed.

    Args:
        record: Keep output for ``export_text`` (used by tests).
        force_use: Force Rich on or off instead of reading MEDIASTAMP_NO_RICH.
        **console_kwargs: Extra Console arguments (``stderr``, ``soft_wrap``...).
    """

    def __init__(
        self,
        *,
        record: bool = False,
        force_use: bool | None = None,
        **console_kwargs: Any,
    ) -> None:
        self._kwargs = dict(console_kwargs, record=record)
        self._force_use = force_use
        self.console: Console | None = None

    def __enter__(self) -> Console:
        self.console = make_console(use_rich=self._force_use, **self._kwargs)
        install_rich_traceback(show_locals=True, console=self.console)
        return self.console

    def __exit__(self, exc_type, exc_val, exc_tb):  # type: ignore[override]
        if self.console is not None:
            self.console.file.flush()
        return False


class FilenameColumn(TextColumn):
    """Name of the file whose metadata is being read."""

    def __init__(self) -> None:
        super().__init__("{task.fields[filename]}")


def create_default_progress(console: Console, *, disable: bool = False) -> Progress:
    """Progress bar shown while metadata is read.

    Transient, so it is gone before the per-file rename lines are printed.
    """
    return Progress(
        SpinnerColumn(),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        FilenameColumn(),
        console=console,
        transient=True,
        disable=disable or not rich_enabled(),
    )
