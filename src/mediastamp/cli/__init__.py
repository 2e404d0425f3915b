"""Command-line interface for mediastamp.

This package provides the Typer app and global console for all CLI commands and
user-facing output.

- app: The Typer application object, used by all CLI entrypoints and subcommands.
- console: Rich Console instance for consistent, styled output.
- err_console: Rich Console bound to stderr for failed renames and rollbacks.
- Command modules import app and console from this package so that global
  options apply to every command.
"""

import os

import typer
from rich.console import Console
from rich.traceback import install

# Load the ``console`` submodule before the global below is bound, so a later
# ``import mediastamp.cli.console`` cannot overwrite the package-level Console.
import mediastamp.cli.console  # noqa: E402,F401

# Install rich traceback handler for all CLI commands
install(show_locals=True)

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="mediastamp",
    help="Rename photos, videos and their sidecar files after their capture time.",
    add_completion=True,
)


@app.callback()
def callback(
    ctx: typer.Context,  # noqa: ARG001
    no_rich: bool = typer.Option(
        False,
        "--no-rich",
        help=(
            "Disable Rich coloured output and progress bars. "
            "Can also be set with the MEDIASTAMP_NO_RICH environment variable."
        ),
    ),
) -> None:
    """Top-level CLI callback adding global options.

    The *--no-rich* flag sets the ``MEDIASTAMP_NO_RICH`` environment variable
    so that :class:`~mediastamp.cli.console.ConsoleManager` responds the same
    way whether the flag is passed or the variable is set externally.
    """

    if no_rich:
        os.environ["MEDIASTAMP_NO_RICH"] = "1"


@app.command()
def version() -> None:
    """Show the version of mediastamp."""
    from mediastamp.__about__ import __version__

    console.print(f"mediastamp version: [bold]{__version__}[/bold]")
