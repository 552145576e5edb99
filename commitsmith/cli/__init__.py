"""CLI entry point for commitsmith.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

from typing import Optional

import typer

from commitsmith import __version__
from commitsmith.cli.hook import check_command, commit_msg_command, format_command
from commitsmith.cli.verbs import verbs_app

# Main application
app = typer.Typer(
    name="commitsmith",
    help="commitsmith: commit message policy checker and normalizer",
    add_completion=False,
)

app.add_typer(verbs_app, name="verbs")

app.command("commit-msg")(commit_msg_command)
app.command("check")(check_command)
app.command("format")(format_command)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"commitsmith {__version__}")
        raise typer.Exit()


@app.callback()
def main_command(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Validate and normalize git commit messages."""


__all__ = [
    "app",
    "verbs_app",
    "commit_msg_command",
    "check_command",
    "format_command",
    "main_command",
]
