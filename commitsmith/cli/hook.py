"""CLI commands that validate and rewrite commit messages."""

from pathlib import Path
from typing import Optional

import typer

from commitsmith.cli.utils import echo_stage, get_effective_policy, report_failure
from commitsmith.exceptions import CommitsmithError
from commitsmith.pipeline import clean_message, process_message, read_message_file, run_hook


def commit_msg_command(
    message_file: Path = typer.Argument(
        ...,
        help="Path to the commit message file passed by git",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show the message after each rewrite stage",
    ),
) -> None:
    """Validate and rewrite a commit message file (git commit-msg hook)."""
    try:
        policy = get_effective_policy(verbose)
        result = run_hook(message_file, policy, echo_stage if verbose else None)
    except CommitsmithError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not result.ok:
        report_failure(result.failure)
        raise typer.Exit(1)


def check_command(
    message_file: Optional[Path] = typer.Argument(
        None,
        help="Path to a commit message file",
    ),
    message: Optional[str] = typer.Option(
        None,
        "--message",
        "-m",
        help="Check this message instead of a file",
    ),
) -> None:
    """Check a commit message against the policy without changing it."""
    if (message_file is None) == (message is None):
        typer.echo("Error: Provide either a message file or --message.", err=True)
        raise typer.Exit(1)

    try:
        policy = get_effective_policy()
        text = clean_message(message) if message is not None else read_message_file(message_file)
    except CommitsmithError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    result = process_message(text, policy)
    if not result.ok:
        report_failure(result.failure)
        raise typer.Exit(1)

    typer.echo("Commit message OK.", err=True)
    if result.message != text:
        typer.echo(f"Would be rewritten as: {result.message}")


def format_command(
    message: str = typer.Option(
        ...,
        "--message",
        "-m",
        help="Commit message to format",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show the message after each rewrite stage",
    ),
) -> None:
    """Print a commit message as the hook would rewrite it."""
    try:
        policy = get_effective_policy(verbose)
    except CommitsmithError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    result = process_message(clean_message(message), policy, echo_stage if verbose else None)
    if not result.ok:
        report_failure(result.failure)
        raise typer.Exit(1)

    typer.echo(result.message)
