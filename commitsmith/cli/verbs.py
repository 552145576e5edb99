"""CLI commands for accepted verb management."""

import typer

from commitsmith.exceptions import CommitsmithError
from commitsmith.git import get_repo_root
from commitsmith.user_config import add_verb, get_verbs, remove_verb

# Subcommand group for verb management
verbs_app = typer.Typer(
    name="verbs",
    help="Manage accepted leading verbs in .commitsmith/config.yaml",
    add_completion=False,
)


@verbs_app.command("list")
def verbs_list() -> None:
    """Show the accepted leading verbs."""
    try:
        repo_root = get_repo_root()
        verbs = get_verbs(repo_root)
    except CommitsmithError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("Accepted leading verbs in .commitsmith/config.yaml:")
    typer.echo()
    for verb in verbs:
        typer.echo(f"  - {verb}")
    typer.echo()
    typer.echo(f"Total: {len(verbs)} verb(s)")


@verbs_app.command("add")
def verbs_add(
    verb: str = typer.Argument(
        ...,
        help="Verb to accept (e.g., Reworked)",
    ),
) -> None:
    """Add a verb to the accepted list."""
    try:
        repo_root = get_repo_root()
        if add_verb(repo_root, verb):
            typer.echo(f"Added verb: {verb}")
        else:
            typer.echo(f"Verb already accepted: {verb}")
    except CommitsmithError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@verbs_app.command("remove")
def verbs_remove(
    verb: str = typer.Argument(
        ...,
        help="Verb to remove from the accepted list",
    ),
) -> None:
    """Remove a verb from the accepted list."""
    try:
        repo_root = get_repo_root()
        removed = remove_verb(repo_root, verb)
    except CommitsmithError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if removed:
        typer.echo(f"Removed verb: {verb}")
    else:
        typer.echo(f"Verb not found: {verb}", err=True)
        raise typer.Exit(1)
