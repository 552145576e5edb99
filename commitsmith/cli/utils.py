"""Shared helpers for commitsmith CLI commands."""

import typer

from commitsmith.git import find_repo_root
from commitsmith.policy import PolicyConfig
from commitsmith.user_config import load_policy
from commitsmith.validator import ValidationFailure


def get_effective_policy(verbose: bool = False) -> PolicyConfig:
    """Load the policy of the current repository, or the defaults outside one.

    Raises:
        ConfigError: If the repository config is invalid.
    """
    repo_root = find_repo_root()
    if verbose:
        source = repo_root / ".commitsmith" / "config.yaml" if repo_root else "built-in defaults"
        typer.echo(f"Policy: {source}", err=True)
    return load_policy(repo_root)


def echo_stage(name: str, message: str) -> None:
    """Print one rewrite stage to stderr."""
    typer.echo(f"  {name}: {message}", err=True)


def report_failure(failure: ValidationFailure) -> None:
    """Print a policy violation to stderr."""
    typer.echo(f"Error: {failure.describe()}", err=True)
