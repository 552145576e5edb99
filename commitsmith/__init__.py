"""Commit message policy checker and normalizer for git hooks."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commitsmith")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
