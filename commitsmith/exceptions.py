"""Exception classes for commitsmith.

Contains:
- CommitsmithError: Base exception for commitsmith errors
- MessageFileError: Raised when the commit message file cannot be read or written
- ConfigError: Raised when the repository configuration is invalid

Policy violations are not exceptions; see commitsmith.validator.ValidationFailure.
"""


class CommitsmithError(Exception):
    """Base exception for commitsmith errors."""

    pass


class MessageFileError(CommitsmithError):
    """Raised when the commit message file cannot be read or written."""

    pass


class ConfigError(CommitsmithError):
    """Raised when the repository configuration is invalid."""

    pass
