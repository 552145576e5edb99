"""Commit message policy checks.

Three checks run in a fixed order and the first violation wins:
- check_charset: only English letters, digits and a few path characters
- check_leading_verb: the message starts with an accepted past-tense verb
- check_punctuation: no punctuation outside the allow-list

Each check returns a ValidationFailure, or None when the message passes.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from commitsmith.vocabulary import VERBS

# Characters a message may consist of
CHARSET_REGEX = re.compile(r"[A-Za-z0-9./\\:`\- ]")

# Anything that is not a word character, whitespace or an allowed mark
PUNCTUATION_REGEX = re.compile(r"[^\w\s./\\:`\-]", re.ASCII)


class FailureKind(Enum):
    """Kinds of policy violations."""

    NON_ENGLISH_CHARACTERS = "non-english-characters"
    MISSING_LEADING_VERB = "missing-leading-verb"
    DISALLOWED_PUNCTUATION = "disallowed-punctuation"


@dataclass(frozen=True)
class ValidationFailure:
    """A single policy violation found in a commit message.

    Attributes:
        kind: Which check failed.
        detail: Human-readable explanation.
        position: Index of the offending character, if any.
        character: The offending character, if any.
    """

    kind: FailureKind
    detail: str
    position: Optional[int] = None
    character: Optional[str] = None

    def describe(self) -> str:
        """Render the failure as a user-facing report."""
        if self.character is not None:
            return f"{self.detail} (found {self.character!r} at position {self.position})"
        return self.detail


def check_charset(message: str) -> Optional[ValidationFailure]:
    """Check that the message is written only with English letters."""
    for position, char in enumerate(message):
        if not CHARSET_REGEX.fullmatch(char):
            return ValidationFailure(
                kind=FailureKind.NON_ENGLISH_CHARACTERS,
                detail="Commit message must be written only with English letters",
                position=position,
                character=char,
            )
    return None


def match_leading_verb(message: str, verbs: Iterable[str] = VERBS) -> Optional[str]:
    """Return the accepted verb the message starts with, or None.

    The verb must be followed by a non-word character or the end of the message.
    """
    verbs = list(verbs)
    if not verbs:
        return None
    pattern = r"(?:" + "|".join(re.escape(verb) for verb in verbs) + r")(?!\w)"
    match = re.match(pattern, message)
    return match.group() if match else None


def check_leading_verb(message: str, verbs: Iterable[str] = VERBS) -> Optional[ValidationFailure]:
    """Check that the first word is an accepted verb in the past simple form.

    Args:
        message: The commit message.
        verbs: Accepted leading verbs (case-sensitive).

    Returns:
        A failure listing the accepted verbs, or None.
    """
    verbs = list(verbs)
    if match_leading_verb(message, verbs) is not None:
        return None
    return ValidationFailure(
        kind=FailureKind.MISSING_LEADING_VERB,
        detail=(
            "First word of commit message must be a verb in the past simple form: "
            + ", ".join(verbs)
        ),
    )


def check_punctuation(message: str) -> Optional[ValidationFailure]:
    """Check that the message has no punctuation marks outside the allow-list."""
    match = PUNCTUATION_REGEX.search(message)
    if match is None:
        return None
    return ValidationFailure(
        kind=FailureKind.DISALLOWED_PUNCTUATION,
        detail="Commit message should not contain punctuation marks",
        position=match.start(),
        character=match.group(),
    )


def validate(message: str, verbs: Iterable[str] = VERBS) -> Optional[ValidationFailure]:
    """Run all checks in order and return the first failure.

    Args:
        message: The commit message.
        verbs: Accepted leading verbs.

    Returns:
        The first ValidationFailure found, or None if the message is accepted.
    """
    return (
        check_charset(message)
        or check_leading_verb(message, verbs)
        or check_punctuation(message)
    )
