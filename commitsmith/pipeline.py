"""Commit message pipeline: validate, rewrite and persist.

Contains:
- HookResult: Outcome of processing one commit message
- rewrite_message: Filename normalization followed by keyword quoting
- process_message: Validate a message and rewrite it if it is accepted
- read_message_file / write_message_file: Commit message file I/O
- run_hook: The commit-msg hook flow over a message file
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional

from commitsmith.exceptions import MessageFileError
from commitsmith.filenames import STAGES as FILENAME_STAGES
from commitsmith.keywords import quote_keywords
from commitsmith.policy import PolicyConfig
from commitsmith.validator import ValidationFailure, match_leading_verb, validate
from commitsmith.vocabulary import KEYWORDS

# Marker git puts above the diff in verbose commits
SCISSORS_REGEX = re.compile(r"^# -+ >8 -+$", re.MULTILINE)


@dataclass
class HookResult:
    """Outcome of processing one commit message.

    Attributes:
        original: The message as read.
        message: The rewritten message, or None if validation failed.
        failure: The first policy violation, or None.
    """

    original: str
    message: Optional[str] = None
    failure: Optional[ValidationFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def rewrite_message(
    message: str,
    keywords: Iterable[str] = KEYWORDS,
    trace: Optional[Callable[[str, str], None]] = None,
) -> str:
    """Normalize filenames, then quote keywords.

    Args:
        message: A message that passed validation.
        keywords: Words to wrap in backticks.
        trace: Optional callback receiving (stage name, output) after each stage.

    Returns:
        The rewritten message.
    """
    stages = [(stage.__name__, stage) for stage in FILENAME_STAGES]
    stages.append(("quote_keywords", lambda text: quote_keywords(text, keywords)))
    for name, stage in stages:
        message = stage(message)
        if trace is not None:
            trace(name, message)
    return message


def process_message(
    message: str,
    config: Optional[PolicyConfig] = None,
    trace: Optional[Callable[[str, str], None]] = None,
) -> HookResult:
    """Validate a message and rewrite it if it passes.

    Args:
        message: The commit message.
        config: Policy to apply. Defaults to the built-in policy.
        trace: Optional stage callback, see rewrite_message.

    Returns:
        HookResult with either the rewritten message or the failure.
    """
    config = config or PolicyConfig()
    failure = validate(message, config.verbs)
    if failure is not None:
        return HookResult(original=message, failure=failure)

    # The accepted verb is kept out of the rewrite: "Updated/x.rb" stays "Updated `x.rb`"
    verb = match_leading_verb(message, config.verbs)
    rest = message[len(verb):]
    body = rewrite_message(rest, config.keywords, trace)
    if not body:
        rewritten = verb
    elif not rest[0].isspace() and body.startswith(rest[0]):
        # "Fixed: bug" keeps its colon attached
        rewritten = verb + body
    else:
        rewritten = f"{verb} {body}"
    return HookResult(original=message, message=rewritten)


def clean_message(text: str) -> str:
    """Drop git comment lines and surrounding whitespace.

    Everything below the scissors line written by `git commit --verbose`
    (the staged diff) is dropped as well.
    """
    scissors = SCISSORS_REGEX.search(text)
    if scissors is not None:
        text = text[: scissors.start()]
    lines = [line for line in text.splitlines() if not line.startswith("#")]
    return "\n".join(lines).strip()


def read_message_file(path: Path) -> str:
    """Read and clean the commit message file.

    Raises:
        MessageFileError: If the file does not exist or cannot be read.
    """
    path = Path(path)
    if not path.is_file():
        raise MessageFileError(f"Commit message file not found: {path}")
    try:
        return clean_message(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise MessageFileError(f"Failed to read commit message from {path}: {e}")


def write_message_file(path: Path, message: str) -> None:
    """Replace the commit message file content with message."""
    path = Path(path)
    try:
        path.write_text(message + "\n", encoding="utf-8")
    except OSError as e:
        raise MessageFileError(f"Failed to write commit message to {path}: {e}")


def run_hook(
    path: Path,
    config: Optional[PolicyConfig] = None,
    trace: Optional[Callable[[str, str], None]] = None,
) -> HookResult:
    """Run the commit-msg flow on a message file.

    The file is rewritten only when the message is accepted; on failure it
    is left untouched.
    """
    result = process_message(read_message_file(path), config, trace)
    if result.ok:
        write_message_file(path, result.message)
    return result
