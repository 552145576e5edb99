"""Filename normalization for commit messages.

normalize_filenames runs four stages, each feeding the next:
1. unwrap_quoted: `src/utils/helper.rb` -> helper.rb
2. drop_continued_tokens: dir1\\ dir2\\ file.rb -> file.rb
3. collapse_windows_path: lib\\util\\x.rb -> x.rb
4. quote_filenames: path/to/file.txt -> `file.txt`
"""

import re

# Backtick-quoted span
QUOTED_REGEX = re.compile(r"`(.*?)`")

# Optional non-whitespace run, a dot, then a non-whitespace extension
FILENAME_REGEX = re.compile(r"\S*\.\S+")

SEPARATOR_REGEX = re.compile(r"[\\/]")


def basename(path: str) -> str:
    """Return the last / or \\ delimited component of a path.

    Trailing separators are ignored, so "lib/util/" gives "util".
    A path made only of separators is returned unchanged.
    """
    stripped = path.rstrip("/\\")
    if not stripped:
        return path
    return SEPARATOR_REGEX.split(stripped)[-1]


def unwrap_quoted(message: str) -> str:
    """Replace every backtick-quoted span with the basename of its content."""
    message = QUOTED_REGEX.sub(lambda m: basename(m.group(1)), message)
    # Unbalanced backticks left over
    return message.replace("`", "")


def drop_continued_tokens(message: str) -> str:
    """Drop tokens ending with a backslash and rejoin with single spaces."""
    return " ".join(token for token in message.split() if not token.endswith("\\"))


def _first_windows_path(message: str):
    for token in message.split():
        if "\\" in token and basename(token) != token:
            return token
    return None


def collapse_windows_path(message: str) -> str:
    """Replace the first backslash path with its last component everywhere.

    Repeated until no collapsible backslash token is left, so running the
    stage again is a no-op. Each round removes at least one backslash.
    """
    windows_path = _first_windows_path(message)
    while windows_path is not None:
        message = message.replace(windows_path, basename(windows_path))
        windows_path = _first_windows_path(message)
    return message


def _quote_filename(match: re.Match) -> str:
    name = basename(match.group())
    # "lib.d/util" keeps only "util", which is no longer a filename
    if not FILENAME_REGEX.fullmatch(name):
        return name
    return f"`{name}`"


def quote_filenames(message: str) -> str:
    """Wrap filename-shaped tokens in backticks, keeping only the basename."""
    return FILENAME_REGEX.sub(_quote_filename, message)


# Applied in this order
STAGES = (unwrap_quoted, drop_continued_tokens, collapse_windows_path, quote_filenames)


def normalize_filenames(message: str) -> str:
    """Run all filename normalization stages in order."""
    for stage in STAGES:
        message = stage(message)
    return message
