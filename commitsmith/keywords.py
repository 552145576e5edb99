"""Backtick quoting of language keywords in commit messages."""

import re
from typing import Iterable

from commitsmith.vocabulary import KEYWORDS

# Already quoted spans are left as they are
QUOTED_SPAN_REGEX = re.compile(r"(`[^`]*`)")


def build_keywords_regex(keywords: Iterable[str]) -> re.Pattern:
    """Build a regex matching any keyword as a standalone word."""
    alternatives = sorted(set(keywords), key=len, reverse=True)
    return re.compile(
        r"(?<!\w)(" + "|".join(re.escape(word) for word in alternatives) + r")(?!\w)"
    )


KEYWORDS_REGEX = build_keywords_regex(KEYWORDS)


def quote_keywords(message: str, keywords: Iterable[str] = KEYWORDS) -> str:
    """Wrap standalone keyword occurrences in backticks.

    Args:
        message: The commit message.
        keywords: Words to quote. Defaults to KEYWORDS.

    Returns:
        The message with e.g. "self" replaced by "`self`". Words inside an
        existing backtick span and keywords embedded in larger identifiers
        ("selfie") are not touched.
    """
    if keywords is KEYWORDS:
        regex = KEYWORDS_REGEX
    else:
        keywords = [word for word in keywords if word]
        if not keywords:
            return message
        regex = build_keywords_regex(keywords)

    parts = QUOTED_SPAN_REGEX.split(message)
    # Odd indices are the quoted spans captured by split
    return "".join(
        part if i % 2 else regex.sub(r"`\1`", part)
        for i, part in enumerate(parts)
    )
