"""Small string helpers: substring search and whitespace word splitting."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def _terminated(text: str) -> str:
    return text.split("\0", 1)[0]


def find(text: str, pattern: str, limit: int) -> int:
    """Return the first position of pattern in text, or -1.

    The search gives up at once when the pattern is longer than limit.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    if len(pattern) > limit:
        return -1
    return _terminated(text).find(pattern)


def find_unquoted(text: str, pattern: str, limit: int) -> int:
    """Like find, but skip matches that lie inside double quotes."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    if len(pattern) > limit:
        return -1
    text = _terminated(text)
    quoted = False
    for pos, ch in enumerate(text[: len(text) - len(pattern) + 1]):
        if ch == '"':
            quoted = not quoted
        if not quoted and text.startswith(pattern, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs only."""
    return [word for word in _BLANKS.split(_terminated(text)) if word]