"""Small text-scanning helpers used by the XPM reader."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def find(text, needle, limit):
    """Return the first index of needle in text, or -1.

    Returns -1 at once when needle is longer than limit.
    """
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_unquoted(text, needle, limit):
    """Like find, but ignores matches inside double-quoted stretches."""
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    quoted = False
    last_start = len(text) - len(needle)
    for pos, ch in enumerate(text[: last_start + 1]):
        if ch == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text):
    """Split text into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]