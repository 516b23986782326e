"""Reading XPM pixmaps into images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from solong.colors import text_to_rgb
from solong.image import Image
from solong.textscan import find, find_unquoted, split_words

_TRANSPARENT = 0xFF000000
_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"[ \t\n\r\v\f]*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _blank(text: str, start: int, length: int) -> str:
    end = min(len(text), start + length)
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text):
    """Replace C-style comments outside quoted strings with spaces."""
    while (start := find_unquoted(text, "/*", len(text))) != -1:
        rest = text[start + 2 :]
        end = find(rest, "*/", len(rest))
        text = _blank(text, start, end + 4)
    while (start := find_unquoted(text, "//", len(text))) != -1:
        rest = text[start + 2 :]
        end = find(rest, "\n", len(rest))
        text = _blank(text, start, end + 3)
    return text


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"XPM header needs four values, got {line!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header {line!r}")
    return width, height, ncolors, cpp


def _read_color(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"XPM colour line without a 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"XPM colour line without a colour: {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    return line[:cpp], text_to_rgb(words[index], end)


def xpm_to_image(lines):
    """Build an Image from XPM strings: header, colour lines, pixel rows."""
    lines = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(lines, "header"))

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, rgb = _read_color(_next_line(lines, "colour table"), cpp)
        if cpp <= 2:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    image = Image(width, height)
    for y in range(height):
        row = _next_line(lines, "pixel rows")
        if len(row) < width * cpp:
            raise XpmError(f"XPM pixel row {y} is too short: {row!r}")
        for x in range(width):
            color = palette.get(row[x * cpp : (x + 1) * cpp], 0)
            if color == -1:
                color = _TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def _quoted_strings(text: str) -> Iterator[str]:
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def xpm_text_to_image(text):
    """Build an Image from the text of an XPM file."""
    return xpm_to_image(_quoted_strings(strip_comments(text)))


def xpm_file_to_image(path):
    """Read an XPM file and return its Image."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read XPM file {path!s}: {exc}") from exc
    return xpm_text_to_image(text)