"""Loading and validating game maps.

A map is a grid of rows, each a list of one-character strings, indexed
as grid[y][x]. The symbols are '1' (wall), '0' (floor), 'P' (player),
'E' (exit) and 'C' (coin).
"""

from __future__ import annotations

import os
from dataclasses import dataclass

MAP_EXTENSION = ".ber"
MIN_HEIGHT = 3
MIN_WIDTH = 5
ALLOWED_SYMBOLS = frozenset("10PEC\n")

_VISITED = "V"
_TAKEN_COIN = "c"


class MapError(ValueError):
    """Raised when a map file cannot be read or its content is invalid."""


@dataclass(frozen=True)
class Point:
    """A position or a size on the map grid."""

    x: int = 0
    y: int = 0


def _row_length(row) -> int:
    """Length of a row, not counting a trailing newline."""
    length = 0
    for ch in row:
        if ch == "\n":
            break
        length += 1
    return length


def _cells(grid):
    for y, row in enumerate(grid):
        for x, ch in enumerate(row):
            yield y, x, ch


def has_map_extension(path):
    """Return True if the path ends with the map extension."""
    return os.fspath(path).endswith(MAP_EXTENSION)


def count_lines(path):
    """Return the number of lines in the file, counting an unterminated last one."""
    try:
        with open(path, "rb") as handle:
            return sum(1 for _ in handle)
    except OSError as exc:
        raise MapError("Opening file failed") from exc


def read_map(path):
    """Read a map file into a grid of mutable rows without newlines."""
    if not has_map_extension(path):
        raise MapError("Opening file failed or wrong map extension")
    try:
        with open(path, "rb") as handle:
            text = handle.read().decode("latin-1")
    except OSError as exc:
        raise MapError("Opening file failed or wrong map extension") from exc
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [list(line) for line in lines]


def count_coins(grid):
    """Return the number of coins on the map."""
    return sum(1 for _, _, ch in _cells(grid) if ch == "C")


def find_map_size(grid):
    """Return the map size, or Point(0, 0) if it is not a large enough rectangle."""
    if not grid:
        return Point(0, 0)
    width = _row_length(grid[0])
    if any(_row_length(row) != width for row in grid):
        return Point(0, 0)
    height = len(grid)
    if height < MIN_HEIGHT or width < MIN_WIDTH:
        return Point(0, 0)
    return Point(width, height)


def check_symbols(grid):
    """Raise MapError if the map holds a symbol other than 1, 0, P, E, C."""
    for y, x, ch in _cells(grid):
        if ch not in ALLOWED_SYMBOLS:
            raise MapError(f"Map content is not valid: {ch!r} at ({x}, {y})")


def check_counts(grid):
    """Raise MapError unless there is one exit, one player and at least one coin."""
    exits = players = coins = 0
    for _, _, ch in _cells(grid):
        if ch == "E":
            exits += 1
        elif ch == "P":
            players += 1
        elif ch == "C":
            coins += 1
    if exits != 1 or players != 1 or coins < 1:
        raise MapError(
            f"Map content is not valid: {exits} exit(s), {players} player(s), {coins} coin(s)"
        )


def find_player(grid):
    """Return the position of the first player, or Point(0, 0) if there is none."""
    for y, x, ch in _cells(grid):
        if ch == "P":
            return Point(x, y)
    return Point(0, 0)


def _inside(size: Point, y: int, x: int) -> bool:
    return 0 < y < size.y - 1 and 0 < x < size.x - 1


def _neighbours(y: int, x: int):
    # Pushed in reverse so they are explored right, left, down, up.
    return ((y - 1, x), (y + 1, x), (y, x - 1), (y, x + 1))


def mark_reachable_coins(grid, size, y, x):
    """Flood from (x, y): reachable coins become 'c', other cells 'V'.

    Walls and the exit block the way. The grid is changed in place.
    """
    stack = [(y, x)]
    while stack:
        cy, cx = stack.pop()
        if not _inside(size, cy, cx):
            continue
        ch = grid[cy][cx]
        if ch in ("1", "E", _VISITED, _TAKEN_COIN):
            continue
        grid[cy][cx] = _TAKEN_COIN if ch == "C" else _VISITED
        stack.extend(_neighbours(cy, cx))


def all_coins_reachable(grid):
    """Return True if no unmarked coin is left after mark_reachable_coins."""
    return count_coins(grid) == 0


def exit_reachable(grid, size, y, x):
    """Return True if the exit can be reached from (x, y) without crossing walls.

    Explored cells are marked 'V' in place.
    """
    stack = [(y, x)]
    while stack:
        cy, cx = stack.pop()
        if not _inside(size, cy, cx):
            continue
        ch = grid[cy][cx]
        if ch in ("1", _VISITED):
            continue
        if ch == "E":
            return True
        grid[cy][cx] = _VISITED
        stack.extend(_neighbours(cy, cx))
    return False


def walls_closed(grid, size):
    """Return True if the map border is made only of walls."""
    top, bottom = grid[0], grid[size.y - 1]
    if any(top[x] != "1" or bottom[x] != "1" for x in range(size.x)):
        return False
    return all(row[0] == "1" and row[size.x - 1] == "1" for row in grid[: size.y])