"""Validation of the map grid of a scene file."""

from __future__ import annotations

from collections.abc import Sequence
from os import PathLike

_PLAYER = frozenset("NSEW")
_WALKABLE = frozenset("0NSEW")
_SOLID = frozenset("01NSEW")
_ALLOWED = frozenset("10NSWE \t\n")


class MapError(ValueError):
    """Raised when a scene file or its map is not valid."""


def _at(grid: Sequence[str], y: int, x: int) -> str:
    row = grid[y]
    return row[x] if 0 <= x < len(row) else "\0"


def has_abnormalities(grid: Sequence[str]) -> bool:
    """Tell whether a row is empty or holds a character a map may not have."""
    return any(not row or not set(row) <= _ALLOWED for row in grid)


def extreme_line_open(line: str) -> bool:
    """Tell whether a first or last row holds floor or a player."""
    return any(ch in _WALKABLE for ch in line)


def invalid(ch: str, is_wall: bool) -> bool:
    """Tell whether ch fails as a wall, or as a map cell when is_wall is false."""
    if is_wall:
        return ch != "1"
    return ch not in _SOLID


def check_borders(grid: Sequence[str], y: int, x: int) -> bool:
    """Check a cell next to the left or right end of its row."""
    end_space = len(grid[y]) - 2
    if x == 1:
        return (
            invalid(_at(grid, y, 0), True)
            or invalid(_at(grid, y, 2), False)
            or invalid(_at(grid, y + 1, 1), False)
            or invalid(_at(grid, y - 1, 1), False)
        )
    if x == end_space:
        return (
            invalid(_at(grid, y, x - 1), False)
            or invalid(_at(grid, y, x + 1), True)
            or invalid(_at(grid, y + 1, x), False)
            or invalid(_at(grid, y - 1, x), False)
        )
    return False


def check_inside(grid: Sequence[str], y: int, x: int) -> bool:
    """Check that an inner cell is surrounded by map cells."""
    if _at(grid, y, 0) in ("\n", "\0"):
        return True
    if x <= 1 or x >= len(grid[y]) - 2:
        return False
    return (
        invalid(_at(grid, y, x - 1), False)
        or invalid(_at(grid, y, x + 1), False)
        or invalid(_at(grid, y + 1, x), False)
        or invalid(_at(grid, y - 1, x), False)
    )


def middle_line_open(grid: Sequence[str], line: int) -> bool:
    """Tell whether a row between the first and last leaves the map open."""
    row = grid[line]
    last = len(row) - 1
    for i, ch in enumerate(row):
        if i == 0 and ch == "\n":
            return True
        if ch in _WALKABLE:
            if i in (0, last):
                return True
            if check_borders(grid, line, i) or check_inside(grid, line, i):
                return True
    return False


def not_closed(grid: Sequence[str]) -> bool:
    """Tell whether the walls fail to enclose every floor cell."""
    last = len(grid) - 1
    for line in range(len(grid)):
        if line in (0, last):
            if extreme_line_open(grid[line]):
                return True
        elif middle_line_open(grid, line):
            return True
    return False


def not_solo(grid: Sequence[str]) -> bool:
    """Tell whether the map holds anything but exactly one player."""
    return sum(ch in _PLAYER for row in grid for ch in row) != 1


def check_map(grid: Sequence[str]) -> None:
    """Raise MapError unless the map is clean, closed and single-player."""
    if has_abnormalities(grid):
        raise MapError("Abnormalities found")
    if not_closed(grid):
        raise MapError("Map is not closed")
    if not_solo(grid):
        raise MapError("Map is not single player")


def check_file(path: str | PathLike[str]) -> str:
    """Return the path as text if it names a .cub file; raise MapError otherwise."""
    name = str(path)
    if not name.endswith(".cub"):
        raise MapError("Invalid file type")
    return name