"""Player position, facing and held keys."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_PLANE = 0.66


class Direction(Enum):
    """Starting direction, as written in the map."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @property
    def vectors(self) -> tuple[float, float, float, float]:
        """Return (dir_x, dir_y, plane_x, plane_y) for this direction."""
        return _VECTORS[self]


_VECTORS = {
    Direction.NORTH: (0.0, -1.0, -_PLANE, 0.0),
    Direction.SOUTH: (0.0, 1.0, _PLANE, 0.0),
    Direction.EAST: (1.0, 0.0, 0.0, _PLANE),
    Direction.WEST: (-1.0, 0.0, 0.0, -_PLANE),
}


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    x: float
    y: float
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0

    @classmethod
    def facing(cls, direction: Direction | str, x: float, y: float) -> Player:
        """Make a player at (x, y) looking in direction ("N", "S", "E" or "W")."""
        dir_x, dir_y, plane_x, plane_y = Direction(direction).vectors
        return cls(x, y, dir_x, dir_y, plane_x, plane_y)


@dataclass
class KeyState:
    """Movement and turning keys currently held down."""

    w: bool = False
    a: bool = False
    s: bool = False
    d: bool = False
    left: bool = False
    right: bool = False