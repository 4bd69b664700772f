"""Toroidal coordinate space for the arena."""

from __future__ import annotations

import enum
from typing import NamedTuple


class Size(NamedTuple):
    """Arena dimensions in cells."""

    width: int
    height: int

    @classmethod
    def of(cls, width: int, height: int) -> Size:
        """Build a validated size; both dimensions must be positive."""
        if width < 1 or height < 1:
            raise ValueError("Arena dimensions must be positive.")
        return cls(width, height)


class Pos(NamedTuple):
    """An (x, y) cell coordinate; x grows east, y grows south."""

    x: int
    y: int


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def delta(self) -> tuple[int, int]:
        """Return the (dx, dy) step for one move in this direction."""
        return self.value

    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


def wrap(pos: tuple[int, int], delta: tuple[int, int], size: Size) -> Pos:
    """Add *delta* to *pos* and wrap each axis around the arena edges.

    Python's ``%`` is a floored remainder, so the result lies in
    ``[0, width) x [0, height)`` for any delta, however large or negative.
    """
    x, y = pos
    dx, dy = delta
    return Pos((x + dx) % size.width, (y + dy) % size.height)
