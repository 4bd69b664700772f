"""Snek representation and movement logic."""

from __future__ import annotations

from collections import deque

from snekhaus.geometry import Direction, Pos, Size, wrap


class Snek:
    """A snek made of a head plus an ordered deque of body segments.

    ``body[0]`` is the oldest segment (the tail end); ``body[-1]`` is the
    segment directly behind the head. The head is never stored in the body.
    """

    def __init__(
        self,
        head: tuple[int, int],
        body: list[tuple[int, int]] | None = None,
        direction: Direction = Direction.EAST,
        pending_growth: int = 0,
    ) -> None:
        if pending_growth < 0:
            raise ValueError("pending_growth must be non-negative.")
        self.head = Pos(*head)
        self.body: deque[Pos] = deque(Pos(*seg) for seg in body or ())
        self.direction = direction
        self.pending_growth = pending_growth

    @classmethod
    def create(cls, size: Size, initial_length: int) -> Snek:
        """Lay out a horizontal snek centred in the arena, facing east.

        The body holds *initial_length* cells left of the head. Odd lengths
        bias the extra cell to the left of centre.
        """
        if initial_length < 1:
            raise ValueError("Snek length must be at least 1.")
        if initial_length + 1 > size.width:
            raise ValueError("initial_length does not fit the arena width.")
        mid_x = size.width // 2
        mid_y = size.height // 2
        half = initial_length // 2
        left = mid_x - half - initial_length % 2
        body = [(left + i, mid_y) for i in range(initial_length)]
        return cls(head=(mid_x + half, mid_y), body=body)

    @property
    def length(self) -> int:
        """Number of cells covered, head included."""
        return len(self.body) + 1

    def change_direction(self, new_direction: Direction) -> bool:
        """Turn towards *new_direction*, ignoring repeats and reversals.

        Returns True if the facing changed.
        """
        if new_direction == self.direction:
            return False
        if new_direction.opposite() == self.direction:
            return False
        self.direction = new_direction
        return True

    def next_head(self, size: Size) -> Pos:
        """Compute the next head position without moving."""
        return wrap(self.head, self.direction.delta, size)

    def advance(self, size: Size) -> Pos | None:
        """Move one cell forward, wrapping around the arena edges.

        Returns the vacated tail cell, or ``None`` if a pending growth
        segment was retained instead.
        """
        new_head = self.next_head(size)
        self.body.append(self.head)
        self.head = new_head
        if self.pending_growth > 0:
            self.pending_growth -= 1
            return None
        return self.body.popleft()

    def grow(self, amount: int) -> None:
        """Queue *amount* segments, retained one per subsequent advance."""
        if amount < 0:
            raise ValueError("Growth amount must be non-negative.")
        self.pending_growth += amount

    def collides_with_body(self, pos: tuple[int, int]) -> bool:
        """Check whether *pos* is one of the body segments (head excluded)."""
        return Pos(*pos) in self.body

    def collides_with_head(self, pos: tuple[int, int]) -> bool:
        return self.head == Pos(*pos)

    def occupies(self, pos: tuple[int, int]) -> bool:
        """Check whether the snek covers *pos* with its head or body."""
        return self.collides_with_head(pos) or self.collides_with_body(pos)

    def self_collision(self) -> bool:
        """Check whether the head overlaps any body segment."""
        return self.collides_with_body(self.head)

    def to_dict(self) -> dict:
        """Serialize snek state to a dictionary."""
        return {
            "head": list(self.head),
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name.lower(),
            "pending_growth": self.pending_growth,
        }
