"""The arena: one snek, its morsels, and the running score."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from snekhaus.errors import InvalidPlacement
from snekhaus.geometry import Direction, Pos, Size
from snekhaus.morsel import DEFAULT_SPAWN_ATTEMPTS, MAX_GROWTH_VALUE, Morsel, spawn_morsel
from snekhaus.snek import Snek

logger = logging.getLogger(__name__)


class StepKind(enum.Enum):
    """Outcome tags for a single arena step."""

    ONGOING = "ongoing"
    CONSUMED = "consumed"
    COLLIDED = "collided"


@dataclass(frozen=True)
class StepResult:
    """Outcome of :meth:`SnekHaus.step`; *value* is set for CONSUMED only."""

    kind: StepKind
    value: int = 0

    @classmethod
    def ongoing(cls) -> StepResult:
        return cls(StepKind.ONGOING)

    @classmethod
    def consumed(cls, value: int) -> StepResult:
        return cls(StepKind.CONSUMED, value)

    @classmethod
    def collided(cls) -> StepResult:
        return cls(StepKind.COLLIDED)


class SnekHaus:
    """Single-snek, step-based arena on a wrap-around grid.

    The arena owns the snek and the active morsels. Each call to
    :meth:`step` moves the snek one cell and reports whether it hit
    itself or ate something.
    """

    def __init__(self, size: Size, initial_length: int = 3) -> None:
        self.size = Size.of(*size)
        self.snek = Snek.create(self.size, initial_length)
        self.morsels: list[Morsel] = []
        self.score = 0

    def change_direction(self, direction: Direction) -> bool:
        return self.snek.change_direction(direction)

    def place_morsel(self, morsel: Morsel) -> None:
        """Add *morsel* to the arena.

        Raises :class:`InvalidPlacement` if the snek covers its cell.
        """
        if self.snek.occupies(morsel.pos):
            raise InvalidPlacement(
                f"Attempted to place morsel at occupied cell {tuple(morsel.pos)}."
            )
        self.morsels.append(morsel)

    def spawn_morsel(
        self,
        rng: np.random.Generator,
        max_attempts: int = DEFAULT_SPAWN_ATTEMPTS,
        max_growth_value: int = MAX_GROWTH_VALUE,
    ) -> Morsel:
        """Create a random morsel and place it in one go."""
        morsel = spawn_morsel(
            self, rng, max_attempts=max_attempts, max_growth_value=max_growth_value,
        )
        self.place_morsel(morsel)
        return morsel

    def morsel_at(self, pos: tuple[int, int]) -> Morsel | None:
        """Return the first morsel on *pos*, if any."""
        target = Pos(*pos)
        for morsel in self.morsels:
            if morsel.pos == target:
                return morsel
        return None

    def free_cells(self, avoid_morsels: bool = True) -> list[Pos]:
        """Return cells the snek does not cover, in row-major order.

        Cells holding a morsel are left out unless *avoid_morsels* is False.
        """
        taken = np.zeros((self.size.height, self.size.width), dtype=bool)
        for x, y in self.snek.body:
            taken[y, x] = True
        taken[self.snek.head.y, self.snek.head.x] = True
        if avoid_morsels:
            for m in self.morsels:
                taken[m.pos.y, m.pos.x] = True
        ys, xs = np.where(~taken)
        return [Pos(x, y) for x, y in zip(xs.tolist(), ys.tolist(), strict=True)]

    def step(self) -> StepResult:
        """Advance the arena by one tick.

        The snek moves first. A collision with its own body is reported
        before any morsel is considered and leaves the arena untouched.
        """
        self.snek.advance(self.size)

        if self.snek.self_collision():
            logger.debug("Snek hit itself at %s.", tuple(self.snek.head))
            return StepResult.collided()

        morsel = self.morsel_at(self.snek.head)
        if morsel is None:
            return StepResult.ongoing()

        self.morsels.remove(morsel)
        self.score += morsel.growth_value
        self.snek.grow(morsel.growth_value)
        return StepResult.consumed(morsel.growth_value)

    def to_dict(self) -> dict:
        """Serialize arena state to a dictionary."""
        return {
            "width": self.size.width,
            "height": self.size.height,
            "score": self.score,
            "snek": self.snek.to_dict(),
            "morsels": [m.to_dict() for m in self.morsels],
        }
