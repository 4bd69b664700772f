"""Morsels and their random placement."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from snekhaus.errors import ArenaSaturated
from snekhaus.geometry import Pos

if TYPE_CHECKING:
    from snekhaus.haus import SnekHaus

logger = logging.getLogger(__name__)

MIN_GROWTH_VALUE = 1
MAX_GROWTH_VALUE = 5

# One glyph per growth value, smallest first.
MORSEL_GLYPHS: tuple[str, ...] = ("♣", "♦", "♥", "♠", "★")

DEFAULT_SPAWN_ATTEMPTS = 1000


@dataclass(frozen=True)
class Morsel:
    """A consumable cell worth *growth_value* segments and points."""

    pos: Pos
    growth_value: int

    def __post_init__(self) -> None:
        if not MIN_GROWTH_VALUE <= self.growth_value <= MAX_GROWTH_VALUE:
            raise ValueError(
                f"growth_value must be between {MIN_GROWTH_VALUE} "
                f"and {MAX_GROWTH_VALUE}."
            )
        object.__setattr__(self, "pos", Pos(*self.pos))

    @property
    def glyph(self) -> str:
        return MORSEL_GLYPHS[self.growth_value - 1]

    def to_dict(self) -> dict:
        return {"pos": list(self.pos), "growth_value": self.growth_value}


def spawn_morsel(
    haus: SnekHaus,
    rng: np.random.Generator,
    max_attempts: int = DEFAULT_SPAWN_ATTEMPTS,
    max_growth_value: int = MAX_GROWTH_VALUE,
) -> Morsel:
    """Pick a random cell clear of the snek and wrap it in a new morsel.

    Cells are sampled uniformly until one is free. After *max_attempts*
    misses the remaining free cells are enumerated and one is chosen
    directly, so a crowded arena never stalls. Raises
    :class:`ArenaSaturated` when the snek covers every cell.
    """
    if max_attempts < 0:
        raise ValueError("max_attempts must be non-negative.")
    width, height = haus.size
    snek = haus.snek

    pos: Pos | None = None
    for _ in range(max_attempts):
        candidate = Pos(int(rng.integers(0, width)), int(rng.integers(0, height)))
        if not snek.collides_with_body(candidate) and candidate != snek.head:
            pos = candidate
            break

    if pos is None:
        free = haus.free_cells(avoid_morsels=False)
        if not free:
            logger.warning("No free cells left for a morsel in a %s arena.", haus.size)
            raise ArenaSaturated(f"Arena {width}x{height} has no free cell.")
        logger.debug(
            "Random placement missed %d times; choosing among %d free cells.",
            max_attempts, len(free),
        )
        pos = free[int(rng.integers(0, len(free)))]

    growth_value = int(rng.integers(MIN_GROWTH_VALUE, max_growth_value + 1))
    return Morsel(pos=pos, growth_value=growth_value)
