"""Read-only snapshots of a game for renderers and remote clients."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from snekhaus.geometry import Direction, Pos, Size

if TYPE_CHECKING:
    from snekhaus.haus import SnekHaus


class PhaseTag(enum.Enum):
    """Public names of the game phases."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"
    TERMINATED = "terminated"


class CellType(enum.IntEnum):
    """Integer codes stored in a rendered cell grid."""

    EMPTY = 0
    BODY = 1
    HEAD = 2
    MORSEL = 3


@dataclass(frozen=True)
class MorselView:
    pos: Pos
    growth_value: int
    glyph: str


@dataclass(frozen=True)
class GameView:
    """Immutable picture of a game at one instant.

    Arena fields are ``None``/empty while no arena exists (idle and
    terminated phases).
    """

    phase: PhaseTag
    best_score: int
    arena_size: Size | None = None
    score: int | None = None
    final_score: int | None = None
    head: Pos | None = None
    body: tuple[Pos, ...] = ()
    direction: Direction | None = None
    morsels: tuple[MorselView, ...] = ()

    @property
    def has_arena(self) -> bool:
        return self.head is not None

    def cells(self) -> np.ndarray:
        """Render the arena into a ``(height, width)`` array of CellType codes."""
        if self.arena_size is None:
            return np.zeros((0, 0), dtype=np.int8)
        width, height = self.arena_size
        grid = np.zeros((height, width), dtype=np.int8)
        for m in self.morsels:
            grid[m.pos.y, m.pos.x] = CellType.MORSEL
        for seg in self.body:
            grid[seg.y, seg.x] = CellType.BODY
        if self.head is not None:
            grid[self.head.y, self.head.x] = CellType.HEAD
        return grid

    def to_dict(self) -> dict:
        """Serialize the view to a JSON-compatible dictionary."""
        return {
            "phase": self.phase.value,
            "best_score": self.best_score,
            "arena_size": list(self.arena_size) if self.arena_size else None,
            "score": self.score,
            "final_score": self.final_score,
            "head": list(self.head) if self.head is not None else None,
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name.lower() if self.direction else None,
            "morsels": [
                {
                    "pos": list(m.pos),
                    "growth_value": m.growth_value,
                    "glyph": m.glyph,
                }
                for m in self.morsels
            ],
        }


def build_view(
    phase: PhaseTag,
    best_score: int,
    arena_size: Size | None,
    haus: SnekHaus | None = None,
    final_score: int | None = None,
) -> GameView:
    """Snapshot *haus* (if any) together with the phase-level fields."""
    if haus is None:
        return GameView(phase=phase, best_score=best_score, arena_size=arena_size)
    snek = haus.snek
    return GameView(
        phase=phase,
        best_score=best_score,
        arena_size=haus.size,
        score=haus.score,
        final_score=final_score,
        head=snek.head,
        body=tuple(snek.body),
        direction=snek.direction,
        morsels=tuple(
            MorselView(pos=m.pos, growth_value=m.growth_value, glyph=m.glyph)
            for m in haus.morsels
        ),
    )
