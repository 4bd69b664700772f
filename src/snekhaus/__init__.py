"""Snekhaus — wrap-around snake simulation core."""

from snekhaus.config import GameConfig
from snekhaus.errors import (
    ArenaSaturated,
    ArenaSizeUnknown,
    InvalidPlacement,
    SnekHausError,
)
from snekhaus.game import Game, Intent, TickReport, new_game
from snekhaus.geometry import Direction, Pos, Size, wrap
from snekhaus.haus import SnekHaus, StepKind, StepResult
from snekhaus.morsel import Morsel, spawn_morsel
from snekhaus.snek import Snek
from snekhaus.view import GameView, PhaseTag

__all__ = [
    "ArenaSaturated",
    "ArenaSizeUnknown",
    "Direction",
    "Game",
    "GameConfig",
    "GameView",
    "Intent",
    "InvalidPlacement",
    "Morsel",
    "PhaseTag",
    "Pos",
    "Size",
    "SnekHaus",
    "SnekHausError",
    "Snek",
    "StepKind",
    "StepResult",
    "TickReport",
    "new_game",
    "spawn_morsel",
    "wrap",
]
