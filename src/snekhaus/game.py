"""Top-level game state machine: idle, running, paused, ended."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from snekhaus.config import GameConfig
from snekhaus.errors import ArenaSaturated, ArenaSizeUnknown
from snekhaus.geometry import Direction, Size
from snekhaus.haus import SnekHaus, StepKind, StepResult
from snekhaus.scores import HighScoreStore
from snekhaus.view import GameView, PhaseTag, build_view

logger = logging.getLogger(__name__)


class Intent(enum.Enum):
    """Discrete commands a player or driver can send to the game."""

    MOVE_NORTH = "move_north"
    MOVE_EAST = "move_east"
    MOVE_SOUTH = "move_south"
    MOVE_WEST = "move_west"
    START = "start"
    PAUSE = "pause"
    RESUME = "resume"
    QUIT = "quit"
    TERMINATE = "terminate"

    @property
    def direction(self) -> Direction | None:
        """The movement direction for move intents, else ``None``."""
        return _MOVES.get(self)


_MOVES: dict[Intent, Direction] = {
    Intent.MOVE_NORTH: Direction.NORTH,
    Intent.MOVE_EAST: Direction.EAST,
    Intent.MOVE_SOUTH: Direction.SOUTH,
    Intent.MOVE_WEST: Direction.WEST,
}


# --- phases ---
# Each phase that needs an arena holds it; moving to the next phase hands
# the same SnekHaus over, so only one phase ever references it.


@dataclass(frozen=True)
class Idle:
    tag: ClassVar[PhaseTag] = PhaseTag.IDLE


@dataclass(frozen=True)
class Running:
    haus: SnekHaus
    tag: ClassVar[PhaseTag] = PhaseTag.RUNNING


@dataclass(frozen=True)
class Paused:
    haus: SnekHaus
    tag: ClassVar[PhaseTag] = PhaseTag.PAUSED


@dataclass(frozen=True)
class Ended:
    haus: SnekHaus
    final_score: int
    tag: ClassVar[PhaseTag] = PhaseTag.ENDED


@dataclass(frozen=True)
class Terminated:
    tag: ClassVar[PhaseTag] = PhaseTag.TERMINATED


Phase = Idle | Running | Paused | Ended | Terminated


@dataclass(frozen=True)
class TickReport:
    """What one tick did.

    *result* is ``None`` when the phase does not step the arena.
    *new_high_score* is set when the tick ended a session with a score
    above the previous best; the caller is expected to persist it.
    """

    result: StepResult | None = None
    new_high_score: int | None = None


class Game:
    """Phase-driven wrapper around a single :class:`SnekHaus` session.

    External drivers call :meth:`on_tick` at a fixed interval and
    :meth:`on_intent` for every command they receive. At most one
    direction intent is honoured between two ticks.
    """

    def __init__(
        self,
        best_score: int = 0,
        arena_size: tuple[int, int] | None = None,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
        on_high_score: Callable[[int], object] | None = None,
    ) -> None:
        if best_score < 0:
            raise ValueError("best_score must be non-negative.")
        self.config = config if config is not None else GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.best_score = best_score
        self.on_high_score = on_high_score
        self.arena_size: Size | None = None
        self._size_locked = False
        self._intent_consumed = False
        self._phase: Phase = Idle()
        if arena_size is not None:
            self.set_arena_size(*arena_size)

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def haus(self) -> SnekHaus | None:
        """The live arena, if the current phase holds one."""
        return getattr(self._phase, "haus", None)

    @property
    def terminated(self) -> bool:
        return isinstance(self._phase, Terminated)

    def set_arena_size(self, width: int, height: int) -> bool:
        """Record the surface-provided arena size.

        The size is fixed once the first arena has been built; later calls
        are ignored. Returns True if the size was accepted.
        """
        if self._size_locked:
            logger.debug("Arena size already fixed at %s; ignoring %dx%d.",
                         self.arena_size, width, height)
            return False
        self.arena_size = Size.of(width, height)
        return True

    # --- events ---

    def on_tick(self) -> TickReport:
        """Advance the game by one tick.

        Only a running game steps its arena; every tick re-arms direction
        input.
        """
        self._intent_consumed = False
        phase = self._phase
        if not isinstance(phase, Running):
            return TickReport()

        haus = phase.haus
        result = haus.step()
        if result.kind is StepKind.COLLIDED:
            logger.info("Snek collided with score %d.", haus.score)
            return TickReport(result, self._finish(haus))

        if result.kind is StepKind.CONSUMED:
            try:
                self._spawn(haus)
            except ArenaSaturated:
                logger.warning("Arena saturated with score %d; ending game.", haus.score)
                return TickReport(result, self._finish(haus))

        return TickReport(result)

    def on_intent(self, intent: Intent) -> bool:
        """Apply *intent* to the current phase.

        Returns True if the intent had an effect.
        """
        phase = self._phase
        if isinstance(phase, Terminated):
            return False
        if intent is Intent.TERMINATE:
            self._transition(Terminated())
            return True

        if isinstance(phase, Idle):
            if intent is Intent.START:
                self._start()
                return True
            if intent is Intent.QUIT:
                self._transition(Terminated())
                return True
            return False

        if isinstance(phase, Running):
            direction = intent.direction
            if direction is not None:
                return self._steer(phase.haus, direction)
            if intent is Intent.PAUSE:
                self._transition(Paused(phase.haus))
                return True
            if intent is Intent.QUIT:
                self._quit(phase.haus)
                return True
            return False

        if isinstance(phase, Paused):
            if intent is Intent.RESUME:
                self._transition(Running(phase.haus))
                return True
            if intent is Intent.QUIT:
                self._quit(phase.haus)
                return True
            return False

        # Ended: start, resume, or quit all return to the title screen.
        if intent in (Intent.START, Intent.RESUME, Intent.QUIT):
            self._transition(Idle())
            return True
        return False

    def current_phase(self) -> GameView:
        """Return a read-only snapshot of the current phase."""
        phase = self._phase
        return build_view(
            phase.tag,
            self.best_score,
            self.arena_size,
            haus=getattr(phase, "haus", None),
            final_score=getattr(phase, "final_score", None),
        )

    # --- internals ---

    def _start(self) -> None:
        if self.arena_size is None:
            raise ArenaSizeUnknown("Arena size must be set before starting a game.")
        haus = SnekHaus(self.arena_size, self.config.initial_length)
        self._spawn(haus)
        self._size_locked = True
        self._intent_consumed = False
        self._transition(Running(haus))

    def _spawn(self, haus: SnekHaus) -> None:
        haus.spawn_morsel(
            self.rng,
            max_attempts=self.config.spawn_attempts,
            max_growth_value=self.config.max_growth_value,
        )

    def _steer(self, haus: SnekHaus, direction: Direction) -> bool:
        if self._intent_consumed:
            logger.debug("Dropping %s; a direction was already taken this tick.",
                         direction.name)
            return False
        self._intent_consumed = True
        return haus.change_direction(direction)

    def _quit(self, haus: SnekHaus) -> None:
        logger.info("Game quit early with score %d.", haus.score)
        self._transition(Ended(haus, haus.score))

    def _finish(self, haus: SnekHaus) -> int | None:
        """End the session, returning the new best score if one was set."""
        final_score = haus.score
        new_high: int | None = None
        if final_score > self.best_score:
            self.best_score = final_score
            new_high = final_score
            logger.info("New high score: %d.", final_score)
            if self.on_high_score is not None:
                self.on_high_score(final_score)
        self._transition(Ended(haus, final_score))
        return new_high

    def _transition(self, phase: Phase) -> None:
        logger.info("Phase %s -> %s.", self._phase.tag.value, phase.tag.value)
        self._phase = phase


def new_game(
    store: HighScoreStore | None = None,
    config: GameConfig | None = None,
    rng: np.random.Generator | None = None,
    arena_size: tuple[int, int] | None = None,
) -> Game:
    """Build an idle game, loading and persisting the best score via *store*."""
    best = store.load() if store is not None else 0
    return Game(
        best_score=best,
        arena_size=arena_size,
        config=config,
        rng=rng,
        on_high_score=store.save if store is not None else None,
    )


# Terminal key names, resolved against the phase
# because the space bar doubles as start, pause, resume, and restart.
_KEY_MOVES: dict[str, Intent] = {
    "up": Intent.MOVE_NORTH,
    "w": Intent.MOVE_NORTH,
    "down": Intent.MOVE_SOUTH,
    "s": Intent.MOVE_SOUTH,
    "left": Intent.MOVE_WEST,
    "a": Intent.MOVE_WEST,
    "right": Intent.MOVE_EAST,
    "d": Intent.MOVE_EAST,
}

_SPACE_INTENTS: dict[PhaseTag, Intent] = {
    PhaseTag.IDLE: Intent.START,
    PhaseTag.RUNNING: Intent.PAUSE,
    PhaseTag.PAUSED: Intent.RESUME,
    PhaseTag.ENDED: Intent.START,
}


def intent_for_key(key: str, phase: PhaseTag) -> Intent | None:
    """Translate a key name into the intent it means in *phase*."""
    key = key.lower()
    if key in ("esc", "escape"):
        return Intent.TERMINATE
    if key == "q":
        return Intent.QUIT
    if key in (" ", "space"):
        return _SPACE_INTENTS.get(phase)
    if phase is PhaseTag.RUNNING:
        return _KEY_MOVES.get(key)
    return None
