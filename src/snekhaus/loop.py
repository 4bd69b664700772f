"""Cooperative single-threaded driver alternating input polls and ticks."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Protocol

import numpy as np

from snekhaus.game import Game, Intent
from snekhaus.view import GameView, PhaseTag

logger = logging.getLogger(__name__)

_MOVE_INTENTS = (
    Intent.MOVE_NORTH,
    Intent.MOVE_EAST,
    Intent.MOVE_SOUTH,
    Intent.MOVE_WEST,
)


class IntentSource(Protocol):
    """Anything that can be polled for the next intent."""

    def poll(self, timeout: float) -> Intent | None:
        """Wait at most *timeout* seconds for an intent."""
        ...


def run_loop(
    game: Game,
    source: IntentSource,
    *,
    tick_interval: float | None = None,
    clock: Callable[[], float] = time.monotonic,
    on_frame: Callable[[GameView], object] | None = None,
    max_ticks: int | None = None,
) -> int:
    """Drive *game* until it terminates or *max_ticks* ticks have fired.

    Each iteration draws a frame, polls for at most one intent with a
    timeout no longer than the time left until the next tick, and then
    ticks if the interval has elapsed. Returns the number of ticks fired.
    """
    interval = tick_interval if tick_interval is not None else game.config.tick_interval
    if interval <= 0:
        raise ValueError("tick_interval must be positive.")

    ticks = 0
    last_tick = clock()
    while not game.terminated:
        if max_ticks is not None and ticks >= max_ticks:
            break
        if on_frame is not None:
            on_frame(game.current_phase())

        remaining = max(0.0, interval - (clock() - last_tick))
        intent = source.poll(remaining)
        if intent is not None:
            game.on_intent(intent)
            if game.terminated:
                break

        if clock() - last_tick >= interval:
            game.on_tick()
            ticks += 1
            last_tick = clock()

    logger.info("Loop stopped after %d ticks in phase %s.", ticks, game.phase.tag.value)
    return ticks


class SimulatedClock:
    """Manually advanced clock for headless runs and tests."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RandomIntentSource:
    """Headless player that turns at random and leaves once the game ends.

    Every poll consumes its full timeout on the simulated clock.
    """

    def __init__(
        self,
        game: Game,
        clock: SimulatedClock,
        rng: np.random.Generator | None = None,
        turn_probability: float = 0.2,
    ) -> None:
        if not 0.0 <= turn_probability <= 1.0:
            raise ValueError("turn_probability must be between 0 and 1.")
        self.game = game
        self.clock = clock
        self.rng = rng if rng is not None else np.random.default_rng()
        self.turn_probability = turn_probability

    def poll(self, timeout: float) -> Intent | None:
        self.clock.advance(timeout)
        tag = self.game.phase.tag
        if tag is PhaseTag.ENDED:
            return Intent.TERMINATE
        if tag is PhaseTag.IDLE:
            return Intent.START
        if tag is PhaseTag.RUNNING and self.rng.random() < self.turn_probability:
            return _MOVE_INTENTS[int(self.rng.integers(0, len(_MOVE_INTENTS)))]
        return None
