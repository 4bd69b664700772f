"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from snekhaus.morsel import DEFAULT_SPAWN_ATTEMPTS, MAX_GROWTH_VALUE, MIN_GROWTH_VALUE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Tunables for a game and the drivers around it.

    Supports JSON serialization so a setup can be reproduced.
    """

    # Simulation
    tick_rate_ms: int = 150
    initial_length: int = 3
    max_growth_value: int = MAX_GROWTH_VALUE
    spawn_attempts: int = DEFAULT_SPAWN_ATTEMPTS

    # Arena used by drivers without a rendering surface
    arena_width: int = 40
    arena_height: int = 20

    # Paths
    high_score_path: str = ".snekhaus_high_score.txt"
    log_file: str = "snekhaus.log"

    def __post_init__(self) -> None:
        if self.tick_rate_ms < 1:
            raise ValueError("tick_rate_ms must be at least 1.")
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        if not MIN_GROWTH_VALUE <= self.max_growth_value <= MAX_GROWTH_VALUE:
            raise ValueError(
                f"max_growth_value must be between {MIN_GROWTH_VALUE} "
                f"and {MAX_GROWTH_VALUE}."
            )
        if self.spawn_attempts < 0:
            raise ValueError("spawn_attempts must be non-negative.")
        if self.arena_width < 1 or self.arena_height < 1:
            raise ValueError("arena_width and arena_height must be positive.")
        if self.arena_width <= self.initial_length:
            raise ValueError("arena_width must exceed initial_length.")

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_rate_ms / 1000.0

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
