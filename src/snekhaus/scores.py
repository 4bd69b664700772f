"""Best-score persistence."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Keeps the best score as a plain-text integer in a file.

    Read and write failures are logged and never propagate: a missing or
    unreadable file loads as 0 and a failed save leaves the old value.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> int:
        """Return the stored best score, or 0 if it cannot be read."""
        try:
            text = self.path.read_text()
        except OSError as exc:
            logger.error("Error loading high score from %s: %s", self.path, exc)
            return 0
        try:
            score = int(text.strip())
        except ValueError:
            logger.error("Ignoring malformed high score in %s.", self.path)
            return 0
        return max(score, 0)

    def save(self, score: int) -> bool:
        """Persist *score*. Returns True on success."""
        try:
            self.path.write_text(str(score))
        except OSError as exc:
            logger.error("Error saving high score to %s: %s", self.path, exc)
            return False
        logger.info("High score %d saved to %s", score, self.path)
        return True
