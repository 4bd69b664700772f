"""Exception hierarchy for the snekhaus simulation core."""

from __future__ import annotations


class SnekHausError(Exception):
    """Base class for all snekhaus errors."""


class ArenaSaturated(SnekHausError):
    """Raised when no free cell is left for a new morsel."""


class InvalidPlacement(SnekHausError):
    """Raised when a morsel is placed on a cell the snek occupies.

    This signals a caller bug and is never handled by the game itself.
    """


class ArenaSizeUnknown(SnekHausError):
    """Raised when a session is started before the arena size is known."""
