"""Errors raised by the colour flood engine."""

from __future__ import annotations

from backend.models.grid import Color


class FloodError(Exception):
    """Base class for engine errors."""


class InvalidMove(FloodError, ValueError):
    """A move was rejected; the game state is left unchanged."""

    def __init__(self, color: Color, reason: str) -> None:
        super().__init__(f"Cannot play {color!r}: {reason}")
        self.color = color
        self.reason = reason


class EmptyPalette(FloodError, ValueError):
    """A grid was requested with no colours to draw from."""
