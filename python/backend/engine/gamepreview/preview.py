"""Simulates a move without touching the game state."""

from __future__ import annotations

from dataclasses import dataclass

from backend.engine.errors import InvalidMove
from backend.engine.gamemove import MoveEngine, multiplier_for, points_for
from backend.engine.gameregion import RegionTracker
from backend.engine.gamestate import GameState
from backend.models.grid import ANCHOR, Color, Region


@dataclass(frozen=True)
class PreviewResult:
    """Cells a move would absorb and the multiplier it would earn.

    The empty preview has no colour, no tiles and no multiplier.
    """

    color: Color | None = None
    new_tiles: Region = frozenset()
    multiplier: float | None = None

    @property
    def is_empty(self) -> bool:
        return self.color is None

    @property
    def points(self) -> int:
        return points_for(len(self.new_tiles)) if self.multiplier else 0


EMPTY_PREVIEW = PreviewResult()


class PreviewCalculator:
    """Stateless preview — all methods are static."""

    @staticmethod
    def preview_move(state: GameState, color: Color) -> PreviewResult:
        """Return what playing *color* would add, or ``EMPTY_PREVIEW``."""
        try:
            MoveEngine.check(state, color)
        except InvalidMove:
            return EMPTY_PREVIEW

        scratch = state.grid.copy()
        scratch.recolor(state.region, color)
        region = RegionTracker.compute_region(scratch, ANCHOR)
        new_tiles = region - state.region
        return PreviewResult(
            color=color,
            new_tiles=new_tiles,
            multiplier=multiplier_for(len(new_tiles)),
        )
