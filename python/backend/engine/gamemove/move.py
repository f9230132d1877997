"""Applies a colour to the active region and scores the result."""

from __future__ import annotations

import logging
import math

from backend.engine.errors import InvalidMove
from backend.engine.gameregion import RegionTracker
from backend.engine.gamestate import GameState, GameStatus
from backend.models.grid import ANCHOR, Color

logger = logging.getLogger(__name__)

# (more than N new tiles, multiplier), checked in order.
MULTIPLIER_TIERS: tuple[tuple[int, float], ...] = ((20, 2.0), (10, 1.5))


def multiplier_for(new_tiles: int) -> float:
    """Return the combo multiplier earned by absorbing *new_tiles* cells."""
    for threshold, multiplier in MULTIPLIER_TIERS:
        if new_tiles > threshold:
            return multiplier
    return 1.0


def points_for(new_tiles: int) -> int:
    return math.floor(new_tiles * multiplier_for(new_tiles))


class MoveEngine:
    """Stateless move processor — all methods are static."""

    @staticmethod
    def check(state: GameState, color: Color) -> None:
        """Raise ``InvalidMove`` if *color* cannot be played on *state*."""
        if not state.is_playing:
            raise InvalidMove(color, f"the level is already {state.status.value}")
        if color == state.active_color:
            raise InvalidMove(color, "it is already the active colour")
        if color not in state.palette_selection:
            raise InvalidMove(color, "it is not offered on this level")

    @staticmethod
    def apply_move(state: GameState, color: Color) -> GameState:
        """Flood the active region with *color* and update *state* in place.

        Every field is computed before any is assigned, so a rejected move
        leaves *state* exactly as it was.
        """
        try:
            MoveEngine.check(state, color)
        except InvalidMove as exc:
            logger.debug("Rejected move: %s", exc)
            raise

        grid = state.grid.copy()
        grid.recolor(state.region, color)
        region = RegionTracker.compute_region(grid, ANCHOR)

        # The old region is always a subset of the new one.
        new_tiles = len(region) - len(state.region)
        points = points_for(new_tiles)
        moves_left = state.moves_left - 1

        if len(region) == grid.area:
            status = GameStatus.WON
        elif moves_left <= 0:
            status = GameStatus.LOST
        else:
            status = GameStatus.PLAYING

        state.grid = grid
        state.region = region
        state.active_color = color
        state.score += points
        state.moves_left = moves_left
        state.status = status

        logger.debug(
            "Played %s: +%d tiles x%g = %d points, %d moves left",
            color,
            new_tiles,
            multiplier_for(new_tiles),
            points,
            moves_left,
        )
        if status != GameStatus.PLAYING:
            logger.info(
                "Level %d %s with score %d", state.level, status.value, state.score
            )
        return state
