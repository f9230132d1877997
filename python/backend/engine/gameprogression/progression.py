"""Level progression: colour unlocks, bonuses, and palette cycling."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from backend.config import GameConfig
from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamestate import GameState
from backend.models.grid import Color
from backend.models.palette import get_palette, next_palette_name

logger = logging.getLogger(__name__)


def color_count(
    level: int,
    thresholds: Sequence[int] = (5, 10, 15),
    base: int = 3,
) -> int:
    """Return how many colours are in play on *level*.

    One colour is unlocked at each threshold reached::

        color_count(4) == 3
        color_count(5) == 4
        color_count(15) == 6
    """
    return base + sum(1 for t in thresholds if level >= t)


class ProgressionController:
    """Builds the state for each level and carries score between them.

    Every change of level or palette goes through ``derive_state``, which
    picks the palette selection and generates a fresh grid.
    """

    def __init__(self, config: GameConfig, rng: random.Random | None = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.palette_name = config.palette_name

    # -- rules ----------------------------------------------------------------

    def color_count(self, level: int) -> int:
        count = color_count(level, self.config.level_thresholds, self.config.base_colors)
        return min(count, len(self.config.palettes[self.palette_name]))

    def palette_selection(self, level: int, palette_name: str) -> tuple[Color, ...]:
        return get_palette(palette_name, self.color_count(level), self.config.palettes)

    def earns_perfect_clear(self, state: GameState) -> bool:
        """True when the level used fewer moves than the perfect-clear limit."""
        used = self.config.default_moves - state.moves_left
        return used < self.config.perfect_clear_moves

    # -- state construction ---------------------------------------------------

    def derive_state(
        self,
        level: int,
        palette_name: str,
        score: int = 0,
        moves_left: int | None = None,
    ) -> GameState:
        """Return a fresh grid for *level* in *palette_name*, *score* kept.

        *moves_left* defaults to the full move budget.
        """
        self.palette_name = palette_name
        selection = self.palette_selection(level, palette_name)
        return self._build(level, selection, score, moves_left)

    def _build(
        self,
        level: int,
        selection: tuple[Color, ...],
        score: int,
        moves_left: int | None = None,
    ) -> GameState:
        grid = GameGenerator.generate(self.config.grid_size, selection, self.rng)
        return GameState(
            grid,
            palette_name=self.palette_name,
            palette_selection=selection,
            move_budget=self.config.default_moves,
            level=level,
            score=score,
            moves_left=moves_left,
        )

    # -- transitions ----------------------------------------------------------

    def start_new_game(self) -> GameState:
        logger.info("New game with palette %r", self.palette_name)
        return self.derive_state(1, self.palette_name)

    def reset_level(self, state: GameState) -> GameState:
        """Replay *state*'s level on a new grid with the same colours."""
        logger.info("Resetting level %d", state.level)
        return self._build(state.level, state.palette_selection, state.score)

    def start_next_level(self, state: GameState) -> GameState:
        score = state.score
        if self.earns_perfect_clear(state):
            score += self.config.perfect_clear_bonus
            logger.info(
                "Perfect clear in %d moves: +%d",
                self.config.default_moves - state.moves_left,
                self.config.perfect_clear_bonus,
            )
        level = state.level + 1
        logger.info("Starting level %d with %d colours", level, self.color_count(level))
        return self.derive_state(level, self.palette_name, score)

    def cycle_palette(self, state: GameState) -> GameState:
        name = next_palette_name(self.palette_name, self.config.palettes)
        logger.info("Palette %r -> %r", self.palette_name, name)
        return self.derive_state(state.level, name, state.score, state.moves_left)
