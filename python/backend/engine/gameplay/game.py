"""Core gameplay session — the single entry point used by every frontend."""

from __future__ import annotations

import random
from collections.abc import Sequence

from backend.config import GameConfig
from backend.engine.gamemove import MoveEngine
from backend.engine.gamepreview import PreviewCalculator, PreviewResult
from backend.engine.gameprogression import ProgressionController
from backend.engine.gamestate import GameSnapshot, GameState, GameStatus
from backend.models.grid import Color, Grid


class GamePlay:
    """Orchestrates a colour flood session across levels.

    Frontends issue commands and read ``snapshot``; they never touch the
    grid or state directly.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.progression = ProgressionController(self.config, rng)
        self.state = self.progression.start_new_game()

    @classmethod
    def from_grid(
        cls,
        grid: Grid,
        colors: Sequence[Color] | None = None,
        config: GameConfig | None = None,
        *,
        level: int = 1,
        score: int = 0,
        moves_left: int | None = None,
    ) -> GamePlay:
        """Create a session from an existing grid (e.g. a hand-built level).

        *colors* defaults to the colours present in *grid*, in sorted order.
        """
        obj = object.__new__(cls)
        obj.config = config if config is not None else GameConfig(grid_size=grid.size)
        obj.progression = ProgressionController(obj.config)
        obj.state = GameState(
            grid,
            palette_name=obj.config.palette_name,
            palette_selection=colors if colors is not None else sorted(grid.colors()),
            move_budget=obj.config.default_moves,
            level=level,
            score=score,
            moves_left=moves_left,
        )
        return obj

    # -- commands -------------------------------------------------------------

    def start_new_game(self) -> GameSnapshot:
        self.state = self.progression.start_new_game()
        return self.snapshot

    def reset_level(self) -> GameSnapshot:
        self.state = self.progression.reset_level(self.state)
        return self.snapshot

    def start_next_level(self) -> GameSnapshot:
        self.state = self.progression.start_next_level(self.state)
        return self.snapshot

    def cycle_palette(self) -> GameSnapshot:
        self.state = self.progression.cycle_palette(self.state)
        return self.snapshot

    def apply_move(self, color: Color) -> GameSnapshot:
        """Play *color*.  Raises ``InvalidMove`` and changes nothing if illegal."""
        MoveEngine.apply_move(self.state, color)
        return self.snapshot

    def preview_move(self, color: Color) -> PreviewResult:
        return PreviewCalculator.preview_move(self.state, color)

    # -- queries --------------------------------------------------------------

    @property
    def snapshot(self) -> GameSnapshot:
        return self.state.snapshot(
            earns_perfect_clear=(
                self.state.status == GameStatus.WON
                and self.progression.earns_perfect_clear(self.state)
            )
        )

    @property
    def colors(self) -> tuple[Color, ...]:
        return self.state.palette_selection

    @property
    def size(self) -> int:
        return self.state.grid.size

    @property
    def is_won(self) -> bool:
        return self.state.status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        return self.state.status == GameStatus.LOST
