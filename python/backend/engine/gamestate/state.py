"""Tracks the mutable state of a level in progress."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from backend.engine.gameregion import RegionTracker
from backend.models.grid import ANCHOR, Color, Grid, Region


class GameStatus(StrEnum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a ``GameState`` handed to frontends."""

    grid: tuple[tuple[Color, ...], ...]
    active_color: Color
    active_area: Region
    moves_left: int
    move_budget: int
    score: int
    level: int
    status: GameStatus
    palette_name: str
    palette_selection: tuple[Color, ...]
    earns_perfect_clear: bool = False

    @property
    def size(self) -> int:
        return len(self.grid)

    @property
    def moves_used(self) -> int:
        return self.move_budget - self.moves_left

    def is_active(self, row: int, col: int) -> bool:
        return (row, col) in self.active_area


class GameState:
    """Holds the grid, active region, and counters of the current level."""

    def __init__(
        self,
        grid: Grid,
        *,
        palette_name: str,
        palette_selection: Sequence[Color],
        move_budget: int,
        level: int = 1,
        score: int = 0,
        moves_left: int | None = None,
    ) -> None:
        self.grid = grid
        self.palette_name = palette_name
        self.palette_selection: tuple[Color, ...] = tuple(palette_selection)
        self.move_budget = move_budget
        self.level = level
        self.score = score
        self.moves_left: int = move_budget if moves_left is None else moves_left
        self.active_color: Color = grid.get(*ANCHOR)
        self.region: Region = RegionTracker.compute_region(grid, ANCHOR)
        self.status = GameStatus.PLAYING
        if len(self.region) == grid.area:
            self.status = GameStatus.WON
        elif self.moves_left <= 0:
            self.status = GameStatus.LOST

    # -- queries --------------------------------------------------------------

    @property
    def moves_used(self) -> int:
        return self.move_budget - self.moves_left

    @property
    def is_playing(self) -> bool:
        return self.status == GameStatus.PLAYING

    def snapshot(self, *, earns_perfect_clear: bool = False) -> GameSnapshot:
        return GameSnapshot(
            grid=self.grid.to_rows(),
            active_color=self.active_color,
            active_area=self.region,
            moves_left=self.moves_left,
            move_budget=self.move_budget,
            score=self.score,
            level=self.level,
            status=self.status,
            palette_name=self.palette_name,
            palette_selection=self.palette_selection,
            earns_perfect_clear=earns_perfect_clear,
        )
