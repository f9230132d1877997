"""Session configuration for the colour flood engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from backend.models.grid import Color
from backend.models.palette import PALETTE_SIZE, PALETTES

DEFAULT_GRID_SIZE = 14
DEFAULT_MOVES = 25


def _default_palettes() -> dict[str, tuple[Color, ...]]:
    return dict(PALETTES)


@dataclass(frozen=True)
class GameConfig:
    """Settings fixed for the lifetime of a session.

    ``level_thresholds`` lists the levels at which one more colour is
    unlocked, starting from ``base_colors`` colours at level 1.  A level is a
    perfect clear when it is won using fewer than ``perfect_clear_moves``
    moves.
    """

    grid_size: int = DEFAULT_GRID_SIZE
    default_moves: int = DEFAULT_MOVES
    palette_name: str = "default"
    palettes: dict[str, tuple[Color, ...]] = field(default_factory=_default_palettes)
    base_colors: int = 3
    level_thresholds: tuple[int, ...] = (5, 10, 15)
    perfect_clear_moves: int = 15
    perfect_clear_bonus: int = 500
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_size < 1:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}.")
        if self.default_moves < 1:
            raise ValueError(
                f"default_moves must be positive, got {self.default_moves}."
            )
        if not self.palettes:
            raise ValueError("At least one palette is required.")
        for name, colors in self.palettes.items():
            if len(colors) != PALETTE_SIZE:
                raise ValueError(
                    f"Palette {name!r} has {len(colors)} colours, "
                    f"expected {PALETTE_SIZE}."
                )
        if self.palette_name not in self.palettes:
            raise ValueError(
                f"Unknown palette: {self.palette_name!r}. "
                f"Available: {list(self.palettes)}"
            )
        if not 1 <= self.base_colors <= PALETTE_SIZE:
            raise ValueError(
                f"base_colors must be between 1 and {PALETTE_SIZE}, "
                f"got {self.base_colors}."
            )
        if list(self.level_thresholds) != sorted(self.level_thresholds):
            raise ValueError("level_thresholds must be in ascending order.")

    @property
    def palette_names(self) -> list[str]:
        return list(self.palettes)
