"""Configuration and palette catalog."""

from __future__ import annotations

import pytest

from backend.config import GameConfig
from backend.models.grid import Grid
from backend.models.palette import (
    PALETTE_NAMES,
    PALETTES,
    get_palette,
    hex_to_rgb,
    next_palette_name,
)


def test_defaults() -> None:
    config = GameConfig()
    assert config.grid_size == 14
    assert config.default_moves == 25
    assert config.palette_name == "default"
    assert config.level_thresholds == (5, 10, 15)
    assert config.perfect_clear_moves == 15
    assert config.perfect_clear_bonus == 500


@pytest.mark.parametrize(
    "overrides",
    [
        {"grid_size": 0},
        {"default_moves": 0},
        {"palette_name": "nope"},
        {"palettes": {"short": ("#000000",)}, "palette_name": "short"},
        {"palettes": {}},
        {"base_colors": 7},
        {"level_thresholds": (10, 5)},
    ],
)
def test_invalid_config(overrides: dict) -> None:
    with pytest.raises(ValueError):
        GameConfig(**overrides)


def test_catalog_order_and_size() -> None:
    assert PALETTE_NAMES == [
        "default", "pastel", "retrowave", "metallic", "monochrome", "beach", "garden",
    ]
    assert all(len(colors) == 6 for colors in PALETTES.values())


def test_get_palette_prefix() -> None:
    assert get_palette("default", 3) == ("#FF5252", "#FFEB3B", "#4CAF50")
    with pytest.raises(ValueError):
        get_palette("nope", 3)


def test_next_palette_wraps() -> None:
    assert next_palette_name("default") == "pastel"
    assert next_palette_name("garden") == "default"
    assert next_palette_name("unknown") == "default"


def test_hex_to_rgb() -> None:
    assert hex_to_rgb("#FF9800") == (255, 152, 0)
    with pytest.raises(ValueError):
        hex_to_rgb("#FFF")


def test_grid_from_rows_requires_square() -> None:
    with pytest.raises(ValueError):
        Grid.from_rows([["A", "B"], ["A"]])
    with pytest.raises(ValueError):
        Grid.from_rows([])
