"""Level progression, bonuses, and palette cycling."""

from __future__ import annotations

import random

import pytest

from backend.config import GameConfig
from backend.engine.gameprogression import ProgressionController, color_count
from backend.engine.gamestate import GameStatus
from backend.models.palette import PALETTES


# -- helpers ------------------------------------------------------------------


def _controller(**overrides: object) -> ProgressionController:
    config = GameConfig(**{"grid_size": 6, "seed": 7, **overrides})  # type: ignore[arg-type]
    return ProgressionController(config)


# -- colour count -------------------------------------------------------------


@pytest.mark.parametrize(
    ("level", "count"),
    [(1, 3), (4, 3), (5, 4), (9, 4), (10, 5), (14, 5), (15, 6), (40, 6)],
)
def test_color_count_steps(level: int, count: int) -> None:
    assert color_count(level) == count
    assert _controller().color_count(level) == count


def test_color_count_custom_thresholds() -> None:
    assert color_count(3, thresholds=(2, 3), base=2) == 4
    assert color_count(1, thresholds=(2, 3), base=2) == 2


def test_color_count_is_capped_by_palette() -> None:
    controller = _controller(base_colors=6)
    assert controller.color_count(20) == 6


# -- new game / reset ---------------------------------------------------------


def test_start_new_game() -> None:
    state = _controller().start_new_game()
    assert state.level == 1
    assert state.score == 0
    assert state.moves_left == 25
    assert state.status == GameStatus.PLAYING
    assert state.palette_name == "default"
    assert state.palette_selection == PALETTES["default"][:3]
    assert state.grid.size == 6
    assert state.grid.colors() <= set(state.palette_selection)


def test_reset_level_keeps_level_score_and_colours() -> None:
    controller = _controller()
    state = controller.derive_state(7, "beach", score=120)
    state.moves_left = 3

    fresh = controller.reset_level(state)

    assert fresh.level == 7
    assert fresh.score == 120
    assert fresh.moves_left == 25
    assert fresh.palette_selection == state.palette_selection
    assert fresh.grid is not state.grid


def test_same_seed_same_levels() -> None:
    a = _controller().start_new_game()
    b = _controller().start_new_game()
    assert a.grid == b.grid


def test_injected_rng_is_used() -> None:
    config = GameConfig(grid_size=6)
    a = ProgressionController(config, random.Random(3)).start_new_game()
    b = ProgressionController(config, random.Random(3)).start_new_game()
    assert a.grid == b.grid


# -- next level ---------------------------------------------------------------


@pytest.mark.parametrize(
    ("moves_left", "bonus"),
    [(24, 500), (11, 500), (10, 0), (0, 0)],
    ids=["1-used", "14-used", "15-used", "25-used"],
)
def test_perfect_clear_bonus(moves_left: int, bonus: int) -> None:
    controller = _controller()
    state = controller.start_new_game()
    state.score = 200
    state.moves_left = moves_left

    nxt = controller.start_next_level(state)

    assert nxt.level == 2
    assert nxt.score == 200 + bonus
    assert nxt.moves_left == 25


def test_next_level_unlocks_colour() -> None:
    controller = _controller()
    state = controller.derive_state(4, "default")
    assert len(state.palette_selection) == 3

    nxt = controller.start_next_level(state)

    assert nxt.level == 5
    assert nxt.palette_selection == PALETTES["default"][:4]


def test_custom_bonus_settings() -> None:
    controller = _controller(perfect_clear_moves=5, perfect_clear_bonus=50)
    state = controller.start_new_game()
    state.moves_left = 21
    assert controller.start_next_level(state).score == 50


# -- palettes -----------------------------------------------------------------


def test_cycle_palette_moves_to_next_name() -> None:
    controller = _controller()
    state = controller.derive_state(6, "default", score=90)

    cycled = controller.cycle_palette(state)

    assert cycled.palette_name == "pastel"
    assert cycled.palette_selection == PALETTES["pastel"][:4]
    assert cycled.level == 6
    assert cycled.score == 90


def test_cycle_palette_wraps() -> None:
    controller = _controller(palette_name="garden")
    state = controller.start_new_game()
    assert controller.cycle_palette(state).palette_name == "default"


def test_palette_sticks_for_following_levels() -> None:
    controller = _controller()
    state = controller.cycle_palette(controller.start_new_game())
    assert controller.start_next_level(state).palette_name == "pastel"
    assert controller.start_new_game().palette_name == "pastel"


def test_cycle_palette_keeps_moves_left() -> None:
    controller = _controller()
    state = controller.start_new_game()
    state.moves_left = 7

    cycled = controller.cycle_palette(state)

    assert cycled.moves_left == 7
    assert cycled.move_budget == 25


def test_cycle_palette_does_not_revive_lost_level() -> None:
    controller = _controller()
    state = controller.start_new_game()
    state.moves_left = 0
    state.status = GameStatus.LOST

    cycled = controller.cycle_palette(state)

    assert cycled.moves_left == 0
    assert cycled.status == GameStatus.LOST
