"""Move application, scoring, and terminal status."""

from __future__ import annotations

import pytest

from backend.config import GameConfig
from backend.engine.errors import InvalidMove
from backend.engine.gamemove import MoveEngine, multiplier_for, points_for
from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import GameState, GameStatus
from tests.helpers import assert_region_invariants, grid_of


# -- helpers ------------------------------------------------------------------


def _state(*rows: str, moves_left: int | None = None, colors: str = "") -> GameState:
    grid = grid_of(*rows)
    return GameState(
        grid,
        palette_name="default",
        palette_selection=tuple(colors) or tuple(sorted(grid.colors())),
        move_budget=25,
        moves_left=moves_left,
    )


def _strip(size: int, new_tiles: int) -> GameState:
    """Anchor ``A`` followed by *new_tiles* ``B`` cells on the top row."""
    top = "A" + "B" * new_tiles + "C" * (size - 1 - new_tiles)
    return _state(top, *(["C" * size] * (size - 1)))


# -- worked example -----------------------------------------------------------


def test_three_by_three_example() -> None:
    state = _state("ABA", "BBA", "AAB")
    assert state.region == {(0, 0)}

    MoveEngine.apply_move(state, "B")

    assert state.grid.cells == [list("BBA"), list("BBA"), list("AAB")]
    assert state.region == {(0, 0), (0, 1), (1, 0), (1, 1)}
    assert state.active_color == "B"
    assert state.score == 3
    assert state.moves_left == 24
    assert state.status == GameStatus.PLAYING


# -- scoring ------------------------------------------------------------------


@pytest.mark.parametrize(
    ("new_tiles", "multiplier", "points"),
    [
        (0, 1, 0),
        (1, 1, 1),
        (10, 1, 10),
        (11, 1.5, 16),
        (15, 1.5, 22),
        (20, 1.5, 30),
        (21, 2, 42),
        (30, 2, 60),
    ],
)
def test_multiplier_thresholds(new_tiles: int, multiplier: float, points: int) -> None:
    assert multiplier_for(new_tiles) == multiplier
    assert points_for(new_tiles) == points



@pytest.mark.parametrize(("new_tiles", "points"), [(10, 10), (11, 16), (20, 30), (21, 42)])
def test_move_scores_with_multiplier(new_tiles: int, points: int) -> None:
    state = _strip(new_tiles + 2, new_tiles)
    MoveEngine.apply_move(state, "B")
    assert len(state.region) == new_tiles + 1
    assert state.score == points


# -- rejected moves -----------------------------------------------------------


def test_active_colour_is_rejected() -> None:
    state = _state("ABA", "BBA", "AAB")
    with pytest.raises(InvalidMove) as info:
        MoveEngine.apply_move(state, "A")
    assert info.value.color == "A"
    assert state.moves_left == 25
    assert state.score == 0


def test_colour_outside_selection_is_rejected() -> None:
    state = _state("AB", "BA", colors="AB")
    with pytest.raises(InvalidMove):
        MoveEngine.apply_move(state, "Z")


def test_rejected_move_leaves_state_untouched() -> None:
    game = GamePlay.from_grid(grid_of("ABA", "BBA", "AAB"))
    before = game.snapshot
    with pytest.raises(InvalidMove):
        game.apply_move("A")
    assert game.snapshot == before


def test_no_moves_after_the_level_is_over() -> None:
    state = _state("AB", "BB")
    MoveEngine.apply_move(state, "B")
    assert state.status == GameStatus.WON
    with pytest.raises(InvalidMove):
        MoveEngine.apply_move(state, "A")
    assert state.moves_left == 24


def test_invalid_move_is_a_value_error() -> None:
    state = _state("AB", "BA")
    with pytest.raises(ValueError):
        MoveEngine.apply_move(state, "A")


# -- terminal status ----------------------------------------------------------


def test_unifying_the_grid_wins() -> None:
    state = _state("AB", "BB")
    MoveEngine.apply_move(state, "B")
    assert state.status == GameStatus.WON
    assert len(state.region) == 4
    assert state.grid.is_uniform()


def test_running_out_of_moves_loses() -> None:
    state = _state("ABC", "CCC", "CCC", moves_left=1)
    MoveEngine.apply_move(state, "B")
    assert state.moves_left == 0
    assert state.status == GameStatus.LOST


def test_win_on_last_move_beats_loss() -> None:
    state = _state("AB", "BB", moves_left=1)
    MoveEngine.apply_move(state, "B")
    assert state.moves_left == 0
    assert state.status == GameStatus.WON


def test_move_without_new_tiles_still_costs_a_move() -> None:
    state = _state("AC", "CC", colors="ABC")
    MoveEngine.apply_move(state, "B")
    assert state.region == {(0, 0)}
    assert state.score == 0
    assert state.moves_left == 24


# -- invariants over whole games ----------------------------------------------


@pytest.mark.parametrize("seed", range(10))
def test_invariants_hold_through_a_game(seed: int) -> None:
    game = GamePlay(GameConfig(grid_size=8, default_moves=40, seed=seed))
    state = game.state
    assert_region_invariants(state)

    turn = 0
    while state.status == GameStatus.PLAYING:
        choices = [c for c in game.colors if c != state.active_color]
        color = choices[turn % len(choices)]
        size_before = len(state.region)
        moves_before = state.moves_left

        game.apply_move(color)

        assert len(state.region) >= size_before
        assert state.moves_left == moves_before - 1
        assert_region_invariants(state)
        if state.status == GameStatus.LOST:
            assert state.moves_left == 0
        turn += 1
