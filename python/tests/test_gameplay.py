"""Session API used by the frontends."""

from __future__ import annotations

import dataclasses
import typing

import pytest

from backend.config import GameConfig
from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import GameStatus
from tests.helpers import grid_of


def test_new_session_defaults() -> None:
    snap = GamePlay(GameConfig(seed=1)).snapshot
    assert snap.size == 14
    assert snap.level == 1
    assert snap.score == 0
    assert snap.moves_left == 25
    assert snap.moves_used == 0
    assert snap.status == GameStatus.PLAYING
    assert len(snap.palette_selection) == 3
    assert snap.is_active(0, 0)
    assert snap.active_color == snap.grid[0][0]


def test_snapshot_is_frozen() -> None:
    snap = GamePlay(GameConfig(grid_size=5, seed=1)).snapshot
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.score = 10  # type: ignore[misc]


def test_snapshot_does_not_follow_later_moves() -> None:
    game = GamePlay.from_grid(grid_of("ABA", "BBA", "AAB"))
    before = game.snapshot
    after = game.apply_move("B")
    assert before.grid[0][0] == "A"
    assert after.grid[0][0] == "B"
    assert after.moves_left == before.moves_left - 1


def test_win_then_next_level_with_bonus() -> None:
    game = GamePlay.from_grid(grid_of("AB", "BB"), config=GameConfig(grid_size=2, seed=4))

    snap = game.apply_move("B")
    assert snap.status == GameStatus.WON
    assert snap.earns_perfect_clear
    assert game.is_won

    nxt = game.start_next_level()
    assert nxt.level == 2
    assert nxt.score == 3 + 500
    assert nxt.moves_left == 25
    assert nxt.size == 2


def test_loss_then_new_game() -> None:
    game = GamePlay.from_grid(
        grid_of("ABC", "CCC", "CCC"), config=GameConfig(grid_size=3), moves_left=1
    )
    snap = game.apply_move("B")
    assert snap.status == GameStatus.LOST
    assert game.is_lost
    assert not snap.earns_perfect_clear

    fresh = game.start_new_game()
    assert fresh.status in (GameStatus.PLAYING, GameStatus.WON)
    assert fresh.level == 1
    assert fresh.score == 0
    assert fresh.moves_left == 25


def test_reset_and_cycle_return_snapshots() -> None:
    game = GamePlay(GameConfig(grid_size=6, seed=2))
    assert game.reset_level().level == 1
    assert game.cycle_palette().palette_name == "pastel"
    assert game.colors == game.snapshot.palette_selection
    assert game.size == 6


def test_cycle_palette_keeps_move_count() -> None:
    game = GamePlay(GameConfig(grid_size=6, seed=2))
    active = game.snapshot.active_color
    game.apply_move(next(c for c in game.colors if c != active))

    snap = game.cycle_palette()

    assert snap.moves_left == 24
    assert snap.moves_used == 1


def test_grid_without_moves_starts_lost() -> None:
    game = GamePlay.from_grid(grid_of("AB", "BB"), moves_left=0)
    assert game.is_lost
    assert game.preview_move("B").is_empty


def test_from_grid_return_annotation_resolves() -> None:
    assert typing.get_type_hints(GamePlay.from_grid)["return"] is GamePlay
