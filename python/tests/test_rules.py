"""Tests for the shared how-to-play text."""

from __future__ import annotations

from backend.config import GameConfig
from frontend.rules import rules_lines


def test_rules_follow_config() -> None:
    text = "\n".join(
        rules_lines(GameConfig(grid_size=8, default_moves=30, perfect_clear_bonus=250))
    )
    assert "30 moves" in text
    assert "8×8" in text
    assert "+250 bonus" in text
    assert "levels 5, 10, 15" in text


def test_rules_without_thresholds() -> None:
    lines = rules_lines(GameConfig(level_thresholds=()))
    assert not any(line.startswith("Progression") for line in lines)
