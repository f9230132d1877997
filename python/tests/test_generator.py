"""Random grid generation."""

from __future__ import annotations

import random

import pytest

from backend.engine.errors import EmptyPalette
from backend.engine.gamegenerator import GameGenerator


def test_grid_has_requested_size() -> None:
    grid = GameGenerator.generate(14, ("A", "B", "C"), random.Random(1))
    assert grid.size == 14
    assert len(grid.cells) == 14
    assert all(len(row) == 14 for row in grid.cells)


def test_cells_come_from_the_selection() -> None:
    grid = GameGenerator.generate(20, ("A", "B", "C"), random.Random(2))
    assert grid.colors() <= {"A", "B", "C"}


def test_every_colour_is_used_on_a_large_grid() -> None:
    grid = GameGenerator.generate(40, ("A", "B", "C", "D"), random.Random(3))
    assert grid.colors() == {"A", "B", "C", "D"}


def test_same_seed_same_grid() -> None:
    a = GameGenerator.generate(12, ("A", "B", "C"), random.Random(42))
    b = GameGenerator.generate(12, ("A", "B", "C"), random.Random(42))
    assert a == b


def test_single_colour_gives_uniform_grid() -> None:
    grid = GameGenerator.generate(5, ("A",))
    assert grid.is_uniform()


def test_empty_palette_is_rejected() -> None:
    with pytest.raises(EmptyPalette):
        GameGenerator.generate(5, ())


def test_empty_palette_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        GameGenerator.generate(5, [])


def test_non_positive_size_is_rejected() -> None:
    with pytest.raises(ValueError):
        GameGenerator.generate(0, ("A", "B"))
