"""Flood fill from the anchor cell."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameregion import RegionTracker
from backend.models.grid import Grid
from tests.helpers import grid_of, reachable


# -- fixed grids --------------------------------------------------------------


def test_isolated_anchor_is_a_singleton() -> None:
    grid = grid_of("ABA", "BBA", "AAB")
    assert RegionTracker.compute_region(grid) == {(0, 0)}


def test_uniform_grid_is_one_region() -> None:
    grid = grid_of("CCC", "CCC", "CCC")
    region = RegionTracker.compute_region(grid)
    assert len(region) == 9


def test_diagonal_cells_are_not_connected() -> None:
    grid = grid_of("AB", "BA")
    assert RegionTracker.compute_region(grid) == {(0, 0)}


def test_winding_region_is_followed_to_the_end() -> None:
    grid = grid_of(
        "AAAAA",
        "BBBBA",
        "AAAAA",
        "ABBBB",
        "AAAAA",
    )
    region = RegionTracker.compute_region(grid)
    assert len(region) == 17
    assert (4, 4) in region
    assert (1, 0) not in region


def test_other_anchor() -> None:
    grid = grid_of("ABB", "ABB", "AAA")
    assert RegionTracker.compute_region(grid, (0, 2)) == {
        (0, 1), (0, 2), (1, 1), (1, 2),
    }


def test_anchor_outside_grid_gives_empty_region() -> None:
    grid = grid_of("AB", "BA")
    assert RegionTracker.compute_region(grid, (5, 5)) == frozenset()
    assert RegionTracker.compute_region(grid, (-1, 0)) == frozenset()


def test_neighbors_stay_in_bounds() -> None:
    grid = grid_of("ABC", "DEF", "GHI")
    assert sorted(RegionTracker.neighbors(grid, (0, 0))) == [(0, 1), (1, 0)]
    assert len(RegionTracker.neighbors(grid, (1, 1))) == 4


def test_large_grid_does_not_recurse() -> None:
    size = 300
    grid = Grid(size=size, cells=[["A"] * size for _ in range(size)])
    assert len(RegionTracker.compute_region(grid)) == size * size


# -- random grids -------------------------------------------------------------


@pytest.mark.parametrize("seed", range(20))
def test_region_is_maximal_component(seed: int) -> None:
    grid = GameGenerator.generate(10, ("A", "B", "C"), random.Random(seed))
    region = RegionTracker.compute_region(grid)
    color = grid.get(0, 0)

    assert all(grid.get(r, c) == color for r, c in region)
    assert reachable(grid, (0, 0), region) == set(region)

    same_colour = frozenset(
        (r, c) for r in range(10) for c in range(10) if grid.get(r, c) == color
    )
    assert reachable(grid, (0, 0), same_colour) == set(region)
