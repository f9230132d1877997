"""Shared builders for engine tests."""

from __future__ import annotations

from collections import deque

from backend.engine.gameregion import RegionTracker
from backend.engine.gamestate import GameState, GameStatus
from backend.models.grid import ANCHOR, Coordinate, Grid


def grid_of(*rows: str) -> Grid:
    """Build a grid from strings, one character per cell.

    Example::

        grid_of("ABA", "BBA", "AAB")
    """
    return Grid.from_rows([list(row) for row in rows])


def reachable(grid: Grid, start: Coordinate, cells: frozenset[Coordinate]) -> set[Coordinate]:
    """Breadth-first walk from *start* that only steps onto *cells*."""
    seen = {start}
    queue = deque([start])
    while queue:
        for n in RegionTracker.neighbors(grid, queue.popleft()):
            if n in cells and n not in seen:
                seen.add(n)
                queue.append(n)
    return seen


def assert_region_invariants(state: GameState) -> None:
    """The region is exactly the anchor's maximal same-colour component."""
    grid = state.grid
    region = state.region

    assert ANCHOR in region
    assert all(grid.get(r, c) == state.active_color for r, c in region)
    assert reachable(grid, ANCHOR, region) == set(region)
    for coord in region:
        for nr, nc in RegionTracker.neighbors(grid, coord):
            if (nr, nc) not in region:
                assert grid.get(nr, nc) != state.active_color
    assert (state.status == GameStatus.WON) == (len(region) == grid.area)
