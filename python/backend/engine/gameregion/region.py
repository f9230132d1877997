"""Connected-region search from the anchor cell."""

from __future__ import annotations

from backend.models.grid import ANCHOR, Coordinate, Grid, Region

# up, right, down, left
NEIGHBOR_OFFSETS: tuple[Coordinate, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


class RegionTracker:
    """Stateless flood fill — all methods are static."""

    @staticmethod
    def compute_region(grid: Grid, anchor: Coordinate = ANCHOR) -> Region:
        """Return the 4-connected cells sharing the colour of *anchor*.

        Uses an explicit stack, so the search depth does not grow with the
        grid area.  An anchor outside the grid yields an empty region.
        """
        if not grid.in_bounds(*anchor):
            return frozenset()

        target = grid.get(*anchor)
        visited: set[Coordinate] = {anchor}
        stack: list[Coordinate] = [anchor]

        while stack:
            for nr, nc in RegionTracker.neighbors(grid, stack.pop()):
                if (nr, nc) in visited or grid.get(nr, nc) != target:
                    continue
                visited.add((nr, nc))
                stack.append((nr, nc))

        return frozenset(visited)

    @staticmethod
    def neighbors(grid: Grid, coord: Coordinate) -> list[Coordinate]:
        """Return the in-bounds orthogonal neighbours of *coord*."""
        r, c = coord
        result: list[Coordinate] = []
        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = r + dr, c + dc
            if grid.in_bounds(nr, nc):
                result.append((nr, nc))
        return result
