"""Grid model for the colour flood game."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

Color = str
Coordinate = tuple[int, int]
Region = frozenset[Coordinate]

# The active region always grows from the top-left cell.
ANCHOR: Coordinate = (0, 0)


@dataclass
class Grid:
    """Represents the square board of coloured cells.

    Cells are stored as a 2D list of colour tokens, row-major.
    """

    size: int
    cells: list[list[Color]]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Color]]) -> Grid:
        """Create a grid from a square sequence of rows.

        Example::

            Grid.from_rows([["A", "B"], ["B", "A"]])
        """
        size = len(rows)
        if size == 0:
            raise ValueError("A grid needs at least one row.")
        for r, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(
                    f"Expected {size} cells in row {r} of a {size}×{size} grid, "
                    f"got {len(row)}."
                )
        return cls(size=size, cells=[list(row) for row in rows])

    # -- queries --------------------------------------------------------------

    @property
    def area(self) -> int:
        return self.size * self.size

    def get(self, row: int, col: int) -> Color:
        return self.cells[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def is_uniform(self) -> bool:
        """Check if every cell holds the same colour."""
        first = self.cells[0][0]
        return all(cell == first for row in self.cells for cell in row)

    def colors(self) -> set[Color]:
        return {cell for row in self.cells for cell in row}

    # -- mutation -------------------------------------------------------------

    def recolor(self, coords: Iterable[Coordinate], color: Color) -> None:
        """Paint every cell in *coords* with *color*."""
        for r, c in coords:
            self.cells[r][c] = color

    def copy(self) -> Grid:
        return Grid(size=self.size, cells=[row[:] for row in self.cells])

    def to_rows(self) -> tuple[tuple[Color, ...], ...]:
        """Return an immutable copy of the cells."""
        return tuple(tuple(row) for row in self.cells)
