"""Generates random colour flood grids."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from backend.engine.errors import EmptyPalette
from backend.models.grid import Color, Grid

logger = logging.getLogger(__name__)


class GameGenerator:
    """Fills grids with colours drawn uniformly from a palette selection."""

    @staticmethod
    def generate(
        size: int,
        colors: Sequence[Color],
        rng: random.Random | None = None,
    ) -> Grid:
        """Return a *size*×*size* grid with every cell drawn from *colors*.

        Cells are drawn independently, so neighbouring cells may share a
        colour.  Pass a seeded ``random.Random`` for reproducible grids.
        """
        if not colors:
            raise EmptyPalette("Cannot generate a grid from an empty palette.")
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}.")

        rng = rng if rng is not None else random.Random()
        choices = list(colors)
        cells = [[rng.choice(choices) for _ in range(size)] for _ in range(size)]
        logger.debug("Generated %dx%d grid from %d colours", size, size, len(choices))
        return Grid(size=size, cells=cells)
