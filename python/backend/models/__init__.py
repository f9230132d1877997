from backend.models.grid import ANCHOR, Color, Coordinate, Grid, Region
from backend.models.palette import (
    PALETTE_NAMES,
    PALETTE_SIZE,
    PALETTES,
    get_palette,
    hex_to_rgb,
    next_palette_name,
)

__all__ = [
    "ANCHOR",
    "Color",
    "Coordinate",
    "Grid",
    "Region",
    "PALETTES",
    "PALETTE_NAMES",
    "PALETTE_SIZE",
    "get_palette",
    "hex_to_rgb",
    "next_palette_name",
]
