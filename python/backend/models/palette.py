"""Colour palettes for the colour flood game.

Each palette holds exactly six colours, ordered so that any prefix is a
usable level palette: early levels play with the first three, later levels
unlock the rest.
"""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Mapping, Sequence

from backend.models.grid import Color

PALETTE_SIZE = 6

PaletteCatalog = Mapping[str, Sequence[Color]]

# Palettes in cycling order.
PALETTES: OrderedDict[str, tuple[Color, ...]] = OrderedDict()

PALETTES["default"] = (
    "#FF5252",  # Red
    "#FFEB3B",  # Yellow
    "#4CAF50",  # Green
    "#2196F3",  # Blue
    "#9C27B0",  # Purple
    "#FF9800",  # Orange
)

PALETTES["pastel"] = (
    "#FF9AA2",  # Salmon
    "#FFD6A5",  # Peach
    "#CAFFBF",  # Mint
    "#9BF6FF",  # Ice
    "#BDB2FF",  # Lavender
    "#FFC6FF",  # Pink
)

PALETTES["retrowave"] = (
    "#FF00FF",  # Magenta
    "#00FFFF",  # Cyan
    "#FFFF00",  # Yellow
    "#0000FF",  # Blue
    "#FF0000",  # Red
    "#00FF00",  # Green
)

PALETTES["metallic"] = (
    "#A79E70",  # Brass
    "#8D8741",  # Bronze
    "#7D5E2A",  # Copper
    "#574932",  # Pewter
    "#513B29",  # Rust
    "#3F2D20",  # Iron
)

PALETTES["monochrome"] = (
    "#FFFFFF",
    "#D6D6D6",
    "#ADADAD",
    "#848484",
    "#5B5B5B",
    "#333333",
)

PALETTES["beach"] = (
    "#FFDE59",  # Sand
    "#3AB4F2",  # Sea
    "#FF9966",  # Sunset
    "#59D8A4",  # Lagoon
    "#FF6B6B",  # Coral
    "#C490D1",  # Shell
)

PALETTES["garden"] = (
    "#8BC34A",  # Leaf
    "#FFEB3B",  # Sunflower
    "#F06292",  # Rose
    "#9575CD",  # Lilac
    "#795548",  # Soil
    "#4CAF50",  # Grass
)

PALETTE_NAMES: list[str] = list(PALETTES.keys())


def get_palette(
    name: str, num_colors: int, catalog: PaletteCatalog = PALETTES
) -> tuple[Color, ...]:
    """Return the first *num_colors* colours of the named palette.

    Raises:
        ValueError: If *name* is not in *catalog*.
    """
    if name not in catalog:
        raise ValueError(f"Unknown palette: {name!r}. Available: {list(catalog)}")
    return tuple(catalog[name][:num_colors])


def next_palette_name(current: str, catalog: PaletteCatalog = PALETTES) -> str:
    """Return the palette after *current*, wrapping to the first."""
    names = list(catalog)
    if current not in names:
        return names[0]
    return names[(names.index(current) + 1) % len(names)]


def hex_to_rgb(color: Color) -> tuple[int, int, int]:
    """Convert a ``#RRGGBB`` token to an RGB tuple for drawing."""
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Not a #RRGGBB colour: {color!r}")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))
