#!/usr/bin/env python3
"""Colour Flood.

Usage::

    python main.py                      # interactive menu
    python main.py -f rich -s 10        # Rich terminal, 10×10
    python main.py -f pygame -p pastel  # Pygame GUI (has its own menu)
    python main.py --rules              # print how to play
"""

import importlib
import logging
import sys
from dataclasses import replace
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import DEFAULT_GRID_SIZE, DEFAULT_MOVES, GameConfig  # noqa: E402
from backend.models.palette import PALETTE_NAMES  # noqa: E402

logger = logging.getLogger("colour_flood")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)],
    )


def _print_rules(config: GameConfig) -> None:
    from frontend.rules import rules_lines

    print("\n  === HOW TO PLAY ===\n")
    for line in rules_lines(config):
        print(f"  {line}")
    print()


def _check_palette(name: str) -> str:
    if name not in PALETTE_NAMES:
        raise typer.BadParameter(
            f"unknown palette {name!r}, choose from: {', '.join(PALETTE_NAMES)}"
        )
    return name


def _ask_palette(config: GameConfig) -> GameConfig:
    names = config.palette_names
    print()
    for i, name in enumerate(names, 1):
        print(f"  {i}.  {name}")
    raw = input(f"  Palette (1-{len(names)}, default {config.palette_name}): ").strip()
    if not raw:
        return config
    try:
        name = names[int(raw) - 1]
    except (ValueError, IndexError):
        print(f"  Invalid palette — keeping {config.palette_name}.")
        return config
    return replace(config, palette_name=name)


def _menu_loop(config: GameConfig) -> None:
    while True:
        print()
        print("  ====================================")
        print("         C O L O U R   F L O O D      ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  Play  (Pygame GUI)")
        print("  4.  Play  (PyQt GUI)")
        print(f"  5.  Palette  [{config.palette_name}]")
        print("  6.  How to play")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2", "3", "4"):
            frontend = list(Frontend)[int(choice) - 1]
            mod = importlib.import_module(_RUNNERS[frontend])
            mod.run(config)

        elif choice == "5":
            config = _ask_palette(config)

        elif choice == "6":
            _print_rules(config)

        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    size: int = typer.Option(
        DEFAULT_GRID_SIZE, "-s", "--size",
        min=4, max=30,
        help="Grid size (4-30).",
    ),
    moves: int = typer.Option(
        DEFAULT_MOVES, "-m", "--moves",
        min=1,
        help="Move budget per level.",
    ),
    palette: str = typer.Option(
        "default", "-p", "--palette",
        callback=_check_palette,
        help=f"Starting palette ({', '.join(PALETTE_NAMES)}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for reproducible grids.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine activity at DEBUG level.",
    ),
    rules: bool = typer.Option(
        False, "--rules",
        help="Show how to play and exit.",
    ),
) -> None:
    """Colour Flood puzzle game."""
    _setup_logging(verbose)

    try:
        config = GameConfig(
            grid_size=size,
            default_moves=moves,
            palette_name=palette,
            seed=seed,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if rules:
        _print_rules(config)
        return

    if frontend is None:
        _menu_loop(config)
        return

    logger.debug(
        "Launching %s frontend (%dx%d, palette %s)",
        frontend, config.grid_size, config.grid_size, config.palette_name,
    )
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(config)


if __name__ == "__main__":
    app()
