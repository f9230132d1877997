"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, 24-bit ANSI colours, tty/termios) for rendering
and input.  Includes a built-in menu, the game screen with move previews,
and the level-complete / game-over screens.
"""

from __future__ import annotations

import sys

from backend.config import GameConfig
from backend.engine.errors import InvalidMove
from backend.engine.gameplay import GamePlay
from backend.engine.gamepreview import EMPTY_PREVIEW, PreviewResult
from backend.engine.gamestate import GameSnapshot, GameStatus
from backend.models.palette import hex_to_rgb
from frontend.cli.input_handler import color_index, get_key
from frontend.rules import rules_lines


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset
_INK = "\033[30m"    # black fg (marks drawn on top of cells)


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _bg(color: str) -> str:
    r, g, b = hex_to_rgb(color)
    return f"\033[48;2;{r};{g};{b}m"


# -- grid rendering -----------------------------------------------------------


def _render_grid(snap: GameSnapshot, preview: PreviewResult) -> str:
    """Return the grid as two-character coloured blocks.

    Cells a previewed move would absorb are painted in the preview colour
    and dotted; the anchor cell carries an ``S``.
    """
    lines: list[str] = []
    for r, row in enumerate(snap.grid):
        cells: list[str] = []
        for c, color in enumerate(row):
            if (r, c) in preview.new_tiles and preview.color is not None:
                cells.append(f"{_bg(preview.color)}{_INK}··{_R}")
            elif (r, c) == (0, 0):
                cells.append(f"{_bg(color)}{_INK}{_BOLD}S {_R}")
            else:
                cells.append(f"{_bg(color)}  {_R}")
        lines.append("  " + "".join(cells))
    return "\n".join(lines)


def _render_buttons(snap: GameSnapshot, cursor: int, preview: PreviewResult) -> str:
    """Return the colour button row; the cursor is bracketed."""
    parts: list[str] = []
    for i, color in enumerate(snap.palette_selection):
        swatch = f"{_bg(color)}    {_R}"
        label = f"{i + 1}"
        if color == snap.active_color:
            label = f"{_DIM}{label}{_R}"
        if i == cursor:
            parts.append(f"{_BOLD}[{label}{_BOLD}]{_R}{swatch}")
        else:
            parts.append(f" {label} {swatch}")
    line = "  " + "  ".join(parts)
    if not preview.is_empty and preview.new_tiles:
        line += (
            f"   {_Y}+{len(preview.new_tiles)} tiles  "
            f"x{preview.multiplier:g}  = {preview.points} pts{_R}"
        )
    return line


def _stats_line(snap: GameSnapshot) -> str:
    moves_col = _RED if snap.moves_left <= 5 else _Y
    return (
        f"  Level: {_Y}{snap.level}{_R}  |  "
        f"Score: {_Y}{snap.score}{_R}  |  "
        f"Moves left: {moves_col}{snap.moves_left}{_R}  |  "
        f"Palette: {_C}{snap.palette_name}{_R}"
    )


# -- screens ------------------------------------------------------------------


def _show_menu() -> None:
    _clear()
    print()
    print(f"  {_BOLD}======================================{_R}")
    print(f"  {_BOLD}        C O L O U R   F L O O D       {_R}")
    print(f"  {_BOLD}======================================{_R}")
    print()
    print(f"    {_C}1{_R}  Classic Mode")
    print(f"    {_DIM}2  Time Attack (coming soon){_R}")
    print(f"    {_DIM}3  Puzzle Mode (coming soon){_R}")
    print(f"    {_Y}H{_R}  How to play")
    print(f"    {_DIM}Q{_R}  Quit")
    print()


def _show_game(
    snap: GameSnapshot, cursor: int, preview: PreviewResult, status: str = ""
) -> None:
    _clear()
    size = snap.size
    print(f"  {_C}=== Colour Flood ({size}×{size}) ==={_R}")
    print()
    print(_stats_line(snap))
    print()
    print(_render_grid(snap, preview))
    print()
    print(_render_buttons(snap, cursor, preview))
    print()
    print(
        f"  {_C}1-{len(snap.palette_selection)}{_R}: play  |  "
        f"{_C}←→{_R}/{_C}AD{_R}: preview  |  "
        f"{_C}Enter{_R}: play preview  |  "
        f"{_C}P{_R}: palette  |  "
        f"{_C}R{_R}: reset  |  "
        f"{_C}N{_R}: new  |  "
        f"{_C}H{_R}: help  |  "
        f"{_C}Q{_R}: back"
    )
    if status:
        print(f"\n  {status}")
    sys.stdout.flush()


def _show_over(snap: GameSnapshot, bonus: int) -> None:
    """Draw the final grid with the level-complete or game-over message."""
    _clear()
    print()
    print(_render_grid(snap, EMPTY_PREVIEW))
    print()
    if snap.status == GameStatus.WON:
        print(f"  {_G}★ LEVEL COMPLETE! ★{_R}")
        print()
        print(f"  You cleared the level in {_Y}{snap.moves_used}{_R} moves!")
        print(f"  Your score: {_Y}{snap.score}{_R}")
        if snap.earns_perfect_clear:
            print(f"  {_G}Perfect Clear Bonus: +{bonus}!{_R}")
        print(f"\n  Press {_C}Enter{_R} for the next level, {_C}Q{_R} to go back.")
    else:
        print(f"  {_RED}GAME OVER{_R}")
        print()
        print("  You ran out of moves!")
        print(f"  Final score: {_Y}{snap.score}{_R}")
        print(f"  You reached level {_Y}{snap.level}{_R}")
        print(f"\n  Press {_C}Enter{_R} to play again, {_C}Q{_R} to go back.")
    sys.stdout.flush()


def _show_rules(config: GameConfig) -> None:
    _clear()
    print()
    print(f"  {_BOLD}=== HOW TO PLAY ==={_R}")
    print()
    for line in rules_lines(config):
        print(f"  {line}")
    print(f"\n  {_DIM}Press any key to go back.{_R}")
    get_key()


def _confirm(question: str) -> bool:
    sys.stdout.write(f"\n  {_Y}{question}{_R} {_DIM}(y to confirm){_R} ")
    sys.stdout.flush()
    return get_key() == "yes"


# -- game loop ----------------------------------------------------------------


def _play_game(config: GameConfig) -> None:
    game = GamePlay(config)
    cursor = 0
    preview = EMPTY_PREVIEW
    status = ""

    while True:
        snap = game.snapshot

        if snap.status != GameStatus.PLAYING:
            _show_over(snap, config.perfect_clear_bonus)
            while True:
                key = get_key()
                if key == "quit":
                    return
                if key == "enter":
                    break
            if snap.status == GameStatus.WON:
                game.start_next_level()
            else:
                game.start_new_game()
            cursor, preview, status = 0, EMPTY_PREVIEW, ""
            continue

        colors = snap.palette_selection
        cursor = min(cursor, len(colors) - 1)
        _show_game(snap, cursor, preview, status)
        status = ""
        key = get_key()

        choice = color_index(key)
        if key == "enter":
            choice = cursor

        if choice is not None:
            if choice >= len(colors):
                status = f"{_DIM}Only {len(colors)} colours on this level.{_R}"
                continue
            try:
                game.apply_move(colors[choice])
            except InvalidMove as exc:
                status = f"{_DIM}{exc.reason.capitalize()}.{_R}"
            preview = EMPTY_PREVIEW
        elif key in ("left", "right"):
            step = -1 if key == "left" else 1
            cursor = (cursor + step) % len(colors)
            preview = game.preview_move(colors[cursor])
        elif key == "palette":
            game.cycle_palette()
            preview = EMPTY_PREVIEW
            status = f"{_C}Palette: {game.snapshot.palette_name}{_R}"
        elif key == "reset":
            if _confirm("Reset this level? Your current progress will be lost."):
                game.reset_level()
                preview = EMPTY_PREVIEW
                status = f"{_Y}Level reset.{_R}"
        elif key == "new":
            if _confirm("Start a new game from level 1?"):
                game.start_new_game()
                preview = EMPTY_PREVIEW
        elif key == "help":
            _show_rules(config)
        elif key == "quit":
            return


# -- menu loop ----------------------------------------------------------------


def _menu_loop(config: GameConfig) -> None:
    while True:
        _show_menu()
        key = get_key()

        if key == "quit":
            _clear()
            print("  Goodbye!\n")
            return
        elif key in ("color:0", "enter"):
            _play_game(config)
        elif key == "help":
            _show_rules(config)


# -- public entry point -------------------------------------------------------


def run(config: GameConfig) -> None:
    """Launch the vanilla CLI with interactive menu."""
    _menu_loop(config)
