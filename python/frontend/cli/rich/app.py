"""Rich terminal frontend — colour blocks, panels, and styled text.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.  Includes a built-in
menu, move previews, and level-complete / game-over panels.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from backend.config import GameConfig
from backend.engine.errors import InvalidMove
from backend.engine.gameplay import GamePlay
from backend.engine.gamepreview import EMPTY_PREVIEW, PreviewResult
from backend.engine.gamestate import GameSnapshot, GameStatus
from frontend.cli.input_handler import color_index, get_key
from frontend.rules import rules_lines

console = Console()


# -- grid rendering -----------------------------------------------------------


def _render_grid(snap: GameSnapshot, preview: PreviewResult) -> Text:
    """Return the grid as a block of two-character cells."""
    grid = Text()
    for r, row in enumerate(snap.grid):
        if r:
            grid.append("\n")
        for c, color in enumerate(row):
            if (r, c) in preview.new_tiles and preview.color is not None:
                grid.append("··", style=f"bold black on {preview.color}")
            elif (r, c) == (0, 0):
                grid.append("S ", style=f"bold black on {color}")
            else:
                grid.append("  ", style=f"on {color}")
    return grid


def _render_buttons(snap: GameSnapshot, cursor: int, preview: PreviewResult) -> Text:
    row = Text()
    for i, color in enumerate(snap.palette_selection):
        if i:
            row.append("  ")
        active = color == snap.active_color
        label_style = "dim" if active else "bold"
        if i == cursor:
            row.append(f"[{i + 1}]", style=f"{label_style} cyan")
        else:
            row.append(f" {i + 1} ", style=label_style)
        row.append("    ", style=f"on {color}")
    if not preview.is_empty and preview.new_tiles:
        row.append(f"   +{len(preview.new_tiles)} tiles ", style="yellow")
        row.append(f"x{preview.multiplier:g}", style="bold magenta")
        row.append(f"  = {preview.points} pts", style="yellow")
    return row


def _stats(snap: GameSnapshot) -> Text:
    stats = Text()
    stats.append("Level ", style="dim")
    stats.append(str(snap.level), style="bold yellow")
    stats.append("    Score ", style="dim")
    stats.append(str(snap.score), style="bold yellow")
    stats.append("    Moves left ", style="dim")
    stats.append(
        str(snap.moves_left),
        style="bold red" if snap.moves_left <= 5 else "bold yellow",
    )
    stats.append("    Palette ", style="dim")
    stats.append(snap.palette_name, style="bold cyan")
    return stats


# -- screens ------------------------------------------------------------------


def _draw_menu() -> None:
    console.clear()

    opts = Text()
    opts.append("1", style="bold cyan")
    opts.append("  Classic Mode\n")
    opts.append("2  Time Attack (coming soon)\n", style="dim")
    opts.append("3  Puzzle Mode (coming soon)\n", style="dim")
    opts.append("H", style="bold yellow")
    opts.append("  How to play\n")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    panel = Panel(
        Align.center(opts),
        title="[bold]C O L O U R   F L O O D[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )
    console.print()
    console.print(Align.center(panel))


def _draw_game(
    snap: GameSnapshot, cursor: int, preview: PreviewResult, status: str = ""
) -> None:
    console.clear()

    controls = Text()
    controls.append(f"1-{len(snap.palette_selection)}", style="bold cyan")
    controls.append("  play   ", style="dim")
    controls.append("←→", style="bold cyan")
    controls.append("  preview   ", style="dim")
    controls.append("Enter", style="bold cyan")
    controls.append("  play preview   ", style="dim")
    controls.append("P", style="bold cyan")
    controls.append("  palette   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  reset   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  new   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    body = Group(
        Align.center(_stats(snap)),
        Text(""),
        Align.center(_render_grid(snap, preview)),
        Text(""),
        Align.center(_render_buttons(snap, cursor, preview)),
    )
    panel = Panel(
        body,
        title=f"[bold cyan]Colour Flood  {snap.size}×{snap.size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text.from_markup(status)))
    console.print(Align.center(controls))


def _draw_over(snap: GameSnapshot, bonus: int) -> None:
    console.clear()

    message = Text(justify="center")
    if snap.status == GameStatus.WON:
        title = "[bold green]LEVEL COMPLETE![/bold green]"
        border = "bold green"
        message.append(f"You cleared the level in {snap.moves_used} moves!\n")
        message.append("Your score: ")
        message.append(str(snap.score), style="bold yellow")
        if snap.earns_perfect_clear:
            message.append(f"\nPerfect Clear Bonus: +{bonus}!", style="bold green")
        hint = "Press Enter for the next level, Q to go back."
    else:
        title = "[bold red]GAME OVER[/bold red]"
        border = "bold red"
        message.append("You ran out of moves!\n")
        message.append("Final score: ")
        message.append(str(snap.score), style="bold yellow")
        message.append("\nYou reached level ")
        message.append(str(snap.level), style="bold yellow")
        hint = "Press Enter to play again, Q to go back."

    panel = Panel(
        Group(
            Align.center(_render_grid(snap, EMPTY_PREVIEW)),
            Text(""),
            Align.center(message),
        ),
        title=title,
        border_style=border,
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text(f"\n{hint}\n", style="dim")))


def _draw_rules(config: GameConfig) -> None:
    console.clear()
    panel = Panel(
        Text("\n".join(rules_lines(config))),
        title="[bold]HOW  TO  PLAY[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\nPress any key to go back.\n", style="dim")))
    get_key()


def _confirm(question: str) -> bool:
    console.print(
        Align.center(Text.from_markup(f"[yellow]{question}[/yellow] [dim](y to confirm)[/dim]"))
    )
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
            _draw_over(snap, config.perfect_clear_bonus)
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
        _draw_game(snap, cursor, preview, status)
        status = ""
        key = get_key()

        choice = color_index(key)
        if key == "enter":
            choice = cursor

        if choice is not None:
            if choice >= len(colors):
                status = f"[dim]Only {len(colors)} colours on this level.[/dim]"
                continue
            try:
                game.apply_move(colors[choice])
            except InvalidMove as exc:
                status = f"[dim]{exc.reason.capitalize()}.[/dim]"
            preview = EMPTY_PREVIEW
        elif key in ("left", "right"):
            step = -1 if key == "left" else 1
            cursor = (cursor + step) % len(colors)
            preview = game.preview_move(colors[cursor])
        elif key == "palette":
            game.cycle_palette()
            preview = EMPTY_PREVIEW
            status = f"[cyan]Palette: {game.snapshot.palette_name}[/cyan]"
        elif key == "reset":
            if _confirm("Reset this level? Your current progress will be lost."):
                game.reset_level()
                preview = EMPTY_PREVIEW
                status = "[yellow]Level reset.[/yellow]"
        elif key == "new":
            if _confirm("Start a new game from level 1?"):
                game.start_new_game()
                preview = EMPTY_PREVIEW
        elif key == "help":
            _draw_rules(config)
        elif key == "quit":
            return


# -- menu loop ----------------------------------------------------------------


def _menu_loop(config: GameConfig) -> None:
    while True:
        _draw_menu()
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key in ("color:0", "enter"):
            _play_game(config)
        elif key == "help":
            _draw_rules(config)


# -- public entry point -------------------------------------------------------


def run(config: GameConfig) -> None:
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(config)
