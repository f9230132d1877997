"""How-to-play text shared by every frontend."""

from __future__ import annotations

from backend.config import GameConfig


def rules_lines(config: GameConfig) -> list[str]:
    """Return the rules as plain lines, filled in from *config*."""
    lines = [
        "Goal: fill the entire grid with one colour before you run out of moves.",
        "Pick a colour to repaint the region growing from the top-left cell (S);",
        "every neighbouring cell of that colour joins the region.",
        "",
        "Scoring:",
        "  1 point per tile added to the region",
        "  1.5x when a move adds more than 10 tiles",
        "  2x when a move adds more than 20 tiles",
        f"  +{config.perfect_clear_bonus} bonus for clearing a level in fewer than "
        f"{config.perfect_clear_moves} moves",
        "",
        f"Each level gives you {config.default_moves} moves on a "
        f"{config.grid_size}×{config.grid_size} grid.",
    ]
    if config.level_thresholds:
        levels = ", ".join(str(t) for t in config.level_thresholds)
        lines.append(f"Progression: a new colour is added at levels {levels}.")
    return lines
