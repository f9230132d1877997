"""Cross-platform single-keypress reader for CLI frontends.

Handles arrow keys, digit colour picks, and command keys without requiring
Enter.  Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    ch = msvcrt.getch()
    # Arrow keys arrive as a 0xE0 / 0x00 prefix followed by a scan code.
    if ch in (b"\xe0", b"\x00"):
        return _WIN_ARROWS.get(msvcrt.getch(), "")
    return ch.decode("utf-8", errors="ignore")


_WIN_ARROWS: dict[bytes, str] = {
    b"K": "\x1b[D",
    b"M": "\x1b[C",
}

_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "a": "left",
    "A": "left",
    "d": "right",
    "D": "right",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "reset",
    "R": "reset",
    "n": "new",
    "N": "new",
    "p": "palette",
    "P": "palette",
    "h": "help",
    "H": "help",
    "?": "help",
    "y": "yes",
    "Y": "yes",
    "\r": "enter",
    "\n": "enter",
    " ": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "C": "right",
    "D": "left",
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    if ch and ch in "123456":
        return f"color:{int(ch) - 1}"
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


def color_index(action: str) -> int | None:
    """Return the palette slot of a ``"color:<n>"`` action, else ``None``."""
    if action.startswith("color:"):
        return int(action.split(":", 1)[1])
    return None


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "color:0" … "color:5"  — digit keys 1-6, play that colour
        "left", "right"        — move the colour cursor (preview)
        "enter"                — Enter / Space, play the cursor colour
        "reset"                — r (reset level)
        "new"                  — n (new game)
        "palette"              — p (cycle palette)
        "help"                 — h / ?
        "yes"                  — y (confirm)
        "quit"                 — q / Ctrl-C / Escape
        "<char>"               — unmapped printable char
        ""                     — unrecognised key
    """
    ch = _getch()

    # Arrow keys (escape sequences: ESC [ C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            ch3 = _getch()
            return _ARROW_MAP.get(ch3, "")
        return "quit"  # bare Escape

    if ch.startswith("\x1b["):
        return _ARROW_MAP.get(ch[-1], "")

    return _resolve(ch)
