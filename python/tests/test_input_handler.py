"""Tests for the CLI key mapping (no terminal needed)."""

from __future__ import annotations

import pytest

from frontend.cli.input_handler import _resolve, color_index


@pytest.mark.parametrize(
    "ch, action",
    [
        ("1", "color:0"),
        ("6", "color:5"),
        ("a", "left"),
        ("D", "right"),
        ("\r", "enter"),
        (" ", "enter"),
        ("r", "reset"),
        ("n", "new"),
        ("p", "palette"),
        ("?", "help"),
        ("y", "yes"),
        ("q", "quit"),
        ("\x03", "quit"),
        ("7", "7"),
        ("", ""),
        ("\x01", ""),
    ],
)
def test_resolve(ch: str, action: str) -> None:
    assert _resolve(ch) == action


def test_color_index() -> None:
    assert color_index("color:3") == 3
    assert color_index("left") is None
    assert color_index("") is None
