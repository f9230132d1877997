"""PyQt6 GUI frontend — fully self-contained.

Includes main menu, gameplay with hover previews, level-complete and
game-over pages, and a how-to-play page.  No terminal interaction required.
"""

from __future__ import annotations

import sys

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSpacerItem,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from backend.config import GameConfig
from backend.engine.errors import InvalidMove
from backend.engine.gameplay import GamePlay
from backend.engine.gamepreview import EMPTY_PREVIEW, PreviewResult
from backend.engine.gamestate import GameSnapshot, GameStatus
from frontend.rules import rules_lines

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_SURFACE0 = "#313244"
_SURFACE1 = "#45475a"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_SUBTEXT = "#a6adc8"
_BLUE = "#89b4fa"
_GREEN = "#a6e3a1"
_GREEN_H = "#b8ecb4"
_PINK = "#f5c2e7"
_PINK_H = "#f8d4ee"
_YELLOW = "#f9e2af"
_YELLOW_H = "#fbebc6"
_RED = "#f38ba8"
_RED_H = "#f5a0b8"
_LAVENDER = "#b4befe"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
"""

_HINT = "1-6  play     P  palette     R  reset     N  new game     H  help     Esc  menu"


def _styled_btn(
    text: str,
    *,
    bg: str = _SURFACE0,
    hover: str = _SURFACE1,
    fg: str = _TEXT,
    font_size: int = 14,
    bold: bool = True,
    min_w: int = 0,
    min_h: int = 44,
    radius: int = 8,
) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", font_size, QFont.Weight.Bold if bold else QFont.Weight.Normal))
    btn.setMinimumHeight(min_h)
    if min_w:
        btn.setMinimumWidth(min_w)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(
        f"QPushButton {{ background:{bg}; color:{fg};"
        f" border:none; border-radius:{radius}px; padding:6px 18px; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
        f" QPushButton:disabled {{ color:{_OVERLAY0}; }}"
    )
    return btn


def _label(text: str, size: int, *, color: str = _TEXT, bold: bool = False) -> QLabel:
    lbl = QLabel(text)
    lbl.setFont(QFont("Helvetica", size, QFont.Weight.Bold if bold else QFont.Weight.Normal))
    lbl.setStyleSheet(f"color:{color};")
    lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
    return lbl


class _SwatchButton(QPushButton):
    """Colour button that reports when the pointer enters or leaves it."""

    hovered = pyqtSignal(int)
    left = pyqtSignal(int)

    def __init__(self, slot: int) -> None:
        super().__init__()
        self.slot = slot
        self.setFixedSize(56, 56)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

    def enterEvent(self, event) -> None:  # noqa: N802
        super().enterEvent(event)
        self.hovered.emit(self.slot)

    def leaveEvent(self, event) -> None:  # noqa: N802
        super().leaveEvent(event)
        self.left.emit(self.slot)


# ═══════════════════════════════════════════════════════════════════════════
# Pages
# ═══════════════════════════════════════════════════════════════════════════


class _MenuPage(QWidget):
    """Main menu with game modes, rules, quit."""

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("page")

        root = QVBoxLayout(self)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.setSpacing(12)
        root.setContentsMargins(30, 30, 30, 30)

        root.addWidget(_label("COLOUR  FLOOD", 34, bold=True))
        root.addSpacerItem(QSpacerItem(0, 24))
        root.addWidget(_label("Choose a mode", 15, color=_SUBTEXT))
        root.addSpacerItem(QSpacerItem(0, 8))

        self.play_btn = _styled_btn(
            "CLASSIC MODE", bg=_BLUE, hover=_LAVENDER, fg=_BASE,
            font_size=16, min_w=260, min_h=52,
        )
        root.addWidget(self.play_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        for name in ("TIME ATTACK", "PUZZLE MODE"):
            btn = _styled_btn(f"{name} (COMING SOON)", min_w=260, font_size=12)
            btn.setEnabled(False)
            root.addWidget(btn, alignment=Qt.AlignmentFlag.AlignCenter)

        root.addSpacerItem(QSpacerItem(0, 12))

        self.rules_btn = _styled_btn(
            "HOW TO PLAY", bg=_YELLOW, hover=_YELLOW_H, fg=_BASE, min_w=260, font_size=13
        )
        root.addWidget(self.rules_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        self.quit_btn = _styled_btn(
            "Q U I T", bg=_RED, hover=_RED_H, fg=_BASE, min_w=260, font_size=13
        )
        root.addWidget(self.quit_btn, alignment=Qt.AlignmentFlag.AlignCenter)


class _GamePage(QWidget):
    """The flood grid, colour buttons and live stats."""

    def __init__(self, config: GameConfig) -> None:
        super().__init__()
        self.setObjectName("page")
        self.config = config
        self.game = GamePlay(config)
        self._preview: PreviewResult = EMPTY_PREVIEW

        size = config.grid_size
        cell_px = max(12, min(40, 480 // size))

        root = QVBoxLayout(self)
        root.setSpacing(8)
        root.setContentsMargins(16, 10, 16, 10)

        # stats
        stats = QHBoxLayout()
        self._level = _label("", 15, bold=True)
        self._score = _label("", 15, bold=True, color=_YELLOW)
        self._moves = _label("", 15, bold=True, color=_PINK)
        for w in (self._level, self._score, self._moves):
            stats.addWidget(w)
        root.addLayout(stats)

        # actions
        actions = QHBoxLayout()
        actions.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.palette_btn = _styled_btn(
            "PALETTE", bg=_PINK, hover=_PINK_H, fg=_BASE, font_size=12, min_h=34
        )
        self.reset_btn = _styled_btn("RESET", font_size=12, min_h=34)
        self.rules_btn = _styled_btn("HOW TO PLAY", font_size=12, min_h=34)
        for w in (self.palette_btn, self.reset_btn, self.rules_btn):
            actions.addWidget(w)
        root.addLayout(actions)

        # board
        frame = QFrame()
        frame.setStyleSheet(f"background:{_MANTLE}; border-radius:6px;")
        grid = QGridLayout(frame)
        grid.setSpacing(1)
        grid.setContentsMargins(6, 6, 6, 6)
        root.addWidget(frame, alignment=Qt.AlignmentFlag.AlignCenter)

        self._cells: list[list[QLabel]] = []
        for r in range(size):
            row: list[QLabel] = []
            for c in range(size):
                cell = QLabel()
                cell.setFixedSize(cell_px, cell_px)
                cell.setAlignment(Qt.AlignmentFlag.AlignCenter)
                cell.setFont(QFont("Helvetica", max(8, cell_px // 3), QFont.Weight.Bold))
                grid.addWidget(cell, r, c)
                row.append(cell)
            self._cells.append(row)

        # preview readout
        self._preview_lbl = _label("", 13, bold=True, color=_YELLOW)
        root.addWidget(self._preview_lbl)

        # colour buttons
        swatches = QHBoxLayout()
        swatches.setAlignment(Qt.AlignmentFlag.AlignCenter)
        swatches.setSpacing(12)
        self._swatches: list[_SwatchButton] = []
        for slot in range(len(config.palettes[config.palette_name])):
            btn = _SwatchButton(slot)
            btn.clicked.connect(lambda _, s=slot: self.play_slot(s))
            btn.hovered.connect(self._on_hover)
            btn.left.connect(self._on_leave)
            swatches.addWidget(btn)
            self._swatches.append(btn)
        root.addLayout(swatches)

        # hint
        self._hint = _label(_HINT, 11, color=_OVERLAY0)
        root.addWidget(self._hint)

        self.sync()

    # -- rendering --

    def sync(self) -> None:
        snap = self.game.snapshot
        preview = self._preview
        self._level.setText(f"Level {snap.level}")
        self._score.setText(f"Score {snap.score}")
        self._moves.setText(f"Moves {snap.moves_left}")
        self._moves.setStyleSheet(f"color:{_RED if snap.moves_left <= 5 else _PINK};")
        self.palette_btn.setText(f"PALETTE: {snap.palette_name.upper()}")

        for r, row in enumerate(snap.grid):
            for c, color in enumerate(row):
                cell = self._cells[r][c]
                if (r, c) in preview.new_tiles and preview.color is not None:
                    cell.setStyleSheet(
                        f"background:{preview.color}; border:2px solid {_TEXT};"
                    )
                else:
                    cell.setStyleSheet(f"background:{color}; border:none;")
                cell.setText("S" if (r, c) == (0, 0) else "")

        self._sync_swatches(snap)

        if preview.new_tiles:
            self._preview_lbl.setText(
                f"+{len(preview.new_tiles)} tiles   x{preview.multiplier:g}"
                f"   = {preview.points} pts"
            )
        else:
            self._preview_lbl.setText("")

    def _sync_swatches(self, snap: GameSnapshot) -> None:
        colors = snap.palette_selection
        for slot, btn in enumerate(self._swatches):
            if slot >= len(colors):
                btn.hide()
                continue
            btn.show()
            color = colors[slot]
            active = color == snap.active_color
            border = f"3px solid {_TEXT}" if active else "none"
            if color == self._preview.color:
                border = f"3px solid {_YELLOW}"
            btn.setText(str(slot + 1))
            btn.setEnabled(not active)
            btn.setStyleSheet(
                f"QPushButton {{ background:{color}; color:{_BASE}; border:{border};"
                f" border-radius:10px; font-weight:bold; }}"
                f" QPushButton:disabled {{ color:{_OVERLAY0}; }}"
            )

    def set_status(self, text: str) -> None:
        self._hint.setText(text or _HINT)
        self._hint.setStyleSheet(f"color:{_YELLOW if text else _OVERLAY0};")

    # -- input --

    def _on_hover(self, slot: int) -> None:
        colors = self.game.colors
        if slot < len(colors):
            self._preview = self.game.preview_move(colors[slot])
            self.sync()

    def _on_leave(self, slot: int) -> None:
        self._preview = EMPTY_PREVIEW
        self.sync()

    def play_slot(self, slot: int) -> None:
        colors = self.game.colors
        if slot >= len(colors):
            self.set_status(f"Only {len(colors)} colours on this level")
            return
        try:
            self.game.apply_move(colors[slot])
        except InvalidMove as exc:
            self.set_status(exc.reason.capitalize())
            return
        self.set_status("")
        self._preview = EMPTY_PREVIEW
        self.sync()

    def run_command(self, command) -> None:
        command()
        self._preview = EMPTY_PREVIEW
        self.set_status("")
        self.sync()


class _ResultPage(QWidget):
    """Level-complete or game-over screen with navigation buttons."""

    def __init__(self, snap: GameSnapshot, bonus: int) -> None:
        super().__init__()
        self.setObjectName("page")
        self.won = snap.status == GameStatus.WON

        root = QVBoxLayout(self)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.setSpacing(10)
        root.setContentsMargins(30, 30, 30, 30)

        if self.won:
            root.addWidget(_label("★  LEVEL COMPLETE!  ★", 30, bold=True, color=_GREEN))
            lines = [
                (f"You cleared the level in {snap.moves_used} moves!", _SUBTEXT),
                (f"Your score: {snap.score}", _YELLOW),
            ]
            if snap.earns_perfect_clear:
                lines.append((f"Perfect Clear Bonus: +{bonus}!", _GREEN))
        else:
            root.addWidget(_label("GAME  OVER", 32, bold=True, color=_RED))
            lines = [
                ("You ran out of moves!", _SUBTEXT),
                (f"Final score: {snap.score}", _YELLOW),
                (f"You reached level {snap.level}", _YELLOW),
            ]

        root.addSpacerItem(QSpacerItem(0, 20))
        for txt, col in lines:
            root.addWidget(_label(txt, 18, bold=True, color=col))
        root.addSpacerItem(QSpacerItem(0, 24))

        self.continue_btn = _styled_btn(
            "NEXT LEVEL" if self.won else "PLAY AGAIN",
            bg=_GREEN, hover=_GREEN_H, fg=_BASE,
            font_size=16, min_w=240, min_h=50,
        )
        root.addWidget(self.continue_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        root.addSpacerItem(QSpacerItem(0, 6))

        self.menu_btn = _styled_btn("M E N U", min_w=240, font_size=13)
        root.addWidget(self.menu_btn, alignment=Qt.AlignmentFlag.AlignCenter)


class _RulesPage(QWidget):
    """How-to-play text with a back button."""

    def __init__(self, config: GameConfig) -> None:
        super().__init__()
        self.setObjectName("page")

        root = QVBoxLayout(self)
        root.setSpacing(8)
        root.setContentsMargins(24, 20, 24, 16)

        root.addWidget(_label("HOW  TO  PLAY", 26, bold=True))

        body = QLabel("\n".join(rules_lines(config)))
        body.setFont(QFont("Helvetica", 13))
        body.setStyleSheet(f"color:{_SUBTEXT};")
        body.setWordWrap(True)
        root.addWidget(body)
        root.addStretch(1)

        self.back_btn = _styled_btn("B A C K", min_w=200, font_size=13)
        root.addWidget(self.back_btn, alignment=Qt.AlignmentFlag.AlignCenter)


# ═══════════════════════════════════════════════════════════════════════════
# Main window
# ═══════════════════════════════════════════════════════════════════════════

_IDX_MENU = 0
_IDX_GAME = 1
_IDX_RESULT = 2
_IDX_RULES = 3


class _MainWindow(QMainWindow):
    def __init__(self, config: GameConfig) -> None:
        super().__init__()
        self._config = config

        self.setWindowTitle("Colour Flood")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(560, 760)

        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        # menu
        self._menu = _MenuPage()
        self._menu.play_btn.clicked.connect(self._on_play)
        self._menu.rules_btn.clicked.connect(self._show_rules)
        self._menu.quit_btn.clicked.connect(self.close)
        self._stack.addWidget(self._menu)  # 0

        # placeholders (replaced dynamically)
        self._game_page: _GamePage | None = None
        self._stack.addWidget(QWidget())  # 1
        self._stack.addWidget(QWidget())  # 2

        # rules
        self._rules_page = _RulesPage(config)
        self._rules_page.back_btn.clicked.connect(self._leave_rules)
        self._stack.addWidget(self._rules_page)  # 3

        self._stack.setCurrentIndex(_IDX_MENU)

    # -- navigation ---

    def _replace(self, idx: int, page: QWidget) -> None:
        old = self._stack.widget(idx)
        self._stack.removeWidget(old)
        old.deleteLater()
        self._stack.insertWidget(idx, page)
        self._stack.setCurrentIndex(idx)

    def _show_menu(self) -> None:
        self._stack.setCurrentIndex(_IDX_MENU)

    def _show_rules(self) -> None:
        self._stack.setCurrentIndex(_IDX_RULES)

    def _leave_rules(self) -> None:
        self._stack.setCurrentIndex(_IDX_GAME if self._game_page is not None else _IDX_MENU)

    def _on_play(self) -> None:
        page = _GamePage(self._config)
        page.palette_btn.clicked.connect(lambda: self._command(page.game.cycle_palette))
        page.reset_btn.clicked.connect(self._confirm_reset)
        page.rules_btn.clicked.connect(self._show_rules)
        self._game_page = page
        self._replace(_IDX_GAME, page)
        self._check_over()

    def _show_result(self) -> None:
        gp = self._game_page
        assert gp is not None
        page = _ResultPage(gp.game.snapshot, self._config.perfect_clear_bonus)
        page.continue_btn.clicked.connect(self._continue)
        page.menu_btn.clicked.connect(self._show_menu)
        self._replace(_IDX_RESULT, page)

    def _continue(self) -> None:
        gp = self._game_page
        assert gp is not None
        if gp.game.is_won:
            self._command(gp.game.start_next_level)
        else:
            self._command(gp.game.start_new_game)

    # -- game commands ---

    def _command(self, command) -> None:
        gp = self._game_page
        assert gp is not None
        gp.run_command(command)
        self._stack.setCurrentIndex(_IDX_GAME)
        self._check_over()

    def _play(self, slot: int) -> None:
        gp = self._game_page
        assert gp is not None
        gp.play_slot(slot)
        self._check_over()

    def _check_over(self) -> None:
        gp = self._game_page
        if gp is not None and gp.game.snapshot.status != GameStatus.PLAYING:
            self._show_result()

    def _confirm_reset(self) -> None:
        gp = self._game_page
        assert gp is not None
        answer = QMessageBox.question(
            self,
            "Reset Level?",
            "Are you sure you want to reset this level?\n"
            "Your current progress will be lost.",
        )
        if answer == QMessageBox.StandardButton.Yes:
            self._command(gp.game.reset_level)

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        idx = self._stack.currentIndex()

        if idx == _IDX_MENU:
            if key in (Qt.Key.Key_Return, Qt.Key.Key_1):
                self._on_play()
            elif key == Qt.Key.Key_H:
                self._show_rules()
            elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
                self.close()

        elif idx == _IDX_GAME and self._game_page is not None:
            gp = self._game_page
            slot = key - Qt.Key.Key_1.value
            if 0 <= slot < 6:
                self._play(slot)
            elif key == Qt.Key.Key_P:
                self._command(gp.game.cycle_palette)
            elif key == Qt.Key.Key_R:
                self._confirm_reset()
            elif key == Qt.Key.Key_N:
                self._command(gp.game.start_new_game)
            elif key == Qt.Key.Key_H:
                self._show_rules()
            elif key in (Qt.Key.Key_M, Qt.Key.Key_Escape):
                self._show_menu()

        elif idx == _IDX_RESULT:
            if key == Qt.Key.Key_Return:
                self._continue()
            elif key in (Qt.Key.Key_M, Qt.Key.Key_Escape):
                self._show_menu()

        elif idx == _IDX_RULES:
            if key in (
                Qt.Key.Key_Escape,
                Qt.Key.Key_Backspace,
                Qt.Key.Key_H,
            ):
                self._leave_rules()

        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: GameConfig) -> None:
    """Launch the PyQt6 GUI (opens directly to the menu)."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(config)
    window.show()
    qapp.exec()
