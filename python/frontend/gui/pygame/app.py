"""Pygame GUI frontend — fully self-contained.

Includes main menu, gameplay with hover previews, level-complete and
game-over dialogs, reset confirmation, and a how-to-play screen.  No
terminal interaction required.
"""

from __future__ import annotations

import enum

import pygame

from backend.config import GameConfig
from backend.engine.errors import InvalidMove
from backend.engine.gameplay import GamePlay
from backend.engine.gamepreview import EMPTY_PREVIEW, PreviewResult
from backend.engine.gamestate import GameStatus
from backend.models.palette import hex_to_rgb
from frontend.rules import rules_lines

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_LAVENDER = (180, 190, 254)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_YELLOW = (249, 226, 175)
COL_RED = (243, 139, 168)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 540, 760
CELL_GAP = 1
MARGIN = 30
BOARD_MAX = WIN_W - 2 * MARGIN  # max board width/height in px
BOARD_Y = 128
SWATCH = 56
SWATCH_GAP = 14


# ---------------------------------------------------------------------------
# Screen enum
# ---------------------------------------------------------------------------
class _Screen(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    RULES = "rules"


class _Dialog(enum.Enum):
    NONE = "none"
    OVER = "over"
    CONFIRM_RESET = "confirm_reset"


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "radius", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
        radius: int = 8,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self.radius = radius
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = self.hover if self._hot else self.bg
        pygame.draw.rect(surf, c, self.rect, border_radius=self.radius)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


# ---------------------------------------------------------------------------
# Centring helpers
# ---------------------------------------------------------------------------
def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, config: GameConfig) -> None:
        self._config = config

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Colour Flood")
        self._clock = pygame.time.Clock()

        # Fonts
        self._f_big = pygame.font.SysFont("Helvetica", 38, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_btn = pygame.font.SysFont("Helvetica", 17, bold=True)
        self._f_btn_sm = pygame.font.SysFont("Helvetica", 14, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)
        self._f_cell = pygame.font.SysFont("Helvetica", 12, bold=True)

        self._screen = _Screen.MENU
        self._dialog = _Dialog.NONE
        self._game: GamePlay | None = None
        self._preview: PreviewResult = EMPTY_PREVIEW
        self._status_msg: str = ""

        self._build_menu_btns()
        self._build_game_btns()
        self._build_dialog_btns()

    # ── buttons ─────────────────────────────────────────────────────────────

    def _build_menu_btns(self) -> None:
        bw = 280
        self._play_btn = _Btn(
            (_cx(bw), 250, bw, 52),
            "CLASSIC MODE",
            self._f_btn,
            bg=COL_BLUE,
            hover=COL_LAVENDER,
            fg=COL_BASE,
        )
        self._time_btn = _Btn(
            (_cx(bw), 318, bw, 44),
            "TIME ATTACK (COMING SOON)",
            self._f_btn_sm,
            fg=COL_OVERLAY0,
            hover=COL_SURFACE0,
        )
        self._puzzle_btn = _Btn(
            (_cx(bw), 374, bw, 44),
            "PUZZLE MODE (COMING SOON)",
            self._f_btn_sm,
            fg=COL_OVERLAY0,
            hover=COL_SURFACE0,
        )
        self._rules_btn = _Btn(
            (_cx(bw), 446, bw, 44),
            "HOW TO PLAY",
            self._f_btn_sm,
            bg=COL_YELLOW,
            hover=(255, 240, 200),
            fg=COL_BASE,
        )
        self._quit_btn = _Btn(
            (_cx(bw), 502, bw, 44),
            "Q U I T",
            self._f_btn_sm,
            bg=COL_RED,
            hover=(255, 170, 185),
            fg=COL_BASE,
        )
        self._menu_all: list[_Btn] = [
            self._play_btn,
            self._time_btn,
            self._puzzle_btn,
            self._rules_btn,
            self._quit_btn,
        ]
        self._rules_back = _Btn(
            (_cx(180), WIN_H - 80, 180, 46), "B A C K", self._f_btn_sm
        )

    def _build_game_btns(self) -> None:
        """Palette / reset / info buttons above the board."""
        bw, gap = 150, 10
        sx = _cx(3 * bw + 2 * gap)
        self._palette_btn = _Btn(
            (sx, 76, bw, 36), "PALETTE", self._f_btn_sm,
            bg=COL_PINK, hover=(245, 210, 227), fg=COL_BASE,
        )
        self._reset_btn = _Btn(
            (sx + bw + gap, 76, bw, 36), "RESET (R)", self._f_btn_sm,
        )
        self._info_btn = _Btn(
            (sx + 2 * (bw + gap), 76, bw, 36), "HOW TO PLAY (H)", self._f_btn_sm,
        )
        self._game_action_btns = [self._palette_btn, self._reset_btn, self._info_btn]

    def _build_dialog_btns(self) -> None:
        bw = 220
        self._next_btn = _Btn(
            (_cx(bw), 430, bw, 50), "NEXT LEVEL", self._f_btn,
            bg=COL_GREEN, hover=(190, 240, 190), fg=COL_BASE,
        )
        self._again_btn = _Btn(
            (_cx(bw), 430, bw, 50), "PLAY AGAIN", self._f_btn,
            bg=COL_BLUE, hover=COL_LAVENDER, fg=COL_BASE,
        )
        self._cancel_btn = _Btn(
            (WIN_W // 2 - 130, 420, 120, 44), "CANCEL", self._f_btn_sm,
        )
        self._confirm_btn = _Btn(
            (WIN_W // 2 + 10, 420, 120, 44), "RESET", self._f_btn_sm,
            bg=COL_RED, hover=(255, 170, 185), fg=COL_BASE,
        )

    # ── layout helpers ──────────────────────────────────────────────────────

    def _cell_layout(self) -> tuple[int, int, int]:
        """Return (cell_px, origin_x, origin_y) for the current grid."""
        sz = self._config.grid_size
        cell_px = (BOARD_MAX - (sz - 1) * CELL_GAP) // sz
        total = sz * cell_px + (sz - 1) * CELL_GAP
        return cell_px, _cx(total), BOARD_Y

    def _board_bottom(self) -> int:
        cpx, _, oy = self._cell_layout()
        sz = self._config.grid_size
        return oy + sz * cpx + (sz - 1) * CELL_GAP

    def _swatch_rects(self) -> list[pygame.Rect]:
        assert self._game is not None
        n = len(self._game.colors)
        total = n * SWATCH + (n - 1) * SWATCH_GAP
        sx = _cx(total)
        y = self._board_bottom() + 44
        return [
            pygame.Rect(sx + i * (SWATCH + SWATCH_GAP), y, SWATCH, SWATCH)
            for i in range(n)
        ]

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_menu(self) -> None:
        self._surf.fill(COL_BASE)
        _blit_center(
            self._surf,
            self._f_big.render("COLOUR  FLOOD", True, COL_TEXT),
            110,
        )
        _blit_center(
            self._surf,
            self._f_body.render("Choose a mode", True, COL_SUBTEXT),
            200,
        )
        for btn in self._menu_all:
            btn.draw(self._surf)

    def _draw_rules(self) -> None:
        self._surf.fill(COL_BASE)
        _blit_center(
            self._surf,
            self._f_big.render("HOW TO PLAY", True, COL_TEXT),
            40,
        )
        y = 120
        for line in rules_lines(self._config):
            if line:
                self._surf.blit(self._f_body.render(line, True, COL_SUBTEXT), (MARGIN, y))
            y += 26
        self._rules_back.draw(self._surf)

    def _draw_game(self) -> None:
        self._surf.fill(COL_BASE)
        game = self._game
        assert game is not None
        snap = game.snapshot
        preview = self._preview

        # header
        moves_col = COL_RED if snap.moves_left <= 5 else COL_PINK
        header = self._f_title.render(
            f"Level {snap.level}     Score {snap.score}", True, COL_TEXT
        )
        self._surf.blit(header, (MARGIN, 18))
        moves = self._f_title.render(f"Moves {snap.moves_left}", True, moves_col)
        self._surf.blit(moves, (WIN_W - MARGIN - moves.get_width(), 18))
        self._sync_palette_label(snap.palette_name)

        for btn in self._game_action_btns:
            btn.draw(self._surf)

        # cells
        cpx, ox, oy = self._cell_layout()
        for r, row in enumerate(snap.grid):
            for c, color in enumerate(row):
                rect = pygame.Rect(ox + c * (cpx + CELL_GAP), oy + r * (cpx + CELL_GAP), cpx, cpx)
                if (r, c) in preview.new_tiles and preview.color is not None:
                    pygame.draw.rect(self._surf, hex_to_rgb(preview.color), rect)
                    pygame.draw.rect(self._surf, COL_TEXT, rect, width=2)
                else:
                    pygame.draw.rect(self._surf, hex_to_rgb(color), rect)
                if (r, c) == (0, 0):
                    lbl = self._f_cell.render("S", True, COL_BASE)
                    self._surf.blit(
                        lbl,
                        (
                            rect.centerx - lbl.get_width() // 2,
                            rect.centery - lbl.get_height() // 2,
                        ),
                    )

        # colour buttons
        for color, rect in zip(snap.palette_selection, self._swatch_rects()):
            pygame.draw.rect(self._surf, hex_to_rgb(color), rect, border_radius=10)
            if color == snap.active_color:
                dim = pygame.Surface(rect.size, pygame.SRCALPHA)
                dim.fill((0, 0, 0, 120))
                self._surf.blit(dim, rect.topleft)
                pygame.draw.rect(self._surf, COL_TEXT, rect, width=3, border_radius=10)
            elif color == preview.color:
                pygame.draw.rect(self._surf, COL_YELLOW, rect, width=3, border_radius=10)
                if preview.new_tiles:
                    tag = self._f_btn_sm.render(f"{preview.multiplier:g}x", True, COL_YELLOW)
                    self._surf.blit(
                        tag, (rect.centerx - tag.get_width() // 2, rect.y - 22)
                    )

        # status message
        footer_y = self._swatch_rects()[0].bottom + 18
        if self._status_msg:
            _blit_center(
                self._surf,
                self._f_small.render(self._status_msg, True, COL_YELLOW),
                footer_y,
            )
        _blit_center(
            self._surf,
            self._f_small.render(
                "1-6  play     P  palette     R  reset     N  new game     Esc  menu",
                True,
                COL_OVERLAY0,
            ),
            footer_y + 22,
        )

        if self._dialog == _Dialog.OVER:
            self._draw_over_dialog()
        elif self._dialog == _Dialog.CONFIRM_RESET:
            self._draw_confirm_dialog()

    def _sync_palette_label(self, palette_name: str) -> None:
        self._palette_btn.text = f"PALETTE: {palette_name.upper()}"

    def _draw_panel(self, height: int) -> pygame.Rect:
        shade = pygame.Surface((WIN_W, WIN_H), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 170))
        self._surf.blit(shade, (0, 0))
        panel = pygame.Rect(_cx(400), 220, 400, height)
        pygame.draw.rect(self._surf, COL_MANTLE, panel, border_radius=14)
        pygame.draw.rect(self._surf, COL_SURFACE1, panel, width=2, border_radius=14)
        return panel

    def _draw_over_dialog(self) -> None:
        game = self._game
        assert game is not None
        snap = game.snapshot
        self._draw_panel(290)

        if snap.status == GameStatus.WON:
            title = self._f_big.render("LEVEL COMPLETE!", True, COL_GREEN)
            lines = [
                (f"You cleared the level in {snap.moves_used} moves!", COL_TEXT),
                (f"Your score: {snap.score}", COL_YELLOW),
            ]
            if snap.earns_perfect_clear:
                lines.append(
                    (f"Perfect Clear Bonus: +{self._config.perfect_clear_bonus}!", COL_GREEN)
                )
            btn = self._next_btn
        else:
            title = self._f_big.render("GAME OVER", True, COL_RED)
            lines = [
                ("You ran out of moves!", COL_TEXT),
                (f"Final score: {snap.score}", COL_YELLOW),
                (f"You reached level {snap.level}", COL_YELLOW),
            ]
            btn = self._again_btn

        _blit_center(self._surf, title, 246)
        y = 310
        for txt, col in lines:
            _blit_center(self._surf, self._f_body.render(txt, True, col), y)
            y += 28
        btn.draw(self._surf)

    def _draw_confirm_dialog(self) -> None:
        self._draw_panel(270)
        _blit_center(self._surf, self._f_title.render("Reset Level?", True, COL_TEXT), 250)
        for i, line in enumerate(
            ("Are you sure you want to reset this level?", "Your current progress will be lost.")
        ):
            _blit_center(
                self._surf, self._f_body.render(line, True, COL_SUBTEXT), 310 + i * 26
            )
        self._cancel_btn.draw(self._surf)
        self._confirm_btn.draw(self._surf)

    # ── event handling ──────────────────────────────────────────────────────

    def _ev_menu(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for b in self._menu_all:
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._play_btn.hit(ev.pos):
                self._start_game()
            elif self._rules_btn.hit(ev.pos):
                self._screen = _Screen.RULES
            elif self._quit_btn.hit(ev.pos):
                return False
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_RETURN, pygame.K_1):
                self._start_game()
            elif ev.key == pygame.K_h:
                self._screen = _Screen.RULES
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    def _ev_rules(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            self._rules_back.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._rules_back.hit(ev.pos):
                self._leave_rules()
        elif ev.type == pygame.KEYDOWN:
            self._leave_rules()
        return True

    def _ev_game(self, ev: pygame.event.Event) -> bool:
        game = self._game
        assert game is not None

        if self._dialog != _Dialog.NONE:
            return self._ev_dialog(ev)

        if ev.type == pygame.MOUSEMOTION:
            for btn in self._game_action_btns:
                btn.motion(ev.pos)
            self._preview = EMPTY_PREVIEW
            for color, rect in zip(game.colors, self._swatch_rects()):
                if rect.collidepoint(ev.pos):
                    self._preview = game.preview_move(color)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._palette_btn.hit(ev.pos):
                self._cycle_palette()
                return True
            if self._reset_btn.hit(ev.pos):
                self._dialog = _Dialog.CONFIRM_RESET
                return True
            if self._info_btn.hit(ev.pos):
                self._screen = _Screen.RULES
                return True
            for color, rect in zip(game.colors, self._swatch_rects()):
                if rect.collidepoint(ev.pos):
                    self._play(color)
                    return True
        elif ev.type == pygame.KEYDOWN:
            slot = ev.key - pygame.K_1
            if 0 <= slot < 6:
                if slot < len(game.colors):
                    self._play(game.colors[slot])
                else:
                    self._status_msg = f"Only {len(game.colors)} colours on this level"
            elif ev.key == pygame.K_p:
                self._cycle_palette()
            elif ev.key == pygame.K_r:
                self._dialog = _Dialog.CONFIRM_RESET
            elif ev.key == pygame.K_n:
                self._restart(game.start_new_game)
            elif ev.key == pygame.K_h:
                self._screen = _Screen.RULES
            elif ev.key == pygame.K_ESCAPE:
                self._screen = _Screen.MENU
        return True

    def _ev_dialog(self, ev: pygame.event.Event) -> bool:
        game = self._game
        assert game is not None
        won = game.is_won

        if self._dialog == _Dialog.OVER:
            btn = self._next_btn if won else self._again_btn
            if ev.type == pygame.MOUSEMOTION:
                btn.motion(ev.pos)
            elif (
                (ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1 and btn.hit(ev.pos))
                or (ev.type == pygame.KEYDOWN and ev.key == pygame.K_RETURN)
            ):
                self._restart(game.start_next_level if won else game.start_new_game)
            elif ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
                self._screen = _Screen.MENU
        elif self._dialog == _Dialog.CONFIRM_RESET:
            if ev.type == pygame.MOUSEMOTION:
                self._cancel_btn.motion(ev.pos)
                self._confirm_btn.motion(ev.pos)
            elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                if self._confirm_btn.hit(ev.pos):
                    self._restart(game.reset_level)
                elif self._cancel_btn.hit(ev.pos):
                    self._dialog = _Dialog.NONE
            elif ev.type == pygame.KEYDOWN:
                if ev.key in (pygame.K_y, pygame.K_RETURN):
                    self._restart(game.reset_level)
                elif ev.key in (pygame.K_n, pygame.K_ESCAPE):
                    self._dialog = _Dialog.NONE
        return True

    # ── game actions ────────────────────────────────────────────────────────

    def _start_game(self) -> None:
        self._game = GamePlay(self._config)
        self._preview = EMPTY_PREVIEW
        self._dialog = _Dialog.NONE
        self._status_msg = ""
        self._screen = _Screen.PLAYING

    def _leave_rules(self) -> None:
        self._screen = _Screen.PLAYING if self._game is not None else _Screen.MENU

    def _play(self, color: str) -> None:
        game = self._game
        assert game is not None
        try:
            snap = game.apply_move(color)
        except InvalidMove as exc:
            self._status_msg = exc.reason.capitalize()
            return
        self._status_msg = ""
        self._preview = EMPTY_PREVIEW
        if snap.status != GameStatus.PLAYING:
            self._dialog = _Dialog.OVER

    def _restart(self, command) -> None:
        command()
        self._preview = EMPTY_PREVIEW
        self._dialog = _Dialog.NONE
        self._status_msg = ""
        # A fresh grid can already be one colour, or have no moves left.
        if self._game is not None and (self._game.is_won or self._game.is_lost):
            self._dialog = _Dialog.OVER

    def _cycle_palette(self) -> None:
        self._restart(self._game.cycle_palette)  # type: ignore[union-attr]

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        _dispatch = {
            _Screen.MENU: self._ev_menu,
            _Screen.PLAYING: self._ev_game,
            _Screen.RULES: self._ev_rules,
        }
        _draw = {
            _Screen.MENU: self._draw_menu,
            _Screen.PLAYING: self._draw_game,
            _Screen.RULES: self._draw_rules,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                handler = _dispatch.get(self._screen)
                if handler and not handler(ev):
                    running = False
                    break

            drawer = _draw.get(self._screen)
            if drawer:
                drawer()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: GameConfig) -> None:
    """Launch the Pygame GUI (opens directly to the menu)."""
    app = PygameApp(config)
    app.run_loop()
