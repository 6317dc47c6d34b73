"""
Windowed front-end on pygame: the same character field drawn as coloured cells.

- Pre-render one cell Surface per field character and blit them.
- Pre-render the static background (panel frame) once per window geometry.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Optional, Tuple

import pygame

from termtris_field import CLEAR_MARK, EMPTY, HEIGHT, WALL, WIDTH
from termtris_input import Input, InputSource, from_letter
from termtris_config import CONFIG
from termtris_render import Renderer

COLORS: Dict[str, Tuple[int, int, int]] = {
    "I": (102, 224, 255),
    "J": (106, 119, 255),
    "L": (255, 158, 94),
    "O": (255, 224, 102),
    "S": (94, 224, 142),
    "T": (200, 119, 255),
    "Z": (255, 102, 119),
    WALL: (50, 60, 100),
    CLEAR_MARK: (240, 240, 240),
}
BG = (10, 13, 34)
TEXT = (200, 210, 240)

ARROW_KEYS = {
    pygame.K_LEFT: Input.MOVE_LEFT,
    pygame.K_RIGHT: Input.MOVE_RIGHT,
    pygame.K_DOWN: Input.SOFT_DROP,
}

FPS = 60
MARGIN = 16
PAD = 12
LINE_H = 24
HUD_LINES = 4  # title, score, lines, level


@dataclass
class Window:
    """Pixel geometry: the field on the left, a HUD panel just tall enough for its text."""
    cell: int
    panel_x: int
    panel_w: int
    panel_h: int
    total_w: int
    total_h: int


def window_geometry(cell: int, panel_w: int = 160) -> Window:
    panel_x = MARGIN + WIDTH * cell + MARGIN
    return Window(
        cell=cell,
        panel_x=panel_x,
        panel_w=panel_w,
        panel_h=2 * PAD + HUD_LINES * LINE_H,
        total_w=panel_x + panel_w + MARGIN,
        total_h=MARGIN + HEIGHT * cell + MARGIN,
    )


def recreate_window(win: Window, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((win.total_w, win.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((win.total_w, win.total_h), flags)


@dataclass
class HudCache:
    score: int = -1
    lines: int = -1
    level: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None


class PygameRenderer(Renderer):
    """Holds pre-rendered assets for fast blitting."""
    def __init__(self, screen: pygame.Surface, win: Window, font: pygame.font.Font):
        self.screen = screen
        self.win = win
        self.font = font
        self.hud = HudCache()
        self.panel_rect = pygame.Rect(win.panel_x, MARGIN, win.panel_w, win.panel_h)
        self._make_static()
        self._make_cells()

    def _make_static(self):
        self.bg = pygame.Surface((self.win.total_w, self.win.total_h))
        self.bg.fill(BG)
        pygame.draw.rect(self.bg, (21, 25, 53), self.panel_rect)
        pygame.draw.rect(self.bg, (50, 60, 100), self.panel_rect, 1)

    def _make_cells(self):
        c = self.win.cell
        self.cell_surf: Dict[str, pygame.Surface] = {}
        for ch, col in COLORS.items():
            s = pygame.Surface((c - 2, c - 2))
            s.fill(col)
            self.cell_surf[ch] = s
        self.empty_surf = pygame.Surface((c, c))
        self.empty_surf.fill(BG)

    def cell_pos(self, x: int, y: int) -> Tuple[int, int]:
        return MARGIN + x * self.win.cell, MARGIN + y * self.win.cell

    def draw_cell(self, x: int, y: int, ch: str) -> None:
        rx, ry = self.cell_pos(x, y)
        self.screen.blit(self.empty_surf, (rx, ry))
        if ch != EMPTY:
            self.screen.blit(self.cell_surf.get(ch, self.cell_surf[CLEAR_MARK]), (rx + 1, ry + 1))

    def draw_hud(self, score: int, lines: int, level: int) -> None:
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("termtris", True, (197, 202, 233))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, TEXT)
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, TEXT)
        if level != self.hud.level:
            self.hud.level = level
            self.hud.level_s = f.render(f"Level: {level}", True, TEXT)

    def _blit_hud(self):
        r = self.panel_rect
        self.screen.blit(self.bg, r.topleft, r)
        y = r.y + PAD
        for surf in (self.hud.title, self.hud.score_s, self.hud.lines_s, self.hud.level_s):
            if surf:
                self.screen.blit(surf, (r.x + PAD, y))
            y += LINE_H

    def present(self) -> None:
        self._blit_hud()
        pygame.display.flip()


class PygameInput(InputSource):
    def __init__(self):
        self.pending: Deque[Input] = deque()

    def poll_event(self) -> Optional[Input]:
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                raise KeyboardInterrupt
            if e.type != pygame.KEYDOWN:
                continue
            event = ARROW_KEYS.get(e.key) or (from_letter(e.unicode) if e.unicode else None)
            if event is not None:
                self.pending.append(event)
        return self.pending.popleft() if self.pending else None


class PygameClock:
    def __init__(self):
        self.clock = pygame.time.Clock()

    def begin_frame(self):
        pass

    def end_frame(self):
        self.clock.tick_busy_loop(FPS)

    def pause(self, ms: int):
        pygame.time.wait(ms)
        pygame.event.pump()


def play(game) -> int:
    """Open a window, run `game` in it and return the score."""
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])
    try:
        win = window_geometry(int(CONFIG["CELL_SIZE"]))
        screen = recreate_window(win)
        pygame.display.set_caption("termtris")
        renderer = PygameRenderer(screen, win, pygame.font.SysFont(None, 22))
        screen.blit(renderer.bg, (0, 0))
        return game.run(renderer, PygameInput(), PygameClock())
    finally:
        pygame.quit()
