"""curses terminal front-end: renderer and keyboard input"""
import curses
from typing import Optional

from termtris_field import CLEAR_MARK, HEIGHT, WALL, WIDTH
from termtris_input import Input, InputSource, from_letter
from termtris_piece import KINDS
from termtris_render import Renderer

HUD_X = WIDTH + 2
HUD_W = 10

ARROW_KEYS = {
    curses.KEY_LEFT: Input.MOVE_LEFT,
    curses.KEY_RIGHT: Input.MOVE_RIGHT,
    curses.KEY_DOWN: Input.SOFT_DROP,
}

# curses colour numbers per kind, paired 1..7 in KINDS order
KIND_COLORS = {
    "I": curses.COLOR_CYAN,
    "Z": curses.COLOR_RED,
    "S": curses.COLOR_GREEN,
    "O": curses.COLOR_YELLOW,
    "T": curses.COLOR_MAGENTA,
    "L": curses.COLOR_WHITE,
    "J": curses.COLOR_BLUE,
}


class TerminalTooSmall(Exception):
    pass


class CursesRenderer(Renderer):
    def __init__(self, stdscr):
        self.stdscr = stdscr
        rows, cols = stdscr.getmaxyx()
        if rows < HEIGHT or cols < HUD_X + HUD_W:
            raise TerminalTooSmall(
                f"terminal is {cols}x{rows}, need at least {HUD_X + HUD_W}x{HEIGHT}")
        curses.curs_set(0)
        self.pairs = {}
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            for i, kind in enumerate(KINDS, start=1):
                curses.init_pair(i, KIND_COLORS[kind], -1)
                self.pairs[kind] = curses.color_pair(i)

    def _attr(self, ch: str) -> int:
        if ch in (WALL, CLEAR_MARK):
            return curses.A_BOLD
        return self.pairs.get(ch, 0)

    def draw_cell(self, x: int, y: int, ch: str) -> None:
        try:
            self.stdscr.addch(y, x, ch, self._attr(ch))
        except curses.error:
            # writing the bottom-right cell of a window moves the cursor off-screen
            pass

    def draw_hud(self, score: int, lines: int, level: int) -> None:
        for row, text in ((1, "SCORE:"), (2, str(score)),
                          (4, "LINES:"), (5, str(lines)),
                          (7, "LEVEL:"), (8, str(level))):
            self.stdscr.addstr(row, HUD_X, text.ljust(HUD_W - 1))

    def present(self) -> None:
        self.stdscr.refresh()


class CursesInput(InputSource):
    def __init__(self, stdscr):
        self.stdscr = stdscr
        curses.cbreak()
        curses.noecho()
        stdscr.keypad(True)
        stdscr.nodelay(True)

    def poll_event(self) -> Optional[Input]:
        key = self.stdscr.getch()
        if key == -1:
            return None
        if key in ARROW_KEYS:
            return ARROW_KEYS[key]
        if 0 <= key < 256:
            return from_letter(chr(key))
        return None


def play(stdscr, game, clock) -> int:
    """curses.wrapper target: run `game` on `stdscr` and return the score."""
    renderer = CursesRenderer(stdscr)
    inputs = CursesInput(stdscr)
    return game.run(renderer, inputs, clock)
