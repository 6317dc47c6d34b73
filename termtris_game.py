"""
Game loop and progression: gravity ticks, lock-in, line clears, scoring, levels.

One tick = one frame. Each tick the controller reads at most one input event,
tries it against the field, applies forced gravity when the tick threshold is
reached, and on lock-in hands the field over for marking. Marked rows stay in
the field while the game sits in LINE_CLEARING so the front-end can show them;
clear_lines() then scores, levels up and collapses.
"""
import logging
import random
from enum import Enum, auto
from typing import Dict, Optional

from termtris_bag import PieceBag
from termtris_config import CONFIG
from termtris_field import Field, can_fit, collapse, detect_full_lines, lock, new_field
from termtris_input import Input
from termtris_piece import SPAWN_Y, Piece

log = logging.getLogger(__name__)

# NES line clear points, multiplied by level+1
SCORE_TABLE: Dict[int, int] = {1: 40, 2: 100, 3: 300, 4: 1200}
LINES_PER_LEVEL = 10


class Phase(Enum):
    FALLING = auto()
    LOCKING = auto()
    LINE_CLEARING = auto()
    GAME_OVER = auto()


def line_clear_points(count: int, level: int) -> int:
    return SCORE_TABLE.get(count, 0) * (level + 1)


def faster_gravity(level: int, ticks_per_drop: int) -> int:
    """Gravity threshold after reaching `level`."""
    if level < 8 and ticks_per_drop > 5:
        return ticks_per_drop - 5
    return max(1, ticks_per_drop - 1)


class Game:
    def __init__(self, rng: Optional[random.Random] = None, field: Optional[Field] = None,
                 ticks_per_drop: Optional[int] = None, strict_spawn: Optional[bool] = None):
        if rng is None:
            rng = random.Random(CONFIG["SEED"])
        self.field = field if field is not None else new_field()
        self.bag = PieceBag(rng)
        self.strict_spawn = CONFIG["STRICT_SPAWN_CHECK"] if strict_spawn is None else strict_spawn

        self.score = 0
        self.lines = 0
        self.level = 0
        self.ten_line_counter = 0
        self.ticks = 0
        self.ticks_per_drop = CONFIG["START_TICKS_PER_DROP"] if ticks_per_drop is None else ticks_per_drop

        # rows marked by the last lock, waiting for clear_lines()
        self.pending_lines = 0
        self.lowest_marked = 0

        self.phase = Phase.FALLING
        self.piece: Piece = Piece.spawn(self.bag.next_piece())
        self._check_spawn()

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    # ---------- piece movement ----------
    def try_move(self, candidate: Piece) -> bool:
        if can_fit(self.field, candidate):
            self.piece = candidate
            return True
        return False

    def spawn(self):
        self.piece = Piece.spawn(self.bag.next_piece())
        self.phase = Phase.FALLING
        log.debug("spawned %s", self.piece.kind)
        self._check_spawn()

    def _check_spawn(self):
        if self.strict_spawn and not can_fit(self.field, self.piece):
            log.info("spawn blocked for %s, game over with score %d", self.piece.kind, self.score)
            self.phase = Phase.GAME_OVER

    # ---------- one frame ----------
    def tick(self, event: Optional[Input] = None) -> Phase:
        """Process one frame of input and gravity; returns the resulting phase."""
        if self.phase is not Phase.FALLING:
            return self.phase

        force_down = self.ticks >= self.ticks_per_drop

        if event is Input.MOVE_LEFT:
            self.try_move(self.piece.moved(-1, 0))
        elif event is Input.MOVE_RIGHT:
            self.try_move(self.piece.moved(1, 0))
        elif event is Input.SOFT_DROP:
            force_down = True
        elif event is Input.ROTATE_CW:
            self.try_move(self.piece.rotated(1))
        elif event is Input.ROTATE_CCW:
            self.try_move(self.piece.rotated(-1))

        if force_down:
            self.ticks = 0
            if not self.try_move(self.piece.moved(0, 1)):
                self._lock_piece()

        self.ticks += 1
        return self.phase

    def _lock_piece(self):
        self.phase = Phase.LOCKING
        piece = self.piece
        if piece.y <= SPAWN_Y:
            log.info("piece %s stuck at row %d, game over with score %d", piece.kind, piece.y, self.score)
            self.phase = Phase.GAME_OVER
            return

        lock(self.field, piece)
        log.debug("locked %s at (%d, %d) rot %d", piece.kind, piece.x, piece.y, piece.rot)
        count, lowest = detect_full_lines(self.field, piece)
        if count:
            self.pending_lines, self.lowest_marked = count, lowest
            self.phase = Phase.LINE_CLEARING
        else:
            self.spawn()

    # ---------- line clears ----------
    def clear_lines(self):
        """Score the marked rows, advance the level and collapse the field."""
        if self.phase is not Phase.LINE_CLEARING:
            return
        count = self.pending_lines
        self.score += line_clear_points(count, self.level)
        self.lines += count
        self.ten_line_counter += count
        log.info("cleared %d line(s), score %d", count, self.score)

        while self.ten_line_counter >= LINES_PER_LEVEL:
            self.level += 1
            self.ten_line_counter -= LINES_PER_LEVEL
            self.ticks_per_drop = faster_gravity(self.level, self.ticks_per_drop)
            log.info("level %d, %d ticks per drop", self.level, self.ticks_per_drop)

        collapse(self.field, count, self.lowest_marked)
        self.pending_lines = self.lowest_marked = 0
        self.spawn()

    # ---------- drawing / main loop ----------
    def draw(self, renderer, with_piece: bool = True):
        renderer.draw_field(self.field)
        if with_piece:
            renderer.draw_piece(self.piece)
        renderer.present()

    def run(self, renderer, inputs, clock, clear_delay_ms: Optional[int] = None) -> int:
        """Play until game over and return the final score."""
        if clear_delay_ms is None:
            clear_delay_ms = CONFIG["LINE_CLEAR_DELAY_MS"]

        renderer.draw_hud(self.score, self.lines, self.level)
        self.draw(renderer)

        while not self.game_over:
            clock.begin_frame()
            phase = self.tick(inputs.poll_event())
            if phase is Phase.LINE_CLEARING:
                self.draw(renderer, with_piece=False)
                clock.pause(clear_delay_ms)
                self.clear_lines()
                renderer.draw_hud(self.score, self.lines, self.level)
                self.draw(renderer, with_piece=not self.game_over)
            elif phase is Phase.FALLING:
                self.draw(renderer)
            clock.end_frame()
        return self.score
