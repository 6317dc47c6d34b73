"""Playfield helpers: can_fit, lock, detect_full_lines, collapse"""
from typing import List, Optional, Tuple

from termtris_piece import Piece

WIDTH, HEIGHT = 12, 18

WALL = "#"
EMPTY = " "
CLEAR_MARK = "="

Field = List[List[str]]


def new_field() -> Field:
    """Empty well with walls on the left, right and bottom."""
    field = []
    for y in range(HEIGHT):
        row = []
        for x in range(WIDTH):
            if x == 0 or x == WIDTH - 1 or y == HEIGHT - 1:
                row.append(WALL)
            else:
                row.append(EMPTY)
        field.append(row)
    return field


def can_fit(field: Field, piece: Piece) -> bool:
    """Return True if every occupied cell lands on an empty interior cell."""
    for x, y, _ in piece.cells():
        if x < 1 or x > WIDTH - 2 or y < 0 or y > HEIGHT - 1:
            return False
        if field[y][x] != EMPTY:
            return False
    return True


def lock(field: Field, piece: Piece) -> None:
    """Write the piece into the field (no collision check)."""
    for x, y, ch in piece.cells():
        field[y][x] = ch


def row_is_full(field: Field, y: int) -> bool:
    return all(field[y][x] != EMPTY for x in range(1, WIDTH - 1))


def detect_full_lines(field: Field, piece: Piece) -> Tuple[int, int]:
    """Mark full rows spanned by a just-locked piece.

    Marked rows are overwritten with CLEAR_MARK so they can be shown before
    collapse() removes them. Returns (count, lowest marked row), the row is 0
    when nothing was marked.
    """
    count = lowest = 0
    for dy in range(piece.side):
        y = piece.y + dy
        if y >= HEIGHT - 1:
            break
        if not row_is_full(field, y):
            continue
        for x in range(1, WIDTH - 1):
            field[y][x] = CLEAR_MARK
        lowest = y
        count += 1
    return count, lowest


def is_marked(field: Field, y: int) -> bool:
    return field[y][1] == CLEAR_MARK


def next_marked_row(field: Field, start: int) -> Optional[int]:
    """First marked row at or above `start`, scanning upward."""
    for y in range(start, -1, -1):
        if is_marked(field, y):
            return y
    return None


def collapse(field: Field, count: int, lowest: int) -> None:
    """Remove `count` marked rows, starting at the lowest one.

    Each contiguous run of marked rows is removed separately: rows 0..lowest
    shift down by the run length, then the scan resumes upward.
    """
    while count > 0:
        run = 1
        while lowest - run >= 0 and is_marked(field, lowest - run):
            run += 1

        for y in range(lowest, -1, -1):
            for x in range(1, WIDTH - 1):
                field[y][x] = EMPTY if y < run else field[y - run][x]

        count -= run
        if count > 0:
            found = next_marked_row(field, lowest - 1)
            if found is None:
                break
            lowest = found
