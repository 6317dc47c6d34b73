"""Rotation tables: (rotation, row, col) -> offset into a piece sprite"""
from typing import List

# rotations are clockwise: 0, 90, 180, 270 degrees
THREE_ROT: List[List[List[int]]] = [
    [[0, 1, 2],
     [3, 4, 5],
     [6, 7, 8]],
    [[6, 3, 0],
     [7, 4, 1],
     [8, 5, 2]],
    [[8, 7, 6],
     [5, 4, 3],
     [2, 1, 0]],
    [[2, 5, 8],
     [1, 4, 7],
     [0, 3, 6]],
]

FOUR_ROT: List[List[List[int]]] = [
    [[ 0,  1,  2,  3],
     [ 4,  5,  6,  7],
     [ 8,  9, 10, 11],
     [12, 13, 14, 15]],
    [[12,  8,  4,  0],
     [13,  9,  5,  1],
     [14, 10,  6,  2],
     [15, 11,  7,  3]],
    [[15, 14, 13, 12],
     [11, 10,  9,  8],
     [ 7,  6,  5,  4],
     [ 3,  2,  1,  0]],
    [[ 3,  7, 11, 15],
     [ 2,  6, 10, 14],
     [ 1,  5,  9, 13],
     [ 0,  4,  8, 12]],
]

TABLES = {3: THREE_ROT, 4: FOUR_ROT}


def piece_index(side: int, rot: int, x: int, y: int) -> int:
    """Sprite offset of local cell (x, y) for a piece rotated `rot` quarter turns.

    Sizes without a table (the 2x2 square) ignore rotation.
    """
    table = TABLES.get(side)
    if table is None:
        return y * side + x
    return table[rot][y][x]
