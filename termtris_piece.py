"""Piece model: sprites, spawn, move/rotate trials"""
from dataclasses import dataclass, replace
from typing import Dict, Iterator, List, Tuple

from termtris_rotation import piece_index

# bag order
KINDS: List[str] = ["I", "Z", "S", "O", "T", "L", "J"]

SPRITES: Dict[str, str] = {
    "I": "    IIII        ",
    "Z": "ZZ  ZZ   ",
    "S": " SSSS    ",
    "O": "OOOO",
    "T": " T TTT   ",
    "L": "  LLLL   ",
    "J": "J  JJJ   ",
}

SIDE_LENGTHS: Dict[str, int] = {"I": 4, "Z": 3, "S": 3, "O": 2, "T": 3, "L": 3, "J": 3}

SPAWN_X, SPAWN_Y = 4, 1


@dataclass(frozen=True)
class Piece:
    kind: str
    x: int
    y: int
    rot: int = 0  # quarter turns clockwise

    @staticmethod
    def spawn(kind: str) -> "Piece":
        return Piece(kind, SPAWN_X, SPAWN_Y, 0)

    @property
    def side(self) -> int:
        return SIDE_LENGTHS[self.kind]

    @property
    def sprite(self) -> str:
        return SPRITES[self.kind]

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self, delta: int) -> "Piece":
        return replace(self, rot=(self.rot + delta) % 4)

    def cells(self) -> Iterator[Tuple[int, int, str]]:
        """Yield (field_x, field_y, char) for each occupied cell of the rotated sprite."""
        side = self.side
        for y in range(side):
            for x in range(side):
                ch = self.sprite[piece_index(side, self.rot, x, y)]
                if ch != " ":
                    yield self.x + x, self.y + y, ch
