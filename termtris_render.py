"""Renderer contract used by the game loop"""
from termtris_piece import Piece


class Renderer:
    """Pure output: nothing drawn here feeds back into game state."""

    def draw_cell(self, x: int, y: int, ch: str) -> None:
        raise NotImplementedError

    def draw_hud(self, score: int, lines: int, level: int) -> None:
        raise NotImplementedError

    def present(self) -> None:
        raise NotImplementedError

    def draw_field(self, field) -> None:
        for y, row in enumerate(field):
            for x, ch in enumerate(row):
                self.draw_cell(x, y, ch)

    def draw_piece(self, piece: Piece) -> None:
        for x, y, ch in piece.cells():
            self.draw_cell(x, y, ch)
