from __future__ import annotations

from enum import IntEnum
from typing import Tuple


class Piece(IntEnum):
    EMPTY = 0
    WHITE = 1
    BLACK = 2

    @classmethod
    def default(cls) -> "Piece":
        return cls.EMPTY

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

    @classmethod
    def from_glyph(cls, glyph: str) -> "Piece":
        for piece, symbol in _GLYPHS.items():
            if symbol == glyph:
                return piece
        raise ValueError(f"Unknown piece glyph {glyph!r}.")

    @classmethod
    def from_name(cls, name: str) -> "Piece":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown piece name {name!r}.") from None


_GLYPHS = {Piece.EMPTY: " ", Piece.WHITE: "W", Piece.BLACK: "B"}

# (row, col) coordinate on the board
Position = Tuple[int, int]
