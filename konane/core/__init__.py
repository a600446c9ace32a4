"""Core board model and move generation for Konane."""

from .state import Piece, Position
from .board import (
    BOARD_SIZE,
    DIRECTIONS,
    NUM_POINTS,
    Board,
    in_bounds,
    point_index,
)

__all__ = [
    "Board",
    "Piece",
    "Position",
    "BOARD_SIZE",
    "DIRECTIONS",
    "NUM_POINTS",
    "in_bounds",
    "point_index",
]
