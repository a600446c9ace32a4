"""Konane board model and capture-jump move generation."""

from . import core, features, validation
from .core import BOARD_SIZE, DIRECTIONS, NUM_POINTS, Board, Piece, Position
from .features import (
    BOARD_CHANNELS,
    Transform,
    all_transforms,
    board_to_numpy,
    build_board_tensor,
    build_move_mask,
    transform_board,
    transform_moves,
    transform_position,
)
from .validation import BoardDataError

__all__ = [
    "core",
    "features",
    "validation",
    "Board",
    "Piece",
    "Position",
    "BOARD_SIZE",
    "DIRECTIONS",
    "NUM_POINTS",
    "BOARD_CHANNELS",
    "Transform",
    "all_transforms",
    "board_to_numpy",
    "build_board_tensor",
    "build_move_mask",
    "transform_board",
    "transform_moves",
    "transform_position",
    "BoardDataError",
]
