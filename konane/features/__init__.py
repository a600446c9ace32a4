"""Feature extraction helpers for Konane boards."""

from .observation import (
    BOARD_CHANNELS,
    board_to_numpy,
    build_board_tensor,
    build_move_mask,
)
from .symmetry import (
    Transform,
    all_transforms,
    inverse,
    transform_board,
    transform_moves,
    transform_position,
)

__all__ = [
    "BOARD_CHANNELS",
    "board_to_numpy",
    "build_board_tensor",
    "build_move_mask",
    "Transform",
    "all_transforms",
    "inverse",
    "transform_board",
    "transform_moves",
    "transform_position",
]
