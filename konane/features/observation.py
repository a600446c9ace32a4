from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from konane.core import BOARD_SIZE, Board, Piece

BOARD_CHANNELS = 2  # white, black


def build_board_tensor(board: Board) -> np.ndarray:
    """Return board tensor with shape (2, 6, 6) channel-first."""
    grid = board.to_array()
    tensor = np.zeros((BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
    tensor[0] = grid == Piece.WHITE
    tensor[1] = grid == Piece.BLACK
    return tensor


def build_move_mask(board: Board, row: int, col: int) -> Optional[np.ndarray]:
    moves = board.possible_moves(row, col)
    if moves is None:
        return None
    mask = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    for to_row, to_col in moves:
        mask[to_row, to_col] = 1
    return mask


def board_to_numpy(board: Board) -> Tuple[np.ndarray, np.ndarray]:
    occupancy = board.to_array() != Piece.EMPTY
    return build_board_tensor(board), occupancy
