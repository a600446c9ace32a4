from __future__ import annotations

from typing import List, Sequence

import numpy as np

from konane.core.state import Piece

BOARD_DIM = 6
ROW_WIDTH = BOARD_DIM * 2  # glyph + separator per cell


class BoardDataError(ValueError):
    pass


def validate_board_array(values) -> np.ndarray:
    """Return a flat int8 copy of ``values`` after checking shape and piece codes."""
    array = np.asarray(values)
    if array.shape not in ((BOARD_DIM * BOARD_DIM,), (BOARD_DIM, BOARD_DIM)):
        raise BoardDataError(f"board array must have shape (36,) or (6, 6), got {array.shape}")
    if array.dtype.kind not in "iu":
        if array.dtype.kind != "f" or not np.all(np.mod(array, 1) == 0):
            raise BoardDataError("board array must contain integer piece codes")
    valid = np.isin(array, [int(piece) for piece in Piece])
    if not valid.all():
        raise BoardDataError("board array contains unknown piece codes")
    return array.astype(np.int8).reshape(-1).copy()


def validate_text_layout(text: str) -> List[str]:
    lines = text.split("\n")
    # A rendered board ends every row with a newline.
    if lines and lines[-1] == "":
        lines = lines[:-1]
    if len(lines) != BOARD_DIM:
        raise BoardDataError(f"board layout must have {BOARD_DIM} rows, got {len(lines)}")
    for index, line in enumerate(lines):
        if len(line) > ROW_WIDTH:
            raise BoardDataError(f"row {index} is longer than {ROW_WIDTH} characters")
        for glyph in line[0::2]:
            if glyph not in (" ", "W", "B"):
                raise BoardDataError(f"row {index} contains unknown glyph {glyph!r}")
        for separator in line[1::2]:
            if separator != " ":
                raise BoardDataError(f"row {index} has a non-space cell separator")
    return lines


def validate_placement(entry: Sequence) -> None:
    if len(entry) != 3:
        raise BoardDataError(f"placement must be [row, col, piece], got {list(entry)!r}")
    row, col, name = entry
    if not isinstance(row, int) or not isinstance(col, int):
        raise BoardDataError("placement row and col must be integers")
    if not 0 <= row < BOARD_DIM or not 0 <= col < BOARD_DIM:
        raise BoardDataError(f"placement ({row}, {col}) is off the board")
    try:
        Piece.from_name(str(name))
    except ValueError as exc:
        raise BoardDataError(str(exc)) from exc
