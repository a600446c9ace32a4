from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from konane.core import BOARD_SIZE, Board, Position

LAST = BOARD_SIZE - 1


class Transform(Enum):
    IDENTITY = auto()
    ROT90 = auto()
    ROT180 = auto()
    ROT270 = auto()
    FLIP_H = auto()
    FLIP_V = auto()
    FLIP_MAIN_DIAG = auto()
    FLIP_ANTI_DIAG = auto()


@dataclass(frozen=True)
class SymmetrySpec:
    name: str
    transform: Transform
    position_fn: Callable[[int, int], Tuple[int, int]]
    inverse: Transform


def _identity(r: int, c: int) -> Tuple[int, int]:
    return r, c


def _rot90(r: int, c: int) -> Tuple[int, int]:
    return c, LAST - r


def _rot180(r: int, c: int) -> Tuple[int, int]:
    return LAST - r, LAST - c


def _rot270(r: int, c: int) -> Tuple[int, int]:
    return LAST - c, r


def _flip_h(r: int, c: int) -> Tuple[int, int]:
    return r, LAST - c


def _flip_v(r: int, c: int) -> Tuple[int, int]:
    return LAST - r, c


def _flip_main_diag(r: int, c: int) -> Tuple[int, int]:
    return c, r


def _flip_anti_diag(r: int, c: int) -> Tuple[int, int]:
    return LAST - c, LAST - r


_SPECS: Dict[Transform, SymmetrySpec] = {
    Transform.IDENTITY: SymmetrySpec("identity", Transform.IDENTITY, _identity, Transform.IDENTITY),
    Transform.ROT90: SymmetrySpec("rot90", Transform.ROT90, _rot90, Transform.ROT270),
    Transform.ROT180: SymmetrySpec("rot180", Transform.ROT180, _rot180, Transform.ROT180),
    Transform.ROT270: SymmetrySpec("rot270", Transform.ROT270, _rot270, Transform.ROT90),
    Transform.FLIP_H: SymmetrySpec("flip_h", Transform.FLIP_H, _flip_h, Transform.FLIP_H),
    Transform.FLIP_V: SymmetrySpec("flip_v", Transform.FLIP_V, _flip_v, Transform.FLIP_V),
    Transform.FLIP_MAIN_DIAG: SymmetrySpec(
        "flip_main_diag", Transform.FLIP_MAIN_DIAG, _flip_main_diag, Transform.FLIP_MAIN_DIAG
    ),
    Transform.FLIP_ANTI_DIAG: SymmetrySpec(
        "flip_anti_diag", Transform.FLIP_ANTI_DIAG, _flip_anti_diag, Transform.FLIP_ANTI_DIAG
    ),
}


def get_spec(transform: Transform) -> SymmetrySpec:
    return _SPECS[transform]


def all_transforms() -> Iterable[Transform]:
    return list(_SPECS.keys())


def inverse(transform: Transform) -> Transform:
    return get_spec(transform).inverse


def transform_position(transform: Transform, row: int, col: int) -> Tuple[int, int]:
    return get_spec(transform).position_fn(row, col)


def transform_board(board: Board, transform: Transform) -> Board:
    """Return a new board with every point moved by ``transform``; colours are unchanged."""
    result = Board.create_empty()
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            nr, nc = transform_position(transform, row, col)
            result.set(nr, nc, board.get(row, col))
    return result


def transform_moves(transform: Transform, moves: Optional[List[Position]]) -> Optional[List[Position]]:
    if moves is None:
        return None
    return [transform_position(transform, row, col) for row, col in moves]
