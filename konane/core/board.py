from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from konane.validation.data_checks import validate_board_array, validate_text_layout

from .state import Piece, Position

BOARD_SIZE = 6
NUM_POINTS = BOARD_SIZE * BOARD_SIZE
# Scan order of move generation: up, down, left, right.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

PointArray = NDArray[np.int8]


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def point_index(row: int, col: int) -> int:
    return row * BOARD_SIZE + col


def _empty_points() -> PointArray:
    return np.zeros(NUM_POINTS, dtype=np.int8)


@dataclass(eq=False)
class Board:
    """A 6x6 Konane board of 36 points, each empty or holding a white or black piece.

    Points are stored row-major in a flat int8 array. Every coordinate access is
    bounds-checked first; an out-of-range coordinate yields ``None`` rather than
    wrapping around or raising.
    """

    points: PointArray = field(default_factory=_empty_points)  # shape (36,), values are Piece codes

    def __post_init__(self) -> None:
        self.points = validate_board_array(self.points)

    @classmethod
    def create_empty(cls) -> "Board":
        return cls()

    @classmethod
    def default(cls) -> "Board":
        board = cls()
        board.points[0::2] = Piece.BLACK
        board.points[1::2] = Piece.WHITE
        return board

    @classmethod
    def from_array(cls, values) -> "Board":
        return cls(points=np.asarray(values))

    @classmethod
    def from_text(cls, text: str) -> "Board":
        """Parse the format produced by :meth:`render`."""
        board = cls()
        for row, line in enumerate(validate_text_layout(text)):
            for col, glyph in enumerate(line[0::2]):
                board.points[point_index(row, col)] = Piece.from_glyph(glyph)
        return board

    def copy(self) -> "Board":
        return Board(points=self.points.copy())

    def to_array(self) -> NDArray[np.int8]:
        return self.points.reshape(BOARD_SIZE, BOARD_SIZE).copy()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def in_bounds(self, row: int, col: int) -> bool:
        return in_bounds(row, col)

    def get(self, row: int, col: int) -> Optional[Piece]:
        if not in_bounds(row, col):
            return None
        return Piece(int(self.points[point_index(row, col)]))

    def set(self, row: int, col: int, piece: Piece) -> Optional[Piece]:
        """Place ``piece`` at (row, col) and return the piece it replaced."""
        previous = self.get(row, col)
        if previous is None:
            return None
        self.points[point_index(row, col)] = Piece(piece)
        return previous

    def count(self, piece: Piece) -> int:
        return int(np.count_nonzero(self.points == int(piece)))

    def positions(self, piece: Piece) -> Iterable[Position]:
        for index in np.flatnonzero(self.points == int(piece)):
            yield divmod(int(index), BOARD_SIZE)

    # ------------------------------------------------------------------
    # Move generation
    # ------------------------------------------------------------------
    def possible_moves(self, row: int, col: int) -> Optional[List[Position]]:
        """Return the landing points reachable by capturing jumps from (row, col).

        Any non-empty neighbour is treated as an enemy piece; the colour of the
        source and of the jumped pieces is never inspected. The source itself may
        be empty. Returns ``None`` when (row, col) is off the board.
        """
        if not in_bounds(row, col):
            return None

        moves: List[Position] = []
        for dr, dc in DIRECTIONS:
            moves.extend(self._scan_jumps(row, col, dr, dc))
        return moves

    def all_moves(self) -> Dict[Position, List[Position]]:
        result: Dict[Position, List[Position]] = {}
        for index in np.flatnonzero(self.points != Piece.EMPTY):
            row, col = divmod(int(index), BOARD_SIZE)
            moves = self.possible_moves(row, col)
            if moves:
                result[(row, col)] = moves
        return result

    def _scan_jumps(self, row: int, col: int, dr: int, dc: int) -> List[Position]:
        landings: List[Position] = []
        offset = 0
        while True:
            over_row, over_col = row + dr * (offset + 1), col + dc * (offset + 1)
            to_row, to_col = row + dr * (offset + 2), col + dc * (offset + 2)
            if not in_bounds(to_row, to_col):
                break
            if self.points[point_index(over_row, over_col)] == Piece.EMPTY:
                break
            if self.points[point_index(to_row, to_col)] == Piece.EMPTY:
                landings.append((to_row, to_col))
            # An occupied landing point does not end the scan; longer jumps are still reported.
            offset += 2
        return landings

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------
    def render(self) -> str:
        lines = []
        for row in range(BOARD_SIZE):
            cells = self.points[row * BOARD_SIZE : (row + 1) * BOARD_SIZE]
            lines.append("".join(Piece(int(value)).glyph + " " for value in cells) + "\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.points, other.points))

    def __repr__(self) -> str:
        return (
            f"Board(white={self.count(Piece.WHITE)}, black={self.count(Piece.BLACK)})\n"
            f"{self.render()}"
        )
