import numpy as np
import pytest

from konane.core import BOARD_SIZE, Board, Piece
from konane.validation import BoardDataError

OUT_OF_RANGE = [(6, 0), (0, 6), (6, 6), (-1, 0), (0, -1), (100, 3)]


def test_empty_board_is_empty_everywhere():
    board = Board.create_empty()
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            assert board.get(row, col) == Piece.EMPTY


def test_piece_default_is_empty():
    assert Piece.default() is Piece.EMPTY
    assert Piece.EMPTY != Piece.WHITE != Piece.BLACK


def test_default_board_rows_alternate_from_black():
    board = Board.default()
    assert board.get(0, 0) == Piece.BLACK
    assert board.get(0, 1) == Piece.WHITE
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            expected = Piece.BLACK if col % 2 == 0 else Piece.WHITE
            assert board.get(row, col) == expected
    assert board.count(Piece.BLACK) == 18
    assert board.count(Piece.WHITE) == 18


@pytest.mark.parametrize("row,col", OUT_OF_RANGE)
def test_get_out_of_range_returns_none(row, col):
    assert Board.default().get(row, col) is None


def test_set_returns_previous_piece():
    board = Board.create_empty()

    assert board.set(0, 1, Piece.WHITE) == Piece.EMPTY
    assert board.get(0, 1) == Piece.WHITE

    assert board.set(0, 1, Piece.BLACK) == Piece.WHITE
    assert board.get(0, 1) == Piece.BLACK


@pytest.mark.parametrize("row,col", OUT_OF_RANGE)
def test_set_out_of_range_leaves_board_untouched(row, col):
    board = Board.default()
    before = board.copy()
    assert board.set(row, col, Piece.EMPTY) is None
    assert board == before


def test_copy_does_not_share_points():
    board = Board.create_empty()
    clone = board.copy()
    clone.set(2, 2, Piece.BLACK)
    assert board.get(2, 2) == Piece.EMPTY
    assert board != clone


def test_positions_are_row_major():
    board = Board.create_empty()
    board.set(4, 1, Piece.WHITE)
    board.set(0, 5, Piece.WHITE)
    assert list(board.positions(Piece.WHITE)) == [(0, 5), (4, 1)]


def test_render_one_line_per_row():
    board = Board.create_empty()
    board.set(0, 0, Piece.BLACK)
    board.set(0, 1, Piece.WHITE)
    lines = board.render().splitlines()
    assert len(lines) == BOARD_SIZE
    assert lines[0] == "B W " + "  " * 4
    assert all(line == "  " * BOARD_SIZE for line in lines[1:])
    assert str(Board.default()).startswith("B W B W B W \n")


def test_from_text_reads_rendered_board():
    board = Board.default()
    board.set(3, 3, Piece.EMPTY)
    assert Board.from_text(board.render()) == board


def test_from_text_accepts_trimmed_rows():
    board = Board.from_text("B W\n\n\n\n\n    W\n")
    assert board.get(0, 0) == Piece.BLACK
    assert board.get(0, 1) == Piece.WHITE
    assert board.get(0, 2) == Piece.EMPTY
    assert board.get(5, 2) == Piece.WHITE


def test_from_text_rejects_unknown_glyph():
    with pytest.raises(BoardDataError):
        Board.from_text("X \n\n\n\n\n\n")


def test_from_array_accepts_grid():
    grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int64)
    grid[2, 3] = int(Piece.BLACK)
    board = Board.from_array(grid)
    assert board.get(2, 3) == Piece.BLACK
    np.testing.assert_array_equal(board.to_array(), grid)


def test_from_array_copies_input():
    values = np.zeros(36, dtype=np.int8)
    board = Board.from_array(values)
    values[0] = int(Piece.WHITE)
    assert board.get(0, 0) == Piece.EMPTY
