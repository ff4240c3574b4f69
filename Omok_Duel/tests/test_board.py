"""Sanity tests for Board addressing, sizing, and fullness."""

import pytest

from Omok_Duel.Board import BLACK, EMPTY, WHITE, Board, InvalidSize, OutOfBounds


def stones(board):
    return sum(1 for row in board.rows() for cell in row if cell != EMPTY)


def test_new_board_is_empty():
    b = Board(size=15)
    assert b.size == 15
    assert stones(b) == 0
    assert all(b.get(r, c) == EMPTY for r in range(15) for c in range(15))


def test_set_and_get_single_cell():
    b = Board(size=5)
    b.set(2, 3, BLACK)
    b.set(4, 0, WHITE)
    assert b.get(2, 3) == BLACK
    assert b.get(4, 0) == WHITE
    assert b.get(3, 2) == EMPTY
    assert stones(b) == 2


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (5, 0), (0, 5), (7, 7)])
def test_out_of_bounds_access_raises(row, col):
    b = Board(size=5)
    with pytest.raises(OutOfBounds):
        b.get(row, col)
    with pytest.raises(OutOfBounds):
        b.set(row, col, BLACK)


def test_out_of_bounds_is_an_index_error():
    b = Board(size=5)
    with pytest.raises(IndexError):
        b.get(5, 5)


@pytest.mark.parametrize("size", [0, 1, 4])
def test_too_small_board_rejected(size):
    with pytest.raises(InvalidSize):
        Board(size=size)


def test_reset_with_bad_size_keeps_board():
    b = Board(size=6)
    b.set(1, 1, BLACK)
    with pytest.raises(ValueError):
        b.reset(3)
    assert b.size == 6
    assert b.get(1, 1) == BLACK


def test_reset_clears_and_resizes():
    b = Board(size=15)
    b.set(7, 7, WHITE)
    b.reset(9)
    assert b.size == 9
    assert stones(b) == 0
    b.set(8, 8, BLACK)
    b.reset()
    assert b.size == 9
    assert stones(b) == 0


def test_is_full():
    b = Board(size=5)
    assert not b.is_full()
    for r in range(5):
        for c in range(5):
            b.set(r, c, BLACK if (r + c) % 2 else WHITE)
    assert b.is_full()
    b.set(0, 0, EMPTY)
    assert not b.is_full()


def test_rows_is_a_detached_copy():
    b = Board(size=5)
    snapshot = b.rows()
    b.set(0, 0, BLACK)
    assert snapshot[0][0] == EMPTY
    assert b.rows()[0][0] == BLACK


def test_set_rejects_unknown_value():
    b = Board(size=5)
    with pytest.raises(ValueError):
        b.set(0, 0, 2)
