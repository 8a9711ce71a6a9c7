import pytest

from cselab.board import Board
from cselab.sim import next_row, sim_loop, step, wrap


def _board(rows, cols, cells):
    board = Board(rows, cols)
    for r, c in cells:
        board.set_alive(r, c, True)
    return board


def test_wrap_values():
    assert wrap(-1, 5) == 4
    assert wrap(5, 5) == 0
    assert wrap(3, 5) == 3


@pytest.mark.parametrize("x", range(-12, 13))
def test_wrap_in_range(x):
    result = wrap(x, 6)
    assert 0 <= result < 6
    assert (result - x) % 6 == 0


def test_empty_board_stays_empty():
    board = Board(4, 5)
    sim_loop(board, 3)
    assert list(board.live_cells()) == []
    assert board.gen == 3


def test_block_is_still_life():
    cells = [(1, 1), (1, 2), (2, 1), (2, 2)]
    board = _board(5, 5, cells)
    sim_loop(board, 4)
    assert sorted(board.live_cells()) == cells


def test_blinker_period_two():
    cells = [(2, 1), (2, 2), (2, 3)]
    board = _board(5, 5, cells)
    step(board)
    after_one = sorted(board.live_cells())
    assert after_one == [(1, 2), (2, 2), (3, 2)]
    step(board)
    assert sorted(board.live_cells()) == cells
    assert board.gen == 2


def test_birth_with_six_neighbours():
    neighbours = [(1, 1), (1, 2), (1, 3), (3, 1), (3, 2), (3, 3)]
    board = _board(5, 5, neighbours)
    step(board)
    assert board.is_alive(2, 2)


def test_lonely_cell_dies():
    board = _board(5, 5, [(2, 2)])
    row = next_row(board.current_buffer, 2, 5, 5)
    assert list(row) == [0, 0, 0, 0, 0]
    step(board)
    assert list(board.live_cells()) == []


def test_next_row_does_not_modify_source():
    board = _board(5, 5, [(2, 1), (2, 2), (2, 3)])
    before = bytes(board.current_buffer)
    next_row(board.current_buffer, 1, 5, 5)
    assert bytes(board.current_buffer) == before


def test_wraps_around_edges():
    # A blinker straddling the left/right edge behaves like one in the middle.
    board = _board(5, 5, [(2, 4), (2, 0), (2, 1)])
    sim_loop(board, 2)
    assert sorted(board.live_cells()) == [(2, 0), (2, 1), (2, 4)]


def test_zero_steps_is_noop():
    board = _board(3, 3, [(0, 0)])
    sim_loop(board, 0)
    assert board.gen == 0
    assert list(board.live_cells()) == [(0, 0)]