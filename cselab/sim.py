"""Generation stepping for a toroidal board (born on 3 or 6, survives on 2 or 3)."""

from __future__ import annotations

from collections.abc import Sequence

from cselab.board import ALIVE, DEAD, Board, get_index

_OFFSETS = (-1, 0, 1)


def wrap(x: int, n: int) -> int:
    """Return ``x`` modulo ``n``, non-negative for negative ``x`` as well."""
    return x % n


def next_row(src: Sequence[int], row: int, rows: int, cols: int) -> bytearray:
    """Compute the next generation of one row of the flat buffer ``src``."""
    above = wrap(row - 1, rows)
    below = wrap(row + 1, rows)
    result = bytearray(cols)
    for col in range(cols):
        count = sum(
            src[get_index(cols, r, wrap(col + dc, cols))] == ALIVE
            for dc in _OFFSETS
            for r in (row, above, below)
        )
        cell = src[get_index(cols, row, col)]
        if cell == ALIVE:
            count -= 1
            result[col] = ALIVE if 2 <= count <= 3 else DEAD
        elif cell == DEAD:
            result[col] = ALIVE if count in (3, 6) else DEAD
    return result


def step(board: Board) -> None:
    """Advance the board by one generation."""
    rows, cols = board.num_rows, board.num_cols
    src = board.current_buffer
    for row in range(rows):
        start = get_index(cols, row, 0)
        board.next_buffer[start:start + cols] = next_row(src, row, rows, cols)
    board.swap_buffers()
    board.gen += 1


def sim_loop(board: Board, steps: int) -> None:
    """Advance the board by ``steps`` generations."""
    for _ in range(steps):
        step(board)