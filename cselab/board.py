"""Toroidal Game of Life board with double-buffered cell storage."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional, Union

ALIVE = 1
DEAD = 0


def get_index(num_cols: int, row: int, col: int) -> int:
    """Return the flat buffer index of the cell at ``row``, ``col``."""
    return row * num_cols + col


@dataclass
class Board:
    """A grid of cells held in two flat buffers: the current and the next generation."""

    num_rows: int
    num_cols: int
    gen: int = 0
    current_buffer: Optional[bytearray] = None
    next_buffer: Optional[bytearray] = None

    def __post_init__(self) -> None:
        if self.num_rows < 0 or self.num_cols < 0:
            raise ValueError("board dimensions must be non-negative")
        size = self.num_rows * self.num_cols
        if self.current_buffer is None:
            self.current_buffer = bytearray(size)
        if self.next_buffer is None:
            self.next_buffer = bytearray(size)
        if len(self.current_buffer) != size or len(self.next_buffer) != size:
            raise ValueError("buffer size does not match board dimensions")

    @classmethod
    def from_file(cls, filename: Union[str, os.PathLike]) -> "Board":
        """Load a board: row count, column count, then ``row col`` pairs of live cells."""
        with open(filename, "r", encoding="utf-8") as handle:
            tokens = handle.read().split()

        try:
            rows = int(tokens[0])
            cols = int(tokens[1])
        except (IndexError, ValueError) as exc:
            raise ValueError(f"{filename}: missing or invalid board dimensions") from exc

        board = cls(rows, cols)
        coords = []
        for token in tokens[2:]:
            try:
                coords.append(int(token))
            except ValueError:
                break

        for row, col in zip(coords[0::2], coords[1::2]):
            try:
                board.set_alive(row, col, True)
            except IndexError as exc:
                raise ValueError(f"{filename}: cell ({row}, {col}) is outside the board") from exc
        return board

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self.num_rows and 0 <= col < self.num_cols):
            raise IndexError(f"cell ({row}, {col}) is outside a {self.num_rows}x{self.num_cols} board")
        return get_index(self.num_cols, row, col)

    def clear(self) -> None:
        """Set every cell in both buffers to dead."""
        size = self.num_rows * self.num_cols
        self.current_buffer[:] = bytes(size)
        self.next_buffer[:] = bytes(size)

    def swap_buffers(self) -> None:
        """Exchange the current and next buffers."""
        self.current_buffer, self.next_buffer = self.next_buffer, self.current_buffer

    def is_alive(self, row: int, col: int) -> bool:
        """Whether the cell is alive in the current generation."""
        return self.current_buffer[self._index(row, col)] == ALIVE

    def set_alive(self, row: int, col: int, alive: bool) -> None:
        """Set the cell's state in the current generation."""
        self.current_buffer[self._index(row, col)] = ALIVE if alive else DEAD

    def live_cells(self) -> Iterator[tuple[int, int]]:
        """Yield ``(row, col)`` of every live cell, in row-major order."""
        for index, value in enumerate(self.current_buffer):
            if value == ALIVE:
                yield divmod(index, self.num_cols)