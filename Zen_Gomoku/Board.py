"""Immutable board container, cell values, and move application."""

from dataclasses import dataclass
from enum import IntEnum

from .settings import DEFAULT_BOARD_SIZE
from .errors import IllegalMove


class Cell(IntEnum):
    # Digit codes double as the serialized token alphabet
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self):
        if self is Cell.BLACK:
            return Cell.WHITE
        if self is Cell.WHITE:
            return Cell.BLACK
        raise ValueError("EMPTY has no opponent")

    @property
    def label(self):
        return self.name.capitalize()


SYMBOLS = {Cell.EMPTY: ".", Cell.BLACK: "X", Cell.WHITE: "O"}


@dataclass(frozen=True)
class Move:
    row: int
    col: int
    player: Cell


class Board:
    """N x N grid of Cell values. Never mutated after construction; moves return a new Board."""

    __slots__ = ("size", "cells")

    def __init__(self, size=DEFAULT_BOARD_SIZE, cells=None):
        if not isinstance(size, int) or size <= 0:
            raise ValueError(f"board size must be a positive integer, got {size!r}")
        if cells is None:
            rows = tuple((Cell.EMPTY,) * size for _ in range(size))
        else:
            if len(cells) != size or any(len(row) != size for row in cells):
                raise ValueError(f"cells must be a {size}x{size} grid")
            rows = tuple(tuple(Cell(v) for v in row) for row in cells)
        object.__setattr__(self, "size", size)
        object.__setattr__(self, "cells", rows)

    def __setattr__(self, name, value):
        raise AttributeError("Board is immutable")

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == Cell.EMPTY

    def get(self, row, col):
        return self.cells[row][col]

    def place(self, row, col, player):
        """Return a new Board with `player` at (row, col); raise IllegalMove if out of range or occupied."""
        player = Cell(player)
        if player == Cell.EMPTY:
            raise ValueError("player must be BLACK or WHITE")
        if not self.in_bounds(row, col):
            raise IllegalMove(f"move ({row}, {col}) out of range", row, col)
        if self.cells[row][col] != Cell.EMPTY:
            raise IllegalMove(f"cell ({row}, {col}) already occupied", row, col)
        rows = list(self.cells)
        updated = list(rows[row])
        updated[col] = player
        rows[row] = tuple(updated)
        return Board(self.size, rows)

    def count(self, value):
        return sum(row.count(value) for row in self.cells)

    @property
    def move_count(self):
        return self.size * self.size - self.count(Cell.EMPTY)

    def empty_cells(self):
        """Row-major list of empty coordinates."""
        return [
            (r, c)
            for r, row in enumerate(self.cells)
            for c, value in enumerate(row)
            if value == Cell.EMPTY
        ]

    def is_full(self):
        return all(Cell.EMPTY not in row for row in self.cells)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __hash__(self):
        return hash((self.size, self.cells))

    def __str__(self):
        return "\n".join(" ".join(SYMBOLS[v] for v in row) for row in self.cells)

    def __repr__(self):
        return f"Board(size={self.size}, stones={self.move_count})"


def create_empty(size=DEFAULT_BOARD_SIZE):
    return Board(size)


def apply_move(board, move):
    """Pure move application: the input board is left untouched."""
    return board.place(move.row, move.col, move.player)
