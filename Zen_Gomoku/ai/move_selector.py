"""Easy tier: random empty cell, preferring cells next to existing stones."""

import random

from ..Board import Cell

NEIGHBORS_8 = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def has_neighbor(board, row, col):
    """True if any of the eight surrounding cells is occupied."""
    for dr, dc in NEIGHBORS_8:
        r, c = row + dr, col + dc
        if board.in_bounds(r, c) and board.cells[r][c] != Cell.EMPTY:
            return True
    return False


def frontier_cells(board):
    """Empty cells touching at least one stone."""
    return [(r, c) for r, c in board.empty_cells() if has_neighbor(board, r, c)]


def random_move(board, rng=None):
    """Uniform pick among frontier cells, else among all empty cells; None if the board is full."""
    rng = rng or random.Random()
    candidates = frontier_cells(board) or board.empty_cells()
    if not candidates:
        return None
    return rng.choice(candidates)
