"""Easy tier: random but never aimless, never on an occupied cell."""

import random

from Zen_Gomoku.Board import Board, Cell
from Zen_Gomoku.ai import move_selector


def test_never_returns_occupied_cell():
    rng = random.Random(7)
    cells = [[rng.choice([0, 0, 1, 2]) for _ in range(9)] for _ in range(9)]
    cells[8][8] = 0
    b = Board(9, cells)
    for seed in range(50):
        mv = move_selector.random_move(b, rng=random.Random(seed))
        assert b.is_empty(*mv)


def test_prefers_cells_next_to_stones():
    cells = [[0] * 15 for _ in range(15)]
    cells[7][7] = Cell.BLACK
    b = Board(15, cells)
    for seed in range(30):
        r, c = move_selector.random_move(b, rng=random.Random(seed))
        assert max(abs(r - 7), abs(c - 7)) == 1


def test_empty_board_uses_any_cell():
    b = Board(5)
    seen = {move_selector.random_move(b, rng=random.Random(seed)) for seed in range(40)}
    assert len(seen) > 1
    assert all(b.is_empty(*mv) for mv in seen)


def test_full_board_returns_none():
    b = Board(2, [[1, 2], [2, 1]])
    assert move_selector.random_move(b) is None


def test_has_neighbor_respects_edges():
    cells = [[0] * 3 for _ in range(3)]
    cells[0][0] = Cell.WHITE
    b = Board(3, cells)
    assert move_selector.has_neighbor(b, 1, 1)
    assert not move_selector.has_neighbor(b, 2, 2)
    assert move_selector.frontier_cells(b) == [(0, 1), (1, 0), (1, 1)]
