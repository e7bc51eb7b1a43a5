"""Board construction, immutability, and move legality."""

import pytest

from Zen_Gomoku.Board import Board, Cell, Move, apply_move, create_empty
from Zen_Gomoku.errors import IllegalMove


def test_create_empty_is_square_and_empty():
    b = create_empty(15)
    assert b.size == 15
    assert len(b.cells) == 15
    assert all(len(row) == 15 for row in b.cells)
    assert b.move_count == 0
    assert len(b.empty_cells()) == 225


@pytest.mark.parametrize("size", [0, -3])
def test_create_empty_rejects_non_positive_size(size):
    with pytest.raises(ValueError):
        create_empty(size)


def test_apply_move_changes_exactly_one_cell_and_keeps_input():
    b = create_empty(9)
    b = apply_move(b, Move(4, 4, Cell.BLACK))
    before = b.cells

    after = apply_move(b, Move(2, 3, Cell.WHITE))

    assert b.cells == before
    assert b.get(2, 3) == Cell.EMPTY
    assert after.get(2, 3) == Cell.WHITE
    changed = [
        (r, c)
        for r in range(9)
        for c in range(9)
        if after.get(r, c) != b.get(r, c)
    ]
    assert changed == [(2, 3)]


def test_occupied_cell_rejected():
    b = apply_move(create_empty(5), Move(1, 1, Cell.BLACK))
    with pytest.raises(IllegalMove):
        apply_move(b, Move(1, 1, Cell.WHITE))


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (5, 0), (0, 5)])
def test_out_of_range_rejected(row, col):
    with pytest.raises(IllegalMove) as info:
        apply_move(create_empty(5), Move(row, col, Cell.BLACK))
    assert (info.value.row, info.value.col) == (row, col)


def test_board_cannot_be_mutated_in_place():
    b = create_empty(3)
    with pytest.raises(AttributeError):
        b.size = 4
    with pytest.raises(TypeError):
        b.cells[0][0] = Cell.BLACK


def test_invalid_cell_values_rejected():
    with pytest.raises(ValueError):
        Board(2, [[0, 3], [0, 0]])
    with pytest.raises(ValueError):
        Board(2, [[0, 0]])


def test_text_rendering_and_full_board():
    b = Board(2, [[1, 2], [0, 1]])
    assert str(b) == "X O\n. X"
    assert not b.is_full()
    assert apply_move(b, Move(1, 0, Cell.WHITE)).is_full()
    assert Cell.BLACK.opponent is Cell.WHITE
