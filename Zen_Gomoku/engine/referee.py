"""Move validation before any state change."""

from ..Board import Cell
from ..errors import IllegalMove


def check_move(move, board, expected_player=None, winner=None):
    """
    Validate a move against game state, turn order, bounds, and occupancy.
    Raises IllegalMove on invalid moves; the caller's state is untouched.
    """
    row, col = move.row, move.col
    if winner is not None:
        raise IllegalMove(f"game already won by {Cell(winner).label}", row, col)
    if expected_player is not None and move.player != expected_player:
        raise IllegalMove(f"it is {Cell(expected_player).label}'s turn", row, col)
    if not board.in_bounds(row, col):
        raise IllegalMove(f"move ({row}, {col}) out of range", row, col)
    if not board.is_empty(row, col):
        raise IllegalMove(f"cell ({row}, {col}) already occupied", row, col)
    return True
