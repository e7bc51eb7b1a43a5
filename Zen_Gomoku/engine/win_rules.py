"""Win detection around the stone that was just played."""

from dataclasses import dataclass

from ..Board import Cell
from ..settings import WIN_COUNT

# Horizontal, vertical, diagonal (down-right), anti-diagonal (down-left)
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


@dataclass(frozen=True)
class WinResult:
    winner: Cell | None = None
    line: tuple = ()

    def __bool__(self):
        return self.winner is not None


NO_WINNER = WinResult()


def _walk(board, row, col, dr, dc, player):
    """Contiguous `player` cells from (row, col) (exclusive) in (dr, dc); stops at edge or mismatch."""
    cells = []
    r, c = row + dr, col + dc
    while board.in_bounds(r, c) and board.cells[r][c] == player:
        cells.append((r, c))
        r += dr
        c += dc
    return cells


def line_through(board, row, col, dr, dc, player):
    """Ordered run of `player` cells through (row, col) along one direction, origin included."""
    backward = _walk(board, row, col, -dr, -dc, player)
    forward = _walk(board, row, col, dr, dc, player)
    return list(reversed(backward)) + [(row, col)] + forward


def check_win(board, row, col, player, win_count=WIN_COUNT):
    """
    Return the winning line created by the stone at (row, col), or NO_WINNER.
    Only lines through (row, col) are inspected; this is not a full-board scan.
    """
    player = Cell(player)
    if player == Cell.EMPTY or board.cells[row][col] != player:
        return NO_WINNER
    for dr, dc in DIRECTIONS:
        line = line_through(board, row, col, dr, dc, player)
        if len(line) >= win_count:
            return WinResult(winner=player, line=tuple(line))
    return NO_WINNER

