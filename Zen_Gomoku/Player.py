"""Player interfaces: console input, pygame clicks, and a local AI seat."""

import random

from .settings import WIN_COUNT
from .ai import heuristic, oracle as oracle_mod
from .ai.tiers import Difficulty, select_move


class Player:
    def __init__(self, color):
        self.color = color

    def next_move(self, board):
        """Return (row, col) for the next move."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, color, input_fn=input):
        super().__init__(color)
        self.input_fn = input_fn

    def next_move(self, board):
        """Read 'row col' from the console; raises EOFError when input ends."""
        raw = self.input_fn(f"{self.color.label} move as 'row col' (0-indexed): ").strip()
        try:
            row_str, col_str = raw.split()
            return int(row_str), int(col_str)
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc


class GuiHumanPlayer(Player):
    def __init__(self, color, view):
        super().__init__(color)
        self.view = view

    def next_move(self, board):
        return self.view.wait_for_move(board, self.color)


class AiPlayer(Player):
    """Computer seat for a LOCAL game, e.g. AI against AI or a scripted opponent."""

    def __init__(
        self,
        color,
        difficulty=Difficulty.MEDIUM,
        oracle=None,
        rng=None,
        win_count=WIN_COUNT,
        line_scores=None,
        jitter=heuristic.DEFAULT_JITTER,
        oracle_timeout=oracle_mod.DEFAULT_TIMEOUT,
    ):
        super().__init__(color)
        self.difficulty = Difficulty.parse(difficulty)
        self.oracle = oracle
        self.rng = rng or random.Random()
        self.win_count = win_count
        self.line_scores = line_scores
        self.jitter = jitter
        self.oracle_timeout = oracle_timeout

    def next_move(self, board):
        return select_move(
            board,
            self.color,
            self.difficulty,
            self.oracle,
            rng=self.rng,
            win_count=self.win_count,
            line_scores=self.line_scores,
            jitter=self.jitter,
            oracle_timeout=self.oracle_timeout,
        )
