"""Single entry point for AI move selection across difficulty tiers."""

import logging
import random
from enum import Enum

from ..Board import Cell
from ..settings import WIN_COUNT
from ..errors import OracleInvalidResponse, OracleUnavailable
from . import heuristic, move_selector, oracle as oracle_mod

LOGGER = logging.getLogger(__name__)

# Returned when the caller asks for a move on a full board
FULL_BOARD_MOVE = (0, 0)


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        return cls(str(value).lower())


def select_move(
    board,
    player,
    difficulty=Difficulty.MEDIUM,
    oracle=None,
    *,
    rng=None,
    win_count=WIN_COUNT,
    line_scores=None,
    jitter=heuristic.DEFAULT_JITTER,
    oracle_timeout=oracle_mod.DEFAULT_TIMEOUT,
):
    """
    Return (row, col) for `player`. Always a legal empty cell when one exists.
    Hard consults `oracle` first and falls back to Medium on any oracle problem.
    """
    difficulty = Difficulty.parse(difficulty)
    player = Cell(player)
    rng = rng or random.Random()

    if board.is_full():
        LOGGER.warning("select_move called on a full board; returning %s", FULL_BOARD_MOVE)
        return FULL_BOARD_MOVE

    if difficulty is Difficulty.EASY:
        return move_selector.random_move(board, rng=rng)

    if difficulty is Difficulty.HARD:
        if oracle is None:
            LOGGER.debug("No move advisor configured, using Medium heuristic")
        else:
            try:
                move = oracle_mod.consult(oracle, board, player, timeout=oracle_timeout)
                LOGGER.info("Move advisor suggested %s for %s", move, player.label)
                return move
            except (OracleUnavailable, OracleInvalidResponse) as exc:
                LOGGER.warning("Move advisor rejected (%s), falling back to Medium", exc)

    return heuristic.best_move(
        board, player, rng=rng, win_count=win_count, scores=line_scores, jitter=jitter
    )
