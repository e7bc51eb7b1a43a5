"""Directional line scoring for the Medium tier (offense plus weighted defense, center pull, jitter)."""

import logging
import random

from ..Board import Cell
from ..settings import DEFAULT_BOARD_SIZE, WIN_COUNT
from ..engine.win_rules import DIRECTIONS

LOGGER = logging.getLogger(__name__)

# Bins ordered from strongest to weakest; names describe what a stone on the
# candidate cell would turn the adjacent run into.
SCORE_BINS = ("five", "four", "open_three", "closed_three", "open_two", "single")

DEFAULT_LINE_SCORES = {
    "five": 100000,       # completes a winning line (or blocks one)
    "four": 5000,         # one short of a win, at least one open end
    "open_three": 1000,
    "closed_three": 100,
    "open_two": 50,
    "single": 10,         # mere adjacency / isolated
}

DEFENSE_WEIGHT = 1.1
CENTER_PENALTY = 1.0
DEFAULT_JITTER = 5.0


def load_line_scores(data=None, board_size=DEFAULT_BOARD_SIZE, jitter=DEFAULT_JITTER):
    """
    Build line-score weights from a settings mapping; fall back to defaults on a
    missing or malformed section, or when the weights break the bin ordering.

    The five bin must also dominate: blocking an opponent's five has to outscore
    the best cell that sees a four (own and opposing) in all four directions,
    plus the largest jitter and center penalty the board allows.
    """
    if not data:
        return dict(DEFAULT_LINE_SCORES)
    scores = dict(DEFAULT_LINE_SCORES)
    try:
        for name, value in data.items():
            if name not in DEFAULT_LINE_SCORES:
                raise ValueError(f"unknown line score bin {name!r}")
            scores[name] = float(value)
    except (AttributeError, TypeError, ValueError) as exc:
        LOGGER.warning("Ignoring line_scores override (%s); using defaults", exc)
        return dict(DEFAULT_LINE_SCORES)

    ordered = [scores[name] for name in SCORE_BINS]
    if any(a <= b for a, b in zip(ordered, ordered[1:])):
        LOGGER.warning("line_scores must strictly decrease from five to single; using defaults")
        return dict(DEFAULT_LINE_SCORES)

    center = board_size // 2
    max_penalty = CENTER_PENALTY * 2 * max(center, board_size - 1 - center)
    rival = len(DIRECTIONS) * (1 + DEFENSE_WEIGHT) * scores["four"] + jitter + max_penalty
    if DEFENSE_WEIGHT * scores["five"] <= rival:
        LOGGER.warning(
            "line_scores five=%s cannot outweigh %.1f from lesser threats; using defaults",
            scores["five"], rival,
        )
        return dict(DEFAULT_LINE_SCORES)
    return scores


def run_through(board, row, col, dr, dc, player):
    """
    Count `player` stones adjacent to (row, col) along both senses of one direction
    as if (row, col) held a stone, and how many of the two ends are open (empty).
    """
    count = 0
    open_ends = 0
    for sign in (1, -1):
        r, c = row + dr * sign, col + dc * sign
        while board.in_bounds(r, c):
            value = board.cells[r][c]
            if value == player:
                count += 1
            elif value == Cell.EMPTY:
                open_ends += 1
                break
            else:
                break
            r += dr * sign
            c += dc * sign
    return count, open_ends


def classify(count, open_ends, win_count=WIN_COUNT):
    """Map a (count, open_ends) run to one of SCORE_BINS."""
    missing = win_count - 1 - count
    if missing <= 0:
        return "five"
    if missing == 1 and open_ends > 0:
        return "four"
    if missing == 2 and open_ends == 2:
        return "open_three"
    if missing == 2 and open_ends > 0:
        return "closed_three"
    if missing == 3 and open_ends == 2:
        return "open_two"
    return "single"


def line_score(board, row, col, dr, dc, player, win_count=WIN_COUNT, scores=None):
    scores = scores or DEFAULT_LINE_SCORES
    count, open_ends = run_through(board, row, col, dr, dc, player)
    return scores[classify(count, open_ends, win_count)]


def evaluate_cell(board, row, col, player, win_count=WIN_COUNT, scores=None):
    """Deterministic part of a candidate's score for `player` at the empty cell (row, col)."""
    scores = scores or DEFAULT_LINE_SCORES
    opponent = Cell(player).opponent
    score = 0.0
    for dr, dc in DIRECTIONS:
        score += line_score(board, row, col, dr, dc, player, win_count, scores)
        score += DEFENSE_WEIGHT * line_score(board, row, col, dr, dc, opponent, win_count, scores)
    center = board.size // 2
    score -= CENTER_PENALTY * (abs(row - center) + abs(col - center))
    return score


def find_winning_cell(board, player, win_count=WIN_COUNT):
    """First empty cell (row-major) where `player` completes a line, or None."""
    for row, col in board.empty_cells():
        for dr, dc in DIRECTIONS:
            count, _ = run_through(board, row, col, dr, dc, player)
            if count + 1 >= win_count:
                return row, col
    return None


def best_move(board, player, rng=None, win_count=WIN_COUNT, scores=None, jitter=DEFAULT_JITTER):
    """
    Medium-tier choice. An immediate win is taken outright; otherwise the empty
    cell with the highest score plus a bounded random tie-break. None if the board is full.
    """
    rng = rng or random.Random()
    player = Cell(player)

    win_move = find_winning_cell(board, player, win_count)
    if win_move is not None:
        LOGGER.debug("Immediate win for %s at %s", player.label, win_move)
        return win_move

    best = None
    best_score = float("-inf")
    for row, col in board.empty_cells():
        score = evaluate_cell(board, row, col, player, win_count, scores)
        score += rng.random() * jitter
        if score > best_score:
            best_score = score
            best = (row, col)
    return best
