"""Medium-tier line scoring and move choice."""

import random

from Zen_Gomoku.Board import Board, Cell
from Zen_Gomoku.ai import heuristic


def board_with(size, stones):
    cells = [[0] * size for _ in range(size)]
    for (r, c), value in stones.items():
        cells[r][c] = value
    return Board(size, cells)


def test_bins_keep_their_order():
    scores = heuristic.DEFAULT_LINE_SCORES
    ordered = [scores[name] for name in heuristic.SCORE_BINS]
    assert ordered == sorted(ordered, reverse=True)
    assert heuristic.classify(4, 0) == "five"
    assert heuristic.classify(3, 1) == "four"
    assert heuristic.classify(3, 0) == "single"
    assert heuristic.classify(2, 2) == "open_three"
    assert heuristic.classify(2, 1) == "closed_three"
    assert heuristic.classify(1, 2) == "open_two"
    assert heuristic.classify(0, 2) == "single"


def test_line_score_counts_through_the_empty_candidate():
    # X X _ X on row 5: the gap at (5, 4) joins three stones
    b = board_with(15, {(5, 2): Cell.BLACK, (5, 3): Cell.BLACK, (5, 5): Cell.BLACK})
    count, open_ends = heuristic.run_through(b, 5, 4, 0, 1, Cell.BLACK)
    assert (count, open_ends) == (3, 2)
    assert heuristic.line_score(b, 5, 4, 0, 1, Cell.BLACK) == heuristic.DEFAULT_LINE_SCORES["four"]


def test_takes_immediate_win_with_one_open_end():
    stones = {(7, c): Cell.BLACK for c in range(3, 7)}
    stones[(7, 2)] = Cell.WHITE
    b = board_with(15, stones)
    assert heuristic.best_move(b, Cell.BLACK, rng=random.Random(0)) == (7, 7)


def test_prefers_own_win_over_blocking():
    stones = {(2, c): Cell.WHITE for c in range(5, 9)}           # white open four
    stones.update({(10, c): Cell.BLACK for c in range(0, 4)})    # black four on the edge
    stones[(11, 0)] = Cell.WHITE
    b = board_with(15, stones)
    assert heuristic.best_move(b, Cell.BLACK, rng=random.Random(1)) == (10, 4)


def test_blocks_opponent_four():
    stones = {(3, c): Cell.WHITE for c in range(5, 9)}
    stones[(3, 4)] = Cell.BLACK
    stones[(9, 9)] = Cell.BLACK
    b = board_with(15, stones)
    for seed in range(5):
        assert heuristic.best_move(b, Cell.BLACK, rng=random.Random(seed)) == (3, 9)


def test_blocks_open_four_on_either_end():
    stones = {(r, 6): Cell.BLACK for r in range(4, 8)}
    b = board_with(15, stones)
    assert heuristic.best_move(b, Cell.WHITE, rng=random.Random(3)) in {(3, 6), (8, 6)}


def test_empty_board_opens_at_center():
    b = Board(15)
    assert heuristic.best_move(b, Cell.BLACK, rng=random.Random(0), jitter=0) == (7, 7)


def test_seeded_rng_is_deterministic():
    b = board_with(15, {(7, 7): Cell.BLACK, (7, 8): Cell.WHITE})
    first = heuristic.best_move(b, Cell.BLACK, rng=random.Random(42))
    second = heuristic.best_move(b, Cell.BLACK, rng=random.Random(42))
    assert first == second
    assert b.is_empty(*first)


def test_full_board_has_no_move():
    b = Board(2, [[1, 2], [2, 1]])
    assert heuristic.best_move(b, Cell.BLACK) is None


def test_blocking_weighs_more_than_building():
    # Same open two at (7, 7): blocking it scores higher than extending it
    b = board_with(15, {(7, 6): Cell.WHITE, (0, 0): Cell.BLACK})
    extend = heuristic.evaluate_cell(b, 7, 7, Cell.WHITE)
    block = heuristic.evaluate_cell(b, 7, 7, Cell.BLACK)
    assert block > extend


def test_load_line_scores_overrides_and_validates():
    scores = heuristic.load_line_scores({"five": 200000})
    assert scores["five"] == 200000
    assert scores["four"] == heuristic.DEFAULT_LINE_SCORES["four"]
    assert heuristic.load_line_scores({"four": 1}) == heuristic.DEFAULT_LINE_SCORES
    assert heuristic.load_line_scores({"bogus": 3}) == heuristic.DEFAULT_LINE_SCORES
    assert heuristic.load_line_scores(None) == heuristic.DEFAULT_LINE_SCORES


def test_load_line_scores_rejects_a_five_that_cannot_outweigh_fours():
    weak = {"five": 200, "four": 150, "open_three": 100, "closed_three": 50, "open_two": 20, "single": 10}
    # White threatens (3, 9); Black's three crossing threes meet at (10, 10)
    stones = {(3, c): Cell.WHITE for c in range(5, 9)}
    stones[(3, 4)] = Cell.BLACK
    for cell in [(10, 7), (10, 8), (10, 9), (7, 10), (8, 10), (9, 10), (7, 7), (8, 8), (9, 9)]:
        stones[cell] = Cell.BLACK
    b = board_with(15, stones)

    assert heuristic.best_move(b, Cell.BLACK, rng=random.Random(0), scores=weak) == (10, 10)

    scores = heuristic.load_line_scores(weak)
    assert scores == heuristic.DEFAULT_LINE_SCORES
    assert heuristic.best_move(b, Cell.BLACK, rng=random.Random(0), scores=scores) == (3, 9)


def test_five_dominance_depends_on_jitter_and_board_size():
    assert heuristic.load_line_scores({"five": 38000}) == heuristic.DEFAULT_LINE_SCORES
    assert heuristic.load_line_scores({"five": 50000})["five"] == 50000
    assert heuristic.load_line_scores({"five": 50000}, jitter=20000) == heuristic.DEFAULT_LINE_SCORES
    # A smaller board has a smaller worst-case center penalty
    assert heuristic.load_line_scores({"five": 38195}) == heuristic.DEFAULT_LINE_SCORES
    assert heuristic.load_line_scores({"five": 38195}, board_size=5)["five"] == 38195
