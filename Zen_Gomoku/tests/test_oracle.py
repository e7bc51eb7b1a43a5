"""Oracle validation, guarded consultation, and prompt contents."""

import threading

import pytest

from Zen_Gomoku.Board import Board, Cell
from Zen_Gomoku.ai import oracle
from Zen_Gomoku.errors import OracleInvalidResponse, OracleUnavailable


def small_board():
    return Board(3, [[1, 0, 0], [0, 2, 0], [0, 0, 0]])


def test_validate_accepts_empty_in_range_cell():
    assert oracle.validate_suggestion(small_board(), (0, 2)) == (0, 2)
    assert oracle.validate_suggestion(small_board(), oracle.OracleMove(row=2, col=2)) == (2, 2)


@pytest.mark.parametrize("suggestion", [(0, 0), (3, 0), (0, -1), (1.0, 2), "ab", 5, ("1", "2")])
def test_validate_rejects(suggestion):
    with pytest.raises(OracleInvalidResponse):
        oracle.validate_suggestion(small_board(), suggestion)


def test_consult_without_oracle_is_unavailable():
    with pytest.raises(OracleUnavailable):
        oracle.consult(None, small_board(), Cell.WHITE)


def test_consult_wraps_errors():
    class Broken(oracle.MoveOracle):
        def suggest(self, board, player):
            raise ConnectionError("offline")

    with pytest.raises(OracleUnavailable) as info:
        oracle.consult(Broken(), small_board(), Cell.WHITE, timeout=1.0)
    assert "offline" in str(info.value)


def test_consult_passes_board_and_player():
    seen = {}

    class Recorder(oracle.MoveOracle):
        def suggest(self, board, player):
            seen["args"] = (board, player)
            return [2, 0]

    b = small_board()
    assert oracle.consult(Recorder(), b, Cell.BLACK, timeout=1.0) == (2, 0)
    assert seen["args"] == (b, Cell.BLACK)


def test_prompt_describes_board_and_side():
    inputs = oracle.prompt_inputs(small_board(), Cell.WHITE, win_count=3)
    messages = oracle.prompt.format_messages(**inputs)
    text = "\n".join(m.content for m in messages)
    assert "3x3" in text
    assert "X . .\n. O .\n. . ." in text
    assert "You are playing as White (O)" in text
    assert "0 to 2" in text


def test_from_env_without_key_is_absent(monkeypatch):
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    assert oracle.GeminiOracle.from_env() is None


def test_timed_out_call_is_left_on_a_daemon_thread():
    started = threading.Event()
    release = threading.Event()
    seen = {}

    class Slow(oracle.MoveOracle):
        def suggest(self, board, player):
            seen["daemon"] = threading.current_thread().daemon
            started.set()
            release.wait(5)
            return (0, 2)

    try:
        with pytest.raises(OracleUnavailable):
            oracle.consult(Slow(), small_board(), Cell.WHITE, timeout=0.05)
        assert started.wait(5)
    finally:
        release.set()
    assert seen["daemon"] is True
