"""External move advisor (Hard tier): capability interface, Gemini implementation, and guarded consultation."""

import logging
import os
import threading
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FutureTimeout

from langchain_core.prompts import ChatPromptTemplate
from pydantic import BaseModel, Field

from ..Board import Cell
from ..errors import OracleInvalidResponse, OracleUnavailable

LOGGER = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TIMEOUT = 10.0
API_KEY_ENV = "GOOGLE_API_KEY"


class OracleMove(BaseModel):
    row: int = Field(description="0-indexed row of the chosen empty cell.")
    col: int = Field(description="0-indexed column of the chosen empty cell.")


SYSTEM_PROMPT = """
You are a Gomoku (Five-in-a-Row) expert.
The board size is {size}x{size}. A line of {win_count} stones wins.
. = Empty
X = Black (Player 1)
O = White (Player 2)
"""

USER_TEMPLATE = """
Current board state:
{board}

You are playing as {me}.
The opponent is {opponent}.

Objective:
1. Check if you can win immediately. If so, take that spot.
2. Check if the opponent will win on their next turn. If so, block them.
3. Otherwise, play the most strategic move to build a line of {win_count}.

Return ONLY the coordinates of your next move.
Rows and Columns are 0-indexed (0 to {last_index}).
"""

prompt = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("user", USER_TEMPLATE),
])


def _side(player):
    return "Black (X)" if player == Cell.BLACK else "White (O)"


def prompt_inputs(board, player, win_count):
    player = Cell(player)
    return {
        "size": board.size,
        "win_count": win_count,
        "board": str(board),
        "me": _side(player),
        "opponent": _side(player.opponent),
        "last_index": board.size - 1,
    }


class MoveOracle:
    """Suggests a move for `player`; may raise anything, may return garbage."""

    def suggest(self, board, player):
        raise NotImplementedError


class GeminiOracle(MoveOracle):
    def __init__(self, api_key, model=DEFAULT_MODEL, temperature=0.2, win_count=5):
        try:
            from langchain_google_genai import ChatGoogleGenerativeAI
        except ImportError as exc:
            raise OracleUnavailable("langchain-google-genai is not installed") from exc

        llm = ChatGoogleGenerativeAI(model=model, temperature=temperature, google_api_key=api_key)
        self.model = model
        self.win_count = win_count
        self.chain = prompt | llm.with_structured_output(OracleMove)

    @classmethod
    def from_env(cls, model=DEFAULT_MODEL, win_count=5, env_var=API_KEY_ENV):
        """Return an oracle when an API key is configured, otherwise None (oracle absent)."""
        api_key = os.getenv(env_var)
        if not api_key:
            LOGGER.info("No %s set; Hard tier will use the heuristic", env_var)
            return None
        try:
            return cls(api_key, model=model, win_count=win_count)
        except OracleUnavailable as exc:
            LOGGER.warning("Move advisor disabled: %s", exc)
            return None

    def suggest(self, board, player):
        decision = self.chain.invoke(prompt_inputs(board, player, self.win_count))
        if decision is None:
            raise OracleInvalidResponse(f"{self.model} returned no decision")
        return decision.row, decision.col


def validate_suggestion(board, suggestion):
    """Accept only integer coordinates that are in range and empty."""
    if isinstance(suggestion, OracleMove):
        row, col = suggestion.row, suggestion.col
    else:
        try:
            row, col = suggestion
        except (TypeError, ValueError) as exc:
            raise OracleInvalidResponse(f"malformed suggestion {suggestion!r}") from exc
    if isinstance(row, bool) or isinstance(col, bool) or not isinstance(row, int) or not isinstance(col, int):
        raise OracleInvalidResponse(f"non-integer coordinates {suggestion!r}")
    if not board.in_bounds(row, col):
        raise OracleInvalidResponse(f"suggestion ({row}, {col}) out of range")
    if not board.is_empty(row, col):
        raise OracleInvalidResponse(f"suggestion ({row}, {col}) is occupied")
    return row, col


def _start_daemon(fn, *args):
    """Run fn on a daemon thread so an abandoned call never delays interpreter exit."""
    future = Future()

    def run():
        if not future.set_running_or_notify_cancel():
            return
        try:
            future.set_result(fn(*args))
        except BaseException as exc:
            future.set_exception(exc)

    threading.Thread(target=run, name="move-oracle", daemon=True).start()
    return future


def consult(oracle, board, player, timeout=DEFAULT_TIMEOUT):
    """
    Ask the oracle on a worker thread, waiting at most `timeout` seconds.
    Raises OracleUnavailable (absent, timeout, error) or OracleInvalidResponse.
    """
    if oracle is None:
        raise OracleUnavailable("no move advisor configured")

    future = _start_daemon(oracle.suggest, board, player)
    try:
        suggestion = future.result(timeout=timeout)
    except FutureTimeout as exc:
        future.cancel()
        raise OracleUnavailable(f"move advisor timed out after {timeout}s") from exc
    except (OracleUnavailable, OracleInvalidResponse):
        raise
    except Exception as exc:
        raise OracleUnavailable(f"move advisor failed: {exc}") from exc
    return validate_suggestion(board, suggestion)
