"""Game session: owns the board, turn order, history, and mode; serializes move application."""

import logging
import random
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum

from .Board import Board, Cell, Move, apply_move, create_empty
from .ai import heuristic, oracle as oracle_mod
from .ai.tiers import Difficulty, select_move
from .settings import DEFAULT_BOARD_SIZE, WIN_COUNT
from .engine import codec, referee
from .engine.win_rules import check_win
from .errors import IllegalMove

LOGGER = logging.getLogger(__name__)


class GameMode(str, Enum):
    LOCAL = "local"
    AI = "ai"
    REMOTE = "remote"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        return cls(str(value).lower())


@dataclass(frozen=True)
class Snapshot:
    """Everything the presentation layer needs to draw one frame."""

    board: Board
    current_player: Cell
    winner: Cell | None
    winning_line: tuple
    last_move: tuple | None
    mode: GameMode
    thinking: bool
    drawn: bool


class GameSession:
    def __init__(
        self,
        board_size=DEFAULT_BOARD_SIZE,
        win_count=WIN_COUNT,
        mode=GameMode.LOCAL,
        difficulty=Difficulty.MEDIUM,
        ai_color=Cell.WHITE,
        oracle=None,
        rng=None,
        oracle_timeout=oracle_mod.DEFAULT_TIMEOUT,
        line_scores=None,
        jitter=heuristic.DEFAULT_JITTER,
    ):
        if win_count <= 1 or win_count > board_size:
            raise ValueError(f"win_count must be in 2..{board_size}, got {win_count}")
        self.board_size = board_size
        self.win_count = win_count
        self.mode = GameMode.parse(mode)
        self.difficulty = Difficulty.parse(difficulty)
        self.ai_color = Cell(ai_color)
        self.oracle = oracle
        self.rng = rng or random.Random()
        self.oracle_timeout = oracle_timeout
        self.line_scores = line_scores
        self.jitter = jitter

        self._lock = threading.RLock()
        self._executor = None
        self._pending = None
        self._generation = 0
        self._thinking = False
        self._reset_state(create_empty(board_size), Cell.BLACK)

    def _reset_state(self, board, to_move):
        self.board = board
        self._current = to_move
        self._winner = None
        self._winning_line = ()
        self._drawn = board.is_full()
        self._history = []

    # --- construction from a shared token ---

    @classmethod
    def from_token(cls, token, board_size=DEFAULT_BOARD_SIZE, **kwargs):
        """Resume a store-and-forward game. A corrupt token starts a fresh game."""
        kwargs.setdefault("mode", GameMode.REMOTE)
        session = cls(board_size=board_size, **kwargs)
        board = codec.deserialize(token, size=board_size)
        # History and winner are not carried by the token
        session._reset_state(board, codec.next_player(board))
        LOGGER.info("Loaded shared board with %d stones, %s to move", board.move_count, session._current.label)
        return session

    @classmethod
    def from_link(cls, link, board_size=DEFAULT_BOARD_SIZE, **kwargs):
        return cls.from_token(codec.token_from_link(link), board_size=board_size, **kwargs)

    def export_token(self):
        with self._lock:
            return codec.serialize(self.board)

    def share_link(self, base_url):
        with self._lock:
            return codec.share_link(base_url, self.board)

    # --- state accessors ---

    @property
    def current_player(self):
        return self._current

    @property
    def winner(self):
        return self._winner

    @property
    def winning_line(self):
        return self._winning_line

    @property
    def history(self):
        return tuple(self._history)

    @property
    def last_move(self):
        if not self._history:
            return None
        move = self._history[-1]
        return move.row, move.col

    @property
    def is_drawn(self):
        return self._drawn

    @property
    def is_over(self):
        return self._winner is not None or self._drawn

    @property
    def ai_to_move(self):
        return self.mode is GameMode.AI and self._current == self.ai_color and not self.is_over

    @property
    def thinking(self):
        pending = self._pending
        return self._thinking or (pending is not None and not pending.done())

    def snapshot(self):
        with self._lock:
            return Snapshot(
                board=self.board,
                current_player=self._current,
                winner=self._winner,
                winning_line=self._winning_line,
                last_move=self.last_move,
                mode=self.mode,
                thinking=self.thinking,
                drawn=self._drawn,
            )

    # --- move application ---

    def play(self, row, col):
        """Apply a human move for the side to move. Raises IllegalMove and leaves state unchanged."""
        with self._lock:
            if self.ai_to_move:
                raise IllegalMove("waiting for the AI move", row, col)
            # Supersedes any outstanding AI request
            self._generation += 1
            return self._apply(Move(row, col, self._current))

    def _apply(self, move):
        referee.check_move(move, self.board, expected_player=self._current, winner=self._winner)
        self.board = apply_move(self.board, move)
        self._history.append(move)
        result = check_win(self.board, move.row, move.col, move.player, win_count=self.win_count)
        if result:
            self._winner = result.winner
            self._winning_line = result.line
            LOGGER.info("%s wins with %s", result.winner.label, list(result.line))
        elif self.board.is_full():
            self._drawn = True
            LOGGER.info("Board full: draw")
        self._current = move.player.opponent
        return result

    def _choose(self, board, player):
        return select_move(
            board,
            player,
            self.difficulty,
            self.oracle,
            rng=self.rng,
            win_count=self.win_count,
            line_scores=self.line_scores,
            jitter=self.jitter,
            oracle_timeout=self.oracle_timeout,
        )

    def _ai_turn(self, generation):
        """Pick outside the lock, apply under it; returns None if a reset or move superseded us."""
        with self._lock:
            if generation != self._generation:
                return None
            board, player = self.board, self._current
        row, col = self._choose(board, player)
        with self._lock:
            if generation != self._generation:
                LOGGER.info("Discarding superseded AI move (%d, %d)", row, col)
                return None
            self._generation += 1
            return self._apply(Move(row, col, player))

    def ai_move(self):
        """Compute and play a move for the side to move. Returns its WinResult, or None if superseded."""
        with self._lock:
            if self.is_over:
                raise IllegalMove("game is already over")
            if self._pending is not None and not self._pending.done():
                raise IllegalMove("an AI move is already pending")
            generation = self._generation
            self._thinking = True
        try:
            return self._ai_turn(generation)
        finally:
            self._thinking = False

    def request_ai_move(self):
        """
        Start the AI move on a worker thread and return its Future (resolving to a
        WinResult, or None if superseded). At most one request is pending at a time.
        """
        with self._lock:
            if self._pending is not None and not self._pending.done():
                return self._pending
            if self.is_over:
                raise IllegalMove("game is already over")
            if self._executor is None:
                self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="zen-gomoku-ai")
            self._pending = self._executor.submit(self._ai_turn, self._generation)
            return self._pending

    def reset(self):
        """Fresh empty board, Black to move; any outstanding AI request is abandoned."""
        with self._lock:
            self._generation += 1
            if self._pending is not None:
                self._pending.cancel()
                self._pending = None
            self._reset_state(create_empty(self.board_size), Cell.BLACK)

    def close(self):
        with self._lock:
            self._generation += 1
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=False, cancel_futures=True)

    def result(self):
        """Winner Cell, Cell.EMPTY for a draw, or None while the game is running."""
        if self._winner is not None:
            return self._winner
        if self._drawn:
            return Cell.EMPTY
        return None
