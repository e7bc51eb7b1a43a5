"""Game loop driving a GameSession with human players and the session's AI."""

import time

from .Session import GameMode
from .errors import IllegalMove
from .utils.logger import log_event


class Gomokugame:
    def __init__(self, session, players=None, logger=log_event, renderer=None, closer=None, poller=None, final_pause=0.0):
        self.session = session
        self.players = players or {}
        self.logger = logger
        self.renderer = renderer
        self.closer = closer
        # Called repeatedly while an AI move runs in the background (keeps a GUI responsive)
        self.poller = poller
        self.final_pause = final_pause

    def play(self):
        """
        Run the game. Returns the winner Cell, Cell.EMPTY for a draw, or None when the
        game stops early (remote hand-off after one move, or input closed).
        """
        session = self.session
        try:
            while not session.is_over:
                if self.renderer:
                    self.renderer(session.snapshot())

                try:
                    result = self._ai_turn() if session.ai_to_move else self._human_turn()
                except EOFError:
                    self.logger("Game aborted")
                    return None
                if result is None:
                    continue

                move = session.history[-1]
                self.logger(f"Move {len(session.history)}: {move.player.label} ({move.row}, {move.col})")

                if result:
                    self.logger(f"Winner: {result.winner.label}")
                elif session.is_drawn:
                    self.logger("Result: Draw (board full)")
                elif session.mode is GameMode.REMOTE:
                    self.logger(f"Share this board with your opponent: {session.export_token()}")
                    return None

            if self.renderer:
                self.renderer(session.snapshot())
                if self.final_pause:
                    time.sleep(self.final_pause)
            return session.result()
        finally:
            if self.closer:
                self.closer()

    def _ai_turn(self):
        if self.poller is None:
            return self.session.ai_move()
        future = self.session.request_ai_move()
        while not future.done():
            self.poller(self.session.snapshot())
        return future.result()

    def _human_turn(self):
        """Ask the side to move until it produces a legal move."""
        player = self.players[self.session.current_player]
        while True:
            move = None
            try:
                move = player.next_move(self.session.board)
                return self.session.play(*move)
            except IllegalMove as exc:
                self.logger(f"Rejected move {move}: {exc}")
            except ValueError as exc:
                self.logger(f"Rejected input: {exc}")
