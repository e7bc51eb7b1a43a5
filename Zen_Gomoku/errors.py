"""Exception types raised by the board, session, codec, and oracle layers."""


class GomokuError(Exception):
    """Base class for all game-engine errors."""


class IllegalMove(GomokuError, ValueError):
    """Move rejected before any state change (out of range, occupied, game over, wrong turn)."""

    def __init__(self, message, row=None, col=None):
        super().__init__(message)
        self.row = row
        self.col = col


class CorruptToken(GomokuError, ValueError):
    """Serialized board token has the wrong shape for the configured board size."""


class OracleUnavailable(GomokuError, RuntimeError):
    """External move advisor is missing, timed out, or failed to answer."""


class OracleInvalidResponse(GomokuError, ValueError):
    """External move advisor answered with something that is not a legal move."""
