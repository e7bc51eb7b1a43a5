"""Zen_Gomoku package exports."""

from .Board import Board, Cell, Move, apply_move, create_empty
from .Gomokugame import Gomokugame
from .Player import Player, AiPlayer, HumanPlayer, GuiHumanPlayer
from .Session import GameMode, GameSession, Snapshot
from .errors import CorruptToken, GomokuError, IllegalMove, OracleInvalidResponse, OracleUnavailable

# Subpackages for rule engine, AI move selection, GUI, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Board",
    "Cell",
    "Move",
    "apply_move",
    "create_empty",
    "Gomokugame",
    "Player",
    "HumanPlayer",
    "GuiHumanPlayer",
    "AiPlayer",
    "GameMode",
    "GameSession",
    "Snapshot",
    "GomokuError",
    "IllegalMove",
    "CorruptToken",
    "OracleUnavailable",
    "OracleInvalidResponse",
    "ai",
    "engine",
    "gui",
    "utils",
]
