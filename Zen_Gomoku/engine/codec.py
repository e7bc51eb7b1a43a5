"""Board <-> token codec for store-and-forward play (one digit per cell, row-major)."""

import logging
from urllib.parse import urldefrag, urlsplit

from ..Board import Board, Cell, create_empty
from ..settings import DEFAULT_BOARD_SIZE
from ..errors import CorruptToken

LOGGER = logging.getLogger(__name__)


def serialize(board):
    return "".join(str(int(value)) for row in board.cells for value in row)


def parse_digit(ch):
    """'1' -> BLACK, '2' -> WHITE, anything else -> EMPTY."""
    if ch == "1":
        return Cell.BLACK
    if ch == "2":
        return Cell.WHITE
    return Cell.EMPTY


def decode_token(token, size=DEFAULT_BOARD_SIZE):
    """Strict decode: raise CorruptToken unless the token has exactly size*size characters."""
    if not isinstance(token, str):
        raise CorruptToken(f"token must be a string, got {type(token).__name__}")
    expected = size * size
    if len(token) != expected:
        raise CorruptToken(f"token length {len(token)} does not match {size}x{size} board ({expected})")
    cells = [[parse_digit(token[r * size + c]) for c in range(size)] for r in range(size)]
    return Board(size, cells)


def deserialize(token, size=DEFAULT_BOARD_SIZE):
    """Decode a token; a corrupt token degrades to an empty board instead of raising."""
    try:
        return decode_token(token, size=size)
    except CorruptToken as exc:
        LOGGER.warning("Corrupt board token, starting a fresh game: %s", exc)
        return create_empty(size)


def next_player(board):
    """Black always opens, so more black stones means White is to move."""
    black = board.count(Cell.BLACK)
    white = board.count(Cell.WHITE)
    return Cell.WHITE if black > white else Cell.BLACK


def share_link(base_url, board):
    """Place the token in the URL fragment, replacing any existing fragment."""
    return f"{urldefrag(base_url).url}#{serialize(board)}"


def token_from_link(link):
    """Extract the token from a shared URL; a bare token is returned unchanged."""
    if "#" not in link and "://" not in link:
        return link.strip()
    return urlsplit(link.strip()).fragment
