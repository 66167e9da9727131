"""FEN piece-placement parsing and serialisation."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.errors import MalformedFenError
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Position, make_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
_EMPTY_RUN_DIGITS = "12345678"


def board_from_fen(fen: str) -> Board:
    """Parse the piece-placement field of *fen* into a :class:`Board`.

    Only the first whitespace-separated field is read; side to move,
    castling, en passant and the clocks are accepted and ignored. Every
    piece starts with ``moves_made == 0``.
    """
    parts = fen.split()
    if not parts:
        raise MalformedFenError(f"Invalid FEN (empty): {fen!r}")

    ranks = parts[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise MalformedFenError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        row = BOARD_SIZE - 1 - rank_idx
        col = 0
        for ch in rank_text:
            if ch in _EMPTY_RUN_DIGITS:
                col += int(ch)
            elif ch.isdigit():
                raise MalformedFenError(f"Invalid FEN digit {ch!r}: {fen!r}")
            else:
                if col >= BOARD_SIZE:
                    raise MalformedFenError(f"Invalid FEN rank width: {fen!r}")
                board[make_square(row, col)] = Piece.from_char(ch, Position(row, col))
                col += 1
            if col > BOARD_SIZE:
                raise MalformedFenError(f"Invalid FEN rank width: {fen!r}")
        if col != BOARD_SIZE:
            raise MalformedFenError(f"Invalid FEN rank width: {fen!r}")

    return board


load_from_fen = board_from_fen


def board_to_fen(board: Board) -> str:
    """Serialise *board* to a FEN piece-placement field."""
    rows: list[str] = []
    for row in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        text = ""
        for col in range(BOARD_SIZE):
            piece = board[make_square(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)
