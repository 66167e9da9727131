"""Error taxonomy for the rules core.

Every error is a recoverable caller error: the operation that raised it
has left the board and the side to move untouched.
"""

from __future__ import annotations


class ChessRulesError(Exception):
    """Base class for all errors raised by :mod:`chessrules`."""


class MalformedFenError(ChessRulesError, ValueError):
    """The FEN piece-placement field could not be parsed."""


class OutOfBoundsError(ChessRulesError, IndexError):
    """A square index (or row/col pair) lies outside the 8x8 board."""


class EmptySquareError(ChessRulesError):
    """Move generation was requested for a square without a piece."""


class MoveError(ChessRulesError):
    """A proposed move was rejected by the move applicator."""


class NoPieceSelectedError(MoveError):
    """The source square of a move is empty."""


class WrongSideError(MoveError):
    """The piece on the source square belongs to the side not to move."""


class IllegalMoveError(MoveError):
    """The destination is not among the piece's legal destinations."""


class SelfCaptureError(MoveError):
    """The destination is occupied by a piece of the moving side."""


class GameOverError(ChessRulesError):
    """A move was submitted to a game that has already finished."""


class GameNotStartedError(ChessRulesError):
    """A move was submitted before the game was started."""
