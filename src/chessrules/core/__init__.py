"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import STARTING_FEN, TurnController, board_from_fen

    ctrl = TurnController(board_from_fen(STARTING_FEN))
    print(ctrl.legal_destinations(12))  # e2 pawn → [20, 28]
    result = ctrl.attempt_move(12, 28)
"""

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.errors import (
    ChessRulesError,
    EmptySquareError,
    GameNotStartedError,
    GameOverError,
    IllegalMoveError,
    MalformedFenError,
    MoveError,
    NoPieceSelectedError,
    OutOfBoundsError,
    SelfCaptureError,
    WrongSideError,
)
from chessrules.core.geometry import (
    DIRECTION_OFFSETS,
    GEOMETRY,
    Direction,
    GeometryTable,
)
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator, legal_destinations
from chessrules.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    load_from_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import (
    MoveResult,
    PieceCaptured,
    PieceMoved,
    TurnChanged,
    TurnController,
    attempt_move,
)
from chessrules.core.types import (
    Position,
    Square,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Position",
    "Square",
    "col_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Errors
    "ChessRulesError",
    "EmptySquareError",
    "GameNotStartedError",
    "GameOverError",
    "IllegalMoveError",
    "MalformedFenError",
    "MoveError",
    "NoPieceSelectedError",
    "OutOfBoundsError",
    "SelfCaptureError",
    "WrongSideError",
    # Geometry
    "DIRECTION_OFFSETS",
    "GEOMETRY",
    "Direction",
    "GeometryTable",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "legal_destinations",
    # Rules
    "MoveResult",
    "PieceCaptured",
    "PieceMoved",
    "TurnChanged",
    "TurnController",
    "attempt_move",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "load_from_fen",
]
