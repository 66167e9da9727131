"""Move application and turn control.

:func:`attempt_move` validates a (source, destination) pair against the
move generator and only then touches the board, so a rejected move never
leaves a partial change behind.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.errors import (
    IllegalMoveError,
    NoPieceSelectedError,
    SelfCaptureError,
    WrongSideError,
)
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import STARTING_FEN, board_from_fen
from chessrules.core.piece import Piece
from chessrules.core.types import Position, Square, check_square, square_name

# ── Outbound events ──────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class PieceMoved:
    from_sq: Square
    to_sq: Square


@dataclass(frozen=True, slots=True)
class PieceCaptured:
    square: Square
    piece: Piece


@dataclass(frozen=True, slots=True)
class TurnChanged:
    side_to_move: Color


MoveEvent = PieceMoved | PieceCaptured | TurnChanged


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of a successful :func:`attempt_move`.

    ``piece`` is a copy of the moved piece taken right after the move, so it
    does not follow the piece through later moves. ``captured`` is the
    removed enemy piece if any, and ``side_to_move`` the side whose turn it
    is now. Pieces are left out of equality and hashing.
    """

    piece: Piece = field(compare=False)
    from_sq: Square
    to_sq: Square
    captured: Piece | None = field(compare=False)
    side_to_move: Color
    new_position: Position

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def move(self) -> Move:
        return Move(self.from_sq, self.to_sq)

    def events(self) -> tuple[MoveEvent, ...]:
        """Outbound records in the order collaborators should see them."""
        events: list[MoveEvent] = [PieceMoved(self.from_sq, self.to_sq)]
        if self.captured is not None:
            events.append(PieceCaptured(self.to_sq, self.captured))
        events.append(TurnChanged(self.side_to_move))
        return tuple(events)


# ── Move applicator ──────────────────────────────────────────────────────────


def attempt_move(
    board: Board,
    side_to_move: Color,
    source: Square,
    destination: Square,
) -> MoveResult:
    """Validate and apply *source* → *destination* for *side_to_move*.

    Raises a :class:`~chessrules.core.errors.ChessRulesError` subclass when
    the move is rejected; the board is then unchanged.
    """
    check_square(source)
    check_square(destination)

    piece = board[source]
    if piece is None:
        raise NoPieceSelectedError(f"No piece on {square_name(source)}")
    if piece.color != side_to_move:
        raise WrongSideError(
            f"Piece on {square_name(source)} is {piece.color}, "
            f"but {side_to_move} is to move"
        )

    if destination not in MoveGenerator(board).legal_destinations(source):
        raise IllegalMoveError(
            f"Illegal move for {piece.piece_type.name.lower()}: "
            f"{square_name(source)}{square_name(destination)}"
        )

    captured = board[destination]
    if captured is not None and captured.color == side_to_move:
        raise SelfCaptureError(
            f"{square_name(destination)} is occupied by a {side_to_move} piece"
        )

    # Apply
    board[source] = None
    board[destination] = piece
    piece.moves_made += 1

    return MoveResult(
        piece=replace(piece),
        from_sq=source,
        to_sq=destination,
        captured=captured,
        side_to_move=side_to_move.opposite,
        new_position=piece.position,
    )


# ── Turn controller ──────────────────────────────────────────────────────────


class TurnController:
    """Owns one board and the side to move.

    Two states, white to move and black to move. The only transition is a
    successful :meth:`attempt_move`.
    """

    __slots__ = ("board", "side_to_move")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        self.board = board if board is not None else board_from_fen(STARTING_FEN)
        self.side_to_move = side_to_move

    def legal_destinations(self, sq: Square) -> list[Square]:
        return MoveGenerator(self.board).legal_destinations(sq)

    def attempt_move(self, source: Square, destination: Square) -> MoveResult:
        result = attempt_move(self.board, self.side_to_move, source, destination)
        self.side_to_move = result.side_to_move
        return result

    def reset(self, fen: str = STARTING_FEN) -> None:
        """Load *fen* and give the move to white."""
        self.board = board_from_fen(fen)
        self.side_to_move = Color.WHITE
