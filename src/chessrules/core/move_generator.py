"""Legal move generation for the simplified rule set.

There is no check detection: a king may step into an attacked square and
a pinned piece may move. Castling, en passant and promotion do not exist.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import EmptySquareError
from chessrules.core.geometry import (
    ALL_DIRECTIONS,
    DIAGONAL,
    GEOMETRY,
    ORTHOGONAL,
    GeometryTable,
)
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import (
    BOARD_SIZE,
    Position,
    Square,
    check_square,
    col_of,
    is_valid_square,
)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 2),
    (2, 1),
    (-1, 2),
    (-2, 1),
    (1, -2),
    (2, -1),
    (-1, -2),
    (-2, -1),
)

_SLIDING_DIRECTIONS: dict[PieceType, range] = {
    PieceType.ROOK: ORTHOGONAL,
    PieceType.BISHOP: DIAGONAL,
    PieceType.QUEEN: ALL_DIRECTIONS,
}

# (single step, double step) and (capture offset, column delta) per color.
_PAWN_PUSHES: dict[Color, tuple[int, int]] = {
    Color.WHITE: (8, 16),
    Color.BLACK: (-8, -16),
}
_PAWN_CAPTURES: dict[Color, tuple[tuple[int, int], ...]] = {
    Color.WHITE: ((9, 1), (7, -1)),
    Color.BLACK: ((-9, -1), (-7, 1)),
}


class MoveGenerator:
    """Generates destination squares for pieces on a :class:`Board`.

    The generator only reads the board. The piece standing on the queried
    square decides which colour counts as friendly.
    """

    __slots__ = ("_board", "_geometry")

    def __init__(self, board: Board, geometry: GeometryTable = GEOMETRY) -> None:
        self._board = board
        self._geometry = geometry

    # -- Public API ---------------------------------------------------------

    def legal_destinations(self, sq: Square) -> list[Square]:
        """Ordered destinations for the piece on *sq*."""
        piece = self._board[check_square(sq)]
        if piece is None:
            raise EmptySquareError(f"No piece on square: {sq!r}")

        moves: list[Square] = []
        ptype = piece.piece_type
        if ptype.is_sliding:
            self._gen_sliding(sq, piece, _SLIDING_DIRECTIONS[ptype], moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_knight(sq, moves)
        elif ptype == PieceType.PAWN:
            self._gen_pawn(sq, piece, moves)
        else:
            self._gen_king(sq, piece, moves)
        return moves

    def generate_moves(self, color: Color) -> list[Move]:
        """Every (source, destination) pair available to *color*."""
        moves: list[Move] = []
        for sq in self._board.all_pieces(color):
            moves.extend(Move(sq, to_sq) for to_sq in self.legal_destinations(sq))
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_sliding(
        self,
        sq: Square,
        piece: Piece,
        directions: range,
        moves: list[Square],
    ) -> None:
        board = self._board
        for direction in directions:
            for to_sq in self._geometry.ray(sq, direction):
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.color != piece.color:
                    moves.append(to_sq)
                break

    def _gen_knight(self, sq: Square, moves: list[Square]) -> None:
        # Friendly targets are not filtered here; the move applicator
        # rejects them with SelfCaptureError.
        origin = Position.from_square(sq)
        for delta in KNIGHT_OFFSETS:
            target = origin + delta
            if target.in_bounds:
                moves.append(target.to_square())

    def _gen_pawn(self, sq: Square, piece: Piece, moves: list[Square]) -> None:
        board = self._board
        single, double = _PAWN_PUSHES[piece.color]

        one_step = sq + single
        if is_valid_square(one_step) and board.is_empty(one_step):
            moves.append(one_step)
            two_step = sq + double
            if (
                piece.moves_made == 0
                and is_valid_square(two_step)
                and board.is_empty(two_step)
            ):
                moves.append(two_step)

        col = col_of(sq)
        for offset, dcol in _PAWN_CAPTURES[piece.color]:
            cap_sq = sq + offset
            if not (is_valid_square(cap_sq) and 0 <= col + dcol < BOARD_SIZE):
                continue
            target = board[cap_sq]
            if target is not None and target.color != piece.color:
                moves.append(cap_sq)

    def _gen_king(self, sq: Square, piece: Piece, moves: list[Square]) -> None:
        board = self._board
        geometry = self._geometry
        for direction in ALL_DIRECTIONS:
            if geometry.distance(sq, direction) == 0:
                continue
            to_sq = sq + geometry.offsets[direction]
            target = board[to_sq]
            if target is None or target.color != piece.color:
                moves.append(to_sq)


def legal_destinations(board: Board, sq: Square) -> list[Square]:
    """Destinations for the piece on *sq* using the shared geometry table."""
    return MoveGenerator(board).legal_destinations(sq)
