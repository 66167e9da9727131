"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import replace

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import (
    SQUARE_COUNT,
    Position,
    Square,
    check_square,
    make_square,
)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board.

    Each cell holds a :class:`Piece` or ``None``. Storing a piece through
    the board also rewrites the piece's ``position`` so the two never
    disagree.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * SQUARE_COUNT

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[check_square(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        check_square(sq)
        if piece is not None:
            piece.position = Position.from_square(sq)
        self._squares[sq] = piece

    def piece_at(self, sq: Square) -> Piece | None:
        """Occupant of *sq*, or ``None`` for an empty square."""
        return self[sq]

    def set(self, sq: Square, piece: Piece | None) -> None:
        """Place *piece* on *sq* (``None`` empties the square)."""
        self[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, piece in enumerate(self._squares)
            if piece is not None
            and piece.color == color
            and piece.piece_type == piece_type
        ]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [
            sq
            for sq, piece in enumerate(self._squares)
            if piece is not None and piece.color == color
        ]

    def occupied(self) -> list[Square]:
        """All occupied squares, in square order."""
        return [sq for sq, piece in enumerate(self._squares) if piece is not None]

    def __iter__(self) -> Iterator[Piece | None]:
        return iter(self._squares)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        """Independent copy; pieces are copied too since they are mutable."""
        b = Board()
        b._squares = [
            replace(piece) if piece is not None else None for piece in self._squares
        ]
        return b

    def clear(self) -> None:
        self._squares = [None] * SQUARE_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col in range(8):
            b[make_square(1, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(6, col)] = Piece(Color.BLACK, PieceType.PAWN)

        for col, pt in enumerate(_BACK_RANK):
            b[make_square(0, col)] = Piece(Color.WHITE, pt)
            b[make_square(7, col)] = Piece(Color.BLACK, pt)
        return b

    @classmethod
    def from_fen(cls, fen: str) -> Board:
        """Board from the piece-placement field of *fen*."""
        from chessrules.core.notation import board_from_fen

        return board_from_fen(fen)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(7, -1, -1):
            cells = []
            for col in range(8):
                p = self._squares[make_square(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
