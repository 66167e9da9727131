"""Tests for square helpers, Position, Piece, Move and the enums."""

import pytest

from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.errors import ChessRulesError, MalformedFenError, OutOfBoundsError
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1, E2, E4, H8,
    Position,
    check_square,
    col_of,
    is_valid_square,
    make_square,
    parse_square,
    row_of,
    square_name,
)


class TestSquares:
    def test_layout(self) -> None:
        assert A1 == 0
        assert H8 == 63
        assert make_square(3, 4) == E4
        assert row_of(E4) == 3
        assert col_of(E4) == 4

    def test_names(self) -> None:
        assert square_name(E4) == "e4"
        assert parse_square("h8") == H8

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "e44"])
    def test_bad_names(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)

    @pytest.mark.parametrize("sq", [-1, 64, True, 3.0, "e4", None])
    def test_invalid_squares(self, sq: object) -> None:
        assert not is_valid_square(sq)
        with pytest.raises(OutOfBoundsError):
            check_square(sq)

    def test_out_of_bounds_is_chess_error(self) -> None:
        assert issubclass(OutOfBoundsError, ChessRulesError)


class TestPosition:
    def test_round_trip_square(self) -> None:
        assert Position.from_square(E4) == Position(3, 4)
        assert Position(3, 4).to_square() == E4

    def test_offset(self) -> None:
        assert Position(0, 0) + (2, 1) == Position(2, 1)
        assert not (Position(0, 0) + (-1, 0)).in_bounds

    def test_off_board_to_square(self) -> None:
        with pytest.raises(OutOfBoundsError):
            Position(8, 0).to_square()

    def test_str(self) -> None:
        assert str(Position(0, 0)) == "a1"
        assert str(Position(-1, 2)) == "(-1, 2)"


class TestPiece:
    def test_from_char(self) -> None:
        piece = Piece.from_char("n")
        assert piece.color == Color.BLACK
        assert piece.piece_type == PieceType.KNIGHT
        assert piece.moves_made == 0
        assert not piece.has_moved
        assert str(piece) == "n"

    def test_from_char_with_position(self) -> None:
        assert Piece.from_char("K", Position(0, 4)).position == Position(0, 4)

    def test_bad_char(self) -> None:
        with pytest.raises(MalformedFenError):
            Piece.from_char("x")

    def test_symbol(self) -> None:
        assert Piece(Color.WHITE, PieceType.QUEEN).symbol == "♕"

    def test_same_kind_ignores_state(self) -> None:
        moved = Piece(Color.WHITE, PieceType.PAWN, Position(3, 4), moves_made=1)
        assert moved.same_kind(Piece(Color.WHITE, PieceType.PAWN))
        assert not moved.same_kind(Piece(Color.BLACK, PieceType.PAWN))


class TestMove:
    def test_uci(self) -> None:
        assert Move(E2, E4).uci == "e2e4"
        assert Move.from_uci("e2e4") == Move(E2, E4)

    def test_bad_uci(self) -> None:
        with pytest.raises(ValueError):
            Move.from_uci("e2e")


class TestEnums:
    def test_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

    def test_sliding(self) -> None:
        assert [p for p in PieceType if p.is_sliding] == [
            PieceType.BISHOP,
            PieceType.ROOK,
            PieceType.QUEEN,
        ]

    def test_win_for(self) -> None:
        assert GameResult.win_for(Color.BLACK) == GameResult.BLACK_WINS
