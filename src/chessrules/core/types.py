"""Square type alias, board coordinates and helpers.

Board layout (row-major, row 0 = rank 1):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chessrules.core.errors import OutOfBoundsError

Square: TypeAlias = int  # 0–63

BOARD_SIZE = 8
SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE


def is_valid_square(sq: object) -> bool:
    """Check whether *sq* is an integer square index in [0, 64)."""
    return isinstance(sq, int) and not isinstance(sq, bool) and 0 <= sq < SQUARE_COUNT


def check_square(sq: object) -> Square:
    """Return *sq* unchanged, or raise :class:`OutOfBoundsError`."""
    if not is_valid_square(sq):
        raise OutOfBoundsError(f"Square index out of range: {sq!r}")
    return sq  # type: ignore[return-value]


def row_of(sq: Square) -> int:
    """Row index 0–7 (rank 1–8)."""
    return sq >> 3


def col_of(sq: Square) -> int:
    """Column index 0–7 (file a–h)."""
    return sq & 7


def make_square(row: int, col: int) -> Square:
    """Create square from row (0–7) and col (0–7)."""
    return row * BOARD_SIZE + col


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return chr(ord("a") + col_of(sq)) + str(row_of(sq) + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 28."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(int(name[1]) - 1, ord(name[0]) - ord("a"))


@dataclass(frozen=True, slots=True)
class Position:
    """A (row, col) pair.

    Components may leave the board transiently while offsets are being
    added; :attr:`in_bounds` tells whether the pair names a real square.
    """

    row: int
    col: int

    @classmethod
    def from_square(cls, sq: Square) -> Position:
        check_square(sq)
        return cls(row_of(sq), col_of(sq))

    @property
    def in_bounds(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def to_square(self) -> Square:
        if not self.in_bounds:
            raise OutOfBoundsError(f"Position off the board: {self!r}")
        return make_square(self.row, self.col)

    def __add__(self, delta: tuple[int, int]) -> Position:
        drow, dcol = delta
        return Position(self.row + drow, self.col + dcol)

    def __str__(self) -> str:
        if self.in_bounds:
            return square_name(self.to_square())
        return f"({self.row}, {self.col})"


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
