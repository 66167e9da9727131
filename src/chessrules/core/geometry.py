"""Precomputed move geometry: direction offsets and distances to the edge.

The table is built once at import time and never mutated. For every
square, ``squares_to_edge[sq][i]`` is the number of steps a piece can take
in direction ``i`` before leaving the board, and ``DIRECTION_OFFSETS[i]``
is the change in square index for one such step. The two sequences share
their indexing: entry ``i`` of both always describes the same direction.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from chessrules.core.types import BOARD_SIZE, SQUARE_COUNT, Square, col_of, row_of


class Direction(IntEnum):
    """Index into :data:`DIRECTION_OFFSETS` and each edge-distance row."""

    N = 0  # row + 1
    S = 1  # row - 1
    W = 2  # col - 1
    E = 3  # col + 1
    NW = 4  # row + 1, col - 1
    SE = 5  # row - 1, col + 1
    NE = 6  # row + 1, col + 1
    SW = 7  # row - 1, col - 1


DIRECTION_OFFSETS: tuple[int, ...] = (8, -8, -1, 1, 7, -7, 9, -9)

ORTHOGONAL: range = range(Direction.N, Direction.NW)
DIAGONAL: range = range(Direction.NW, len(Direction))
ALL_DIRECTIONS: range = range(len(Direction))


def _edge_distances(sq: Square) -> tuple[int, ...]:
    row = row_of(sq)
    col = col_of(sq)
    last = BOARD_SIZE - 1

    up = last - row
    down = row
    left = col
    right = last - col

    return (
        up,
        down,
        left,
        right,
        min(up, left),
        min(down, right),
        min(up, right),
        min(down, left),
    )


@dataclass(frozen=True, slots=True)
class GeometryTable:
    """Per-square edge distances plus the shared direction offsets."""

    squares_to_edge: tuple[tuple[int, ...], ...]
    offsets: tuple[int, ...] = DIRECTION_OFFSETS

    @classmethod
    def build(cls) -> GeometryTable:
        return cls(tuple(_edge_distances(sq) for sq in range(SQUARE_COUNT)))

    def distance(self, sq: Square, direction: int) -> int:
        """Steps available from *sq* in *direction* before the edge."""
        return self.squares_to_edge[sq][direction]

    def ray(self, sq: Square, direction: int) -> tuple[Square, ...]:
        """Squares from *sq* (exclusive) to the edge along *direction*."""
        offset = self.offsets[direction]
        return tuple(
            sq + offset * step for step in range(1, self.distance(sq, direction) + 1)
        )


GEOMETRY = GeometryTable.build()
