"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.types import Square, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable (source, destination) pair."""

    from_sq: Square
    to_sq: Square

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse e.g. ``'e2e4'``."""
        if len(text) != 4:
            raise ValueError(f"Invalid UCI move: {text!r}")
        return cls(parse_square(text[:2]), parse_square(text[2:]))
