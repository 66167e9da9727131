"""Game-layer configuration and the clock contract.

:class:`GameController` only talks to :class:`IClock`, so a front end can
hand it a clock driven by its own timer.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto

from chessrules.core.enums import Color
from chessrules.core.notation import STARTING_FEN


class GamePhase(IntEnum):
    """Lifecycle of a :class:`GameController`."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


@dataclass(frozen=True, slots=True)
class TimeControl:
    """Budget per side plus a Fischer increment, both in seconds."""

    initial_seconds: float
    increment_seconds: float = 0.0

    def __post_init__(self) -> None:
        if not self.initial_seconds > 0:
            raise ValueError(f"Initial time must be positive: {self.initial_seconds!r}")
        if self.increment_seconds < 0:
            raise ValueError(f"Increment must not be negative: {self.increment_seconds!r}")

    @classmethod
    def minutes(cls, minutes: float, increment_seconds: float = 0.0) -> TimeControl:
        """E.g. ``TimeControl.minutes(3, 2)`` for 3+2 blitz."""
        return cls(minutes * 60, increment_seconds)

    @classmethod
    def unlimited(cls) -> TimeControl:
        return cls(math.inf)

    @property
    def is_unlimited(self) -> bool:
        return math.isinf(self.initial_seconds)

    def __str__(self) -> str:
        if self.is_unlimited:
            return "unlimited"
        text = f"{self.initial_seconds / 60:g}m"
        if self.increment_seconds:
            text += f"+{self.increment_seconds:g}s"
        return text


@dataclass
class GameSettings:
    """What :meth:`GameController.new_game` needs to set up a game."""

    start_fen: str = STARTING_FEN
    time_control: TimeControl | None = None  # no clock


class IClock(ABC):
    """Two per-side countdowns of which at most one runs."""

    @abstractmethod
    def start(self, color: Color) -> None:
        """Run *color*'s countdown and pause the other."""

    @abstractmethod
    def switch(self) -> None: ...

    @abstractmethod
    def stop(self) -> None:
        """Pause both countdowns."""

    @abstractmethod
    def remaining(self, color: Color) -> float: ...

    @abstractmethod
    def add_increment(self, color: Color) -> None: ...

    def is_flag_fallen(self, color: Color) -> bool:
        return self.remaining(color) <= 0.0
