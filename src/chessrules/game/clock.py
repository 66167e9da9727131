"""Chess clock built from two pausable countdowns.

After each completed move the mover's countdown is paused and the
opponent's resumed. Nothing here schedules work; a front end polls
:meth:`Clock.remaining` or lets the controller check for flag falls.
"""

from __future__ import annotations

import math
import time
from collections.abc import Callable

from chessrules.core.enums import Color
from chessrules.game.interfaces import IClock, TimeControl

TimeSource = Callable[[], float]


class SideTimer:
    """One side's countdown. Starts paused."""

    __slots__ = ("duration", "_spent", "_resumed_at", "_now")

    def __init__(self, duration: float, now: TimeSource = time.monotonic) -> None:
        self.duration = duration
        self._spent = 0.0
        self._resumed_at: float | None = None
        self._now = now

    @property
    def paused(self) -> bool:
        return self._resumed_at is None

    def pause(self) -> None:
        if self._resumed_at is not None:
            self._spent += self._now() - self._resumed_at
            self._resumed_at = None

    def unpause(self) -> None:
        if self._resumed_at is None:
            self._resumed_at = self._now()

    def elapsed(self) -> float:
        if self._resumed_at is None:
            return self._spent
        return self._spent + self._now() - self._resumed_at

    def remaining(self) -> float:
        return max(0.0, self.duration - self.elapsed())

    def finished(self) -> bool:
        return self.remaining() <= 0.0

    def extend(self, seconds: float) -> None:
        self.duration += seconds

    def set_remaining(self, seconds: float) -> None:
        self.duration = self.elapsed() + seconds


class Clock(IClock):
    """White and black countdowns sharing one :class:`TimeControl`."""

    __slots__ = ("_time_control", "_timers", "_active")

    def __init__(self, time_control: TimeControl, now: TimeSource = time.monotonic) -> None:
        self._time_control = time_control
        self._timers = {
            color: SideTimer(time_control.initial_seconds, now) for color in Color
        }
        self._active: Color | None = None

    @property
    def time_control(self) -> TimeControl:
        return self._time_control

    @property
    def is_unlimited(self) -> bool:
        return self._time_control.is_unlimited

    @property
    def active_color(self) -> Color | None:
        """Side whose countdown runs, or last ran before :meth:`stop`."""
        return self._active

    @property
    def is_running(self) -> bool:
        return self._active is not None and not self._timers[self._active].paused

    def timer(self, color: Color) -> SideTimer:
        return self._timers[color]

    def start(self, color: Color) -> None:
        self._timers[color.opposite].pause()
        self._timers[color].unpause()
        self._active = color

    def switch(self) -> None:
        """Hand the move to the other side; a stopped clock stays stopped."""
        if self._active is None:
            return
        running = self.is_running
        self._timers[self._active].pause()
        self._active = self._active.opposite
        if running:
            self._timers[self._active].unpause()

    def stop(self) -> None:
        for side in self._timers.values():
            side.pause()

    def remaining(self, color: Color) -> float:
        return self._timers[color].remaining()

    def add_increment(self, color: Color) -> None:
        self._timers[color].extend(self._time_control.increment_seconds)

    def set_remaining(self, color: Color, seconds: float) -> None:
        self._timers[color].set_remaining(seconds)


def format_clock(seconds: float) -> str:
    """``mm:ss`` for a clock label, ``--:--`` without a limit."""
    if math.isinf(seconds):
        return "--:--"
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes:02d}:{secs:02d}"
