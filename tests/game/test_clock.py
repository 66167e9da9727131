"""Tests for SideTimer, Clock and TimeControl."""

import math

import pytest

from chessrules.core.enums import Color
from chessrules.game.clock import Clock, SideTimer, format_clock
from chessrules.game.interfaces import TimeControl


class FakeTime:
    """Manually advanced stand-in for ``time.monotonic``."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_time() -> FakeTime:
    return FakeTime()


class TestSideTimer:
    def test_starts_paused(self, fake_time: FakeTime) -> None:
        timer = SideTimer(60, fake_time)
        fake_time.advance(10)
        assert timer.paused
        assert timer.remaining() == 60

    def test_counts_only_while_unpaused(self, fake_time: FakeTime) -> None:
        timer = SideTimer(60, fake_time)
        timer.unpause()
        fake_time.advance(10)
        timer.pause()
        fake_time.advance(100)
        assert timer.elapsed() == 10
        timer.unpause()
        fake_time.advance(5)
        assert timer.remaining() == 45

    def test_finishes_at_zero(self, fake_time: FakeTime) -> None:
        timer = SideTimer(60, fake_time)
        timer.unpause()
        fake_time.advance(75)
        assert timer.finished()
        assert timer.remaining() == 0.0

    def test_repeated_unpause_keeps_start(self, fake_time: FakeTime) -> None:
        timer = SideTimer(60, fake_time)
        timer.unpause()
        fake_time.advance(10)
        timer.unpause()
        assert timer.elapsed() == 10


class TestClock:
    def test_initial_state(self, fake_time: FakeTime) -> None:
        clock = Clock(TimeControl(300), fake_time)
        assert clock.remaining(Color.WHITE) == 300
        assert clock.remaining(Color.BLACK) == 300
        assert not clock.is_running
        assert clock.active_color is None

    def test_only_active_side_ticks(self, fake_time: FakeTime) -> None:
        clock = Clock(TimeControl(300), fake_time)
        clock.start(Color.WHITE)
        fake_time.advance(20)
        assert clock.is_running
        assert clock.remaining(Color.WHITE) == 280
        assert clock.remaining(Color.BLACK) == 300

    def test_switch_pauses_mover_and_resumes_opponent(self, fake_time: FakeTime) -> None:
        clock = Clock(TimeControl(300), fake_time)
        clock.start(Color.WHITE)
        fake_time.advance(20)
        clock.switch()
        fake_time.advance(30)
        assert clock.active_color == Color.BLACK
        assert clock.timer(Color.WHITE).paused
        assert clock.remaining(Color.WHITE) == 280
        assert clock.remaining(Color.BLACK) == 270

    def test_switch_before_start_is_noop(self) -> None:
        clock = Clock(TimeControl(300))
        clock.switch()
        assert clock.active_color is None

    def test_stop_freezes_both(self, fake_time: FakeTime) -> None:
        clock = Clock(TimeControl(300), fake_time)
        clock.start(Color.BLACK)
        fake_time.advance(5)
        clock.stop()
        fake_time.advance(50)
        assert not clock.is_running
        assert clock.remaining(Color.BLACK) == 295
        clock.switch()
        assert not clock.is_running

    def test_increment(self, fake_time: FakeTime) -> None:
        clock = Clock(TimeControl(300, 5), fake_time)
        clock.start(Color.WHITE)
        fake_time.advance(10)
        clock.add_increment(Color.WHITE)
        assert clock.remaining(Color.WHITE) == 295

    def test_flag(self, fake_time: FakeTime) -> None:
        clock = Clock(TimeControl.minutes(1), fake_time)
        clock.start(Color.WHITE)
        assert not clock.is_flag_fallen(Color.WHITE)
        fake_time.advance(61)
        assert clock.is_flag_fallen(Color.WHITE)
        assert not clock.is_flag_fallen(Color.BLACK)

    def test_set_remaining_on_running_side(self, fake_time: FakeTime) -> None:
        clock = Clock(TimeControl(300), fake_time)
        clock.start(Color.WHITE)
        fake_time.advance(100)
        clock.set_remaining(Color.WHITE, 0.0)
        assert clock.is_flag_fallen(Color.WHITE)

    def test_unlimited_never_falls(self, fake_time: FakeTime) -> None:
        clock = Clock(TimeControl.unlimited(), fake_time)
        clock.start(Color.WHITE)
        fake_time.advance(10**9)
        assert clock.is_unlimited
        assert not clock.is_flag_fallen(Color.WHITE)

    def test_real_time_source(self) -> None:
        clock = Clock(TimeControl(300))
        clock.start(Color.WHITE)
        assert clock.remaining(Color.WHITE) <= 300


class TestTimeControl:
    def test_minutes(self) -> None:
        assert TimeControl.minutes(3, 2) == TimeControl(180, 2)

    @pytest.mark.parametrize(
        ("control", "text"),
        [
            (TimeControl.minutes(3, 2), "3m+2s"),
            (TimeControl.minutes(10), "10m"),
            (TimeControl.unlimited(), "unlimited"),
        ],
    )
    def test_str(self, control: TimeControl, text: str) -> None:
        assert str(control) == text

    def test_hashable(self) -> None:
        assert len({TimeControl(60), TimeControl.minutes(1)}) == 1

    @pytest.mark.parametrize(("initial", "increment"), [(0, 0), (-5, 0), (60, -1)])
    def test_invalid(self, initial: float, increment: float) -> None:
        with pytest.raises(ValueError):
            TimeControl(initial, increment)

    def test_unlimited(self) -> None:
        assert TimeControl.unlimited().is_unlimited
        assert math.isinf(TimeControl.unlimited().initial_seconds)


class TestFormatClock:
    @pytest.mark.parametrize(
        ("seconds", "text"),
        [(0, "00:00"), (59.9, "00:59"), (600, "10:00"), (float("inf"), "--:--")],
    )
    def test_format(self, seconds: float, text: str) -> None:
        assert format_clock(seconds) == text
