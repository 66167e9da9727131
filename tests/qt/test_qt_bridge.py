"""Tests for the Qt signal bridge."""

from __future__ import annotations

from PyQt6.QtTest import QSignalSpy

from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import B5, E2, E3, E4, E5, E7, F1
from chessrules.game.clock import Clock
from chessrules.game.controller import GameController
from chessrules.game.interfaces import GameSettings, TimeControl
from chessrules.qt_bridge import GameSignals


def _started(settings: GameSettings | None = None) -> GameController:
    ctrl = GameController(settings)
    ctrl.new_game()
    return ctrl


class TestGameSignals:
    def test_move_and_turn_signals(self, qapp: object) -> None:
        signals = GameSignals(_started())
        moved = QSignalSpy(signals.piece_moved)
        turned = QSignalSpy(signals.turn_changed)
        captured = QSignalSpy(signals.piece_captured)

        signals.controller.submit_move(E2, E4)

        assert len(moved) == 1
        assert moved[0][0] == E2
        assert moved[0][1] == E4
        assert len(turned) == 1
        assert turned[0][0] == Color.BLACK
        assert len(captured) == 0

    def test_capture_signal(self, qapp: object) -> None:
        ctrl = _started()
        signals = GameSignals(ctrl)
        captured = QSignalSpy(signals.piece_captured)

        ctrl.submit_move(E2, E4)
        ctrl.submit_move(E7, E5)
        ctrl.board[B5] = Piece(Color.BLACK, PieceType.KNIGHT)
        ctrl.submit_move(F1, B5)

        assert len(captured) == 1
        assert captured[0][0] == B5

    def test_press_and_release(self, qapp: object) -> None:
        signals = GameSignals(_started())
        highlights = QSignalSpy(signals.highlights_changed)

        signals.press(E2)
        signals.release(E4)

        assert len(highlights) == 2
        assert list(highlights[0][0]) == [E3, E4]
        assert list(highlights[1][0]) == []
        assert signals.controller.side_to_move == Color.BLACK

    def test_poll_clock_emits_game_over(self, qapp: object) -> None:
        ctrl = _started(GameSettings(time_control=TimeControl.minutes(1)))
        signals = GameSignals(ctrl)
        over = QSignalSpy(signals.game_over)
        clock = ctrl.clock
        assert isinstance(clock, Clock)

        clock.set_remaining(Color.WHITE, 0.0)
        signals.poll_clock()

        assert len(over) == 1
        assert over[0][0] == GameResult.BLACK_WINS

    def test_disconnect(self, qapp: object) -> None:
        ctrl = _started()
        signals = GameSignals(ctrl)
        moved = QSignalSpy(signals.piece_moved)

        signals.disconnect_controller()
        ctrl.submit_move(E2, E4)

        assert len(moved) == 0
        assert ctrl.events.on_move == []
