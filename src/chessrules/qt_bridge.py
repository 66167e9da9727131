"""Qt bridge that re-emits game events as signals for a Qt front end."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessrules.core.enums import Color, GameResult
from chessrules.core.piece import Piece
from chessrules.core.rules import MoveResult
from chessrules.core.types import Square
from chessrules.game.controller import GameController
from chessrules.game.interfaces import GamePhase


class GameSignals(QObject):
    """Subscribes to a :class:`GameController` and forwards its events.

    Widgets (board highlights, move/capture sounds, clock labels) connect
    to these signals instead of registering Python callbacks.
    """

    piece_moved = pyqtSignal(int, int)  # from_sq, to_sq
    piece_captured = pyqtSignal(int, object)  # square, captured Piece
    turn_changed = pyqtSignal(object)  # Color
    game_over = pyqtSignal(object)  # GameResult
    phase_changed = pyqtSignal(object)  # GamePhase
    highlights_changed = pyqtSignal(list)  # list[Square]

    def __init__(self, controller: GameController, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._controller = controller
        events = controller.events
        events.on_move.append(self._forward_move)
        events.on_capture.append(self._forward_capture)
        events.on_turn_changed.append(self._forward_turn)
        events.on_game_over.append(self._forward_game_over)
        events.on_phase_changed.append(self._forward_phase)

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── Slots for pointer input ──────────────────────────────────────────

    @pyqtSlot(int)
    def press(self, sq: int) -> None:
        """Forward a press on *sq* and publish the squares to highlight."""
        self.highlights_changed.emit(self._controller.select(sq))

    @pyqtSlot(int)
    def release(self, sq: int) -> None:
        """Forward a release on *sq*; clears highlights after a move."""
        if self._controller.release(sq) is not None:
            self.highlights_changed.emit([])

    @pyqtSlot()
    def poll_clock(self) -> None:
        """Connect to a ``QTimer.timeout`` to detect flag falls."""
        self._controller.check_flags()

    def disconnect_controller(self) -> None:
        """Stop forwarding events from the controller."""
        events = self._controller.events
        for handlers, handler in (
            (events.on_move, self._forward_move),
            (events.on_capture, self._forward_capture),
            (events.on_turn_changed, self._forward_turn),
            (events.on_game_over, self._forward_game_over),
            (events.on_phase_changed, self._forward_phase),
        ):
            if handler in handlers:
                handlers.remove(handler)

    # ── Forwarders ───────────────────────────────────────────────────────

    def _forward_move(self, result: MoveResult) -> None:
        self.piece_moved.emit(result.from_sq, result.to_sq)

    def _forward_capture(self, sq: Square, piece: Piece) -> None:
        self.piece_captured.emit(sq, piece)

    def _forward_turn(self, color: Color) -> None:
        self.turn_changed.emit(color)

    def _forward_game_over(self, result: GameResult) -> None:
        self.game_over.emit(result)

    def _forward_phase(self, phase: GamePhase) -> None:
        self.phase_changed.emit(phase)
