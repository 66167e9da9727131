"""GameController — drives one game on top of the rules core.

Coordinates: TurnController, Clock, piece selection.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult
from chessrules.core.errors import GameNotStartedError, GameOverError, MoveError
from chessrules.core.notation import board_from_fen
from chessrules.core.piece import Piece
from chessrules.core.rules import MoveResult, TurnController
from chessrules.core.types import Square, square_name
from chessrules.game.clock import Clock
from chessrules.game.interfaces import GamePhase, GameSettings, IClock

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveResult], None]
CaptureCallback = Callable[[Square, Piece], None]  # square, captured piece
TurnCallback = Callable[[Color], None]  # new side to move
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_capture: list[CaptureCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Runs a game: selection, move validation, clock, notifications.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread), one input event at a time.
    """

    __slots__ = (
        "_settings",
        "_turns",
        "_clock",
        "_phase",
        "_result",
        "_selected",
        "_history",
        "events",
    )

    def __init__(self, settings: GameSettings | None = None) -> None:
        self._settings = settings if settings is not None else GameSettings()
        self._turns = TurnController(board_from_fen(self._settings.start_fen))
        self._clock: IClock | None = None
        self._phase = GamePhase.NOT_STARTED
        self._result = GameResult.IN_PROGRESS
        self._selected: Square | None = None
        self._history: list[MoveResult] = []
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def board(self) -> Board:
        return self._turns.board

    @property
    def side_to_move(self) -> Color:
        return self._turns.side_to_move

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    @property
    def accepts_input(self) -> bool:
        return self._phase == GamePhase.AWAITING_MOVE

    @property
    def clock(self) -> IClock | None:
        return self._clock

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def history(self) -> list[MoveResult]:
        return list(self._history)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(
        self,
        settings: GameSettings | None = None,
        clock: IClock | None = None,
    ) -> None:
        """Set up a new game; white moves first.

        *clock* overrides the clock built from the settings' time control.
        """
        if settings is not None:
            self._settings = settings

        board = board_from_fen(self._settings.start_fen)
        self._turns = TurnController(board, Color.WHITE)

        if clock is not None:
            self._clock = clock
        elif self._settings.time_control is not None:
            self._clock = Clock(self._settings.time_control)
        else:
            self._clock = None

        self._result = GameResult.IN_PROGRESS
        self._selected = None
        self._history = []

        _LOGGER.info(
            "New game from %r (time control: %s)",
            self._settings.start_fen,
            self._settings.time_control,
        )
        self._set_phase(GamePhase.AWAITING_MOVE)
        if self._clock is not None:
            self._clock.start(Color.WHITE)

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_destinations(self, sq: Square) -> list[Square]:
        return self._turns.legal_destinations(sq)

    # ── Pointer input ────────────────────────────────────────────────────

    def select(self, sq: Square) -> list[Square]:
        """Handle a press on *sq* and return the squares to highlight.

        Pressing a piece of the side to move selects it; pressing the
        selected square again deselects it. Any other press keeps the
        current selection.
        """
        if not self.accepts_input:
            return []

        piece = self.board[sq]
        if self._selected is not None and sq == self._selected:
            _LOGGER.debug("Deselected %s", square_name(sq))
            self._selected = None
            return []

        if piece is not None and piece.color == self.side_to_move:
            _LOGGER.debug("Selected %s on %s", piece.piece_type.name, square_name(sq))
            self._selected = sq
            return self.legal_destinations(sq)

        if self._selected is None:
            return []
        return self.legal_destinations(self._selected)

    def release(self, sq: Square) -> MoveResult | None:
        """Handle a release on *sq*: move the selected piece there if legal.

        Releasing on the source square, a friendly piece or an illegal target
        returns ``None`` and leaves the board and selection untouched.
        """
        source = self._selected
        if source is None or not self.accepts_input or sq == source:
            return None

        target = self.board[sq]
        if target is not None and target.color == self.side_to_move:
            return None
        if sq not in self.legal_destinations(source):
            return None

        return self.submit_move(source, sq)

    # ── Move submission ──────────────────────────────────────────────────

    def submit_move(self, source: Square, destination: Square) -> MoveResult:
        """Validate and apply a move; raises on rejection."""
        if self.is_game_over:
            raise GameOverError(f"Game is over: {self._result.name}")
        if self._phase == GamePhase.NOT_STARTED:
            raise GameNotStartedError("Call new_game() before submitting moves")

        mover = self.side_to_move
        if self._clock is not None:
            if self._clock.is_flag_fallen(mover):
                self._finish(GameResult.win_for(mover.opposite))
                raise GameOverError(f"{mover} ran out of time")

        try:
            result = self._turns.attempt_move(source, destination)
        except MoveError as exc:
            _LOGGER.warning(
                "Rejected move %s%s: %s",
                square_name(source),
                square_name(destination),
                exc,
            )
            raise

        if self._clock is not None:
            self._clock.add_increment(mover)
            self._clock.switch()

        self._selected = None
        self._history.append(result)
        if result.captured is not None:
            _LOGGER.debug(
                "%s %s captures %s", mover, result.move, result.captured.piece_type.name
            )
        else:
            _LOGGER.debug("%s %s", mover, result.move)
        self._emit_move(result)
        return result

    def check_flags(self) -> GameResult:
        """End the game if the side to move has run out of time."""
        if self.is_game_over or self._clock is None:
            return self._result
        if self._phase == GamePhase.AWAITING_MOVE and self._clock.is_flag_fallen(
            self.side_to_move
        ):
            self._finish(GameResult.win_for(self.side_to_move.opposite))
        return self._result

    # ── Internal helpers ─────────────────────────────────────────────────

    def _finish(self, result: GameResult) -> None:
        if self._clock is not None:
            self._clock.stop()
        self._result = result
        self._selected = None
        _LOGGER.info("Game over: %s", result.name)
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_move(self, result: MoveResult) -> None:
        for cb in self.events.on_move:
            cb(result)
        if result.captured is not None:
            for cap_cb in self.events.on_capture:
                cap_cb(result.to_sq, result.captured)
        for turn_cb in self.events.on_turn_changed:
            turn_cb(result.side_to_move)

    def _set_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
