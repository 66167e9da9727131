"""Game management layer — controller, clock, settings.

Quick start::

    from chessrules.game import GameController, GameSettings, TimeControl

    ctrl = GameController(GameSettings(time_control=TimeControl.minutes(10)))
    ctrl.new_game()
    ctrl.select(12)         # highlight squares for the e2 pawn
    ctrl.release(28)        # e2-e4
"""

from chessrules.game.clock import Clock, SideTimer, format_clock
from chessrules.game.controller import GameController, GameEvents
from chessrules.game.interfaces import GamePhase, GameSettings, IClock, TimeControl

__all__ = [
    # Interfaces / config
    "GamePhase",
    "GameSettings",
    "IClock",
    "TimeControl",
    # Concrete
    "Clock",
    "GameController",
    "GameEvents",
    "SideTimer",
    "format_clock",
]
