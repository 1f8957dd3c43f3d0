"""Game management layer — the controller that owns the live position.

Quick start::

    from chessray.game import GameController

    ctrl = GameController()
    ctrl.submit_text("E2 E4")
"""

from chessray.game.controller import GameController, GameEvents, SubmitResult

__all__ = [
    "GameController",
    "GameEvents",
    "SubmitResult",
]
