"""Qt collaborators for the rules core (promotion selection)."""

from chessray.ui.promotion_dialog import PromotionDialog
from chessray.ui.qt_bridge import QtPromotionSelector

__all__ = [
    "PromotionDialog",
    "QtPromotionSelector",
]
