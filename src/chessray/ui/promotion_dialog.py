"""Promotion dialog — lets user pick the promotion piece."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chessray.core.enums import Color, Role
from chessray.core.piece import Piece
from chessray.core.promotion import DEFAULT_PROMOTION, PROMOTABLE_ROLES


class PromotionDialog(QDialog):
    """Modal dialog to select promotion piece role."""

    def __init__(self, color: Color, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setFixedSize(340, 130)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )
        self.setWindowTitle("Promotion")

        self._selected: Role = DEFAULT_PROMOTION
        self._buttons: dict[Role, QPushButton] = {}

        layout = QVBoxLayout(self)
        label = QLabel("Choose promotion piece:")
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setFont(QFont("Sans Serif", 11))
        layout.addWidget(label)

        btn_row = QHBoxLayout()
        for role in PROMOTABLE_ROLES:
            btn = QPushButton(Piece(color, role).symbol)
            btn.setFont(QFont("Sans Serif", 28))
            btn.setFixedSize(68, 68)
            btn.setToolTip(role.name.capitalize())
            btn.clicked.connect(lambda checked, r=role: self._choose(r))
            btn_row.addWidget(btn)
            self._buttons[role] = btn

        layout.addLayout(btn_row)

    def _choose(self, role: Role) -> None:
        self._selected = role
        self.accept()

    def button(self, role: Role) -> QPushButton:
        return self._buttons[role]

    @property
    def selected(self) -> Role:
        return self._selected

    @staticmethod
    def ask(color: Color, parent: QWidget | None = None) -> Role | None:
        """Show the dialog and return the chosen role, or ``None`` on cancel."""
        dlg = PromotionDialog(color, parent)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            return dlg.selected
        return None
