"""Qt bridge that lets the rules core ask the GUI for a promotion piece."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, Qt, pyqtSignal, pyqtSlot
from PyQt6.QtWidgets import QDialog, QWidget

from chessray.core.enums import Color, Role
from chessray.core.promotion import PromotionSelector
from chessray.settings import AppSettings
from chessray.ui.promotion_dialog import PromotionDialog

if TYPE_CHECKING:
    from chessray.core.piece import Piece
    from chessray.core.types import Square

_LOGGER = logging.getLogger(__name__)

AskCallback = Callable[[Color, "QWidget | None"], "Role | None"]


class _PendingAnswer:
    """One promotion request crossing from a worker thread to the GUI.

    Exactly one side settles the request: the GUI thread with an answer, or
    the worker when it stops waiting. Whoever comes second learns it lost.
    """

    __slots__ = ("color", "role", "done", "_lock", "_abandoned")

    def __init__(self, color: Color) -> None:
        self.color = color
        self.role: Role | None = None
        self.done = threading.Event()
        self._lock = threading.Lock()
        self._abandoned = False

    @property
    def abandoned(self) -> bool:
        with self._lock:
            return self._abandoned

    def answer(self, role: Role | None) -> bool:
        """Record *role*; ``False`` if the worker had already given up."""
        with self._lock:
            if self._abandoned:
                return False
            self.role = role
            self.done.set()
            return True

    def abandon(self) -> bool:
        """Give up waiting; ``False`` if an answer had already arrived."""
        with self._lock:
            if self.done.is_set():
                return False
            self._abandoned = True
            return True


class _PromotionRequester(QObject):
    """Thread-affine helper; its slots always run on the GUI thread."""

    requested = pyqtSignal(object)
    cancelled = pyqtSignal(object)

    def __init__(self, ask: AskCallback | None, parent_widget: QWidget | None) -> None:
        super().__init__()
        self._ask = ask
        self._parent_widget = parent_widget
        self._dialog: PromotionDialog | None = None
        self._current: _PendingAnswer | None = None
        self.requested.connect(
            self._on_requested, Qt.ConnectionType.QueuedConnection
        )
        self.cancelled.connect(
            self._on_cancelled, Qt.ConnectionType.QueuedConnection
        )

    def ask_now(self, color: Color) -> Role | None:
        if self._ask is not None:
            return self._ask(color, self._parent_widget)

        dialog = PromotionDialog(color, self._parent_widget)
        self._dialog = dialog
        try:
            if dialog.exec() == QDialog.DialogCode.Accepted:
                return dialog.selected
            return None
        finally:
            self._dialog = None

    @pyqtSlot(object)
    def _on_requested(self, pending: object) -> None:
        if not isinstance(pending, _PendingAnswer):
            return
        if pending.abandoned:  # caller already gave up
            return

        self._current = pending
        try:
            role = self.ask_now(pending.color)
        finally:
            self._current = None

        if not pending.answer(role) and role is not None:
            _LOGGER.warning(
                "Promotion answer %s arrived after the timeout; dropped",
                role.name.lower(),
            )

    @pyqtSlot(object)
    def _on_cancelled(self, pending: object) -> None:
        # Close the dialog still showing for a request the worker abandoned.
        if pending is self._current and self._dialog is not None:
            self._dialog.reject()


class QtPromotionSelector(PromotionSelector):
    """Promotion selector backed by :class:`PromotionDialog`.

    Must be created on the GUI thread. Called from that thread the dialog is
    shown directly; called from a worker thread the request is queued to the
    GUI thread and the caller blocks until an answer arrives or the timeout
    expires, in which case the configured default role is used and a dialog
    still open for the request is closed.
    """

    __slots__ = ("_requester", "_gui_thread", "_timeout_s", "_default")

    def __init__(
        self,
        parent_widget: QWidget | None = None,
        settings: AppSettings | None = None,
        ask: AskCallback | None = None,
    ) -> None:
        s = settings if settings is not None else AppSettings()
        self._requester = _PromotionRequester(ask, parent_widget)
        self._gui_thread = threading.current_thread()
        self._timeout_s = s.promotion_timeout_s
        self._default = s.default_promotion

    def select(self, piece: Piece, destination: Square) -> Role | None:
        if threading.current_thread() is self._gui_thread:
            role = self._requester.ask_now(piece.color)
            return role if role is not None else self._default

        pending = _PendingAnswer(piece.color)
        self._requester.requested.emit(pending)
        if not pending.done.wait(self._timeout_s) and pending.abandon():
            self._requester.cancelled.emit(pending)
            _LOGGER.warning(
                "No promotion answer within %.1fs; using %s",
                self._timeout_s,
                self._default.name.lower(),
            )
            return self._default
        return pending.role if pending.role is not None else self._default
