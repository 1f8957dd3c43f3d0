"""GameController — owner of the live position.

Coordinates: move parser, legality checker, check detector.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessray.core.check import CheckReport
from chessray.core.enums import Color
from chessray.core.legality import LegalityChecker, LegalityResult
from chessray.core.move import FormedMove
from chessray.core.notation import position_from_fen
from chessray.core.parser import ParseFailure, parse_move
from chessray.core.position import Position
from chessray.core.promotion import PromotionSelector
from chessray.core.rays import RayTable

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[FormedMove, Position], None]
RejectedCallback = Callable[[LegalityResult], None]
CheckCallback = Callable[[Color, CheckReport], None]  # checked side, report


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class SubmitResult:
    """Outcome of :meth:`GameController.submit_text`.

    Exactly one of ``failure`` (text did not parse) and ``result`` (the
    legality verdict) is set.
    """

    failure: ParseFailure | None = None
    result: LegalityResult | None = None

    @property
    def accepted(self) -> bool:
        return self.result is not None and self.result.legal


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Validates moves, applies accepted ones and notifies listeners.

    Thread-safety: the live position is mutated only here, from a single
    thread. The checker works on private copies.
    """

    __slots__ = ("_table", "_checker", "_position", "events")

    def __init__(
        self,
        table: RayTable | None = None,
        promotion_selector: PromotionSelector | None = None,
    ) -> None:
        self._table = table if table is not None else RayTable.build()
        self._checker = LegalityChecker(self._table, promotion_selector)
        self._position = Position.initial()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return self._position

    @property
    def side_to_move(self) -> Color:
        return self._position.player

    @property
    def checker(self) -> LegalityChecker:
        return self._checker

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        """Reset to the standard setup or to *fen*."""
        self._position = Position.initial() if fen is None else position_from_fen(fen)

    def submit_text(self, text: str) -> SubmitResult:
        """Parse *text* and submit the resulting move."""
        parsed = parse_move(text)
        if isinstance(parsed, ParseFailure):
            _LOGGER.debug("Unparseable move %r: %s", text, parsed.reason)
            return SubmitResult(failure=parsed)
        return SubmitResult(result=self.submit_move(parsed))

    def submit_move(self, move: FormedMove) -> LegalityResult:
        """Check *move*; apply it to the live position if legal."""
        result = self._checker.check(move, self._position)
        if not result.legal:
            self._emit_rejected(result)
            return result

        self._position.apply_move(result.move)
        _LOGGER.debug("Applied %s (%s)", result.move, result.kind.name.lower())
        self._emit_move(result.move)

        # Tell listeners when the side now to move is in check.
        defender = self._position.player
        report = self._checker.detector.inspect(self._position, defender)
        if report.in_check:
            self._emit_check(defender, report)
        return result

    def check_report(self, color: Color | None = None) -> CheckReport:
        """King-safety report for *color* (default: side to move)."""
        side = self._position.player if color is None else color
        return self._checker.detector.inspect(self._position, side)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, move: FormedMove) -> None:
        for cb in self.events.on_move:
            cb(move, self._position)

    def _emit_rejected(self, result: LegalityResult) -> None:
        for cb in self.events.on_rejected:
            cb(result)

    def _emit_check(self, color: Color, report: CheckReport) -> None:
        for cb in self.events.on_check:
            cb(color, report)
