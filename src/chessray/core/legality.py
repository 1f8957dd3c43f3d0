"""Move classification and legality checking.

A candidate move passes through an ordered series of checks; the first one
that fails decides the result:

1. origin and destination differ;
2. the origin holds a piece of the player to move;
3. the destination classifies the move (castle / capture / movement /
   en passant) and the geometry for that kind holds;
4. a pawn reaching the last rank gets a promotion role;
5. applying the move to a scratch copy does not leave the mover in check.

The checker never mutates the position it is given.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessray.core.check import CheckDetector
from chessray.core.enums import MoveKind, RejectReason, Role
from chessray.core.promotion import (
    DEFAULT_PROMOTION,
    PROMOTABLE_ROLES,
    DefaultPromotionSelector,
    PromotionSelector,
)
from chessray.core.rays import RayTableNotBuiltError
from chessray.core.types import BOARD_SIZE, Square, square_name

if TYPE_CHECKING:
    from chessray.core.board import Board
    from chessray.core.move import FormedMove
    from chessray.core.piece import Piece
    from chessray.core.position import Position
    from chessray.core.rays import Ray, RayTable, Rays


_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LegalityResult:
    """Verdict on a candidate move.

    ``move`` is the classified (and, for promotions, augmented) move that the
    caller should apply when ``legal`` is true. ``attackers`` lists the
    squares that would check the mover's king when the move was refused for
    self-check.
    """

    legal: bool
    kind: MoveKind
    move: FormedMove
    attackers: tuple[Square, ...] = ()
    reason: RejectReason = RejectReason.NONE

    def __bool__(self) -> bool:
        return self.legal


# -- Geometry helpers -------------------------------------------------------


def _ray_through(rays: Rays, target: Square) -> Ray | None:
    for ray in rays:
        if target in ray:
            return ray
    return None


def _path_clear(board: Board, ray: Ray, target: Square, *, inclusive: bool) -> bool:
    """Whether every square on *ray* up to *target* is empty."""
    for sq in ray:
        if sq == target:
            return not inclusive or board.is_empty(sq)
        if not board.is_empty(sq):
            return False
    return False


def _is_last_row(sq: Square) -> bool:
    return sq[0] in (0, BOARD_SIZE - 1)


# -- Checker ----------------------------------------------------------------


class LegalityChecker:
    """Validates and classifies moves against a :class:`Position`.

    Args:
        table: Prebuilt ray table shared by every query.
        promotion_selector: Asked for the promotion role when a pawn reaches
            the last rank. Defaults to always choosing a queen.
    """

    __slots__ = ("_table", "_detector", "_selector")

    def __init__(
        self,
        table: RayTable,
        promotion_selector: PromotionSelector | None = None,
    ) -> None:
        if table is None or not table.is_built:
            raise RayTableNotBuiltError("legality checker needs a built ray table")
        self._table = table
        self._detector = CheckDetector(table)
        self._selector = (
            promotion_selector
            if promotion_selector is not None
            else DefaultPromotionSelector()
        )

    @property
    def detector(self) -> CheckDetector:
        return self._detector

    # -- Public API ---------------------------------------------------------

    def check(self, move: FormedMove, position: Position) -> LegalityResult:
        """Decide whether *move* may be played in *position*."""
        if move.origin == move.destination:
            return self._reject(move, MoveKind.UNCLASSIFIED, RejectReason.SAME_SQUARE)

        board = position.board
        mover = board[move.origin]
        if mover is None or not mover.is_owned_by(position.player):
            return self._reject(
                move, MoveKind.UNCLASSIFIED, RejectReason.NOT_YOUR_PIECE
            )

        target = board[move.destination]
        if target is not None and target.is_owned_by(position.player):
            # TODO: castling rules (unmoved king/rook, empty and unattacked
            # transit squares) need a design decision before they can be checked.
            return self._reject(
                move, MoveKind.CASTLE, RejectReason.CASTLING_UNSUPPORTED
            )

        if target is not None:
            kind = MoveKind.CAPTURE
            if not self._is_capture_legal(move, mover, board):
                return self._reject(move, kind, RejectReason.ILLEGAL_CAPTURE)
        elif self._is_movement_legal(move, mover, board):
            kind = MoveKind.MOVEMENT
        elif self._is_en_passant_legal(move, mover, position):
            kind = MoveKind.EN_PASSANT
        else:
            return self._reject(move, MoveKind.MOVEMENT, RejectReason.ILLEGAL_MOVEMENT)

        classified = self._with_promotion(move.classified(kind), mover)

        # Play the move on a scratch copy and look at our own king.
        scratch = position.copy()
        scratch.apply_move(classified)
        report = self._detector.inspect(scratch, mover.color)
        if report.in_check:
            _LOGGER.debug(
                "%s rejected: leaves %s king attacked from %s",
                classified,
                mover.color,
                ", ".join(square_name(sq) for sq in report.attackers),
            )
            return LegalityResult(
                False, kind, classified, report.attackers, RejectReason.SELF_CHECK
            )

        return LegalityResult(True, kind, classified)

    # -- Kind-specific geometry ---------------------------------------------

    def _is_capture_legal(self, move: FormedMove, mover: Piece, board: Board) -> bool:
        if mover.role == Role.PAWN:
            rays = self._table.capture_rays(mover.color, move.origin)
        else:
            rays = self._table.rays(mover.role, mover.color, move.origin)
        ray = _ray_through(rays, move.destination)
        if ray is None:
            return False
        return _path_clear(board, ray, move.destination, inclusive=False)

    def _is_movement_legal(self, move: FormedMove, mover: Piece, board: Board) -> bool:
        rays = self._table.rays(mover.role, mover.color, move.origin)
        if mover.role == Role.PAWN and mover.moved_once:
            # The double-step is gone once the pawn has moved.
            rays = tuple(ray[:1] for ray in rays)
        ray = _ray_through(rays, move.destination)
        if ray is None:
            return False
        return _path_clear(board, ray, move.destination, inclusive=True)

    def _is_en_passant_legal(
        self, move: FormedMove, mover: Piece, position: Position
    ) -> bool:
        if mover.role != Role.PAWN or position.en_passant is None:
            return False
        rays = self._table.capture_rays(mover.color, move.origin)
        if _ray_through(rays, move.destination) is None:
            return False
        if move.destination != position.en_passant:
            return False
        victim = position.board[(move.origin[0], move.destination[1])]
        return (
            victim is not None
            and victim.role == Role.PAWN
            and not victim.is_owned_by(mover.color)
        )

    # -- Promotion ----------------------------------------------------------

    def _with_promotion(self, move: FormedMove, mover: Piece) -> FormedMove:
        if mover.role != Role.PAWN or not _is_last_row(move.destination):
            if move.promotion is not None:
                return move.promoted(None)
            return move

        role = move.promotion
        if role is None:
            role = self._selector.select(mover, move.destination)
        if role is None:
            role = DEFAULT_PROMOTION
        elif role not in PROMOTABLE_ROLES:
            _LOGGER.warning(
                "Cannot promote to %s; using %s",
                role.name.lower(),
                DEFAULT_PROMOTION.name.lower(),
            )
            role = DEFAULT_PROMOTION
        return move.promoted(role)

    # -- Helpers ------------------------------------------------------------

    @staticmethod
    def _reject(
        move: FormedMove, kind: MoveKind, reason: RejectReason
    ) -> LegalityResult:
        _LOGGER.debug("%s rejected: %s", move, reason.name.lower())
        return LegalityResult(False, kind, move.classified(kind), (), reason)


def check_legality(
    move: FormedMove,
    position: Position,
    table: RayTable,
    promotion_selector: PromotionSelector | None = None,
) -> LegalityResult:
    """Functional shortcut for :meth:`LegalityChecker.check`."""
    return LegalityChecker(table, promotion_selector).check(move, position)
