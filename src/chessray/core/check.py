"""King-safety probe: is a king attacked, and from which squares?"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessray.core.enums import CheckStatus, Color, Role
from chessray.core.rays import RayTableNotBuiltError
from chessray.core.types import Square, square_name

if TYPE_CHECKING:
    from chessray.core.board import Board
    from chessray.core.position import Position
    from chessray.core.rays import RayTable, Rays

_LOGGER = logging.getLogger(__name__)

_DIAGONAL_ATTACKERS = frozenset((Role.BISHOP, Role.QUEEN))
_ORTHOGONAL_ATTACKERS = frozenset((Role.ROOK, Role.QUEEN))


@dataclass(frozen=True, slots=True)
class CheckReport:
    """Result of a check probe.

    ``status`` is ``NO_KING`` when the requested king is missing from the
    board, which is a broken position rather than a safe one.
    """

    status: CheckStatus
    attackers: tuple[Square, ...] = ()

    @property
    def in_check(self) -> bool:
        return self.status == CheckStatus.IN_CHECK

    @property
    def is_double_check(self) -> bool:
        return len(self.attackers) == 2


def _first_hits(
    board: Board,
    rays: Rays,
    enemy: Color,
    roles: frozenset[Role],
    found: list[Square],
) -> None:
    # Only the first occupied square on each ray can attack along it.
    for ray in rays:
        for sq in ray:
            piece = board[sq]
            if piece is None:
                continue
            if piece.color == enemy and piece.role in roles:
                found.append(sq)
            break


class CheckDetector:
    """Scans a position for attacks on one side's king."""

    __slots__ = ("_table",)

    def __init__(self, table: RayTable) -> None:
        if table is None or not table.is_built:
            raise RayTableNotBuiltError("check detector needs a built ray table")
        self._table = table

    def inspect(self, position: Position, color: Color) -> CheckReport:
        """Report whether *color*'s king is attacked in *position*.

        All five scans always run so that a double check yields both
        attackers.
        """
        board = position.board
        king_sq = board.find_king(color)
        if king_sq is None:
            _LOGGER.warning("No %s king on board; check probe skipped", color)
            return CheckReport(CheckStatus.NO_KING)

        table = self._table
        enemy = color.opposite
        attackers: list[Square] = []

        _first_hits(
            board,
            table.rays(Role.BISHOP, color, king_sq),
            enemy,
            _DIAGONAL_ATTACKERS,
            attackers,
        )
        _first_hits(
            board,
            table.rays(Role.ROOK, color, king_sq),
            enemy,
            _ORTHOGONAL_ATTACKERS,
            attackers,
        )
        _first_hits(
            board,
            table.rays(Role.KNIGHT, color, king_sq),
            enemy,
            frozenset((Role.KNIGHT,)),
            attackers,
        )
        _first_hits(
            board,
            table.rays(Role.KING, color, king_sq),
            enemy,
            frozenset((Role.KING,)),
            attackers,
        )
        # An enemy pawn attacks the king from the squares the king's own
        # pawns would capture onto.
        _first_hits(
            board,
            table.capture_rays(color, king_sq),
            enemy,
            frozenset((Role.PAWN,)),
            attackers,
        )

        if not attackers:
            return CheckReport(CheckStatus.SAFE)
        if len(attackers) > 2:
            _LOGGER.warning(
                "%s king on %s attacked by %d pieces: %s",
                color,
                square_name(king_sq),
                len(attackers),
                ", ".join(square_name(sq) for sq in attackers),
            )
        return CheckReport(CheckStatus.IN_CHECK, tuple(attackers))


def is_in_check(position: Position, color: Color, table: RayTable) -> CheckReport:
    """Functional shortcut for :meth:`CheckDetector.inspect`."""
    return CheckDetector(table).inspect(position, color)
