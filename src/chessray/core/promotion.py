"""Promotion-selection strategies consulted by the legality checker."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from chessray.core.enums import Role

if TYPE_CHECKING:
    from chessray.core.piece import Piece
    from chessray.core.types import Square

PROMOTABLE_ROLES: tuple[Role, ...] = (
    Role.QUEEN,
    Role.ROOK,
    Role.BISHOP,
    Role.KNIGHT,
)
DEFAULT_PROMOTION = Role.QUEEN


class PromotionSelector(ABC):
    """Chooses the piece a pawn turns into on the last rank."""

    @abstractmethod
    def select(self, piece: Piece, destination: Square) -> Role | None:
        """Return the chosen role, or ``None`` to fall back to the default."""


class DefaultPromotionSelector(PromotionSelector):
    """Never answers, so every promotion becomes a queen."""

    def select(self, piece: Piece, destination: Square) -> Role | None:
        return None


class FixedPromotionSelector(PromotionSelector):
    """Always answers with the same role."""

    __slots__ = ("_role",)

    def __init__(self, role: Role) -> None:
        self._role = role

    def select(self, piece: Piece, destination: Square) -> Role | None:
        return self._role
