"""FormedMove value object (coordinate pair plus classification)."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessray.core.enums import MoveKind, Role
from chessray.core.types import Square, square_name

_PROMO_CHARS: dict[Role, str] = {
    Role.KNIGHT: "N",
    Role.BISHOP: "B",
    Role.ROOK: "R",
    Role.QUEEN: "Q",
}


@dataclass(frozen=True, slots=True)
class FormedMove:
    """Immutable value object representing a single proposed move.

    ``kind`` is left ``UNCLASSIFIED`` by callers; the legality checker
    returns a classified copy.
    """

    origin: Square
    destination: Square
    kind: MoveKind = MoveKind.UNCLASSIFIED
    promotion: Role | None = None

    def classified(self, kind: MoveKind) -> FormedMove:
        return replace(self, kind=kind)

    def promoted(self, role: Role | None) -> FormedMove:
        return replace(self, promotion=role)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.origin)} {square_name(self.destination)}"
        if self.promotion is not None:
            base += f"={_PROMO_CHARS.get(self.promotion, '?')}"
        return base
