"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessray.core.enums import Color, Role

# FEN character ↔ (Color, Role)
_CHAR_MAP: dict[str, tuple[Color, Role]] = {
    "P": (Color.WHITE, Role.PAWN),
    "N": (Color.WHITE, Role.KNIGHT),
    "B": (Color.WHITE, Role.BISHOP),
    "R": (Color.WHITE, Role.ROOK),
    "Q": (Color.WHITE, Role.QUEEN),
    "K": (Color.WHITE, Role.KING),
    "p": (Color.BLACK, Role.PAWN),
    "n": (Color.BLACK, Role.KNIGHT),
    "b": (Color.BLACK, Role.BISHOP),
    "r": (Color.BLACK, Role.ROOK),
    "q": (Color.BLACK, Role.QUEEN),
    "k": (Color.BLACK, Role.KING),
}

_UNICODE: dict[tuple[Color, Role], str] = {
    (Color.WHITE, Role.PAWN): "♙",
    (Color.WHITE, Role.KNIGHT): "♘",
    (Color.WHITE, Role.BISHOP): "♗",
    (Color.WHITE, Role.ROOK): "♖",
    (Color.WHITE, Role.QUEEN): "♕",
    (Color.WHITE, Role.KING): "♔",
    (Color.BLACK, Role.PAWN): "♟",
    (Color.BLACK, Role.KNIGHT): "♞",
    (Color.BLACK, Role.BISHOP): "♝",
    (Color.BLACK, Role.ROOK): "♜",
    (Color.BLACK, Role.QUEEN): "♛",
    (Color.BLACK, Role.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, Role], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    ``moved_once`` only matters for pawns: it withdraws the initial
    double-step.
    """

    color: Color
    role: Role
    moved_once: bool = False

    def is_owned_by(self, color: Color) -> bool:
        return self.color == color

    def moved(self) -> Piece:
        """Copy of this piece with ``moved_once`` set."""
        if self.moved_once:
            return self
        return replace(self, moved_once=True)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.role)]

    @classmethod
    def from_char(cls, char: str, moved_once: bool = False) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, role = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, role, moved_once)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.role)]
