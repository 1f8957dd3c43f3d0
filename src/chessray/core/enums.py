"""Core enumerations for the rules domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class Role(IntEnum):
    """Piece roles ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveKind(IntEnum):
    """Move classification assigned by the legality checker."""

    UNCLASSIFIED = 0
    MOVEMENT = 1
    CAPTURE = 2
    CASTLE = 3
    EN_PASSANT = 4


class CheckStatus(IntEnum):
    """Outcome of a king-safety probe."""

    SAFE = auto()
    IN_CHECK = auto()
    NO_KING = auto()  # degenerate board, not a chess result


class RejectReason(IntEnum):
    """Why a candidate move was refused."""

    NONE = 0
    SAME_SQUARE = auto()
    NOT_YOUR_PIECE = auto()
    CASTLING_UNSUPPORTED = auto()
    ILLEGAL_CAPTURE = auto()
    ILLEGAL_MOVEMENT = auto()
    SELF_CHECK = auto()
