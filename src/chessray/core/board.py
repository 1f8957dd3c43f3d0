"""Board - piece placement on a fixed 8x8 grid of tiles."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias

from chessray.core.enums import Color, Role
from chessray.core.piece import Piece
from chessray.core.types import BOARD_SIZE, RANKS, Square

Tile: TypeAlias = "Piece | None"

_BACK_RANK: tuple[Role, ...] = (
    Role.ROOK,
    Role.KNIGHT,
    Role.BISHOP,
    Role.QUEEN,
    Role.KING,
    Role.BISHOP,
    Role.KNIGHT,
    Role.ROOK,
)


class Board:
    """Mutable 8x8 board; each tile is empty or holds exactly one piece."""

    __slots__ = ("_tiles",)

    def __init__(self) -> None:
        self._tiles: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        return self._tiles[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        self._tiles[row][col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied tile, row by row."""
        for row, tiles in enumerate(self._tiles):
            for col, piece in enumerate(tiles):
                if piece is not None:
                    yield (row, col), piece

    def pieces(self, color: Color, role: Role) -> list[Square]:
        """Squares occupied by *color*'s *role*."""
        return [
            sq
            for sq, piece in self.occupied()
            if piece.color == color and piece.role == role
        ]

    def find_king(self, color: Color) -> Square | None:
        """First king of *color* found scanning from a8, or ``None``."""
        for sq, piece in self.occupied():
            if piece.role == Role.KING and piece.color == color:
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._tiles = [row.copy() for row in self._tiles]
        return b

    def clear(self) -> None:
        self._tiles = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, role in enumerate(_BACK_RANK):
            b[(0, col)] = Piece(Color.BLACK, role)
            b[(1, col)] = Piece(Color.BLACK, Role.PAWN)
            b[(6, col)] = Piece(Color.WHITE, Role.PAWN)
            b[(7, col)] = Piece(Color.WHITE, role)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._tiles == other._tiles

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, tiles in enumerate(self._tiles):
            cells = [str(p) if p else "." for p in tiles]
            rows.append(f"{RANKS[row]} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
