"""FEN placement reader for setting up positions.

Only the placement, side-to-move and en-passant fields are used; castling
and clock fields are accepted and ignored.
"""

from __future__ import annotations

from chessray.core.board import Board
from chessray.core.enums import Color, Role
from chessray.core.piece import Piece
from chessray.core.position import Position
from chessray.core.types import BOARD_SIZE, Square, parse_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# Row a pawn of each color starts on; pawns elsewhere have already moved.
_PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`."""
    parts = fen.split()
    if not (2 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 2-6 fields): {fen!r}")

    placement, side_part = parts[:2]

    # 1. Piece placement, rank 8 first (row 0)
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                piece = Piece.from_char(ch)
                if piece.role == Role.PAWN and row != _PAWN_HOME_ROW[piece.color]:
                    piece = piece.moved()
                board[(row, col)] = piece
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. En passant (field 4)
    ep: Square | None = None
    if len(parts) > 3 and parts[3] != "-":
        ep = parse_square(parts[3])
        expected_row = 2 if side == Color.WHITE else 5
        if ep[0] != expected_row:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {parts[3]!r}"
            )

    return Position(board, side, ep)
