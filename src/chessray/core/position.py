"""Position — board plus turn, en-passant and capture bookkeeping."""

from __future__ import annotations

from chessray.core.board import Board
from chessray.core.enums import Color, MoveKind, Role
from chessray.core.move import FormedMove
from chessray.core.piece import Piece
from chessray.core.types import Square, square_name


class Position:
    """Full game state consumed by the rules core.

    The live instance is mutated only by the game loop through
    :meth:`apply_move`; the legality checker works on :meth:`copy` clones.
    """

    __slots__ = ("board", "player", "en_passant", "captured")

    def __init__(
        self,
        board: Board | None = None,
        player: Color = Color.WHITE,
        en_passant: Square | None = None,
        captured: list[Piece] | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.player = player
        self.en_passant = en_passant
        self.captured: list[Piece] = list(captured) if captured else []

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position, White to move."""
        return cls(Board.initial(), Color.WHITE)

    # ── Ownership ────────────────────────────────────────────────────────

    def owns(self, sq: Square) -> bool:
        """Whether the player to move has a piece on *sq*."""
        piece = self.board[sq]
        return piece is not None and piece.is_owned_by(self.player)

    # ── Core move operation ──────────────────────────────────────────────

    def apply_move(self, move: FormedMove) -> Piece | None:
        """Apply *move* in place and return the captured piece, if any.

        The move is trusted: legality is the checker's job.
        """
        if move.kind == MoveKind.CASTLE:
            raise ValueError(f"Castling is not supported: {move}")

        piece = self.board[move.origin]
        if piece is None:
            raise ValueError(f"No piece on {square_name(move.origin)}")

        # En passant: the captured pawn sits beside the origin, not on the target
        capture_sq = move.destination
        if move.kind == MoveKind.EN_PASSANT:
            capture_sq = (move.origin[0], move.destination[1])
        captured = self.board[capture_sq]

        if captured is not None:
            self.captured.append(captured)
            self.board[capture_sq] = None

        placed = piece.moved()
        if piece.role == Role.PAWN and move.promotion is not None:
            placed = Piece(piece.color, move.promotion, moved_once=True)

        self.board[move.origin] = None
        self.board[move.destination] = placed

        # En passant target for the opponent
        next_en_passant: Square | None = None
        if piece.role == Role.PAWN and abs(move.destination[0] - move.origin[0]) == 2:
            next_en_passant = (
                (move.origin[0] + move.destination[0]) // 2,
                move.origin[1],
            )
        self.en_passant = next_en_passant

        self.player = self.player.opposite
        return captured

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy; pieces are immutable so copying the grid is enough."""
        return Position(
            board=self.board.copy(),
            player=self.player,
            en_passant=self.en_passant,
            captured=self.captured.copy(),
        )

    def __repr__(self) -> str:
        ep = square_name(self.en_passant) if self.en_passant is not None else "-"
        return f"{self.board!r}\n{self.player} to move, ep {ep}"
