"""Tests for the FEN placement reader."""

import pytest

from chessray.core.board import Board
from chessray.core.enums import Color, Role
from chessray.core.notation import STARTING_FEN, position_from_fen
from chessray.core.piece import Piece
from chessray.core.types import D6, E2, E4, E3


class TestPositionFromFen:
    def test_starting_matches_initial_board(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.board == Board.initial()
        assert pos.player == Color.WHITE
        assert pos.en_passant is None
        assert pos.captured == []

    def test_black_to_move_with_en_passant(self) -> None:
        pos = position_from_fen(
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )
        assert pos.player == Color.BLACK
        assert pos.en_passant == E3

    def test_advanced_pawns_marked_moved(self) -> None:
        pos = position_from_fen(
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )
        assert pos.board[E4] == Piece(Color.WHITE, Role.PAWN, moved_once=True)
        home = pos.board[(6, 3)]
        assert home is not None and not home.moved_once

    def test_minimal_fields(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/4P3/4K3 w")
        assert pos.board[E2] == Piece(Color.WHITE, Role.PAWN)

    def test_white_en_passant_row(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        assert pos.en_passant == D6

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8/8/8/8/8 w - - 0 1",
            "9/8/8/8/8/8/8/8 w - - 0 1",
            "ppppppppp/8/8/8/8/8/8/8 w - - 0 1",
            "7/8/8/8/8/8/8/8 w - - 0 1",
            "8/8/8/8/8/8/8/8 x - - 0 1",
            "4k3/8/8/8/8/8/8/4K3 w - e3 0 1",
            "4k3/8/8/8/8/8/8/4X3 w - - 0 1",
        ],
    )
    def test_invalid(self, fen: str) -> None:
        with pytest.raises(ValueError):
            position_from_fen(fen)
