"""Tests for move-text parsing."""

import pytest

from chessray.core.enums import MoveKind
from chessray.core.move import FormedMove
from chessray.core.parser import ParseFailure, parse_move
from chessray.core.types import A1, A8, E2, E4, H1, H8


class TestValidInput:
    def test_e2_e4(self) -> None:
        move = parse_move("E2 E4")
        assert isinstance(move, FormedMove)
        assert move.origin == (6, 4)
        assert move.destination == (4, 4)
        assert move.kind == MoveKind.UNCLASSIFIED
        assert move.promotion is None

    def test_lowercase(self) -> None:
        assert parse_move("e2 e4") == FormedMove(E2, E4)

    def test_mixed_case_and_whitespace(self) -> None:
        assert parse_move("  a1\tH8 \n") == FormedMove(A1, H8)

    def test_corners(self) -> None:
        assert parse_move("A8 H1") == FormedMove(A8, H1)

    def test_same_square_still_parses(self) -> None:
        # Distinctness is a legality question, not a parsing one.
        assert parse_move("E2 E2") == FormedMove(E2, E2)


class TestInvalidInput:
    @pytest.mark.parametrize(
        "text",
        [
            "Z9 A1",
            "E2",
            "E2 E4 E5",
            "",
            "   ",
            "E0 E4",
            "E9 E4",
            "I2 E4",
            "E2 E44",
            "E2-E4",
            "2E E4",
            "EE E4",
        ],
    )
    def test_rejected(self, text: str) -> None:
        result = parse_move(text)
        assert isinstance(result, ParseFailure)
        assert not result
        assert result.text == text

    def test_reason_names_bad_square(self) -> None:
        result = parse_move("E2 X4")
        assert isinstance(result, ParseFailure)
        assert "X4" in result.reason

    def test_reason_for_token_count(self) -> None:
        result = parse_move("E2 E4 E5")
        assert isinstance(result, ParseFailure)
        assert "3" in result.reason
