"""Text coordinates → :class:`FormedMove`."""

from __future__ import annotations

from dataclasses import dataclass

from chessray.core.move import FormedMove
from chessray.core.types import FILES, RANKS, Square


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Input text that does not describe a move, with the first problem found."""

    text: str
    reason: str

    def __bool__(self) -> bool:
        return False


def _parse_token(token: str) -> Square | None:
    if len(token) != 2:
        return None
    file_char = token[0].upper()
    rank_char = token[1]
    if file_char not in FILES or rank_char not in RANKS:
        return None
    return (RANKS.index(rank_char), FILES.index(file_char))


def parse_move(text: str) -> FormedMove | ParseFailure:
    """Parse ``"E2 E4"``-style input.

    Exactly two whitespace-separated tokens, each a file letter A–H (any
    case) followed by a rank digit 1–8. The returned move is unclassified.
    """
    tokens = text.split()
    if len(tokens) != 2:
        return ParseFailure(text, f"expected 2 squares, got {len(tokens)}")

    origin = _parse_token(tokens[0])
    if origin is None:
        return ParseFailure(text, f"invalid square {tokens[0]!r}")
    destination = _parse_token(tokens[1])
    if destination is None:
        return ParseFailure(text, f"invalid square {tokens[1]!r}")

    return FormedMove(origin, destination)
