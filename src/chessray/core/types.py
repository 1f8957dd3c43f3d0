"""Square type alias and coordinate helpers.

Board layout (row-major, White at the bottom):
    row 0 = rank 8, row 7 = rank 1
    col 0 = file A, col 7 = file H

So ``(6, 4)`` is e2 and ``(0, 0)`` is a8.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col), each 0–7

BOARD_SIZE = 8

FILES = "ABCDEFGH"
RANKS = "87654321"  # indexed by row


def make_square(row: int, col: int) -> Square:
    """Create square from row (0–7) and col (0–7)."""
    return (row, col)


def is_on_board(row: int, col: int) -> bool:
    """Check whether a coordinate pair lies inside the 8x8 grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (6, 4) → 'E2', (0, 0) → 'A8'."""
    return FILES[sq[1]] + RANKS[sq[0]]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e2' → (6, 4)."""
    if len(name) != 2 or name[0].upper() not in FILES or name[1] not in RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return (RANKS.index(name[1]), FILES.index(name[0].upper()))


def all_squares() -> list[Square]:
    """Every square, row by row from a8 to h1."""
    return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ((0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = ((7, c) for c in range(8))
