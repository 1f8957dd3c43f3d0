"""Precomputed movement geometry: rays per role, color and origin square.

A ray is the ordered run of squares from an origin in one direction, nearest
first, truncated at the board edge. Occupancy is ignored here; blockers are
applied at query time by the checker.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessray.core.enums import Color, Role
from chessray.core.types import BOARD_SIZE, Square, is_on_board

Ray = tuple[Square, ...]
Rays = tuple[Ray, ...]
# [row][col] -> rays
_Grid = tuple[tuple[Rays, ...], ...]

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS
KING_OFFSETS: tuple[tuple[int, int], ...] = QUEEN_DIRS

# White advances towards row 0, Black towards row 7.
_PAWN_FORWARD: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}


class RayTableNotBuiltError(RuntimeError):
    """Raised when rays are requested from a table that holds no data."""


@dataclass(frozen=True, slots=True)
class MovementStyle:
    """Direction offsets plus the longest slide along each of them."""

    directions: tuple[tuple[int, int], ...]
    max_steps: int


def movement_style(role: Role, color: Color = Color.WHITE) -> MovementStyle:
    """Movement style for *role*; only pawns depend on *color*."""
    if role == Role.PAWN:
        # Two steps so the initial advance is on the ray; the checker
        # withdraws the second square once the pawn has moved.
        return MovementStyle(((_PAWN_FORWARD[color], 0),), 2)
    if role == Role.KNIGHT:
        return MovementStyle(KNIGHT_OFFSETS, 1)
    if role == Role.BISHOP:
        return MovementStyle(BISHOP_DIRS, BOARD_SIZE - 1)
    if role == Role.ROOK:
        return MovementStyle(ROOK_DIRS, BOARD_SIZE - 1)
    if role == Role.QUEEN:
        return MovementStyle(QUEEN_DIRS, BOARD_SIZE - 1)
    return MovementStyle(KING_OFFSETS, 1)


def capture_style(color: Color) -> MovementStyle:
    """Pawn capture style: the two forward diagonals, one step each."""
    forward = _PAWN_FORWARD[color]
    return MovementStyle(((forward, -1), (forward, 1)), 1)


# -- Builders ---------------------------------------------------------------


def _walk(row: int, col: int, style: MovementStyle) -> Rays:
    rays: list[Ray] = []
    for dr, dc in style.directions:
        ray: list[Square] = []
        for step in range(1, style.max_steps + 1):
            ar = row + dr * step
            ac = col + dc * step
            if not is_on_board(ar, ac):
                break
            ray.append((ar, ac))
        rays.append(tuple(ray))
    return tuple(rays)


def _build_grid(style: MovementStyle) -> _Grid:
    return tuple(
        tuple(_walk(row, col, style) for col in range(BOARD_SIZE))
        for row in range(BOARD_SIZE)
    )


def _build_capture_grid(style: MovementStyle) -> _Grid:
    # Diagonals that fall off the board yield no ray at all.
    return tuple(
        tuple(
            tuple(ray for ray in _walk(row, col, style) if ray)
            for col in range(BOARD_SIZE)
        )
        for row in range(BOARD_SIZE)
    )


# -- Table ------------------------------------------------------------------


class RayTable:
    """Immutable lookup of precomputed rays.

    Build once with :meth:`build` and share freely; nothing mutates it after
    construction. A bare ``RayTable()`` holds no data and refuses queries.
    """

    __slots__ = ("_movement", "_capture")

    def __init__(
        self,
        movement: dict[tuple[Role, Color], _Grid] | None = None,
        capture: dict[Color, _Grid] | None = None,
    ) -> None:
        self._movement = dict(movement) if movement is not None else None
        self._capture = dict(capture) if capture is not None else None

    @classmethod
    def build(cls) -> RayTable:
        movement: dict[tuple[Role, Color], _Grid] = {}
        for role in Role:
            if role == Role.PAWN:
                for color in Color:
                    movement[(role, color)] = _build_grid(movement_style(role, color))
                continue
            grid = _build_grid(movement_style(role))
            for color in Color:
                movement[(role, color)] = grid

        capture = {color: _build_capture_grid(capture_style(color)) for color in Color}
        return cls(movement, capture)

    @property
    def is_built(self) -> bool:
        return self._movement is not None and self._capture is not None

    def rays(self, role: Role, color: Color, sq: Square) -> Rays:
        """Movement rays for a *color* *role* standing on *sq*."""
        if self._movement is None:
            raise RayTableNotBuiltError("ray table queried before it was built")
        row, col = sq
        return self._movement[(role, color)][row][col]

    def capture_rays(self, color: Color, sq: Square) -> Rays:
        """Diagonal capture rays for a *color* pawn on *sq*."""
        if self._capture is None:
            raise RayTableNotBuiltError("pawn capture table queried before it was built")
        row, col = sq
        return self._capture[color][row][col]


def get_ray(
    table: RayTable | None,
    role: Role,
    sq: Square,
    color: Color = Color.WHITE,
) -> Rays:
    """Look up movement rays; a missing table is a programmer error."""
    if table is None:
        raise RayTableNotBuiltError("no ray table supplied")
    return table.rays(role, color, sq)
