"""Core rules layer — pure chess legality logic with zero external dependencies.

Quick start::

    from chessray.core import LegalityChecker, Position, RayTable, parse_move

    table = RayTable.build()
    checker = LegalityChecker(table)
    pos = Position.initial()
    result = checker.check(parse_move("E2 E4"), pos)
    if result.legal:
        pos.apply_move(result.move)
"""

from chessray.core.board import Board, Tile
from chessray.core.check import CheckDetector, CheckReport, is_in_check
from chessray.core.enums import CheckStatus, Color, MoveKind, RejectReason, Role
from chessray.core.legality import LegalityChecker, LegalityResult, check_legality
from chessray.core.move import FormedMove
from chessray.core.notation import STARTING_FEN, position_from_fen
from chessray.core.parser import ParseFailure, parse_move
from chessray.core.piece import Piece
from chessray.core.position import Position
from chessray.core.promotion import (
    DEFAULT_PROMOTION,
    PROMOTABLE_ROLES,
    DefaultPromotionSelector,
    FixedPromotionSelector,
    PromotionSelector,
)
from chessray.core.rays import RayTable, RayTableNotBuiltError, get_ray
from chessray.core.types import Square, make_square, parse_square, square_name

__all__ = [
    # Enums
    "CheckStatus",
    "Color",
    "MoveKind",
    "RejectReason",
    "Role",
    # Types / helpers
    "Square",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "FormedMove",
    "Piece",
    "Position",
    "Tile",
    # Geometry
    "RayTable",
    "RayTableNotBuiltError",
    "get_ray",
    # Rules
    "CheckDetector",
    "CheckReport",
    "LegalityChecker",
    "LegalityResult",
    "check_legality",
    "is_in_check",
    # Parsing / setup
    "ParseFailure",
    "STARTING_FEN",
    "parse_move",
    "position_from_fen",
    # Promotion
    "DEFAULT_PROMOTION",
    "PROMOTABLE_ROLES",
    "DefaultPromotionSelector",
    "FixedPromotionSelector",
    "PromotionSelector",
]
