"""Console entry point: two players type moves like ``E2 E4``."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from chessray.core.check import CheckReport
from chessray.core.enums import Color, RejectReason, Role
from chessray.core.legality import LegalityResult
from chessray.core.promotion import PromotionSelector
from chessray.core.types import square_name
from chessray.game.controller import GameController
from chessray.settings import AppSettings

if TYPE_CHECKING:
    from chessray.core.piece import Piece
    from chessray.core.types import Square

_LOGGER = logging.getLogger(__name__)

_PROMOTION_LETTERS: dict[str, Role] = {
    "Q": Role.QUEEN,
    "R": Role.ROOK,
    "B": Role.BISHOP,
    "N": Role.KNIGHT,
}

_REASON_TEXT: dict[RejectReason, str] = {
    RejectReason.SAME_SQUARE: "origin and destination are the same square",
    RejectReason.NOT_YOUR_PIECE: "there is no piece of yours on the origin square",
    RejectReason.CASTLING_UNSUPPORTED: "castling is not supported",
    RejectReason.ILLEGAL_CAPTURE: "that piece cannot capture there",
    RejectReason.ILLEGAL_MOVEMENT: "that piece cannot move there",
    RejectReason.SELF_CHECK: "that move leaves your king in check",
}


class ConsolePromotionSelector(PromotionSelector):
    """Asks on the console; an empty or unknown answer means the default."""

    __slots__ = ("_stdin", "_stdout", "_default")

    def __init__(
        self,
        stdin: TextIO,
        stdout: TextIO,
        default: Role = Role.QUEEN,
    ) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._default = default

    def select(self, piece: Piece, destination: Square) -> Role | None:
        letters = "/".join(_PROMOTION_LETTERS)
        self._stdout.write(f"Promote on {square_name(destination)} to ({letters}): ")
        self._stdout.flush()
        answer = self._stdin.readline().strip().upper()
        return _PROMOTION_LETTERS.get(answer, self._default)


def _describe_rejection(result: LegalityResult) -> str:
    text = _REASON_TEXT.get(result.reason, "illegal move")
    if result.attackers:
        attackers = ", ".join(square_name(sq) for sq in result.attackers)
        text += f" (attacked from {attackers})"
    return text


def _describe_captures(captured: list[Piece]) -> list[str]:
    lines = []
    for color in Color:
        taken = " ".join(str(p) for p in captured if p.color == color.opposite)
        if taken:
            lines.append(f"{str(color).capitalize()} has captured: {taken}")
    return lines


def run_console(
    stdin: TextIO,
    stdout: TextIO,
    settings: AppSettings | None = None,
) -> int:
    """Play a game on text streams until EOF or ``quit``."""
    s = settings if settings is not None else AppSettings()
    ctrl = GameController(
        promotion_selector=ConsolePromotionSelector(stdin, stdout, s.default_promotion)
    )

    def on_check(color: Color, report: CheckReport) -> None:
        kind = "Double check" if report.is_double_check else "Check"
        attackers = ", ".join(square_name(sq) for sq in report.attackers)
        stdout.write(f"{kind}! {color} king attacked from {attackers}\n")

    ctrl.events.on_check.append(on_check)

    while True:
        stdout.write(f"\n{ctrl.position.board!r}\n")
        for captures in _describe_captures(ctrl.position.captured):
            stdout.write(f"{captures}\n")
        stdout.write(f"{str(ctrl.side_to_move).capitalize()}, enter a move: ")
        stdout.flush()
        line = stdin.readline()
        if not line or line.strip().lower() in ("quit", "exit"):
            return 0

        submitted = ctrl.submit_text(line)
        if submitted.failure is not None:
            stdout.write(f"The input was not valid: {submitted.failure.reason}\n")
        elif submitted.result is not None and not submitted.result.legal:
            reason = _describe_rejection(submitted.result)
            stdout.write(f"The move was not valid: {reason}\n")


def main() -> None:
    """Launch the console game."""
    settings = AppSettings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _LOGGER.debug("Starting console game")
    sys.exit(run_console(sys.stdin, sys.stdout, settings))


if __name__ == "__main__":
    main()
