"""Text front end: board rendering and an interactive move loop."""

from __future__ import annotations

import logging
from typing import TextIO

from chessrules.core.board import Board
from chessrules.core.enums import CastlingSide, PieceType, StatusKind
from chessrules.core.rules import Status
from chessrules.core.types import make_square
from chessrules.game.state import Game

_LOGGER = logging.getLogger(__name__)

_CASTLE_INPUT: dict[str, CastlingSide] = {
    "O-O": CastlingSide.KINGSIDE,
    "0-0": CastlingSide.KINGSIDE,
    "O-O-O": CastlingSide.QUEENSIDE,
    "0-0-0": CastlingSide.QUEENSIDE,
}

_PROMOTION_INPUT: dict[str, PieceType] = {
    "q": PieceType.QUEEN,
    "r": PieceType.ROOK,
    "b": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
}


def render_board(board: Board, *, unicode: bool = False) -> str:
    """Framed board, rank 8 at the top."""
    lines = ["  ┌─────────────────┐"]
    for rank in range(7, -1, -1):
        cells: list[str] = []
        for file in range(8):
            piece = board[make_square(file, rank)]
            if piece is None:
                cells.append(".")
            else:
                cells.append(piece.symbol if unicode else str(piece))
        lines.append(f"{rank + 1} │ {' '.join(cells)} │")
    lines.append("  └─────────────────┘")
    lines.append("    a b c d e f g h")
    return "\n".join(lines)


def describe_status(game: Game) -> str:
    status = game.status
    if status.kind == StatusKind.CHECKMATE:
        return f"Checkmate! {game.winner} wins"
    if status.kind == StatusKind.DRAW and status.reason is not None:
        return f"Draw! {status.reason.name.replace('_', ' ').lower()}"
    if status.kind == StatusKind.CHECK:
        return f"Check on {status.color}!"
    return f"Status: {status}"


def run_console(
    game: Game,
    stdin: TextIO,
    stdout: TextIO,
    *,
    unicode: bool = False,
) -> Status:
    """Play *game* from text commands until it ends, ``exit`` or EOF.

    Commands: two squares (``"e2 e4"``), ``O-O`` / ``O-O-O``, ``exit``.
    """

    def say(text: str = "") -> None:
        stdout.write(text + "\n")

    while True:
        say()
        say(render_board(game.board, unicode=unicode))
        say(f"Turn: {game.turn}, Status: {game.status}")

        if game.is_over:
            say(describe_status(game))
            return game.status

        if game.status.kind == StatusKind.AWAITING_PROMOTION:
            stdout.write("Promote to (q, r, b, n): ")
            line = stdin.readline()
            if not line:
                return game.status
            piece_type = _PROMOTION_INPUT.get(line.strip().lower())
            if piece_type is None or game.promote(piece_type) is None:
                say(f"Invalid promotion: {line.strip()!r}")
            continue

        stdout.write("Enter move (e.g. 'e2 e4'): ")
        line = stdin.readline()
        if not line:
            return game.status
        text = line.strip()
        if text == "exit":
            return game.status

        side = _CASTLE_INPUT.get(text.upper())
        if side is not None:
            result = game.castle(side, game.turn)
        else:
            squares = text.split()
            if len(squares) != 2:
                say("Invalid input")
                continue
            result = game.apply(squares[0], squares[1])

        if not result:
            _LOGGER.debug("Console input %r rejected", text)
            say(f"ERROR: {result.kind.name}: {result.message}")
            continue
        if game.status.kind == StatusKind.CHECK:
            say(describe_status(game))
