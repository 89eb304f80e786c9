"""Position text parsing and serialization.

The accepted text is the first fields of FEN: piece placement and side to
move, optionally followed by the remaining FEN fields. Only the half-move
clock of that tail is interpreted; castling and en passant availability come
from piece histories, which are empty for a freshly loaded position.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.board import Board
from chessrules.core.enums import Color, ParseErrorKind
from chessrules.core.piece import Piece
from chessrules.core.types import make_square

STARTING_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w"

_TURN_TOKENS: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}
_TURN_CHARS: dict[Color, str] = {v: k for k, v in _TURN_TOKENS.items()}
_EMPTY_RUNS = "12345678"


class PositionParseError(ValueError):
    """Position text could not be turned into a board."""

    def __init__(self, kind: ParseErrorKind, message: str, text: str) -> None:
        super().__init__(f"{message}: {text!r}")
        self.kind = kind
        self.text = text


@dataclass(frozen=True, slots=True)
class ParsedPosition:
    """Board and move-order data read from a position text."""

    board: Board
    turn: Color
    halfmove_clock: int = 0


def parse_position(text: str) -> ParsedPosition:
    """Parse ``"<placement> <w|b> [castling ep halfmove fullmove]"``."""
    parts = text.split()
    if not (2 <= len(parts) <= 6):
        raise PositionParseError(
            ParseErrorKind.MISSING_FIELDS, "Position needs 2-6 fields", text
        )

    board = parse_placement(parts[0], text)

    turn = _TURN_TOKENS.get(parts[1])
    if turn is None:
        raise PositionParseError(
            ParseErrorKind.UNKNOWN_TURN, f"Unknown side to move {parts[1]!r}", text
        )

    halfmove = 0
    if len(parts) > 4:
        clock = parts[4]
        if not (clock.isascii() and clock.isdigit()):
            raise PositionParseError(
                ParseErrorKind.BAD_CLOCK, f"Invalid half-move clock {clock!r}", text
            )
        halfmove = int(clock)

    return ParsedPosition(board, turn, halfmove)


def parse_placement(placement: str, text: str | None = None) -> Board:
    """Build a :class:`Board` from the placement field, rank 8 first."""
    source = placement if text is None else text
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise PositionParseError(
            ParseErrorKind.WRONG_ROW_COUNT, "Board must contain 8 rows", source
        )

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in _EMPTY_RUNS:
                file += int(ch)
            else:
                if file >= 8:
                    raise PositionParseError(
                        ParseErrorKind.WRONG_COLUMN_COUNT,
                        f"Row {8 - rank_idx} is wider than 8 squares",
                        source,
                    )
                try:
                    board.place(Piece.from_char(ch, make_square(file, rank)))
                except ValueError:
                    raise PositionParseError(
                        ParseErrorKind.MALFORMED_BOARD,
                        f"Invalid piece character {ch!r}",
                        source,
                    ) from None
                file += 1
            if file > 8:
                raise PositionParseError(
                    ParseErrorKind.WRONG_COLUMN_COUNT,
                    f"Row {8 - rank_idx} is wider than 8 squares",
                    source,
                )
        if file != 8:
            raise PositionParseError(
                ParseErrorKind.WRONG_COLUMN_COUNT,
                f"Row {8 - rank_idx} has {file} squares",
                source,
            )
    return board


def position_to_text(board: Board, turn: Color) -> str:
    """Serialise placement and side to move."""
    return f"{board.placement()} {_TURN_CHARS[turn]}"
