"""Core enumerations for the chess rules domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveType(IntEnum):
    """Special move classification, derived from board context."""

    NORMAL = 0
    EN_PASSANT = 1
    CASTLE_KINGSIDE = 2
    CASTLE_QUEENSIDE = 3
    PROMOTION = 4

    @property
    def is_castling(self) -> bool:
        return self in (MoveType.CASTLE_KINGSIDE, MoveType.CASTLE_QUEENSIDE)


class CastlingSide(IntEnum):
    KINGSIDE = auto()
    QUEENSIDE = auto()


class StatusKind(IntEnum):
    """States of the game status machine."""

    CHILLING = auto()
    CHECK = auto()
    CHECKMATE = auto()
    DRAW = auto()
    AWAITING_PROMOTION = auto()


class DrawReason(IntEnum):
    STALEMATE = auto()
    FIFTY_MOVE_RULE = auto()
    THREEFOLD_REPETITION = auto()


class Validation(IntEnum):
    """Outcome category of a move validation."""

    VALID = 0
    INVALID_POSITION = auto()
    INVALID_MOVE = auto()
    INVALID_TURN = auto()


class ParseErrorKind(IntEnum):
    """Why a position text could not be parsed."""

    MISSING_FIELDS = auto()
    MALFORMED_BOARD = auto()
    WRONG_ROW_COUNT = auto()
    WRONG_COLUMN_COUNT = auto()
    UNKNOWN_TURN = auto()
    BAD_CLOCK = auto()
