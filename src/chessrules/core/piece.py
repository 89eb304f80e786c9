"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessrules.core.enums import Color, PieceType
from chessrules.core.types import Square

# Indexed by PieceType - 1.
_WHITE_CHARS = "PNBRQK"
_WHITE_SYMBOLS = "♙♘♗♖♕♔"
_BLACK_SYMBOLS = "♟♞♝♜♛♚"

_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {}
for _ptype in PieceType:
    _CHAR_MAP[_WHITE_CHARS[_ptype - 1]] = (Color.WHITE, _ptype)
    _CHAR_MAP[_WHITE_CHARS[_ptype - 1].lower()] = (Color.BLACK, _ptype)
del _ptype


@dataclass(frozen=True, slots=True)
class Piece:
    """A piece standing on a square.

    ``history`` lists every square the piece occupied before ``square``, oldest
    first. Castling and en passant eligibility are read from it, so a piece
    loaded from a position text starts with an empty history.
    """

    color: Color
    piece_type: PieceType
    square: Square
    history: tuple[Square, ...] = ()

    @property
    def has_moved(self) -> bool:
        return bool(self.history)

    def moved_to(self, sq: Square) -> Piece:
        """The same piece after stepping to *sq*."""
        return replace(self, square=sq, history=self.history + (self.square,))

    def promoted_to(self, piece_type: PieceType) -> Piece:
        """The same piece (square and history kept) with a new type."""
        return replace(self, piece_type=piece_type)

    def __str__(self) -> str:
        """Position text character: uppercase white, lowercase black."""
        char = _WHITE_CHARS[self.piece_type - 1]
        return char if self.color == Color.WHITE else char.lower()

    @classmethod
    def from_char(cls, char: str, square: Square) -> Piece:
        """``"N"`` -> white knight on *square*."""
        try:
            color, piece_type = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, piece_type, square)

    @property
    def symbol(self) -> str:
        """Unicode chess glyph."""
        symbols = _WHITE_SYMBOLS if self.color == Color.WHITE else _BLACK_SYMBOLS
        return symbols[self.piece_type - 1]
