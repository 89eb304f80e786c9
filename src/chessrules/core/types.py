"""Square indices.

A square is a plain ``int``: ``rank * 8 + file``, so ``a1`` is 0, ``h1`` is 7
and ``h8`` is 63. Files and ranks are both counted from zero.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int

FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"

SQUARE_NAMES: tuple[str, ...] = tuple(f + r for r in RANK_NAMES for f in FILE_NAMES)
_SQUARE_BY_NAME: dict[str, Square] = {name: sq for sq, name in enumerate(SQUARE_NAMES)}


def file_of(sq: Square) -> int:
    return sq % 8


def rank_of(sq: Square) -> int:
    return sq // 8


def make_square(file: int, rank: int) -> Square:
    """Square at (*file*, *rank*); raises ``ValueError`` off the board."""
    if not (0 <= file < 8 and 0 <= rank < 8):
        raise ValueError(f"Coordinates off the board: file={file}, rank={rank}")
    return rank * 8 + file


def square_name(sq: Square) -> str:
    return SQUARE_NAMES[sq]


def parse_square(name: str) -> Square:
    """``"e4"`` -> 28. Names are lowercase file letter plus rank digit."""
    try:
        return _SQUARE_BY_NAME[name]
    except KeyError:
        raise ValueError(f"Invalid square name: {name!r}") from None


def is_valid_square(sq: int) -> bool:
    return 0 <= sq < 64
