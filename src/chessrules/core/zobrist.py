"""Placement fingerprints for repetition counting.

Each (color, piece type, square) triple gets a fixed 64-bit key and a board's
fingerprint is the XOR of the keys of its pieces. Side to move and piece
histories are not part of it, so two boards with the same placement always
share a fingerprint.
"""

from __future__ import annotations

from typing import Final

from chessrules.core.board import Board
from chessrules.core.piece import Piece

_MASK_64: Final = (1 << 64) - 1
_GOLDEN_GAMMA: Final = 0x9E3779B97F4A7C15
_SEED: Final = 0x5EED_C0FFEE_F00D


def _splitmix64_stream(seed: int, count: int) -> tuple[int, ...]:
    """*count* successive outputs of the splitmix64 generator."""
    keys: list[int] = []
    state = seed
    for _ in range(count):
        state = (state + _GOLDEN_GAMMA) & _MASK_64
        z = state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK_64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK_64
        keys.append(z ^ (z >> 31))
    return tuple(keys)


# Flat table indexed by (color * 6 + piece_type - 1) * 64 + square.
_KEYS: Final = _splitmix64_stream(_SEED, 2 * 6 * 64)


def piece_key(piece: Piece) -> int:
    """Key of *piece* standing on its square."""
    return _KEYS[(piece.color * 6 + piece.piece_type - 1) * 64 + piece.square]


def placement_key(board: Board) -> int:
    key = 0
    for piece in board:
        key ^= piece_key(piece)
    return key
