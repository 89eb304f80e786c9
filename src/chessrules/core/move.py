"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.piece import Piece
from chessrules.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single candidate move.

    ``piece`` is a snapshot of the mover as it stood on ``from_sq``. The kind
    of move (castling, en passant, promotion) is not stored; see
    :func:`chessrules.core.legality.classify_move`.
    """

    piece: Piece
    from_sq: Square
    to_sq: Square
    is_capture: bool = False

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = "x" if self.is_capture else ""
        return f"{square_name(self.from_sq)}{sep}{square_name(self.to_sq)}"

    @property
    def uci(self) -> str:
        """Long-algebraic notation without capture marker."""
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
