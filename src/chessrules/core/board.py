"""Board: 64 optional piece slots with per-color, per-type bitboards."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _bits(bitboard: int) -> list[Square]:
    """Set bits of *bitboard*, lowest square first."""
    squares: list[Square] = []
    while bitboard:
        low = bitboard & -bitboard
        squares.append(low.bit_length() - 1)
        bitboard ^= low
    return squares


class Board:
    """Mutable 64-square board.

    Pieces carry their own square, so a slot and the piece in it always
    agree when written through :meth:`place`. Writing ``board[sq] = None``
    empties a slot. The bitboard indexes follow every write.

    The board does not enforce one king per color: positions loaded from
    text may have none or several.
    """

    __slots__ = ("_squares", "_by_type", "_by_color")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color][piece_type - 1]
        self._by_type: list[list[int]] = [[0] * 6, [0] * 6]
        self._by_color: list[int] = [0, 0]

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        mask = 1 << sq
        old = self._squares[sq]
        if old is not None:
            self._by_type[old.color][old.piece_type - 1] &= ~mask
            self._by_color[old.color] &= ~mask
        self._squares[sq] = piece
        if piece is not None:
            self._by_type[piece.color][piece.piece_type - 1] |= mask
            self._by_color[piece.color] |= mask

    def __iter__(self) -> Iterator[Piece]:
        """Pieces on the board, a1 first."""
        return (p for p in self._squares if p is not None)

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def place(self, piece: Piece) -> None:
        """Put *piece* on its own square, replacing any occupant."""
        self[piece.square] = piece

    # -- Queries ------------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares holding *color*'s pieces of *piece_type*."""
        return _bits(self._by_type[color][piece_type - 1])

    def all_pieces(self, color: Color) -> list[Square]:
        return _bits(self._by_color[color])

    def king_squares(self, color: Color) -> list[Square]:
        return self.pieces(color, PieceType.KING)

    def king_square(self, color: Color) -> Square | None:
        """First king of *color*, or ``None`` when the board has none."""
        kings = self.king_squares(color)
        return kings[0] if kings else None

    def copy(self) -> Board:
        clone = Board()
        clone._squares = self._squares.copy()
        clone._by_type = [row.copy() for row in self._by_type]
        clone._by_color = self._by_color.copy()
        return clone

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position; no piece has a history."""
        board = cls()
        for file, piece_type in enumerate(_BACK_RANK):
            for color, home, pawns in ((Color.WHITE, 0, 1), (Color.BLACK, 7, 6)):
                board.place(Piece(color, piece_type, make_square(file, home)))
                board.place(Piece(color, PieceType.PAWN, make_square(file, pawns)))
        return board

    # -- Text ---------------------------------------------------------------

    def _rows(self) -> Iterator[list[Piece | None]]:
        for rank in range(7, -1, -1):
            yield self._squares[rank * 8 : rank * 8 + 8]

    def placement(self) -> str:
        """Placement field of a position text, rank 8 first."""
        rows: list[str] = []
        for row in self._rows():
            text = ""
            gap = 0
            for piece in row:
                if piece is None:
                    gap += 1
                    continue
                if gap:
                    text += str(gap)
                    gap = 0
                text += str(piece)
            rows.append(text + (str(gap) if gap else ""))
        return "/".join(rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        lines = [
            f"{8 - i} " + " ".join(str(p) if p else "." for p in row)
            for i, row in enumerate(self._rows())
        ]
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
