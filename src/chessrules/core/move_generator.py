"""Pseudo-legal move generation.

The generator only knows geometry: it never asks whose turn it is and never
checks whether a move exposes the mover's king. Legality is layered on top
in :mod:`chessrules.core.legality`.
"""

from __future__ import annotations

from typing import TypeAlias

from chessrules.core.board import Board
from chessrules.core.enums import CastlingSide, Color, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import Square, file_of, make_square, rank_of

BoardMoves: TypeAlias = tuple[list[Move], ...]

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

KING_HOME_FILE = 4

# side -> (rook file, king destination file, rook destination file)
CASTLING_FILES: dict[CastlingSide, tuple[int, int, int]] = {
    CastlingSide.KINGSIDE: (7, 6, 5),
    CastlingSide.QUEENSIDE: (0, 2, 3),
}


def back_rank(color: Color) -> int:
    """Rank the pieces of *color* start on."""
    return 0 if color == Color.WHITE else 7


def promotion_rank(color: Color) -> int:
    """Farthest rank for *color*'s pawns."""
    return 7 if color == Color.WHITE else 0


def pawn_direction(color: Color) -> int:
    return 1 if color == Color.WHITE else -1


def pawn_start_rank(color: Color) -> int:
    return 1 if color == Color.WHITE else 6


def castling_between(side: CastlingSide) -> range:
    """Files strictly between the king's home square and the rook."""
    rook_file = CASTLING_FILES[side][0]
    if rook_file > KING_HOME_FILE:
        return range(KING_HOME_FILE + 1, rook_file)
    return range(rook_file + 1, KING_HOME_FILE)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        moves: list[Square] = []
        for df, dr in offsets:
            af = file_idx + df
            ar = rank_idx + dr
            if 0 <= af < 8 and 0 <= ar < 8:
                moves.append(make_square(af, ar))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = file_idx + df
            ar = rank_idx + dr
            ray: list[Square] = []
            while 0 <= af < 8 and 0 <= ar < 8:
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


class MoveGenerator:
    """Generates pseudo-legal moves for every piece on a :class:`Board`."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate(self) -> BoardMoves:
        """One list of moves per square, empty for unoccupied squares."""
        board = self._board
        moves: BoardMoves = tuple([] for _ in range(64))
        for sq in range(64):
            piece = board[sq]
            if piece is not None:
                self._gen_piece(piece, moves[sq])
        return moves

    def moves_from(self, sq: Square) -> list[Move]:
        """Pseudo-legal moves of the piece on *sq* (empty if none)."""
        moves: list[Move] = []
        piece = self._board[sq]
        if piece is not None:
            self._gen_piece(piece, moves)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_piece(self, piece: Piece, moves: list[Move]) -> None:
        sq = piece.square
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(piece, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_stepping(piece, _KNIGHT_TARGETS[sq], moves)
        elif ptype == PieceType.BISHOP:
            self._gen_sliding(piece, _BISHOP_RAYS[sq], moves)
        elif ptype == PieceType.ROOK:
            self._gen_sliding(piece, _ROOK_RAYS[sq], moves)
        elif ptype == PieceType.QUEEN:
            self._gen_sliding(piece, _QUEEN_RAYS[sq], moves)
        else:
            self._gen_stepping(piece, _KING_TARGETS[sq], moves)
            self._gen_castling(piece, moves)

    def _gen_pawn(self, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        sq = piece.square
        color = piece.color
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        step = pawn_direction(color)
        ahead = rank_idx + step

        # A pawn left on its farthest rank (pending promotion) has no moves.
        if not 0 <= ahead < 8:
            return

        one_step = make_square(file_idx, ahead)
        if board.is_empty(one_step):
            moves.append(Move(piece, sq, one_step))
            if rank_idx == pawn_start_rank(color):
                two_step = make_square(file_idx, ahead + step)
                if board.is_empty(two_step):
                    moves.append(Move(piece, sq, two_step))

        for df in (-1, 1):
            cap_file = file_idx + df
            if not 0 <= cap_file < 8:
                continue
            cap_sq = make_square(cap_file, ahead)
            target = board[cap_sq]
            if target is not None:
                if target.color != color:
                    moves.append(Move(piece, sq, cap_sq, is_capture=True))
                continue
            if self._can_take_en_passant(piece, make_square(cap_file, rank_idx)):
                moves.append(Move(piece, sq, cap_sq, is_capture=True))

    def _can_take_en_passant(self, pawn: Piece, beside_sq: Square) -> bool:
        """Whether the piece on *beside_sq* just double-stepped past *pawn*."""
        other = self._board[beside_sq]
        if (
            other is None
            or other.piece_type != PieceType.PAWN
            or other.color == pawn.color
            or len(other.history) != 1
        ):
            return False
        origin = other.history[0]
        return (
            file_of(origin) == file_of(other.square)
            and abs(rank_of(origin) - rank_of(other.square)) == 2
        )

    def _gen_stepping(
        self,
        piece: Piece,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None:
                moves.append(Move(piece, piece.square, to_sq))
            elif target.color != piece.color:
                moves.append(Move(piece, piece.square, to_sq, is_capture=True))

    def _gen_sliding(
        self,
        piece: Piece,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(piece, piece.square, to_sq))
                    continue
                if target.color != piece.color:
                    moves.append(Move(piece, piece.square, to_sq, is_capture=True))
                break

    def _gen_castling(self, king: Piece, moves: list[Move]) -> None:
        """Geometric castling candidates; king eligibility is checked later."""
        rank = back_rank(king.color)
        if king.square != make_square(KING_HOME_FILE, rank):
            return

        board = self._board
        for side, (rook_file, king_to_file, _) in CASTLING_FILES.items():
            rook = board[make_square(rook_file, rank)]
            if (
                rook is None
                or rook.piece_type != PieceType.ROOK
                or rook.color != king.color
                or rook.has_moved
            ):
                continue
            if all(board.is_empty(make_square(f, rank)) for f in castling_between(side)):
                moves.append(Move(king, king.square, make_square(king_to_file, rank)))
