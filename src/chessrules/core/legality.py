"""Self-check exclusion on top of the pseudo-legal generator.

Everything here works on cloned boards: :func:`simulate` copies the board
before touching it, so callers may probe any candidate without affecting the
position they hold.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import CastlingSide, Color, MoveType, PieceType
from chessrules.core.move import Move
from chessrules.core.move_generator import (
    CASTLING_FILES,
    KING_HOME_FILE,
    BoardMoves,
    MoveGenerator,
    back_rank,
    castling_between,
    promotion_rank,
)
from chessrules.core.types import file_of, make_square, rank_of

_CASTLE_TYPES: dict[CastlingSide, MoveType] = {
    CastlingSide.KINGSIDE: MoveType.CASTLE_KINGSIDE,
    CastlingSide.QUEENSIDE: MoveType.CASTLE_QUEENSIDE,
}
_CASTLE_SIDES: dict[MoveType, CastlingSide] = {v: k for k, v in _CASTLE_TYPES.items()}


def classify_move(board: Board, move: Move) -> MoveType:
    """Derive the special-move kind of *move* from the board it is played on."""
    piece = move.piece
    if piece.piece_type == PieceType.KING:
        df = file_of(move.to_sq) - file_of(move.from_sq)
        if abs(df) == 2 and rank_of(move.to_sq) == rank_of(move.from_sq):
            return MoveType.CASTLE_KINGSIDE if df > 0 else MoveType.CASTLE_QUEENSIDE
        return MoveType.NORMAL

    if piece.piece_type == PieceType.PAWN:
        if rank_of(move.to_sq) == promotion_rank(piece.color):
            return MoveType.PROMOTION
        if file_of(move.to_sq) != file_of(move.from_sq) and board.is_empty(move.to_sq):
            return MoveType.EN_PASSANT

    return MoveType.NORMAL


def castling_side(move_type: MoveType) -> CastlingSide:
    return _CASTLE_SIDES[move_type]


def castling_type(side: CastlingSide) -> MoveType:
    return _CASTLE_TYPES[side]


def simulate(board: Board, move: Move) -> Board:
    """Return a copy of *board* with *move* played on it.

    Castling also relocates the rook, en passant removes the pawn behind the
    destination, and a promoting pawn stays a pawn until the promotion is
    resolved by the game.
    """
    move_type = classify_move(board, move)
    after = board.copy()
    piece = move.piece

    after[move.from_sq] = None
    if move_type == MoveType.EN_PASSANT:
        after[make_square(file_of(move.to_sq), rank_of(move.from_sq))] = None
    after.place(piece.moved_to(move.to_sq))

    if move_type.is_castling:
        rank = rank_of(move.from_sq)
        rook_file, _, rook_to_file = CASTLING_FILES[castling_side(move_type)]
        rook_from = make_square(rook_file, rank)
        rook = after[rook_from]
        if rook is not None:
            after[rook_from] = None
            after.place(rook.moved_to(make_square(rook_to_file, rank)))

    return after


# -- Check detection -----------------------------------------------------------


def attacked_kings(board: Board, moves: BoardMoves) -> frozenset[Color]:
    """Colors whose king is targeted by a pseudo-legal move of the other side.

    A color with no king on the board is never reported as attacked.
    """
    targets: tuple[set[int], set[int]] = (set(), set())
    for square_moves in moves:
        for move in square_moves:
            targets[int(move.piece.color)].add(move.to_sq)

    attacked: set[Color] = set()
    for color in Color:
        enemy_targets = targets[int(color.opposite)]
        if any(sq in enemy_targets for sq in board.king_squares(color)):
            attacked.add(color)
    return frozenset(attacked)


def is_in_check(board: Board, color: Color) -> bool:
    return color in attacked_kings(board, MoveGenerator(board).generate())


def leaves_king_attacked(board: Board, move: Move) -> bool:
    """Whether playing *move* leaves the mover's own king attacked."""
    return is_in_check(simulate(board, move), move.piece.color)


# -- Castling ------------------------------------------------------------------


def castling_move(board: Board, color: Color, side: CastlingSide) -> Move | None:
    """The king move that castles *side*, or ``None`` without a king at home."""
    rank = back_rank(color)
    king = board[make_square(KING_HOME_FILE, rank)]
    if king is None or king.piece_type != PieceType.KING or king.color != color:
        return None
    king_to = make_square(CASTLING_FILES[side][1], rank)
    return Move(king, king.square, king_to)


def can_castle(board: Board, color: Color, side: CastlingSide) -> bool:
    """Board-level castling eligibility for *color* on *side*.

    Neither piece may have moved, the squares between them must be empty and
    the king may not be attacked on its origin, the square it crosses, or
    where it lands.
    """
    rank = back_rank(color)
    rook_file, king_to_file, _ = CASTLING_FILES[side]
    king = board[make_square(KING_HOME_FILE, rank)]
    rook = board[make_square(rook_file, rank)]
    if king is None or rook is None:
        return False
    if king.piece_type != PieceType.KING or king.color != color or king.has_moved:
        return False
    if rook.piece_type != PieceType.ROOK or rook.color != color or rook.has_moved:
        return False
    if not all(board.is_empty(make_square(f, rank)) for f in castling_between(side)):
        return False

    if is_in_check(board, color):
        return False

    step = 1 if king_to_file > KING_HOME_FILE else -1
    crossing = board.copy()
    crossing[king.square] = None
    crossing.place(king.moved_to(make_square(KING_HOME_FILE + step, rank)))
    if is_in_check(crossing, color):
        return False

    landing = simulate(board, Move(king, king.square, make_square(king_to_file, rank)))
    return not is_in_check(landing, color)


# -- Legality ------------------------------------------------------------------


def is_legal(board: Board, move: Move) -> bool:
    """Pseudo-legal *move* that does not leave the mover in check."""
    move_type = classify_move(board, move)
    if move_type.is_castling:
        return can_castle(board, move.piece.color, castling_side(move_type))
    return not leaves_king_attacked(board, move)


def can_move(board: Board, moves: BoardMoves, color: Color) -> bool:
    """Whether *color* has at least one legal move among *moves*."""
    for square_moves in moves:
        for move in square_moves:
            if move.piece.color == color and is_legal(board, move):
                return True
    return False


def legal_moves(board: Board, color: Color) -> list[Move]:
    """All strictly legal moves for *color*."""
    return [
        move
        for square_moves in MoveGenerator(board).generate()
        for move in square_moves
        if move.piece.color == color and is_legal(board, move)
    ]
