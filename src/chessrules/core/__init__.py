"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import MoveGenerator, Rules, parse_position

    parsed = parse_position("k7/8/8/8/8/8/8/1R6 w")
    moves = MoveGenerator(parsed.board).generate()
    status = Rules.classify(parsed.board, parsed.turn)
"""

from chessrules.core.board import Board
from chessrules.core.enums import (
    CastlingSide,
    Color,
    DrawReason,
    MoveType,
    ParseErrorKind,
    PieceType,
    StatusKind,
    Validation,
)
from chessrules.core.legality import (
    attacked_kings,
    can_castle,
    classify_move,
    is_in_check,
    is_legal,
    legal_moves,
    simulate,
)
from chessrules.core.move import Move
from chessrules.core.move_generator import BoardMoves, MoveGenerator
from chessrules.core.notation import (
    STARTING_POSITION,
    ParsedPosition,
    PositionParseError,
    parse_position,
    position_to_text,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules, Status
from chessrules.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "CastlingSide",
    "Color",
    "DrawReason",
    "MoveType",
    "ParseErrorKind",
    "PieceType",
    "StatusKind",
    "Validation",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "BoardMoves",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    "Status",
    # Legality
    "attacked_kings",
    "can_castle",
    "classify_move",
    "is_in_check",
    "is_legal",
    "legal_moves",
    "simulate",
    # Notation
    "STARTING_POSITION",
    "ParsedPosition",
    "PositionParseError",
    "parse_position",
    "position_to_text",
]
