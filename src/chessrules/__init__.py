"""chessrules: a chess rules engine.

Decides move legality, applies moves and classifies the resulting status
(check, checkmate, stalemate, draws, pending promotion).
"""

from chessrules.core import (
    STARTING_POSITION,
    Board,
    CastlingSide,
    Color,
    DrawReason,
    Move,
    MoveType,
    ParseErrorKind,
    Piece,
    PieceType,
    PositionParseError,
    Square,
    Status,
    StatusKind,
    Validation,
    parse_square,
    square_name,
)
from chessrules.game import (
    Game,
    RulesConfig,
    ValidationResult,
    apply,
    castle,
    load_position,
    new_game,
    promote,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    "STARTING_POSITION",
    "Board",
    "CastlingSide",
    "Color",
    "DrawReason",
    "Game",
    "Move",
    "MoveType",
    "ParseErrorKind",
    "Piece",
    "PieceType",
    "PositionParseError",
    "RulesConfig",
    "Square",
    "Status",
    "StatusKind",
    "Validation",
    "ValidationResult",
    "apply",
    "castle",
    "load_position",
    "new_game",
    "parse_square",
    "promote",
    "square_name",
    "validate",
]
