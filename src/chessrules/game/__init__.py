"""Game management layer: state machine and rule configuration.

Quick start::

    from chessrules.game import new_game

    game = new_game()
    result = game.apply("e2", "e4")
    assert result.is_valid
"""

from chessrules.game.config import DEFAULT_RULES, RulesConfig
from chessrules.game.state import (
    PROMOTION_TYPES,
    Game,
    GameEvents,
    MoveRecord,
    ValidationResult,
    apply,
    castle,
    load_position,
    new_game,
    promote,
    validate,
)

__all__ = [
    # Configuration
    "DEFAULT_RULES",
    "RulesConfig",
    # Concrete
    "Game",
    "GameEvents",
    "MoveRecord",
    "PROMOTION_TYPES",
    "ValidationResult",
    # Operations
    "apply",
    "castle",
    "load_position",
    "new_game",
    "promote",
    "validate",
]
