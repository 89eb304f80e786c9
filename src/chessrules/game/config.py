"""Rule parameters for a game."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.rules import FIFTY_MOVE_LIMIT, REPETITION_THRESHOLD


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Draw-rule thresholds.

    Args:
        fifty_move_limit: Half-moves without a pawn move or capture before
            the game is drawn.
        repetition_threshold: Occurrences of one placement that draw the game.
    """

    fifty_move_limit: int = FIFTY_MOVE_LIMIT
    repetition_threshold: int = REPETITION_THRESHOLD

    def __post_init__(self) -> None:
        if self.fifty_move_limit < 1:
            raise ValueError(f"fifty_move_limit must be positive: {self.fifty_move_limit}")
        if self.repetition_threshold < 1:
            raise ValueError(
                f"repetition_threshold must be positive: {self.repetition_threshold}"
            )


DEFAULT_RULES = RulesConfig()
