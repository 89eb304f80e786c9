"""High-level chess rules: game status classification."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.board import Board
from chessrules.core.enums import Color, DrawReason, PieceType, StatusKind
from chessrules.core.legality import attacked_kings, can_move
from chessrules.core.move_generator import BoardMoves, MoveGenerator, promotion_rank
from chessrules.core.types import Square, rank_of

FIFTY_MOVE_LIMIT = 100  # half-moves, i.e. 50 full moves per side
REPETITION_THRESHOLD = 3


@dataclass(frozen=True, slots=True)
class Status:
    """Classification of the current board for the side to move next."""

    kind: StatusKind
    color: Color | None = None
    reason: DrawReason | None = None

    @classmethod
    def chilling(cls) -> Status:
        return cls(StatusKind.CHILLING)

    @classmethod
    def check(cls, color: Color) -> Status:
        return cls(StatusKind.CHECK, color=color)

    @classmethod
    def checkmate(cls, color: Color) -> Status:
        return cls(StatusKind.CHECKMATE, color=color)

    @classmethod
    def draw(cls, reason: DrawReason) -> Status:
        return cls(StatusKind.DRAW, reason=reason)

    @classmethod
    def awaiting_promotion(cls) -> Status:
        return cls(StatusKind.AWAITING_PROMOTION)

    @property
    def is_over(self) -> bool:
        """Checkmate or draw: no further moves are accepted."""
        return self.kind in (StatusKind.CHECKMATE, StatusKind.DRAW)

    @property
    def accepts_moves(self) -> bool:
        return self.kind in (StatusKind.CHILLING, StatusKind.CHECK)

    def __str__(self) -> str:
        name = self.kind.name.replace("_", " ").capitalize()
        if self.color is not None:
            return f"{name} ({self.color})"
        if self.reason is not None:
            return f"{name} ({self.reason.name.replace('_', ' ').lower()})"
        return name


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Draw policy: fifty-move and threefold repetition end the game
    # automatically, but never override a checkmate or stalemate found on
    # the same board.

    @staticmethod
    def base_status(board: Board, moves: BoardMoves, turn: Color) -> Status:
        """Check / checkmate / stalemate classification, first match wins."""
        attacked = attacked_kings(board, moves)
        opponent = turn.opposite
        turn_stuck = not can_move(board, moves, turn)
        # Mobility of the opponent only matters when its king is attacked.
        opponent_stuck = opponent in attacked and not can_move(board, moves, opponent)

        if turn in attacked and turn_stuck:
            return Status.checkmate(turn)
        if opponent in attacked and opponent_stuck:
            return Status.checkmate(opponent)
        if turn in attacked:
            return Status.check(turn)
        if opponent in attacked:
            return Status.check(opponent)
        if turn_stuck:
            return Status.draw(DrawReason.STALEMATE)
        return Status.chilling()

    @staticmethod
    def is_fifty_move_rule(halfmove_clock: int, limit: int = FIFTY_MOVE_LIMIT) -> bool:
        return halfmove_clock >= limit

    @staticmethod
    def is_threefold_repetition(
        repetition_count: int, threshold: int = REPETITION_THRESHOLD
    ) -> bool:
        return repetition_count >= threshold

    @staticmethod
    def promotion_square(board: Board) -> Square | None:
        """Square of a pawn standing on its farthest rank, if any."""
        for color in Color:
            last_rank = promotion_rank(color)
            for sq in board.pieces(color, PieceType.PAWN):
                if rank_of(sq) == last_rank:
                    return sq
        return None

    @staticmethod
    def classify(
        board: Board,
        turn: Color,
        *,
        halfmove_clock: int = 0,
        repetition_count: int = 1,
        fifty_move_limit: int = FIFTY_MOVE_LIMIT,
        repetition_threshold: int = REPETITION_THRESHOLD,
        promotion_pending: bool = False,
        moves: BoardMoves | None = None,
    ) -> Status:
        """Full status of *board* with *turn* to move next.

        *moves* may carry the pseudo-legal move map already generated for
        *board* so it is not computed twice.
        """
        if not promotion_pending and Rules.promotion_square(board) is not None:
            return Status.awaiting_promotion()

        if moves is None:
            moves = MoveGenerator(board).generate()
        status = Rules.base_status(board, moves, turn)
        if not status.accepts_moves:
            return status

        if Rules.is_threefold_repetition(repetition_count, repetition_threshold):
            return Status.draw(DrawReason.THREEFOLD_REPETITION)
        if Rules.is_fifty_move_rule(halfmove_clock, fifty_move_limit):
            return Status.draw(DrawReason.FIFTY_MOVE_RULE)
        return status
