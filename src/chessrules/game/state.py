"""Game state machine: owns the board, turn, status and draw counters."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeAlias

from chessrules.core.board import Board
from chessrules.core.enums import (
    CastlingSide,
    Color,
    MoveType,
    PieceType,
    StatusKind,
    Validation,
)
from chessrules.core.legality import (
    attacked_kings,
    can_castle,
    castling_move,
    castling_side,
    castling_type,
    classify_move,
    is_in_check as board_in_check,
    is_legal,
    legal_moves,
    simulate,
)
from chessrules.core.move import Move
from chessrules.core.move_generator import BoardMoves, MoveGenerator
from chessrules.core.notation import STARTING_POSITION, parse_position, position_to_text
from chessrules.core.rules import Rules, Status
from chessrules.core.types import Square, is_valid_square, parse_square, square_name
from chessrules.core.zobrist import placement_key
from chessrules.game.config import DEFAULT_RULES, RulesConfig

_LOGGER = logging.getLogger(__name__)

SquareRef: TypeAlias = Square | str

PROMOTION_TYPES: frozenset[PieceType] = frozenset(
    {PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT}
)

_CASTLE_NOTATION: dict[MoveType, str] = {
    MoveType.CASTLE_KINGSIDE: "O-O",
    MoveType.CASTLE_QUEENSIDE: "O-O-O",
}
_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
}


# ── Result / record types ────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating (or applying) a move.

    ``status`` is the status the game has (or would have) after the move and
    is only set for :attr:`Validation.VALID`.
    """

    kind: Validation
    status: Status | None = None
    message: str = ""

    @classmethod
    def valid(cls, status: Status) -> ValidationResult:
        return cls(Validation.VALID, status)

    @classmethod
    def invalid_position(cls, message: str) -> ValidationResult:
        return cls(Validation.INVALID_POSITION, message=message)

    @classmethod
    def invalid_move(cls, message: str) -> ValidationResult:
        return cls(Validation.INVALID_MOVE, message=message)

    @classmethod
    def invalid_turn(cls, message: str) -> ValidationResult:
        return cls(Validation.INVALID_TURN, message=message)

    @property
    def is_valid(self) -> bool:
        return self.kind == Validation.VALID

    def __bool__(self) -> bool:
        return self.is_valid


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    move_type: MoveType
    status_after: Status
    promotion: PieceType | None = None

    @property
    def notation(self) -> str:
        castle = _CASTLE_NOTATION.get(self.move_type)
        if castle is not None:
            return castle
        text = str(self.move)
        if self.promotion is not None:
            text += "=" + _PROMO_CHARS[self.promotion]
        return text


MoveCallback = Callable[[MoveRecord, "Game"], None]
StatusCallback = Callable[[Status], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_status_changed: list[StatusCallback] = field(default_factory=list)
    on_game_over: list[StatusCallback] = field(default_factory=list)


@dataclass(slots=True)
class _Outcome:
    """A fully checked move waiting to be committed."""

    move: Move
    move_type: MoveType
    board: Board
    turn: Color
    halfmove_clock: int
    placement: int | None
    status: Status


# ── Game ─────────────────────────────────────────────────────────────────────


class Game:
    """Authoritative state of one chess game.

    The game is mutated only by :meth:`apply`, :meth:`castle` and
    :meth:`promote`. Every candidate is checked on a cloned board; the
    clone replaces the current board only once the move is known to be
    legal, so a rejected move never changes anything.

    Not thread-safe: one caller owns a game at a time.
    """

    __slots__ = (
        "_board",
        "_turn",
        "_status",
        "_winner",
        "_pending_promotion",
        "_halfmove_clock",
        "_repetitions",
        "_history",
        "_config",
        "events",
    )

    def __init__(
        self,
        board: Board | None = None,
        turn: Color = Color.WHITE,
        *,
        halfmove_clock: int = 0,
        config: RulesConfig | None = None,
    ) -> None:
        self._board = board if board is not None else Board.initial()
        self._turn = turn
        self._config = config if config is not None else DEFAULT_RULES
        self._halfmove_clock = halfmove_clock
        self._repetitions: dict[int, int] = {placement_key(self._board): 1}
        self._history: list[MoveRecord] = []
        self._winner: Color | None = None
        self._pending_promotion: Square | None = None
        self.events = GameEvents()

        self._status = self._classify(self._board, self._turn, self._halfmove_clock, 1)
        if self._status.kind == StatusKind.AWAITING_PROMOTION:
            self._pending_promotion = Rules.promotion_square(self._board)
        self._winner = _winner_of(self._status)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        """Current board. Treat as read-only; copy before experimenting."""
        return self._board

    @property
    def turn(self) -> Color:
        return self._turn

    @property
    def status(self) -> Status:
        return self._status

    @property
    def winner(self) -> Color | None:
        return self._winner

    @property
    def pending_promotion(self) -> Square | None:
        return self._pending_promotion

    @property
    def halfmove_clock(self) -> int:
        return self._halfmove_clock

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return tuple(self._history)

    @property
    def config(self) -> RulesConfig:
        return self._config

    @property
    def is_over(self) -> bool:
        return self._status.is_over

    # ── Queries ──────────────────────────────────────────────────────────

    def is_in_check(self, color: Color) -> bool:
        return board_in_check(self._board, color)

    def repetition_count(self) -> int:
        """How many times the current placement occurred in this game."""
        return self._repetitions.get(placement_key(self._board), 0)

    def legal_moves(self, square: SquareRef | None = None) -> list[Move]:
        """Legal moves for the side to move, optionally from one square."""
        if not self._status.accepts_moves:
            return []
        if square is None:
            return legal_moves(self._board, self._turn)
        try:
            sq = _to_square(square)
        except ValueError:
            return []
        piece = self._board[sq]
        if piece is None or piece.color != self._turn:
            return []
        gen = MoveGenerator(self._board)
        return [m for m in gen.moves_from(sq) if is_legal(self._board, m)]

    def to_text(self) -> str:
        return position_to_text(self._board, self._turn)

    # ── Operations ───────────────────────────────────────────────────────

    def validate(self, from_sq: SquareRef, to_sq: SquareRef) -> ValidationResult:
        """Check a move without changing the game."""
        result, _ = self._prepare(from_sq, to_sq)
        return result

    def apply(self, from_sq: SquareRef, to_sq: SquareRef) -> ValidationResult:
        """Validate a move and commit it when valid."""
        result, outcome = self._prepare(from_sq, to_sq)
        if outcome is None:
            _LOGGER.debug(
                "Rejected %s -> %s: %s %s",
                from_sq,
                to_sq,
                result.kind.name,
                result.message,
            )
            return result
        self._commit(outcome)
        return result

    def castle(self, side: CastlingSide, color: Color) -> ValidationResult:
        """Castle *side* for *color* as that side's move."""
        if not self._status.accepts_moves:
            result = ValidationResult.invalid_turn(f"Game is {self._status}")
            return self._refuse(result)
        if color != self._turn:
            result = ValidationResult.invalid_turn(f"It is {self._turn}'s turn")
            return self._refuse(result)
        move = castling_move(self._board, color, side)
        if move is None:
            return self._refuse(
                ValidationResult.invalid_position(f"No {color} king on its home square")
            )
        result, outcome = self._castle_outcome(move, side)
        if outcome is None:
            return self._refuse(result)
        self._commit(outcome)
        return result

    def promote(self, piece_type: PieceType) -> Status | None:
        """Resolve a pending promotion. ``None`` when nothing changed."""
        sq = self._pending_promotion
        if sq is None or self._status.kind != StatusKind.AWAITING_PROMOTION:
            _LOGGER.debug("Promotion to %s ignored: nothing pending", piece_type.name)
            return None
        if piece_type not in PROMOTION_TYPES:
            _LOGGER.debug("Promotion to %s ignored: invalid type", piece_type.name)
            return None
        pawn = self._board[sq]
        if pawn is None:
            return None

        board = self._board.copy()
        board.place(pawn.promoted_to(piece_type))
        turn = pawn.color.opposite
        key = placement_key(board)
        count = self._repetitions.get(key, 0) + 1
        status = self._classify(board, turn, self._halfmove_clock, count)

        self._board = board
        self._turn = turn
        self._repetitions[key] = count
        self._pending_promotion = None
        if self._history and self._history[-1].move.to_sq == sq:
            self._history[-1].promotion = piece_type
            self._history[-1].status_after = status
        _LOGGER.debug("Promoted pawn on %s to %s", square_name(sq), piece_type.name)
        self._set_status(status)
        return status

    # ── Internal ─────────────────────────────────────────────────────────

    def _prepare(
        self, from_ref: SquareRef, to_ref: SquareRef
    ) -> tuple[ValidationResult, _Outcome | None]:
        try:
            from_sq = _to_square(from_ref)
            to_sq = _to_square(to_ref)
        except ValueError as exc:
            return ValidationResult.invalid_position(str(exc)), None

        piece = self._board[from_sq]
        if piece is None:
            message = f"No piece on {square_name(from_sq)}"
            return ValidationResult.invalid_position(message), None
        if not self._status.accepts_moves:
            return ValidationResult.invalid_turn(f"Game is {self._status}"), None
        if piece.color != self._turn:
            return ValidationResult.invalid_turn(f"It is {self._turn}'s turn"), None

        gen = MoveGenerator(self._board)
        move = next((m for m in gen.moves_from(from_sq) if m.to_sq == to_sq), None)
        if move is None:
            message = (
                f"{piece} cannot move from {square_name(from_sq)} "
                f"to {square_name(to_sq)}"
            )
            return ValidationResult.invalid_move(message), None

        move_type = classify_move(self._board, move)
        if move_type.is_castling:
            return self._castle_outcome(move, castling_side(move_type))
        return self._settle(move, move_type, simulate(self._board, move))

    def _castle_outcome(
        self, move: Move, side: CastlingSide
    ) -> tuple[ValidationResult, _Outcome | None]:
        if self._status.kind != StatusKind.CHILLING:
            return (
                ValidationResult.invalid_move(f"Cannot castle: game is {self._status}"),
                None,
            )
        if not can_castle(self._board, move.piece.color, side):
            return (
                ValidationResult.invalid_move(
                    f"{move.piece.color} cannot castle {side.name.lower()}"
                ),
                None,
            )
        after = simulate(self._board, move)
        return self._settle(move, castling_type(side), after)

    def _settle(
        self, move: Move, move_type: MoveType, after: Board
    ) -> tuple[ValidationResult, _Outcome | None]:
        """Reject self-check, then classify the board *move* leads to."""
        mover = move.piece.color
        moves_after = MoveGenerator(after).generate()
        if mover in attacked_kings(after, moves_after):
            message = f"{move} leaves the {mover} king in check"
            return ValidationResult.invalid_move(message), None

        if move.piece.piece_type == PieceType.PAWN or move.is_capture:
            halfmove = 0
        else:
            halfmove = self._halfmove_clock + 1

        if Rules.promotion_square(after) is not None:
            status = Status.awaiting_promotion()
            outcome = _Outcome(move, move_type, after, self._turn, halfmove, None, status)
            return ValidationResult.valid(outcome.status), outcome

        turn = mover.opposite
        key = placement_key(after)
        count = self._repetitions.get(key, 0) + 1
        status = self._classify(after, turn, halfmove, count, moves_after)
        outcome = _Outcome(move, move_type, after, turn, halfmove, key, status)
        return ValidationResult.valid(status), outcome

    def _commit(self, outcome: _Outcome) -> None:
        self._board = outcome.board
        self._turn = outcome.turn
        self._halfmove_clock = outcome.halfmove_clock
        if outcome.placement is not None:
            key = outcome.placement
            self._repetitions[key] = self._repetitions.get(key, 0) + 1
        if outcome.status.kind == StatusKind.AWAITING_PROMOTION:
            self._pending_promotion = outcome.move.to_sq

        record = MoveRecord(outcome.move, outcome.move_type, outcome.status)
        self._history.append(record)
        _LOGGER.debug("Applied %s (%s)", record.notation, outcome.move_type.name)

        self._set_status(outcome.status)
        for cb in self.events.on_move:
            cb(record, self)

    def _set_status(self, status: Status) -> None:
        previous = self._status
        self._status = status
        self._winner = _winner_of(status)
        if status == previous:
            return

        _LOGGER.debug("Status %s -> %s", previous, status)
        for cb in self.events.on_status_changed:
            cb(status)

        if status.is_over:
            if self._winner is not None:
                _LOGGER.info("Game over: %s, %s wins", status, self._winner)
            else:
                _LOGGER.info("Game over: %s", status)
            for cb in self.events.on_game_over:
                cb(status)

    def _classify(
        self,
        board: Board,
        turn: Color,
        halfmove_clock: int,
        repetition_count: int,
        moves: BoardMoves | None = None,
    ) -> Status:
        return Rules.classify(
            board,
            turn,
            halfmove_clock=halfmove_clock,
            repetition_count=repetition_count,
            fifty_move_limit=self._config.fifty_move_limit,
            repetition_threshold=self._config.repetition_threshold,
            moves=moves,
        )

    def _refuse(self, result: ValidationResult) -> ValidationResult:
        _LOGGER.debug("Rejected castling: %s %s", result.kind.name, result.message)
        return result


# ── Helpers ──────────────────────────────────────────────────────────────────


def _to_square(ref: SquareRef) -> Square:
    if isinstance(ref, str):
        return parse_square(ref.strip().lower())
    if not is_valid_square(ref):
        raise ValueError(f"Square index off the board: {ref}")
    return ref


def _winner_of(status: Status) -> Color | None:
    if status.kind == StatusKind.CHECKMATE and status.color is not None:
        return status.color.opposite
    return None


# ── Functional API ───────────────────────────────────────────────────────────


def new_game(config: RulesConfig | None = None) -> Game:
    """Standard starting position, White to move."""
    return load_position(STARTING_POSITION, config)


def load_position(text: str, config: RulesConfig | None = None) -> Game:
    """Build a game from position text.

    Raises:
        PositionParseError: the text is malformed.
    """
    parsed = parse_position(text)
    return Game(
        parsed.board,
        parsed.turn,
        halfmove_clock=parsed.halfmove_clock,
        config=config,
    )


def validate(game: Game, from_sq: SquareRef, to_sq: SquareRef) -> ValidationResult:
    return game.validate(from_sq, to_sq)


def apply(game: Game, from_sq: SquareRef, to_sq: SquareRef) -> ValidationResult:
    return game.apply(from_sq, to_sq)


def promote(game: Game, piece_type: PieceType) -> Status | None:
    return game.promote(piece_type)


def castle(game: Game, side: CastlingSide, color: Color) -> ValidationResult:
    return game.castle(side, color)
