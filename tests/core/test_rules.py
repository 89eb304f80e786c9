"""Tests for status classification and the draw rules."""

from chessrules.core.enums import Color, DrawReason, StatusKind
from chessrules.core.notation import parse_placement
from chessrules.core.rules import Rules, Status


class TestBaseStatus:
    def test_start_position_is_chilling(self) -> None:
        board = parse_placement("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR")
        assert Rules.classify(board, Color.WHITE) == Status.chilling()

    def test_check_on_side_to_move(self) -> None:
        board = parse_placement("k7/8/8/8/8/8/8/K6R")
        assert Rules.classify(board, Color.WHITE) == Status.chilling()
        board = parse_placement("k7/8/8/8/8/8/8/R6K")
        assert Rules.classify(board, Color.BLACK) == Status.check(Color.BLACK)

    def test_check_on_side_that_just_moved(self) -> None:
        board = parse_placement("k7/8/8/8/8/8/8/R6K")
        assert Rules.classify(board, Color.WHITE) == Status.check(Color.BLACK)

    def test_checkmate(self) -> None:
        board = parse_placement("k7/1Q6/2K5/8/8/8/8/8")
        assert Rules.classify(board, Color.BLACK) == Status.checkmate(Color.BLACK)

    def test_checkmate_of_the_opponent_reported(self) -> None:
        board = parse_placement("k7/1Q6/2K5/8/8/8/8/8")
        assert Rules.classify(board, Color.WHITE) == Status.checkmate(Color.BLACK)

    def test_back_rank_mate(self) -> None:
        board = parse_placement("R5k1/5ppp/8/8/8/8/8/6K1")
        assert Rules.classify(board, Color.BLACK) == Status.checkmate(Color.BLACK)

    def test_stalemate(self) -> None:
        board = parse_placement("k7/8/1Q6/8/8/8/8/K7")
        assert Rules.classify(board, Color.BLACK) == Status.draw(DrawReason.STALEMATE)

    def test_stalemate_only_for_side_to_move(self) -> None:
        board = parse_placement("k7/8/1Q6/8/8/8/8/K7")
        assert Rules.classify(board, Color.WHITE) == Status.chilling()

    def test_blockable_check_is_not_mate(self) -> None:
        board = parse_placement("k7/8/8/8/8/8/1r6/R6K")
        assert Rules.classify(board, Color.BLACK).kind == StatusKind.CHECK

    def test_kingless_board_is_chilling(self) -> None:
        board = parse_placement("8/8/8/8/8/8/8/QQQQQQQQ")
        assert Rules.classify(board, Color.WHITE) == Status.chilling()


class TestDraws:
    def test_threefold(self) -> None:
        board = parse_placement("k7/8/8/8/8/8/8/K6R")
        status = Rules.classify(board, Color.BLACK, repetition_count=3)
        assert status == Status.draw(DrawReason.THREEFOLD_REPETITION)

    def test_fifty_move(self) -> None:
        board = parse_placement("k7/8/8/8/8/8/8/K6R")
        status = Rules.classify(board, Color.BLACK, halfmove_clock=100)
        assert status == Status.draw(DrawReason.FIFTY_MOVE_RULE)

    def test_below_thresholds(self) -> None:
        board = parse_placement("k7/8/8/8/8/8/8/K6R")
        status = Rules.classify(board, Color.BLACK, halfmove_clock=99, repetition_count=2)
        assert status == Status.chilling()

    def test_threefold_wins_over_fifty_move(self) -> None:
        board = parse_placement("k7/8/8/8/8/8/8/K6R")
        status = Rules.classify(
            board, Color.BLACK, halfmove_clock=120, repetition_count=3
        )
        assert status.reason == DrawReason.THREEFOLD_REPETITION

    def test_draw_overrides_check(self) -> None:
        board = parse_placement("k7/8/8/8/8/8/8/R6K")
        status = Rules.classify(board, Color.BLACK, halfmove_clock=100)
        assert status == Status.draw(DrawReason.FIFTY_MOVE_RULE)

    def test_checkmate_beats_fifty_move(self) -> None:
        board = parse_placement("k7/1Q6/2K5/8/8/8/8/8")
        status = Rules.classify(board, Color.BLACK, halfmove_clock=150)
        assert status == Status.checkmate(Color.BLACK)

    def test_stalemate_beats_repetition(self) -> None:
        board = parse_placement("k7/8/1Q6/8/8/8/8/K7")
        status = Rules.classify(board, Color.BLACK, repetition_count=5)
        assert status.reason == DrawReason.STALEMATE

    def test_custom_thresholds(self) -> None:
        board = parse_placement("k7/8/8/8/8/8/8/K6R")
        status = Rules.classify(board, Color.BLACK, halfmove_clock=10, fifty_move_limit=10)
        assert status.reason == DrawReason.FIFTY_MOVE_RULE


class TestPromotionStatus:
    def test_pawn_on_last_rank(self) -> None:
        board = parse_placement("P6k/8/8/8/8/8/8/7K")
        assert Rules.promotion_square(board) == 56
        assert Rules.classify(board, Color.WHITE) == Status.awaiting_promotion()

    def test_black_pawn_on_first_rank(self) -> None:
        board = parse_placement("7k/8/8/8/8/8/8/p6K")
        assert Rules.promotion_square(board) == 0

    def test_pending_flag_skips_promotion(self) -> None:
        board = parse_placement("P6k/8/8/8/8/8/8/7K")
        status = Rules.classify(board, Color.BLACK, promotion_pending=True)
        assert status.kind != StatusKind.AWAITING_PROMOTION


class TestStatus:
    def test_flags(self) -> None:
        assert Status.chilling().accepts_moves
        assert Status.check(Color.WHITE).accepts_moves
        assert not Status.awaiting_promotion().accepts_moves
        assert not Status.awaiting_promotion().is_over
        assert Status.checkmate(Color.WHITE).is_over
        assert Status.draw(DrawReason.STALEMATE).is_over

    def test_str(self) -> None:
        assert str(Status.check(Color.BLACK)) == "Check (black)"
        assert str(Status.draw(DrawReason.FIFTY_MOVE_RULE)) == "Draw (fifty move rule)"
        assert str(Status.awaiting_promotion()) == "Awaiting promotion"
