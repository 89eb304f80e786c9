"""Tests for pseudo-legal move generation."""

from chessrules.core.enums import Color, PieceType
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import parse_placement
from chessrules.core.piece import Piece
from chessrules.core.types import parse_square


def targets(placement: str, square: str) -> set[str]:
    board = parse_placement(placement)
    moves = MoveGenerator(board).moves_from(parse_square(square))
    return {f"{m.uci[2:]}{'x' if m.is_capture else ''}" for m in moves}


class TestGenerateShape:
    def test_one_list_per_square(self) -> None:
        board = parse_placement("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR")
        moves = MoveGenerator(board).generate()
        assert len(moves) == 64
        assert all(not moves[sq] for sq in range(16, 48))

    def test_both_colors_generated(self) -> None:
        board = parse_placement("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR")
        moves = MoveGenerator(board).generate()
        white = sum(len(m) for m in moves if m and m[0].piece.color == Color.WHITE)
        black = sum(len(m) for m in moves if m and m[0].piece.color == Color.BLACK)
        assert white == 20
        assert black == 20

    def test_move_carries_piece_snapshot(self) -> None:
        board = parse_placement("8/8/8/8/8/8/8/N7")
        (move, *_) = MoveGenerator(board).moves_from(parse_square("a1"))
        assert move.piece == Piece(Color.WHITE, PieceType.KNIGHT, parse_square("a1"))
        assert move.from_sq == parse_square("a1")


class TestSliding:
    def test_rook_open_board(self) -> None:
        assert len(targets("8/8/8/8/3R4/8/8/8", "d4")) == 14

    def test_bishop_blocked_by_friend(self) -> None:
        result = targets("8/8/8/8/8/2P5/1B6/8", "b2")
        assert "c3" not in result
        assert result == {"a1", "c1", "a3"}

    def test_rook_capture_stops_ray(self) -> None:
        result = targets("8/8/8/8/8/8/8/R2r4", "a1")
        assert "d1x" in result
        assert "e1" not in result
        assert {"b1", "c1"} <= result

    def test_queen_combines_directions(self) -> None:
        assert len(targets("8/8/8/8/3Q4/8/8/8", "d4")) == 27


class TestStepping:
    def test_knight_corner(self) -> None:
        assert targets("8/8/8/8/8/8/8/N7", "a1") == {"b3", "c2"}

    def test_knight_jumps_over_pieces(self) -> None:
        assert targets("8/8/8/8/8/PPP5/PNP5/PPP5", "b2") == {"d3", "d1", "a4", "c4"}

    def test_king_captures_enemy_not_friend(self) -> None:
        result = targets("8/8/8/8/8/8/Pp6/K7", "a1")
        assert result == {"b1", "b2x"}


class TestPawn:
    def test_initial_double_push(self) -> None:
        assert targets("8/8/8/8/8/8/4P3/8", "e2") == {"e3", "e4"}

    def test_black_direction(self) -> None:
        assert targets("8/4p3/8/8/8/8/8/8", "e7") == {"e6", "e5"}

    def test_blocked(self) -> None:
        assert targets("8/8/8/8/8/4n3/4P3/8", "e2") == set()

    def test_double_push_blocked_on_second_square(self) -> None:
        assert targets("8/8/8/8/4n3/8/4P3/8", "e2") == {"e3"}

    def test_no_double_push_off_start_rank(self) -> None:
        assert targets("8/8/8/8/8/4P3/8/8", "e3") == {"e4"}

    def test_diagonal_capture(self) -> None:
        assert targets("8/8/8/8/8/3p1P2/4P3/8", "e2") == {"e3", "e4", "d3x"}

    def test_pawn_on_last_rank_has_no_moves(self) -> None:
        assert targets("P7/8/8/8/8/8/8/8", "a8") == set()

    def test_en_passant_after_double_step(self) -> None:
        board = parse_placement("8/2p5/8/3P4/8/8/8/8")
        black = board[parse_square("c7")]
        assert black is not None
        board[black.square] = None
        board.place(black.moved_to(parse_square("c5")))

        moves = MoveGenerator(board).moves_from(parse_square("d5"))
        en_passant = [m for m in moves if m.to_sq == parse_square("c6")]
        assert len(en_passant) == 1
        assert en_passant[0].is_capture

    def test_no_en_passant_for_loaded_pawn(self) -> None:
        assert targets("8/8/8/2pP4/8/8/8/8", "d5") == {"d6"}

    def test_no_en_passant_after_two_single_steps(self) -> None:
        board = parse_placement("8/2p5/8/3P4/8/8/8/8")
        pawn = board[parse_square("c7")]
        assert pawn is not None
        board[pawn.square] = None
        pawn = pawn.moved_to(parse_square("c6")).moved_to(parse_square("c5"))
        board.place(pawn)
        moves = MoveGenerator(board).moves_from(parse_square("d5"))
        assert parse_square("c6") not in {m.to_sq for m in moves}


class TestCastlingCandidates:
    def test_both_sides_when_clear(self) -> None:
        result = targets("8/8/8/8/8/8/8/R3K2R", "e1")
        assert {"g1", "c1"} <= result

    def test_blocked_side_missing(self) -> None:
        result = targets("8/8/8/8/8/8/8/RN2K2R", "e1")
        assert "g1" in result
        assert "c1" not in result

    def test_moved_rook_gives_no_candidate(self) -> None:
        board = parse_placement("8/8/8/8/8/8/8/4K2R")
        rook = board[parse_square("h1")]
        assert rook is not None
        board.place(rook.moved_to(parse_square("h2")).moved_to(parse_square("h1")))
        moves = MoveGenerator(board).moves_from(parse_square("e1"))
        assert parse_square("g1") not in {m.to_sq for m in moves}

    def test_king_off_home_square(self) -> None:
        assert "b1" not in targets("8/8/8/8/8/8/8/R2K4", "d1")

    def test_black_candidates(self) -> None:
        assert {"g8", "c8"} <= targets("r3k2r/8/8/8/8/8/8/8", "e8")
