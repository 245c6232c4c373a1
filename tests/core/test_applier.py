"""Tests for move application and its rule-state effects."""

import pytest

from chesslaw.core.applier import apply_move
from chesslaw.core.board import Board
from chesslaw.core.enums import CastlingSide, Color, MovedPieces, MoveFlag, PieceType
from chesslaw.core.errors import EmptySquareError, InvalidSquareError
from chesslaw.core.move_generator import MoveGenerator
from chesslaw.core.piece import Piece
from chesslaw.core.position import Position
from chesslaw.core.status import GameStatus
from chesslaw.core.types import (
    A1, A2, A7, A8, B2, B8, C8, D3, D4, D5, D6, D7, D8, E1, E2, E3, E4, E5, E7,
    E8, F1, F2, F3, F6, G1, G2, G4, G6, G8, H1, H2, H4, H8,
)
from diagrams import rows


def position(
    placement: str,
    side_to_move: Color = Color.WHITE,
    moved: MovedPieces = MovedPieces.ALL,
) -> Position:
    return Position(
        board=Board.from_diagram(rows(placement)),
        side_to_move=side_to_move,
        moved=moved,
    )


class TestBasics:
    def test_relocates_and_flips_turn(self) -> None:
        pos = Position.initial()
        move = apply_move(pos, G1, F3)
        assert move.flag == MoveFlag.NORMAL
        assert pos.board[G1] is None
        assert pos.board[F3] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert pos.side_to_move == Color.BLACK
        assert pos.status == GameStatus.in_progress()

    def test_capture_replaces_piece(self) -> None:
        pos = position("4k3/8/8/3p4/4P3/8/8/4K3")
        apply_move(pos, E4, D5)
        assert pos.board[D5] == Piece(Color.WHITE, PieceType.PAWN)
        assert len(pos.board.all_pieces(Color.BLACK)) == 1

    def test_empty_origin_raises(self) -> None:
        with pytest.raises(EmptySquareError):
            apply_move(Position.initial(), E4, E5)

    def test_invalid_square_raises(self) -> None:
        pos = Position.initial()
        with pytest.raises(InvalidSquareError):
            apply_move(pos, E2, (8, 4))
        assert pos == Position.initial()


class TestEnPassantWindow:
    def test_double_push_sets_target(self) -> None:
        pos = Position.initial()
        move = apply_move(pos, E2, E4)
        assert move.flag == MoveFlag.DOUBLE_PAWN
        assert pos.en_passant == E3

    def test_black_double_push_sets_target(self) -> None:
        pos = Position.initial()
        apply_move(pos, E2, E4)
        apply_move(pos, D7, D5)
        assert pos.en_passant == D6

    def test_single_push_leaves_no_target(self) -> None:
        pos = Position.initial()
        apply_move(pos, E2, E3)
        assert pos.en_passant is None

    def test_target_expires_after_one_ply(self) -> None:
        pos = Position.initial()
        apply_move(pos, E2, E4)
        apply_move(pos, G8, F6)
        assert pos.en_passant is None

    def test_adjacent_pawn_captures_en_passant(self) -> None:
        pos = position("7k/8/8/8/3p4/8/4P3/K7")
        apply_move(pos, E2, E4)
        assert pos.en_passant == E3
        assert E3 in MoveGenerator(pos).legal_moves(D4)

        move = apply_move(pos, D4, E3)
        assert move.flag == MoveFlag.EN_PASSANT
        assert pos.board[E4] is None
        assert pos.board[E3] == Piece(Color.BLACK, PieceType.PAWN)
        assert pos.board[D4] is None
        assert pos.en_passant is None

    def test_window_closes_if_not_taken(self) -> None:
        pos = position("7k/8/8/8/3p4/8/4P3/K7")
        apply_move(pos, E2, E4)
        apply_move(pos, H8, G8)
        apply_move(pos, A1, B2)
        assert E3 not in MoveGenerator(pos).legal_moves(D4)
        assert MoveGenerator(pos).legal_moves(D4) == {D3}


class TestCastling:
    CASTLE = "r3k2r/8/8/8/8/8/8/R3K2R"

    def test_kingside_moves_rook(self) -> None:
        pos = position(self.CASTLE, moved=MovedPieces.NONE)
        move = apply_move(pos, E1, G1)
        assert move.flag == MoveFlag.CASTLE_KINGSIDE
        assert pos.board[G1] == Piece(Color.WHITE, PieceType.KING)
        assert pos.board[F1] == Piece(Color.WHITE, PieceType.ROOK)
        assert pos.board[H1] is None
        assert pos.board[E1] is None
        assert pos.moved & MovedPieces.WHITE_KING
        assert pos.moved & MovedPieces.WHITE_KINGSIDE_ROOK

    def test_queenside_moves_rook(self) -> None:
        pos = position(self.CASTLE, Color.BLACK, moved=MovedPieces.NONE)
        move = apply_move(pos, E8, C8)
        assert move.flag == MoveFlag.CASTLE_QUEENSIDE
        assert pos.board[C8] == Piece(Color.BLACK, PieceType.KING)
        assert pos.board[D8] == Piece(Color.BLACK, PieceType.ROOK)
        assert pos.board[A8] is None
        assert not pos.castling_available(Color.BLACK, CastlingSide.KINGSIDE)

    def test_king_step_loses_both_sides(self) -> None:
        pos = position(self.CASTLE, moved=MovedPieces.NONE)
        apply_move(pos, E1, E2)
        apply_move(pos, E8, E7)
        apply_move(pos, E2, E1)
        assert not pos.castling_available(Color.WHITE, CastlingSide.KINGSIDE)
        assert not pos.castling_available(Color.WHITE, CastlingSide.QUEENSIDE)
        assert G1 not in MoveGenerator(pos).legal_moves(E1)

    def test_rook_move_loses_one_side(self) -> None:
        pos = position(self.CASTLE, moved=MovedPieces.NONE)
        apply_move(pos, H1, H2)
        assert not pos.castling_available(Color.WHITE, CastlingSide.KINGSIDE)
        assert pos.castling_available(Color.WHITE, CastlingSide.QUEENSIDE)

    def test_rook_returning_home_stays_flagged(self) -> None:
        pos = position(self.CASTLE, moved=MovedPieces.NONE)
        apply_move(pos, H1, H2)
        apply_move(pos, A8, B8)
        apply_move(pos, H2, H1)
        assert not pos.castling_available(Color.WHITE, CastlingSide.KINGSIDE)

    def test_captured_corner_rook_loses_side(self) -> None:
        pos = position(self.CASTLE, moved=MovedPieces.NONE)
        apply_move(pos, A1, A8)
        assert not pos.castling_available(Color.BLACK, CastlingSide.QUEENSIDE)
        assert pos.castling_available(Color.BLACK, CastlingSide.KINGSIDE)
        assert not pos.castling_available(Color.WHITE, CastlingSide.QUEENSIDE)


class TestPromotion:
    def test_white_push_promotes_to_queen(self) -> None:
        pos = position("8/P7/8/7k/8/8/8/4K3")
        move = apply_move(pos, A7, A8)
        assert move.flag == MoveFlag.PROMOTION
        assert pos.board[A8] == Piece(Color.WHITE, PieceType.QUEEN)

    def test_black_capture_promotes_to_queen(self) -> None:
        pos = position("7k/8/8/8/8/7K/1p6/N7", Color.BLACK)
        move = apply_move(pos, B2, A1)
        assert move.flag == MoveFlag.PROMOTION
        assert pos.board[A1] == Piece(Color.BLACK, PieceType.QUEEN)
        assert pos.board[B2] is None

    def test_white_capture_promotes_to_queen(self) -> None:
        pos = position("1n5k/P7/8/8/8/8/8/4K3")
        move = apply_move(pos, A7, B8)
        assert move.flag == MoveFlag.PROMOTION
        assert pos.board[B8] == Piece(Color.WHITE, PieceType.QUEEN)
        assert pos.board[A7] is None

    def test_black_push_promotes_to_queen(self) -> None:
        pos = position("7k/8/8/8/8/8/p7/4K3", Color.BLACK)
        move = apply_move(pos, A2, A1)
        assert move.flag == MoveFlag.PROMOTION
        assert pos.board[A1] == Piece(Color.BLACK, PieceType.QUEEN)
        assert pos.board[A2] is None

    def test_promotion_can_give_mate(self) -> None:
        # The new queen on a8 mates the black king on h8 boxed in by pawns.
        pos = position("7k/P5pp/8/8/8/8/8/4K3")
        apply_move(pos, A7, A8)
        assert pos.status == GameStatus.checkmate(Color.BLACK)


class TestTerminalStatus:
    def test_fools_mate(self) -> None:
        pos = Position.initial()
        apply_move(pos, F2, F3)
        apply_move(pos, E7, E5)
        apply_move(pos, G2, G4)
        apply_move(pos, D8, H4)
        assert pos.status == GameStatus.checkmate(Color.WHITE)
        assert pos.status.winner == Color.BLACK

    def test_stalemate(self) -> None:
        pos = position("7k/8/5K2/8/8/8/8/6Q1")
        apply_move(pos, G1, G6)
        assert pos.status == GameStatus.stalemate(Color.BLACK)

    def test_check_is_not_terminal(self) -> None:
        pos = position("4k3/8/8/8/8/8/8/R3K3")
        apply_move(pos, A1, A8)
        assert pos.status == GameStatus.in_progress()
