"""Move value object and the board mechanics of playing one."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chesslaw.core.enums import Color, MoveFlag, PieceType
from chesslaw.core.piece import Piece
from chesslaw.core.types import Square, file_of, make_square, rank_of, square_name

if TYPE_CHECKING:
    from chesslaw.core.board import Board
    from chesslaw.core.position import Position


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single applied or legal move."""

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def is_castle(self) -> bool:
        return self.flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE)


# ── Board mechanics shared by legality testing and move application ─────────

_PROMOTION_RANK: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}

# castling flag -> (rook home file, rook destination file)
_ROOK_HOP: dict[MoveFlag, tuple[int, int]] = {
    MoveFlag.CASTLE_KINGSIDE: (7, 5),
    MoveFlag.CASTLE_QUEENSIDE: (0, 3),
}


def promotion_rank(color: Color) -> int:
    """Farthest rank for *color*'s pawns."""
    return _PROMOTION_RANK[color]


def rook_hop(flag: MoveFlag, rank: int) -> tuple[Square, Square]:
    """(from, to) squares of the rook that accompanies a castling king."""
    rook_file, rook_to_file = _ROOK_HOP[flag]
    return make_square(rank, rook_file), make_square(rank, rook_to_file)


def classify_move(position: Position, from_sq: Square, to_sq: Square) -> MoveFlag:
    """Classify a pseudo-legal (from, to) pair by the special rule it invokes."""
    piece = position.board[from_sq]
    if piece is None:
        return MoveFlag.NORMAL

    if piece.piece_type == PieceType.PAWN:
        if abs(rank_of(to_sq) - rank_of(from_sq)) == 2:
            return MoveFlag.DOUBLE_PAWN
        if (
            to_sq == position.en_passant
            and file_of(to_sq) != file_of(from_sq)
            and position.board.is_empty(to_sq)
        ):
            return MoveFlag.EN_PASSANT
        if rank_of(to_sq) == _PROMOTION_RANK[piece.color]:
            return MoveFlag.PROMOTION
        return MoveFlag.NORMAL

    if piece.piece_type == PieceType.KING:
        delta = file_of(to_sq) - file_of(from_sq)
        if delta == 2:
            return MoveFlag.CASTLE_KINGSIDE
        if delta == -2:
            return MoveFlag.CASTLE_QUEENSIDE

    return MoveFlag.NORMAL


def play_on_board(board: Board, move: Move) -> Piece | None:
    """Move pieces on *board* for *move* and return the captured piece.

    Only piece placement changes: no side to move, castling flags or en
    passant bookkeeping.
    """
    piece = board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {square_name(move.from_sq)}")

    captured = board[move.to_sq]
    if move.flag == MoveFlag.EN_PASSANT:
        victim_sq = make_square(rank_of(move.from_sq), file_of(move.to_sq))
        captured = board[victim_sq]
        board[victim_sq] = None

    board[move.to_sq] = piece
    board[move.from_sq] = None

    if move.flag == MoveFlag.PROMOTION:
        board[move.to_sq] = Piece(piece.color, PieceType.QUEEN)
    elif move.is_castle:
        rook_from, rook_to = rook_hop(move.flag, rank_of(move.from_sq))
        board[rook_to] = board[rook_from]
        board[rook_from] = None

    return captured
