"""Move application: commits one move to a :class:`Position`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesslaw.core.enums import CastlingSide, MoveFlag, MovedPieces, PieceType
from chesslaw.core.errors import EmptySquareError
from chesslaw.core.move import Move, classify_move, play_on_board
from chesslaw.core.rules import Rules
from chesslaw.core.types import Square, file_of, make_square, rank_of, validate_square

if TYPE_CHECKING:
    from chesslaw.core.piece import Piece
    from chesslaw.core.position import Position


_ROOK_CORNERS: dict[Square, MovedPieces] = {
    make_square(7, 0): MovedPieces.WHITE_QUEENSIDE_ROOK,
    make_square(7, 7): MovedPieces.WHITE_KINGSIDE_ROOK,
    make_square(0, 0): MovedPieces.BLACK_QUEENSIDE_ROOK,
    make_square(0, 7): MovedPieces.BLACK_KINGSIDE_ROOK,
}

_CASTLE_SIDE: dict[MoveFlag, CastlingSide] = {
    MoveFlag.CASTLE_KINGSIDE: CastlingSide.KINGSIDE,
    MoveFlag.CASTLE_QUEENSIDE: CastlingSide.QUEENSIDE,
}


def apply_move(position: Position, from_sq: Square, to_sq: Square) -> Move:
    """Commit the move *from_sq* → *to_sq* and return it, classified.

    The move must already be known legal for the side to move; only the
    mechanics are executed here (captures, en passant, castling rook,
    promotion, flags, turn, status). ``GameState.apply_move`` is the
    checked entry point.
    """
    validate_square(from_sq)
    validate_square(to_sq)
    piece = position.board[from_sq]
    if piece is None:
        raise EmptySquareError(from_sq)

    move = Move(from_sq, to_sq, classify_move(position, from_sq, to_sq))
    play_on_board(position.board, move)

    # En passant target lives for exactly one ply
    position.en_passant = None
    if move.flag == MoveFlag.DOUBLE_PAWN:
        position.en_passant = make_square(
            (rank_of(from_sq) + rank_of(to_sq)) // 2, file_of(from_sq)
        )

    _update_moved(position, move, piece)

    position.side_to_move = position.side_to_move.opposite
    position.status = Rules.game_status(position)
    return move


def _update_moved(position: Position, move: Move, piece: Piece) -> None:
    flags = MovedPieces.NONE
    if piece.piece_type == PieceType.KING:
        flags |= MovedPieces.king(piece.color)
        if move.is_castle:
            flags |= MovedPieces.rook(piece.color, _CASTLE_SIDE[move.flag])

    # A corner rook that moves away or is captured at home never returns.
    for sq in (move.from_sq, move.to_sq):
        if sq in _ROOK_CORNERS:
            flags |= _ROOK_CORNERS[sq]

    position.mark_moved(flags)
