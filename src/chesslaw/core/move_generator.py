"""Per-piece move generation, king-safety filtering and attack detection."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from chesslaw.core.enums import CastlingSide, Color, PieceType
from chesslaw.core.errors import EmptySquareError
from chesslaw.core.move import Move, classify_move, play_on_board
from chesslaw.core.piece import Piece
from chesslaw.core.types import Square, validate_square

if TYPE_CHECKING:
    from chesslaw.core.position import Position


# Offsets are (d_rank, d_file).
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# White advances toward rank 0, black toward rank 7.
_PAWN_STEP: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
_HOME_RANK: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}

_KING_HOME_FILE = 4
_CASTLING_ROOK_FILE: dict[CastlingSide, int] = {
    CastlingSide.KINGSIDE: 7,
    CastlingSide.QUEENSIDE: 0,
}

PatternFn: TypeAlias = Callable[["Position", Square, Color, bool], set[Square]]


def _on_board(rank: int, file: int) -> bool:
    return 0 <= rank < 8 and 0 <= file < 8


# -- Movement patterns -----------------------------------------------------
#
# Each pattern takes (position, square, color, attacks_only). With
# attacks_only the result is the set of squares the piece threatens, which
# differs from its move set only for pawns.


def _pawn_pattern(
    position: Position, sq: Square, color: Color, attacks_only: bool
) -> set[Square]:
    board = position.board
    rank, file = sq
    step = _PAWN_STEP[color]
    targets: set[Square] = set()

    ahead = rank + step
    if not 0 <= ahead < 8:
        return targets

    for df in (-1, 1):
        cap_file = file + df
        if not 0 <= cap_file < 8:
            continue
        cap_sq = (ahead, cap_file)
        if attacks_only:
            targets.add(cap_sq)
            continue
        target = board[cap_sq]
        if target is not None and target.color != color:
            targets.add(cap_sq)
        elif target is None and cap_sq == position.en_passant:
            # The pawn being passed must stand beside the capturer.
            if board[(rank, cap_file)] == Piece(color.opposite, PieceType.PAWN):
                targets.add(cap_sq)

    if attacks_only:
        return targets

    one_step = (ahead, file)
    if board.is_empty(one_step):
        targets.add(one_step)
        if rank == _PAWN_START_RANK[color]:
            two_step = (rank + 2 * step, file)
            if board.is_empty(two_step):
                targets.add(two_step)
    return targets


def _leaper(offsets: tuple[tuple[int, int], ...]) -> PatternFn:
    def pattern(
        position: Position, sq: Square, color: Color, attacks_only: bool
    ) -> set[Square]:
        board = position.board
        rank, file = sq
        targets: set[Square] = set()
        for dr, df in offsets:
            to_rank, to_file = rank + dr, file + df
            if not _on_board(to_rank, to_file):
                continue
            target = board[(to_rank, to_file)]
            if target is None or target.color != color:
                targets.add((to_rank, to_file))
        return targets

    return pattern


def _slider(directions: tuple[tuple[int, int], ...]) -> PatternFn:
    def pattern(
        position: Position, sq: Square, color: Color, attacks_only: bool
    ) -> set[Square]:
        board = position.board
        rank, file = sq
        targets: set[Square] = set()
        for dr, df in directions:
            to_rank, to_file = rank + dr, file + df
            while _on_board(to_rank, to_file):
                target = board[(to_rank, to_file)]
                if target is None:
                    targets.add((to_rank, to_file))
                else:
                    if target.color != color:
                        targets.add((to_rank, to_file))
                    break
                to_rank += dr
                to_file += df
        return targets

    return pattern


_PATTERNS: dict[PieceType, PatternFn] = {
    PieceType.PAWN: _pawn_pattern,
    PieceType.KNIGHT: _leaper(KNIGHT_OFFSETS),
    PieceType.BISHOP: _slider(BISHOP_DIRS),
    PieceType.ROOK: _slider(ROOK_DIRS),
    PieceType.QUEEN: _slider(QUEEN_DIRS),
    PieceType.KING: _leaper(KING_OFFSETS),
}


class MoveGenerator:
    """Generates moves for the pieces of a :class:`Position`.

    The generator never mutates the position it was given. Legality of a
    candidate is decided on a private copy with the move already played.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, sq: Square, ignore_check: bool = False) -> set[Square]:
        """Destination squares for the piece on *sq*.

        With *ignore_check* the result is the piece's raw attack pattern:
        no castling, no king-safety filter, and pawns report their capture
        diagonals instead of their pushes.
        """
        validate_square(sq)
        piece = self._board[sq]
        if piece is None:
            raise EmptySquareError(sq)

        if ignore_check:
            return self._attack_pattern(sq, piece)

        targets = _PATTERNS[piece.piece_type](self._pos, sq, piece.color, False)
        if piece.piece_type == PieceType.KING:
            targets |= self._castling_targets(sq, piece.color)
        return {
            to_sq for to_sq in targets if self._keeps_king_safe(sq, to_sq, piece)
        }

    def all_legal_moves(self, color: Color) -> list[Move]:
        """Every legal move for *color*, ordered by origin then destination."""
        moves: list[Move] = []
        for from_sq in self._board.all_pieces(color):
            for to_sq in sorted(self.legal_moves(from_sq)):
                flag = classify_move(self._pos, from_sq, to_sq)
                moves.append(Move(from_sq, to_sq, flag))
        return moves

    def has_legal_move(self, color: Color) -> bool:
        """Whether *color* has at least one legal move (stops at the first)."""
        return any(self.legal_moves(sq) for sq in self._board.all_pieces(color))

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = self._board.king_square(color)
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* inside the attack pattern of any piece of *by_color*?"""
        for from_sq, piece in self._board:
            if piece.color == by_color and sq in self._attack_pattern(from_sq, piece):
                return True
        return False

    # -- Internals ----------------------------------------------------------

    def _attack_pattern(self, sq: Square, piece: Piece) -> set[Square]:
        return _PATTERNS[piece.piece_type](self._pos, sq, piece.color, True)

    def _keeps_king_safe(
        self, from_sq: Square, to_sq: Square, piece: Piece
    ) -> bool:
        scratch = self._pos.copy()
        move = Move(from_sq, to_sq, classify_move(self._pos, from_sq, to_sq))
        play_on_board(scratch.board, move)
        return not MoveGenerator(scratch).is_in_check(piece.color)

    def _castling_targets(self, king_sq: Square, color: Color) -> set[Square]:
        targets: set[Square] = set()
        home = _HOME_RANK[color]
        if king_sq != (home, _KING_HOME_FILE):
            return targets
        if self.is_in_check(color):
            return targets

        board = self._board
        opponent = color.opposite
        rook = Piece(color, PieceType.ROOK)

        for side, rook_file in _CASTLING_ROOK_FILE.items():
            if not self._pos.castling_available(color, side):
                continue
            if board[(home, rook_file)] != rook:
                continue

            step = 1 if rook_file > _KING_HOME_FILE else -1
            between = range(_KING_HOME_FILE + step, rook_file, step)
            if any(not board.is_empty((home, f)) for f in between):
                continue

            passed = (home, _KING_HOME_FILE + step)
            landing = (home, _KING_HOME_FILE + 2 * step)
            if self.is_square_attacked(passed, opponent):
                continue
            if self.is_square_attacked(landing, opponent):
                continue
            targets.add(landing)
        return targets
