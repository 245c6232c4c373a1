"""Core enumerations and flags for the chess rules domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveFlag(IntEnum):
    """Special move classification."""

    NORMAL = 0
    DOUBLE_PAWN = 1
    EN_PASSANT = 2
    CASTLE_KINGSIDE = 3
    CASTLE_QUEENSIDE = 4
    PROMOTION = 5


class CastlingSide(IntEnum):
    """Which rook a king castles with."""

    KINGSIDE = 0
    QUEENSIDE = 1


class MovedPieces(IntFlag):
    """Set-only flags recording which castling pieces have left home.

    Castling availability is derived from these: a side may castle with a
    rook only while neither its king bit nor that rook's bit is set.
    """

    NONE = 0
    WHITE_KING = auto()
    WHITE_KINGSIDE_ROOK = auto()
    WHITE_QUEENSIDE_ROOK = auto()
    BLACK_KING = auto()
    BLACK_KINGSIDE_ROOK = auto()
    BLACK_QUEENSIDE_ROOK = auto()

    WHITE_ALL = WHITE_KING | WHITE_KINGSIDE_ROOK | WHITE_QUEENSIDE_ROOK
    BLACK_ALL = BLACK_KING | BLACK_KINGSIDE_ROOK | BLACK_QUEENSIDE_ROOK
    ALL = WHITE_ALL | BLACK_ALL

    @classmethod
    def king(cls, color: Color) -> MovedPieces:
        return cls.WHITE_KING if color == Color.WHITE else cls.BLACK_KING

    @classmethod
    def rook(cls, color: Color, side: CastlingSide) -> MovedPieces:
        if color == Color.WHITE:
            if side == CastlingSide.KINGSIDE:
                return cls.WHITE_KINGSIDE_ROOK
            return cls.WHITE_QUEENSIDE_ROOK
        if side == CastlingSide.KINGSIDE:
            return cls.BLACK_KINGSIDE_ROOK
        return cls.BLACK_QUEENSIDE_ROOK


class StatusKind(IntEnum):
    """Terminal classification of a position."""

    IN_PROGRESS = 0
    CHECKMATE = 1
    STALEMATE = 2
