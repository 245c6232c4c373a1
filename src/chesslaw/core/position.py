"""Position: complete rule state: board, side to move, castling, en passant."""

from __future__ import annotations

from chesslaw.core.board import Board
from chesslaw.core.enums import CastlingSide, Color, MovedPieces
from chesslaw.core.status import GameStatus
from chesslaw.core.types import Square


class Position:
    """Full chess rule state.

    Castling rights are not stored directly. ``moved`` records, set-only,
    which kings and home-corner rooks have left their squares; a side may
    castle while neither its king nor the matching rook is flagged.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "moved",
        "en_passant",
        "status",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        moved: MovedPieces = MovedPieces.NONE,
        en_passant: Square | None = None,
        status: GameStatus | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.moved = moved
        self.en_passant = en_passant
        self.status = status if status is not None else GameStatus.in_progress()

    @classmethod
    def initial(cls) -> Position:
        return cls()

    # ── Castling bookkeeping ─────────────────────────────────────────────

    def castling_available(self, color: Color, side: CastlingSide) -> bool:
        """Whether neither *color*'s king nor its *side* rook has moved."""
        blockers = MovedPieces.king(color) | MovedPieces.rook(color, side)
        return not self.moved & blockers

    def mark_moved(self, flags: MovedPieces) -> None:
        self.moved |= flags

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent snapshot; mutating it never touches this position."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            moved=self.moved,
            en_passant=self.en_passant,
            status=self.status,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.moved == other.moved
            and self.en_passant == other.en_passant
            and self.status == other.status
        )

    def __repr__(self) -> str:
        return (
            f"Position(side_to_move={self.side_to_move}, moved={self.moved!r}, "
            f"en_passant={self.en_passant}, status={self.status})\n{self.board!r}"
        )
