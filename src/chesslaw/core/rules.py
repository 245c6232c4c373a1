"""High-level chess rules: check, checkmate and stalemate detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesslaw.core.enums import Color
from chesslaw.core.move_generator import MoveGenerator
from chesslaw.core.status import GameStatus
from chesslaw.core.types import Square, validate_square

if TYPE_CHECKING:
    from chesslaw.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Every query is a pure read; it works the same on the live position and
    on a hypothetical copy.
    """

    @staticmethod
    def is_in_check(position: Position, color: Color | None = None) -> bool:
        """Is *color*'s king (default: side to move) attacked?"""
        if color is None:
            color = position.side_to_move
        return MoveGenerator(position).is_in_check(color)

    @staticmethod
    def is_attacked(position: Position, sq: Square, by_color: Color) -> bool:
        validate_square(sq)
        return MoveGenerator(position).is_square_attacked(sq, by_color)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        color = position.side_to_move
        gen = MoveGenerator(position)
        return gen.is_in_check(color) and not gen.has_legal_move(color)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        color = position.side_to_move
        gen = MoveGenerator(position)
        return not gen.is_in_check(color) and not gen.has_legal_move(color)

    @staticmethod
    def game_status(position: Position) -> GameStatus:
        """Terminal status for the side to move."""
        color = position.side_to_move
        gen = MoveGenerator(position)
        if gen.has_legal_move(color):
            return GameStatus.in_progress()
        if gen.is_in_check(color):
            return GameStatus.checkmate(color)
        return GameStatus.stalemate(color)
