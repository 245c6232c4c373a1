"""Game status value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesslaw.core.enums import Color, StatusKind


@dataclass(frozen=True, slots=True)
class GameStatus:
    """In progress, or checkmate/stalemate of the side that cannot move."""

    kind: StatusKind = StatusKind.IN_PROGRESS
    color: Color | None = None

    @classmethod
    def in_progress(cls) -> GameStatus:
        return cls()

    @classmethod
    def checkmate(cls, color: Color) -> GameStatus:
        """*color* is mated."""
        return cls(StatusKind.CHECKMATE, color)

    @classmethod
    def stalemate(cls, color: Color) -> GameStatus:
        """*color* is to move and has no legal move, but is not in check."""
        return cls(StatusKind.STALEMATE, color)

    @property
    def is_over(self) -> bool:
        return self.kind != StatusKind.IN_PROGRESS

    @property
    def winner(self) -> Color | None:
        """The mating side, or None when the game is not won."""
        if self.kind == StatusKind.CHECKMATE and self.color is not None:
            return self.color.opposite
        return None

    def __str__(self) -> str:
        if self.kind == StatusKind.IN_PROGRESS:
            return "in progress"
        return f"{self.kind.name.lower()} ({self.color})"
