"""Abstract interface for the game layer.

Alternative front ends implement or consume this ABC; the stock
implementation is :class:`~chesslaw.game.controller.GameController`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

from chesslaw.core.enums import Color, MovedPieces

if TYPE_CHECKING:
    from chesslaw.core.types import Square
    from chesslaw.game.state import GameState


class IGameController(ABC):
    """Interface for the orchestrator that turns user intents into moves."""

    @property
    @abstractmethod
    def state(self) -> GameState: ...

    @abstractmethod
    def new_game(
        self,
        diagram: Sequence[str] | None = None,
        side_to_move: Color = Color.WHITE,
        moved: MovedPieces = MovedPieces.NONE,
        en_passant: Square | None = None,
    ) -> None:
        """Set up a new game (standard start unless *diagram* is given)."""

    @abstractmethod
    def select(self, sq: Square) -> set[Square]:
        """Select the piece on *sq*; return its legal destinations."""

    @abstractmethod
    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Undo the last move. Returns True on success."""
