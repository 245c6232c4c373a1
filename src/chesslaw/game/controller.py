"""GameController: turns user intents into checked moves.

Coordinates: GameState, piece selection for highlighting, listeners.
Emits events via simple callbacks so a UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from chesslaw.core.enums import Color, MovedPieces
from chesslaw.core.errors import ChessRuleError
from chesslaw.core.move import Move
from chesslaw.core.status import GameStatus
from chesslaw.core.types import Square, is_valid_square
from chesslaw.game.interfaces import IGameController
from chesslaw.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
UndoCallback = Callable[[Move, GameState], None]
GameOverCallback = Callable[[GameStatus], None]
ResetCallback = Callable[[GameState], None]
RejectedCallback = Callable[[Square, Square, str], None]  # from, to, reason


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_undo: list[UndoCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Validates moves coming from an input layer and notifies listeners.

    Rule violations never escape :meth:`submit_move`: they are logged,
    reported through ``events.on_rejected`` and turned into ``False``.

    Thread-safety: one controller per game, driven from a single thread.
    """

    __slots__ = ("_state", "_selected", "events")

    def __init__(self, state: GameState | None = None) -> None:
        self._state = state if state is not None else GameState()
        self._selected: Square | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def selected(self) -> Square | None:
        """Square of the currently selected piece, if any."""
        return self._selected

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        diagram: Sequence[str] | None = None,
        side_to_move: Color = Color.WHITE,
        moved: MovedPieces = MovedPieces.NONE,
        en_passant: Square | None = None,
    ) -> None:
        self._state.setup(
            diagram, side_to_move=side_to_move, moved=moved, en_passant=en_passant
        )
        self._selected = None
        _LOGGER.debug("New game, %s to move", self._state.side_to_move)

        for cb in self.events.on_reset:
            cb(self._state)
        if self._state.is_game_over:
            self._emit_game_over()

    def reset(self) -> None:
        """Start over from the standard position."""
        self.new_game()

    def select(self, sq: Square) -> set[Square]:
        if not is_valid_square(sq):
            _LOGGER.warning("Ignoring selection of invalid square %r", sq)
            self._selected = None
            return set()

        targets = self._state.legal_moves(sq)
        self._selected = sq if targets else None
        return targets

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        try:
            record = self._state.apply_move(from_sq, to_sq)
        except ChessRuleError as exc:
            _LOGGER.warning("Rejected move %r -> %r: %s", from_sq, to_sq, exc)
            for cb in self.events.on_rejected:
                cb(from_sq, to_sq, str(exc))
            return False

        self._selected = None
        _LOGGER.debug("Applied %s (%s)", record.move, record.move.flag.name)

        for cb in self.events.on_move:
            cb(record, self._state)
        if record.status.is_over:
            self._emit_game_over()
        return True

    def move_selected(self, to_sq: Square) -> bool:
        """Move the selected piece to *to_sq*. False when nothing is selected."""
        if self._selected is None:
            return False
        return self.submit_move(self._selected, to_sq)

    def undo_move(self) -> bool:
        move = self._state.undo_last_move()
        if move is None:
            return False

        self._selected = None
        _LOGGER.debug("Undid %s", move)
        for cb in self.events.on_undo:
            cb(move, self._state)
        return True

    # ── Internal ─────────────────────────────────────────────────────────

    def _emit_game_over(self) -> None:
        status = self._state.status
        _LOGGER.info("Game over: %s", status)
        for cb in self.events.on_game_over:
            cb(status)
