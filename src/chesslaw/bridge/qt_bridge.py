"""Qt bridge publishing game events as signals for a board view."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chesslaw.core.move import Move
from chesslaw.core.status import GameStatus
from chesslaw.core.types import Square
from chesslaw.game.controller import GameController
from chesslaw.game.state import GameState, MoveRecord


class GameBridge(QObject):
    """Slots take user intents as plain ints; signals carry engine output.

    Signals:
        board_changed(list[str]): board diagram, rank 0 first.
        move_applied(MoveRecord): a move was committed.
        move_rejected(str): an intent was refused, with the reason.
        game_over(GameStatus): checkmate or stalemate reached.
        highlights_changed(list[tuple[int, int]]): squares to highlight.
    """

    board_changed = pyqtSignal(object)
    move_applied = pyqtSignal(object)
    move_rejected = pyqtSignal(str)
    game_over = pyqtSignal(object)
    highlights_changed = pyqtSignal(object)

    def __init__(
        self,
        *,
        controller: GameController | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller if controller is not None else GameController()

        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_undo.append(self._on_undo)
        events.on_reset.append(self._on_reset)
        events.on_game_over.append(self._on_game_over)
        events.on_rejected.append(self._on_rejected)

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── Slots ────────────────────────────────────────────────────────────

    @pyqtSlot()
    def reset(self) -> None:
        self._controller.new_game()

    @pyqtSlot(int, int)
    def select(self, rank: int, file: int) -> None:
        """Select a piece and publish its legal destinations."""
        targets = self._controller.select((rank, file))
        self.highlights_changed.emit(sorted(targets))

    @pyqtSlot(int, int, int, int, result=bool)
    def submit_move(
        self, from_rank: int, from_file: int, to_rank: int, to_file: int
    ) -> bool:
        return self._controller.submit_move((from_rank, from_file), (to_rank, to_file))

    @pyqtSlot(result=bool)
    def undo_move(self) -> bool:
        return self._controller.undo_move()

    def board_diagram(self) -> list[str]:
        return self._controller.state.board.to_diagram()

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_move(self, record: MoveRecord, state: GameState) -> None:
        self.move_applied.emit(record)
        self._publish_board(state)

    def _on_undo(self, _move: Move, state: GameState) -> None:
        self._publish_board(state)

    def _on_reset(self, state: GameState) -> None:
        self._publish_board(state)

    def _on_game_over(self, status: GameStatus) -> None:
        self.game_over.emit(status)

    def _on_rejected(self, _from_sq: Square, _to_sq: Square, reason: str) -> None:
        self.move_rejected.emit(reason)

    def _publish_board(self, state: GameState) -> None:
        self.highlights_changed.emit([])
        self.board_changed.emit(state.board.to_diagram())
