"""Tests for the Qt game bridge."""

from __future__ import annotations

import pytest
from PyQt6.QtTest import QSignalSpy

from chesslaw.bridge.qt_bridge import GameBridge
from chesslaw.core.enums import Color
from chesslaw.core.status import GameStatus
from chesslaw.game.controller import GameController
from chesslaw.game.state import MoveRecord
from diagrams import START


@pytest.fixture
def bridge(qapp: object) -> GameBridge:
    del qapp
    return GameBridge()


class TestGameBridge:
    def test_submit_move_emits_board(self, bridge: GameBridge) -> None:
        applied = QSignalSpy(bridge.move_applied)
        boards = QSignalSpy(bridge.board_changed)

        assert bridge.submit_move(6, 4, 4, 4)  # e2-e4

        assert len(applied) == 1
        assert isinstance(applied[0][0], MoveRecord)
        assert len(boards) == 1
        assert boards[0][0][4] == "....P..."

    def test_illegal_move_emits_rejected(self, bridge: GameBridge) -> None:
        rejected = QSignalSpy(bridge.move_rejected)
        boards = QSignalSpy(bridge.board_changed)

        assert not bridge.submit_move(6, 4, 3, 4)  # e2-e5

        assert len(rejected) == 1
        assert "Illegal move" in rejected[0][0]
        assert len(boards) == 0

    def test_select_emits_highlights(self, bridge: GameBridge) -> None:
        highlights = QSignalSpy(bridge.highlights_changed)

        bridge.select(7, 6)  # g1 knight

        assert len(highlights) == 1
        assert highlights[0][0] == [(5, 5), (5, 7)]

    def test_game_over(self, bridge: GameBridge) -> None:
        game_over = QSignalSpy(bridge.game_over)

        for move in ((6, 5, 5, 5), (1, 4, 3, 4), (6, 6, 4, 6), (0, 3, 4, 7)):
            assert bridge.submit_move(*move)

        assert len(game_over) == 1
        assert game_over[0][0] == GameStatus.checkmate(Color.WHITE)

    def test_reset_and_undo_publish_board(self, bridge: GameBridge) -> None:
        bridge.submit_move(6, 4, 4, 4)
        boards = QSignalSpy(bridge.board_changed)

        assert bridge.undo_move()
        bridge.reset()

        assert len(boards) == 2
        assert boards[0][0] == START
        assert boards[1][0] == START
        assert bridge.board_diagram() == START

    def test_shares_controller(self, qapp: object) -> None:
        del qapp
        ctrl = GameController()
        bridge = GameBridge(controller=ctrl)
        applied = QSignalSpy(bridge.move_applied)

        assert ctrl.submit_move((6, 4), (4, 4))
        assert len(applied) == 1
        assert bridge.controller is ctrl
