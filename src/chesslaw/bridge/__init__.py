"""Qt adapter exposing a game controller to a PyQt6 presentation layer."""

from chesslaw.bridge.qt_bridge import GameBridge

__all__ = ["GameBridge"]
