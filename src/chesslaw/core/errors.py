"""Exceptions raised when a caller breaks the engine's contract."""

from __future__ import annotations


class ChessRuleError(Exception):
    """Base class for every rule-contract violation."""


class InvalidSquareError(ChessRuleError, ValueError):
    """A coordinate outside the 0–7 range (or not a coordinate at all)."""

    def __init__(self, square: object) -> None:
        super().__init__(f"Invalid square: {square!r}")
        self.square = square


class EmptySquareError(ChessRuleError):
    """Move generation was requested for a square with no piece on it."""

    def __init__(self, square: object) -> None:
        super().__init__(f"No piece on square {square!r}")
        self.square = square


class IllegalMoveError(ChessRuleError):
    """The (from, to) pair is not a legal move for the side to move."""

    def __init__(self, from_sq: object, to_sq: object, reason: str = "") -> None:
        message = f"Illegal move {from_sq!r} -> {to_sq!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.from_sq = from_sq
        self.to_sq = to_sq


class GameOverError(IllegalMoveError):
    """A move was attempted after checkmate or stalemate."""
