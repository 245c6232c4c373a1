"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chesslaw.core import Position, MoveGenerator, apply_move, parse_square

    pos = Position.initial()
    gen = MoveGenerator(pos)
    print(gen.legal_moves(parse_square("e2")))
    apply_move(pos, parse_square("e2"), parse_square("e4"))
"""

from chesslaw.core.applier import apply_move
from chesslaw.core.board import Board
from chesslaw.core.enums import (
    CastlingSide,
    Color,
    MovedPieces,
    MoveFlag,
    PieceType,
    StatusKind,
)
from chesslaw.core.errors import (
    ChessRuleError,
    EmptySquareError,
    GameOverError,
    IllegalMoveError,
    InvalidSquareError,
)
from chesslaw.core.move import Move, classify_move
from chesslaw.core.move_generator import MoveGenerator
from chesslaw.core.piece import Piece
from chesslaw.core.position import Position
from chesslaw.core.rules import Rules
from chesslaw.core.status import GameStatus
from chesslaw.core.types import (
    Square,
    file_of,
    is_valid_square,
    make_square,
    parse_square,
    rank_of,
    square_name,
    validate_square,
)

__all__ = [
    # Enums / flags
    "CastlingSide",
    "Color",
    "MovedPieces",
    "MoveFlag",
    "PieceType",
    "StatusKind",
    # Errors
    "ChessRuleError",
    "EmptySquareError",
    "GameOverError",
    "IllegalMoveError",
    "InvalidSquareError",
    # Types / helpers
    "Square",
    "file_of",
    "is_valid_square",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    "validate_square",
    # Domain objects
    "Board",
    "GameStatus",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Operations
    "apply_move",
    "classify_move",
]
