"""Game state: the checked command/query boundary of one game."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from chesslaw.core.applier import apply_move
from chesslaw.core.board import Board
from chesslaw.core.enums import CastlingSide, Color, MovedPieces, MoveFlag, PieceType
from chesslaw.core.errors import GameOverError, IllegalMoveError
from chesslaw.core.move import Move
from chesslaw.core.move_generator import MoveGenerator
from chesslaw.core.piece import Piece
from chesslaw.core.position import Position
from chesslaw.core.rules import Rules
from chesslaw.core.status import GameStatus
from chesslaw.core.types import Square, file_of, make_square, rank_of, validate_square


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    captured: Piece | None = None
    was_check: bool = False
    status: GameStatus = field(default_factory=GameStatus.in_progress)

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass
class GameState:
    """Owns one game's :class:`Position` and guards every mutation of it.

    Moves go through :meth:`apply_move`, which rejects anything that is not
    a legal move for the side to move and leaves the position untouched in
    that case. This is a pure data/logic class with no threading or UI.
    """

    position: Position = field(init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    _snapshots: list[Position] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.setup()

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        diagram: Sequence[str] | None = None,
        side_to_move: Color = Color.WHITE,
        moved: MovedPieces = MovedPieces.NONE,
        en_passant: Square | None = None,
    ) -> None:
        """Initialise (or reset) the game.

        Args:
            diagram: Eight rows of piece letters and dots, rank 0 (black's
                back rank) first. ``None`` means the standard start.
            side_to_move: Color to move first.
            moved: Castling pieces already considered moved.
            en_passant: En-passant target square valid for the first ply.
        """
        board = Board.initial() if diagram is None else Board.from_diagram(diagram)
        for color in Color:
            kings = board.pieces(color, PieceType.KING)
            if len(kings) != 1:
                raise ValueError(
                    f"{color.name} needs exactly one king, got {len(kings)}"
                )
        if en_passant is not None:
            validate_square(en_passant)

        position = Position(
            board=board,
            side_to_move=side_to_move,
            moved=moved,
            en_passant=en_passant,
        )
        waiting = side_to_move.opposite
        if Rules.is_in_check(position, waiting):
            raise ValueError(f"{waiting.name} is in check but not to move")
        position.status = Rules.game_status(position)

        self.position = position
        self.move_history.clear()
        self._snapshots.clear()

    def reset(self) -> None:
        """Standard start: full castling rights, no en passant, in progress."""
        self.setup()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, from_sq: Square, to_sq: Square) -> MoveRecord:
        """Apply a move after checking it is legal for the side to move.

        Raises:
            InvalidSquareError: either square is off the board.
            GameOverError: the game already ended.
            IllegalMoveError: the move is not legal for the side to move.
        """
        validate_square(from_sq)
        validate_square(to_sq)

        if self.is_game_over:
            raise GameOverError(from_sq, to_sq, f"game is over ({self.status})")

        piece = self.position.board[from_sq]
        if piece is None:
            raise IllegalMoveError(from_sq, to_sq, "no piece on the origin square")
        if piece.color != self.side_to_move:
            raise IllegalMoveError(from_sq, to_sq, f"{self.side_to_move} is to move")
        if to_sq not in MoveGenerator(self.position).legal_moves(from_sq):
            raise IllegalMoveError(from_sq, to_sq)

        before = self.position.copy()
        try:
            move = apply_move(self.position, from_sq, to_sq)
        except Exception:
            self.position = before
            raise

        if move.flag == MoveFlag.EN_PASSANT:
            captured = before.board[make_square(rank_of(from_sq), file_of(to_sq))]
        else:
            captured = before.board[to_sq]

        record = MoveRecord(
            move=move,
            piece=piece,
            captured=captured,
            was_check=Rules.is_in_check(self.position),
            status=self.position.status,
        )
        self._snapshots.append(before)
        self.move_history.append(record)
        return record

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self.position = self._snapshots.pop()
        return record.move

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self.position.board

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def status(self) -> GameStatus:
        return self.position.status

    @property
    def is_game_over(self) -> bool:
        return self.position.status.is_over

    @property
    def en_passant(self) -> Square | None:
        return self.position.en_passant

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def last_move(self) -> Move | None:
        return self.move_history[-1].move if self.move_history else None

    def castling_available(self, color: Color, side: CastlingSide) -> bool:
        return self.position.castling_available(color, side)

    def is_in_check(self) -> bool:
        return Rules.is_in_check(self.position)

    def piece_at(self, sq: Square) -> Piece | None:
        validate_square(sq)
        return self.position.board[sq]

    def legal_moves(self, sq: Square) -> set[Square]:
        """Legal destinations for the piece on *sq*.

        Empty for an empty square, for a piece of the side not to move, and
        after the game has ended.
        """
        validate_square(sq)
        piece = self.position.board[sq]
        if piece is None or piece.color != self.side_to_move or self.is_game_over:
            return set()
        return MoveGenerator(self.position).legal_moves(sq)

    def all_legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        if self.is_game_over:
            return []
        return MoveGenerator(self.position).all_legal_moves(self.side_to_move)
