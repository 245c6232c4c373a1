"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from chesslaw.core.enums import Color, PieceType
from chesslaw.core.errors import InvalidSquareError
from chesslaw.core.piece import Piece
from chesslaw.core.types import Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _checked(sq: Square) -> Square:
    # Negative indices would otherwise wrap around the grid.
    rank, file = sq
    if not (0 <= rank < 8 and 0 <= file < 8):
        raise InvalidSquareError(sq)
    return sq


class Board:
    """Mutable grid of optional pieces indexed by (rank, file) squares.

    Rank 0 is black's back rank, rank 7 is white's.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        rank, file = _checked(sq)
        return self._grid[rank][file]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        rank, file = _checked(sq)
        self._grid[rank][file] = piece

    def is_empty(self, sq: Square) -> bool:
        rank, file = _checked(sq)
        return self._grid[rank][file] is None

    def __iter__(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares with their pieces, rank 0 first."""
        for rank, row in enumerate(self._grid):
            for file, piece in enumerate(row):
                if piece is not None:
                    yield (rank, file), piece

    # -- Query helpers ------------------------------------------------------

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self if piece.color == color]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, piece in self
            if piece.color == color and piece.piece_type == piece_type
        ]

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        kings = self.pieces(color, PieceType.KING)
        if not kings:
            raise ValueError(f"No {color.name} king on board")
        return kings[0]

    def rows(self) -> list[list[Piece | None]]:
        """Copy of the grid as nested lists, rank 0 first."""
        return [row.copy() for row in self._grid]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * 8 for _ in range(8)]

    # -- Factories ----------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for file, pt in enumerate(_BACK_RANK):
            b[(0, file)] = Piece(Color.BLACK, pt)
            b[(1, file)] = Piece(Color.BLACK, PieceType.PAWN)
            b[(6, file)] = Piece(Color.WHITE, PieceType.PAWN)
            b[(7, file)] = Piece(Color.WHITE, pt)
        return b

    @classmethod
    def from_diagram(cls, rows: Sequence[str]) -> Board:
        """Build a board from eight strings of piece letters and dots.

        The first string is rank 0 (black's back rank)::

            Board.from_diagram([
                "....k...",
                "........",
                ...
                "....K...",
            ])
        """
        if len(rows) != 8:
            raise ValueError(f"Diagram needs 8 rows, got {len(rows)}")
        b = cls()
        for rank, row in enumerate(rows):
            if len(row) != 8:
                raise ValueError(f"Diagram row {rank} needs 8 squares: {row!r}")
            for file, char in enumerate(row):
                if char != ".":
                    b[(rank, file)] = Piece.from_char(char)
        return b

    def to_diagram(self) -> list[str]:
        return [
            "".join(str(p) if p else "." for p in row) for row in self._grid
        ]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows = [
            f"{8 - rank} {' '.join(line)}"
            for rank, line in enumerate(self.to_diagram())
        ]
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
