"""Square type alias and coordinate helpers.

Board layout (rank, file), rank 0 is black's back rank:
    a8=(0, 0), b8=(0, 1), ..., h8=(0, 7)
    ...
    a1=(7, 0), b1=(7, 1), ..., h1=(7, 7)
"""

from __future__ import annotations

from typing import TypeAlias

from chesslaw.core.errors import InvalidSquareError

Square: TypeAlias = tuple[int, int]  # (rank, file), each 0–7


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (0 = 8th rank)."""
    return sq[0]


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq[1]


def make_square(rank: int, file: int) -> Square:
    """Create square from rank (0–7) and file (0–7)."""
    return (rank, file)


def is_valid_square(sq: object) -> bool:
    """Check whether *sq* is an on-board (rank, file) pair."""
    if not isinstance(sq, tuple) or len(sq) != 2:
        return False
    rank, file = sq
    return (
        isinstance(rank, int)
        and isinstance(file, int)
        and 0 <= rank < 8
        and 0 <= file < 8
    )


def validate_square(sq: object) -> Square:
    """Return *sq* unchanged, or raise :class:`InvalidSquareError`."""
    if not is_valid_square(sq):
        raise InvalidSquareError(sq)
    return sq  # type: ignore[return-value]


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (7, 4) → 'e1'."""
    return chr(ord("a") + file_of(sq)) + str(8 - rank_of(sq))


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise InvalidSquareError(name)
    return make_square(8 - int(name[1]), ord(name[0]) - ord("a"))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ((0, f) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((1, f) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((2, f) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((3, f) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((4, f) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((5, f) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((6, f) for f in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = ((7, f) for f in range(8))
