"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesslaw.core.enums import Color, PieceType

_LETTERS = "PNBRQK"
_WHITE_SYMBOLS = "♙♘♗♖♕♔"
_BLACK_SYMBOLS = "♟♞♝♜♛♚"

# Diagram letter ↔ (Color, PieceType); uppercase = white, lowercase = black
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {}
_UNICODE: dict[tuple[Color, PieceType], str] = {}
for _idx, _letter in enumerate(_LETTERS):
    _ptype = PieceType(_idx + 1)
    _CHAR_MAP[_letter] = (Color.WHITE, _ptype)
    _CHAR_MAP[_letter.lower()] = (Color.BLACK, _ptype)
    _UNICODE[(Color.WHITE, _ptype)] = _WHITE_SYMBOLS[_idx]
    _UNICODE[(Color.BLACK, _ptype)] = _BLACK_SYMBOLS[_idx]

del _idx, _letter, _ptype

_DIAGRAM_CHARS: dict[tuple[Color, PieceType], str] = {
    v: k for k, v in _CHAR_MAP.items()
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: a piece of one color and kind."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Diagram letter, e.g. 'N' for a white knight, 'n' for a black one."""
        return _DIAGRAM_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]
