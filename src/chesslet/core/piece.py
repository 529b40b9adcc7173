"""Colored pieces and their FEN / unicode spellings."""

from __future__ import annotations

from dataclasses import dataclass

from chesslet.core.enums import Color, PieceType

# Uncolored FEN letter; white pieces use the uppercase form.
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.ROOK: "r",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_TYPES_BY_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}

# Code points of the white glyphs (U+2654..U+2659); black ones sit six later.
_WHITE_GLYPHS: dict[PieceType, int] = {
    PieceType.KING: 0x2654,
    PieceType.QUEEN: 0x2655,
    PieceType.ROOK: 0x2656,
    PieceType.BISHOP: 0x2657,
    PieceType.KNIGHT: 0x2658,
    PieceType.PAWN: 0x2659,
}
_BLACK_GLYPH_SHIFT = 6


@dataclass(frozen=True, slots=True)
class Piece:
    """A colored piece on the board.

    Empty squares hold ``None`` rather than a piece, so an empty square never
    carries a color.
    """

    color: Color
    piece_type: PieceType

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Piece for a FEN letter: case gives the color, e.g. ``'n'`` is a black knight."""
        piece_type = _TYPES_BY_LETTER.get(char.lower()) if len(char) == 1 else None
        if piece_type is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, piece_type)

    @property
    def letter(self) -> str:
        """Uncolored (lowercase) type letter."""
        return _LETTERS[self.piece_type]

    @property
    def sign(self) -> int:
        """+1 for white, -1 for black: the side a material count favours."""
        return 1 if self.color == Color.WHITE else -1

    @property
    def symbol(self) -> str:
        """Unicode chess glyph, e.g. ♞."""
        code = _WHITE_GLYPHS[self.piece_type]
        if self.color == Color.BLACK:
            code += _BLACK_GLYPH_SHIFT
        return chr(code)

    def __str__(self) -> str:
        """FEN letter."""
        return self.letter.upper() if self.color == Color.WHITE else self.letter
