"""Tests for the Piece value object."""

import pytest

from chesslet.core.enums import Color, PieceType
from chesslet.core.piece import Piece


class TestFenLetters:
    @pytest.mark.parametrize(
        "char, color, piece_type",
        [
            ("P", Color.WHITE, PieceType.PAWN),
            ("R", Color.WHITE, PieceType.ROOK),
            ("n", Color.BLACK, PieceType.KNIGHT),
            ("b", Color.BLACK, PieceType.BISHOP),
            ("Q", Color.WHITE, PieceType.QUEEN),
            ("k", Color.BLACK, PieceType.KING),
        ],
    )
    def test_from_char(self, char: str, color: Color, piece_type: PieceType) -> None:
        piece = Piece.from_char(char)
        assert piece == Piece(color, piece_type)
        assert str(piece) == char

    @pytest.mark.parametrize("char", ["x", "1", "", "Kq", " "])
    def test_invalid_char(self, char: str) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char(char)

    def test_letter_is_uncolored(self) -> None:
        assert Piece(Color.WHITE, PieceType.KNIGHT).letter == "n"
        assert Piece(Color.BLACK, PieceType.KNIGHT).letter == "n"


class TestDerivedValues:
    def test_sign(self) -> None:
        assert Piece(Color.WHITE, PieceType.PAWN).sign == 1
        assert Piece(Color.BLACK, PieceType.PAWN).sign == -1

    @pytest.mark.parametrize(
        "piece_type, white, black",
        [
            (PieceType.KING, "♔", "♚"),
            (PieceType.QUEEN, "♕", "♛"),
            (PieceType.ROOK, "♖", "♜"),
            (PieceType.BISHOP, "♗", "♝"),
            (PieceType.KNIGHT, "♘", "♞"),
            (PieceType.PAWN, "♙", "♟"),
        ],
    )
    def test_symbol(self, piece_type: PieceType, white: str, black: str) -> None:
        assert Piece(Color.WHITE, piece_type).symbol == white
        assert Piece(Color.BLACK, piece_type).symbol == black

    def test_immutable(self) -> None:
        piece = Piece(Color.WHITE, PieceType.ROOK)
        with pytest.raises(AttributeError):
            piece.color = Color.BLACK  # type: ignore[misc]
