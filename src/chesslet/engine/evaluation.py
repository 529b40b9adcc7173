"""Material evaluation."""

from __future__ import annotations

from chesslet.core.board import Board
from chesslet.core.enums import Color, PieceType

# Shannon (1949) weights; the king outweighs everything else combined.
PIECE_WEIGHTS: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.ROOK: 5,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.QUEEN: 9,
    PieceType.KING: 200,
}


def material(board: Board) -> int:
    """Material balance from white's point of view."""
    score = 0
    for _, piece in board.occupied():
        score += piece.sign * PIECE_WEIGHTS[piece.piece_type]
    return score


def evaluate(board: Board, color: Color) -> int:
    """Material balance from *color*'s point of view."""
    score = material(board)
    return score if color == Color.WHITE else -score
