"""Notation package: square names, coordinate moves and FEN piece placement."""

from chesslet.core.notation.fen import (
    STARTING_PLACEMENT,
    board_from_fen,
    board_to_fen,
    fen_side_to_move,
)
from chesslet.core.notation.moves import move_to_str, parse_move
from chesslet.core.types import parse_square, square_name

__all__ = [
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
    "fen_side_to_move",
    "move_to_str",
    "parse_move",
    "parse_square",
    "square_name",
]
