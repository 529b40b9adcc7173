"""Core domain layer: board, pieces and move generation.

Quick start::

    from chesslet.core import Board, Color, MoveGenerator

    board = Board.initial()
    gen = MoveGenerator(board)
    for move in gen.generate_moves(Color.WHITE):
        print(move)
"""

from chesslet.core.board import Board
from chesslet.core.enums import Color, GameResult, PieceType, SquareState
from chesslet.core.move import Move
from chesslet.core.move_generator import MoveGenerator
from chesslet.core.notation import (
    STARTING_PLACEMENT,
    board_from_fen,
    board_to_fen,
    move_to_str,
    parse_move,
)
from chesslet.core.piece import Piece
from chesslet.core.rules import Rules
from chesslet.core.types import Coord, on_board, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    "SquareState",
    # Types / helpers
    "Coord",
    "on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
    "move_to_str",
    "parse_move",
]
