"""FEN piece-placement parsing and serialization.

Only the placement field is meaningful here: the board carries no side to
move, castling rights or clocks. Extra FEN fields are accepted and ignored.
"""

from __future__ import annotations

from chesslet.core.board import Board
from chesslet.core.enums import Color
from chesslet.core.piece import Piece
from chesslet.core.types import BOARD_SIZE

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_fen(fen: str) -> Board:
    """Parse the placement field of *fen* into a :class:`Board`."""
    parts = fen.split()
    if not parts:
        raise ValueError(f"Invalid FEN (empty): {fen!r}")

    rows = parts[0].split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    board = Board()
    # FEN lists rank 8 first, which is row 0.
    for row, row_text in enumerate(rows):
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[row, col] = Piece.from_char(ch)
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    return board


def board_to_fen(board: Board) -> str:
    """Serialize the piece placement of *board*."""
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        text = ""
        empty = 0
        for col in range(BOARD_SIZE):
            piece = board[row, col]
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)


def fen_side_to_move(fen: str) -> Color:
    """Side-to-move field of *fen*; white when the field is absent."""
    parts = fen.split()
    if len(parts) < 2 or parts[1] == "w":
        return Color.WHITE
    if parts[1] == "b":
        return Color.BLACK
    raise ValueError(f"Invalid FEN side-to-move field: {parts[1]!r}")
