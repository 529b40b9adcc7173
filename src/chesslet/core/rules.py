"""Game-ending rules for king-capture chess."""

from __future__ import annotations

from chesslet.core.board import Board
from chesslet.core.enums import Color, GameResult
from chesslet.core.move_generator import MoveGenerator


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    There is no check or checkmate: a game is won by capturing the king.
    A side with no moves at all ends the game as a draw.
    """

    @staticmethod
    def king_captured(board: Board) -> Color | None:
        """Color whose king is gone, if any."""
        for color in Color:
            if not board.has_king(color):
                return color
        return None

    @staticmethod
    def has_moves(
        board: Board,
        color: Color,
        *,
        unrestricted_black_double_step: bool = False,
    ) -> bool:
        gen = MoveGenerator(
            board,
            unrestricted_black_double_step=unrestricted_black_double_step,
        )
        return bool(gen.generate_moves(color))

    @staticmethod
    def game_result(
        board: Board,
        side_to_move: Color,
        *,
        unrestricted_black_double_step: bool = False,
    ) -> GameResult:
        loser = Rules.king_captured(board)
        if loser is not None:
            return GameResult.win_for(loser.opposite)
        if not Rules.has_moves(
            board,
            side_to_move,
            unrestricted_black_double_step=unrestricted_black_double_step,
        ):
            return GameResult.DRAW
        return GameResult.IN_PROGRESS
