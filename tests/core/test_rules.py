"""Tests for Rules: king capture and blocked positions."""

from chesslet.core.board import Board
from chesslet.core.enums import Color, GameResult
from chesslet.core.notation import board_from_fen
from chesslet.core.rules import Rules


class TestKingCapture:
    def test_starting_position_in_progress(self, initial_board: Board) -> None:
        assert Rules.king_captured(initial_board) is None
        assert Rules.game_result(initial_board, Color.WHITE) == GameResult.IN_PROGRESS

    def test_black_king_gone(self) -> None:
        board = board_from_fen("R7/8/8/8/8/8/8/4K3")
        assert Rules.king_captured(board) == Color.BLACK
        assert Rules.game_result(board, Color.BLACK) == GameResult.WHITE_WINS

    def test_white_king_gone(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/r7")
        assert Rules.game_result(board, Color.WHITE) == GameResult.BLACK_WINS


class TestNoMoves:
    def test_shut_in_side_draws(self) -> None:
        board = board_from_fen("KP6/PP6/8/8/8/8/8/7k")
        assert not Rules.has_moves(board, Color.WHITE)
        assert Rules.game_result(board, Color.WHITE) == GameResult.DRAW

    def test_other_side_still_plays(self) -> None:
        board = board_from_fen("KP6/PP6/8/8/8/8/8/7k")
        assert Rules.has_moves(board, Color.BLACK)
        assert Rules.game_result(board, Color.BLACK) == GameResult.IN_PROGRESS

    def test_pawn_rule_flag_is_forwarded(self) -> None:
        board = board_from_fen("KP6/PP6/8/8/8/8/8/7k")
        result = Rules.game_result(board, Color.WHITE, unrestricted_black_double_step=True)
        assert result == GameResult.DRAW
        assert Rules.has_moves(board, Color.BLACK, unrestricted_black_double_step=True)
