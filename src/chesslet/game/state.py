"""Game state machine: tracks phase, side to move and result."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chesslet.core.board import Board
from chesslet.core.enums import Color, GameResult
from chesslet.core.move_generator import MoveGenerator
from chesslet.core.notation import STARTING_PLACEMENT, board_from_fen, fen_side_to_move
from chesslet.core.rules import Rules
from chesslet.game.interfaces import GameEndReason, GamePhase

if TYPE_CHECKING:
    from chesslet.core.move import Move
    from chesslet.core.piece import Piece


@dataclass
class GameState:
    """Manages game lifecycle: board, side to move, phase and result.

    Only the last move is remembered; there is no takeback history.
    ``unrestricted_black_double_step`` selects the pawn rule used for move
    lists and the no-moves check, and must match the engines in the game.
    This is a pure data/logic class with no I/O.
    """

    unrestricted_black_double_step: bool = False
    board: Board = field(init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    end_reason: GameEndReason = field(default=GameEndReason.NONE, init=False)
    last_move: Move | None = field(default=None, init=False)
    ply_count: int = field(default=0, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None, side_to_move: Color | None = None) -> None:
        """Initialise (or reset) the game.

        The side to move comes from *side_to_move*, else from the FEN, else white.
        """
        fen = fen or STARTING_PLACEMENT
        self.board = board_from_fen(fen)
        self.side_to_move = side_to_move if side_to_move is not None else fen_side_to_move(fen)
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.end_reason = GameEndReason.NONE
        self.last_move = None
        self.ply_count = 0
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> Piece | None:
        """Apply a validated move and return the captured piece, if any.

        Caller is responsible for legality check.
        """
        captured = self.board.apply_move(move)
        self.last_move = move
        self.ply_count += 1
        self.side_to_move = self.side_to_move.opposite
        self._check_game_over()
        return captured

    # ── Resignation ──────────────────────────────────────────────────────

    def resign(self, color: Color) -> None:
        self.result = GameResult.win_for(color.opposite)
        self.end_reason = GameEndReason.RESIGNATION
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def fullmove_display(self) -> int:
        """Current full-move number for display."""
        return (self.ply_count // 2) + 1

    def legal_moves(self) -> list[Move]:
        """Moves available to the side to move."""
        gen = MoveGenerator(
            self.board,
            unrestricted_black_double_step=self.unrestricted_black_double_step,
        )
        return gen.generate_moves(self.side_to_move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(
            self.board,
            self.side_to_move,
            unrestricted_black_double_step=self.unrestricted_black_double_step,
        )
        if result == GameResult.IN_PROGRESS:
            return
        self.result = result
        self.end_reason = (
            GameEndReason.NO_MOVES if result == GameResult.DRAW else GameEndReason.KING_CAPTURED
        )
        self.phase = GamePhase.GAME_OVER
