"""Material minimax search (alpha-beta + iterative deepening)."""

from __future__ import annotations

import logging
import random
import time

from chesslet.core.board import Board
from chesslet.core.enums import Color
from chesslet.core.move import Move
from chesslet.core.move_generator import MoveGenerator
from chesslet.engine.evaluation import evaluate
from chesslet.engine.search import (
    HIBOUND,
    LOBOUND,
    CancelCheck,
    ElapsedClock,
    IEngine,
    SearchLimits,
    SearchResult,
    Shuffler,
)

_LOGGER = logging.getLogger(__name__)


def _never_cancelled() -> bool:
    return False


class MinimaxEngine(IEngine):
    """Alpha-beta minimax over material, deepened until half the time limit.

    The engine searches on the caller's board in place: every move it tries
    is undone before the next sibling is explored, so the board is unchanged
    once a search returns.

    Args:
        limits: Depth and time constraints.
        shuffle: In-place permutation applied to the root moves before each
            depth. Defaults to :meth:`random.Random.shuffle`; pass a no-op to
            get a deterministic root order.
        clock: Monotonic seconds source used to measure elapsed time.
        seed: Seed for the default shuffle; ignored when *shuffle* is given.
        unrestricted_black_double_step: Forwarded to :class:`MoveGenerator`.
    """

    __slots__ = (
        "_limits",
        "_shuffle",
        "_clock",
        "_nodes",
        "_movegen",
        "_unrestricted_black_double_step",
    )

    def __init__(
        self,
        limits: SearchLimits | None = None,
        *,
        shuffle: Shuffler | None = None,
        clock: ElapsedClock | None = None,
        seed: int | None = None,
        unrestricted_black_double_step: bool = False,
    ) -> None:
        self._limits = limits if limits is not None else SearchLimits()
        self._shuffle: Shuffler = shuffle if shuffle is not None else random.Random(seed).shuffle
        self._clock: ElapsedClock = clock if clock is not None else time.monotonic
        self._nodes = 0
        self._movegen: MoveGenerator | None = None
        self._unrestricted_black_double_step = unrestricted_black_double_step

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    @property
    def nodes(self) -> int:
        """Nodes visited since the last :meth:`search` started."""
        return self._nodes

    # ── Entry points ─────────────────────────────────────────────────────

    def minimax(self, board: Board, color: Color) -> Move | None:
        """Best move for *color*, or ``None`` if it has no moves."""
        return self.search(board, color).best_move

    def search(
        self,
        board: Board,
        color: Color,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult:
        """Iteratively deepen until the time budget is half spent.

        At least one depth always completes. The result is the one from
        the deepest completed depth.
        """
        limits = self._limits
        cancel_check = is_cancelled or _never_cancelled
        self._nodes = 0
        start = self._clock()
        depth = limits.start_depth

        while True:
            _LOGGER.debug("Searching to depth %d", depth)
            score, move = self.depth_limited_search(board, depth, color)
            result = SearchResult(move, score, depth, self._nodes)
            if move is None:
                _LOGGER.info("No moves for %s", color)
                break
            _LOGGER.debug("Best move at depth %d: %s (score %d)", depth, move, score)

            if limits.max_depth is not None and depth >= limits.max_depth:
                break
            if cancel_check():
                break
            if self._clock() - start >= limits.time_limit * 0.5:
                break
            depth += 1

        _LOGGER.info(
            "Best move: %s (score %d, depth %d, %d nodes, %.2fs)",
            result.best_move,
            result.score,
            result.depth,
            result.nodes,
            self._clock() - start,
        )
        return result

    # ── Root search ──────────────────────────────────────────────────────

    def depth_limited_search(
        self,
        board: Board,
        depth: int,
        color: Color,
    ) -> tuple[int, Move | None]:
        """Search every root move of *color* to *depth* plies.

        Root moves are shuffled first. The strictly best score wins, so among
        equal scores the earliest move in shuffled order is kept.
        """
        moves = self._generate(board, color)
        self._shuffle(moves)

        best_score = LOBOUND
        best_move: Move | None = None
        for move in moves:
            captured = board.apply_move(move)
            score = self.search_min(board, depth - 1, LOBOUND, HIBOUND, color)
            board.undo_move(move, captured)
            # A side with moves always gets one, even if every line loses.
            if best_move is None or score > best_score:
                best_score = score
                best_move = move
        return best_score, best_move

    # ── Alpha-beta ───────────────────────────────────────────────────────

    def search_max(
        self,
        board: Board,
        depth: int,
        alpha: int,
        beta: int,
        color: Color,
    ) -> int:
        """Best score *color* can force with *color* to move."""
        self._nodes += 1
        if depth == 0:
            return evaluate(board, color)
        if not board.has_king(color):
            # Losing later is less bad than losing now.
            return LOBOUND + depth

        for move in self._generate(board, color):
            captured = board.apply_move(move)
            score = self.search_min(board, depth - 1, alpha, beta, color)
            board.undo_move(move, captured)
            alpha = max(alpha, score)
            if beta <= alpha:
                break
        return alpha

    def search_min(
        self,
        board: Board,
        depth: int,
        alpha: int,
        beta: int,
        color: Color,
    ) -> int:
        """Best score for *color* when the opponent is to move."""
        self._nodes += 1
        if depth == 0:
            return evaluate(board, color)
        opponent = color.opposite
        if not board.has_king(opponent):
            return HIBOUND - depth

        for move in self._generate(board, opponent):
            captured = board.apply_move(move)
            score = self.search_max(board, depth - 1, alpha, beta, color)
            board.undo_move(move, captured)
            beta = min(beta, score)
            if beta <= alpha:
                break
        return beta

    # ── Internals ────────────────────────────────────────────────────────

    def _generate(self, board: Board, color: Color) -> list[Move]:
        movegen = self._movegen
        if movegen is None or movegen.board is not board:
            movegen = MoveGenerator(
                board,
                unrestricted_black_double_step=self._unrestricted_black_double_step,
            )
            self._movegen = movegen
        return movegen.generate_moves(color)
