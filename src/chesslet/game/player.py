"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from chesslet.core.enums import Color
from chesslet.game.interfaces import IPlayer

if TYPE_CHECKING:
    from chesslet.core.board import Board
    from chesslet.core.move import Move
    from chesslet.engine.search import IEngine, SearchResult


class HumanPlayer(IPlayer):
    """A human participant whose moves come from a reader callback.

    Args:
        color: Side the human plays.
        name: Display name.
        read_move: ``(Board) -> Move | None`` that returns the next move the
            human typed, or ``None`` to resign.
    """

    __slots__ = ("_color", "_name", "_read_move")

    def __init__(
        self,
        color: Color,
        name: str = "",
        read_move: Callable[[Board], Move | None] | None = None,
    ) -> None:
        self._color = color
        self._name = name or f"Player ({color})"
        self._read_move = read_move

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def choose_move(self, board: Board) -> Move | None:
        if self._read_move is None:
            return None
        return self._read_move(board)


class AIPlayer(IPlayer):
    """An AI participant that asks an engine for its move.

    The last search result is kept on :attr:`last_result` for display.
    """

    __slots__ = ("_color", "_name", "_engine", "last_result")

    def __init__(self, color: Color, engine: IEngine, name: str = "Engine") -> None:
        self._color = color
        self._name = name
        self._engine = engine
        self.last_result: SearchResult | None = None

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def choose_move(self, board: Board) -> Move | None:
        self.last_result = self._engine.search(board, self._color)
        return self.last_result.best_move
