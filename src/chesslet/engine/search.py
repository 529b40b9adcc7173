"""Shared engine search models and protocol."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from chesslet.core.move import Move

if TYPE_CHECKING:
    from chesslet.core.board import Board
    from chesslet.core.enums import Color

# Score bounds. A king capture scores near these, offset by remaining depth.
LOBOUND = -9999
HIBOUND = 9999

CancelCheck = Callable[[], bool]
ElapsedClock = Callable[[], float]
Shuffler = Callable[[list[Move]], None]


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation.

    Iterative deepening starts at ``start_depth`` and keeps going while less
    than half of ``time_limit`` (seconds) has elapsed. The check happens
    between depths only, so a single depth may overrun the limit.
    """

    time_limit: float = 3.0
    start_depth: int = 2
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.time_limit < 0:
            raise ValueError("Time limit must be >= 0")
        if self.start_depth < 1:
            raise ValueError("Search depth must be >= 1")
        if self.max_depth is not None and self.max_depth < self.start_depth:
            raise ValueError("max_depth must be >= start_depth")


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result of the last fully completed depth."""

    best_move: Move | None
    score: int
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for engines used by the game layer."""

    def search(
        self,
        board: Board,
        color: Color,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult: ...
