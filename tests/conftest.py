"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from chesslet.core.board import Board
from chesslet.core.move import Move
from chesslet.engine.minimax import MinimaxEngine
from chesslet.engine.search import SearchLimits


def keep_order(moves: list[Move]) -> None:
    """Shuffle stand-in that leaves generation order untouched."""


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def make_engine() -> Iterator[Callable[..., MinimaxEngine]]:
    """Factory for engines with a pinned root order and no time pressure."""

    def factory(max_depth: int = 2, time_limit: float = 0.0, **kwargs) -> MinimaxEngine:
        kwargs.setdefault("shuffle", keep_order)
        limits = SearchLimits(time_limit=time_limit, max_depth=max_depth)
        return MinimaxEngine(limits, **kwargs)

    yield factory


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user configuration out of the tests."""
    for var in (
        "CHESSLET_CONFIG",
        "CHESSLET_TIME_LIMIT",
        "CHESSLET_MAX_DEPTH",
        "CHESSLET_SEED",
        "CHESSLET_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
