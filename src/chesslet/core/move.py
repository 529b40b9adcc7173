"""Move value object (coordinate quadruple)."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chesslet.core.types import Coord, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable ``(from_row, from_col, to_row, to_col)`` quadruple.

    A move carries no legality of its own; moves are only known to be
    valid when they come out of :class:`~chesslet.core.move_generator.MoveGenerator`.
    """

    from_row: int
    from_col: int
    to_row: int
    to_col: int

    @property
    def origin(self) -> Coord:
        return self.from_row, self.from_col

    @property
    def target(self) -> Coord:
        return self.to_row, self.to_col

    def __iter__(self) -> Iterator[int]:
        yield self.from_row
        yield self.from_col
        yield self.to_row
        yield self.to_col

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return square_name(self.from_row, self.from_col) + square_name(
            self.to_row, self.to_col
        )
