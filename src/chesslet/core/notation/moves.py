"""Coordinate move notation, e.g. ``e2e4``."""

from __future__ import annotations

from chesslet.core.move import Move
from chesslet.core.types import parse_square


def parse_move(text: str) -> Move:
    """Parse a four-character coordinate move such as ``'g1f3'``.

    Surrounding whitespace and letter case are ignored. Raises
    :class:`ValueError` for anything that is not two valid square names.
    """
    cleaned = text.strip().lower()
    if len(cleaned) != 4:
        raise ValueError(f"Invalid move (expected e.g. 'e2e4'): {text!r}")
    try:
        from_row, from_col = parse_square(cleaned[:2])
        to_row, to_col = parse_square(cleaned[2:])
    except ValueError:
        raise ValueError(f"Invalid move (expected e.g. 'e2e4'): {text!r}") from None
    return Move(from_row, from_col, to_row, to_col)


def move_to_str(move: Move) -> str:
    """Coordinate notation for *move*."""
    return str(move)
