"""Coordinate type aliases and helpers.

Board layout (row-major, black at the top):
    row 0 = rank 8 (black back rank), row 7 = rank 1 (white back rank)
    col 0 = file a, col 7 = file h
"""

from __future__ import annotations

from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]  # (row, col), each 0–7

BOARD_SIZE = 8
FILES = "abcdefgh"
RANKS = "12345678"


def on_board(row: int, col: int) -> bool:
    """Whether (*row*, *col*) lies inside the 8x8 grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_name(row: int, col: int) -> str:
    """Human-readable name, e.g. (7, 0) → 'a1', (0, 7) → 'h8'."""
    if not on_board(row, col):
        raise ValueError(f"Square out of range: {(row, col)!r}")
    return FILES[col] + str(BOARD_SIZE - row)


def parse_square(name: str) -> Coord:
    """Parse square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return BOARD_SIZE - int(name[1]), FILES.index(name[0])
