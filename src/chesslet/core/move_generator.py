"""Pseudo-legal move generation.

A generated move stays on the board and never lands on a piece of the
mover's own color. Nothing else is checked: there is no check avoidance,
castling, en passant or promotion.
"""

from __future__ import annotations

from collections.abc import Callable

from chesslet.core.board import Board
from chesslet.core.enums import Color, PieceType, SquareState
from chesslet.core.move import Move
from chesslet.core.types import Coord

# (d_row, d_col) offsets
KNIGHT_OFFSETS: tuple[Coord, ...] = (
    (1, 2),
    (2, 1),
    (1, -2),
    (2, -1),
    (-1, -2),
    (-2, -1),
    (-1, 2),
    (-2, 1),
)

KING_OFFSETS: tuple[Coord, ...] = (
    (1, 1),
    (1, 0),
    (1, -1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, 1),
    (0, -1),
)

ROOK_DIRS: tuple[Coord, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS: tuple[Coord, ...] = ((1, 1), (-1, 1), (-1, -1), (1, -1))
QUEEN_DIRS: tuple[Coord, ...] = ROOK_DIRS + BISHOP_DIRS

# color -> (forward row step, starting row)
_PAWN_SETUP: dict[Color, tuple[int, int]] = {
    Color.WHITE: (-1, 6),
    Color.BLACK: (1, 1),
}


class MoveGenerator:
    """Generates candidate moves for either color on a shared :class:`Board`.

    Args:
        board: Board to read from. The generator never mutates it.
        unrestricted_black_double_step: Let black pawns advance two squares
            from any row, not only from their starting row. Off by default;
            only useful to replay games recorded under that rule.
    """

    __slots__ = ("_board", "_unrestricted_black_double_step", "_dispatch")

    def __init__(
        self,
        board: Board,
        *,
        unrestricted_black_double_step: bool = False,
    ) -> None:
        self._board = board
        self._unrestricted_black_double_step = unrestricted_black_double_step
        self._dispatch: dict[PieceType, Callable[[int, int, Color], list[Coord]]] = {
            PieceType.PAWN: self._pawn_targets,
            PieceType.ROOK: self._rook_targets,
            PieceType.KNIGHT: self._knight_targets,
            PieceType.BISHOP: self._bishop_targets,
            PieceType.QUEEN: self._queen_targets,
            PieceType.KING: self._king_targets,
        }

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def generate_moves(self, color: Color) -> list[Move]:
        """All moves for *color*, scanning the board row by row."""
        moves: list[Move] = []
        board = self._board
        for (row, col), piece in board.occupied():
            if piece.color != color:
                continue
            for to_row, to_col in self._dispatch[piece.piece_type](row, col, color):
                target = board.color_at(to_row, to_col)
                if target == color or target is SquareState.OFF:
                    continue
                moves.append(Move(row, col, to_row, to_col))
        return moves

    def is_legal(self, move: Move, color: Color) -> bool:
        """Whether *move* is one of the moves generated for *color*."""
        return move in self.generate_moves(color)

    def moves_from(self, row: int, col: int) -> list[Move]:
        """Moves for the piece on (*row*, *col*); empty for blank squares."""
        piece = self._board.piece_at(row, col)
        if piece is None:
            return []
        return [m for m in self.generate_moves(piece.color) if m.origin == (row, col)]

    # -- Per-piece geometry -------------------------------------------------

    def _pawn_targets(self, row: int, col: int, color: Color) -> list[Coord]:
        board = self._board
        step, start_row = _PAWN_SETUP[color]
        enemy = color.opposite
        targets: list[Coord] = []

        one = row + step
        if board.is_blank(one, col):
            targets.append((one, col))
            may_double = row == start_row or (
                color == Color.BLACK and self._unrestricted_black_double_step
            )
            if may_double and board.is_blank(one + step, col):
                targets.append((one + step, col))

        for d_col in (1, -1):
            if board.is_color(one, col + d_col, enemy):
                targets.append((one, col + d_col))
        return targets

    def _knight_targets(self, row: int, col: int, color: Color) -> list[Coord]:
        return [(row + dr, col + dc) for dr, dc in KNIGHT_OFFSETS]

    def _king_targets(self, row: int, col: int, color: Color) -> list[Coord]:
        return [(row + dr, col + dc) for dr, dc in KING_OFFSETS]

    def _rook_targets(self, row: int, col: int, color: Color) -> list[Coord]:
        return self._ray_targets(row, col, ROOK_DIRS)

    def _bishop_targets(self, row: int, col: int, color: Color) -> list[Coord]:
        return self._ray_targets(row, col, BISHOP_DIRS)

    def _queen_targets(self, row: int, col: int, color: Color) -> list[Coord]:
        return self._ray_targets(row, col, QUEEN_DIRS)

    def _ray_targets(
        self,
        row: int,
        col: int,
        directions: tuple[Coord, ...],
    ) -> list[Coord]:
        """Walk each ray up to and including the first occupied square."""
        board = self._board
        targets: list[Coord] = []
        for dr, dc in directions:
            r = row + dr
            c = col + dc
            while board.is_blank(r, c):
                targets.append((r, c))
                r += dr
                c += dc
            # Occupied or off the board; the filter in generate_moves
            # decides whether this square is a capture.
            targets.append((r, c))
        return targets
