"""Board - piece placement on an 8x8 grid, plus the apply/undo primitives."""

from __future__ import annotations

from chesslet.core.enums import Color, PieceType, SquareState
from chesslet.core.move import Move
from chesslet.core.piece import Piece
from chesslet.core.types import BOARD_SIZE, FILES, Coord, on_board

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of pieces, row 0 being black's back rank.

    The board is shared by the game loop and the search. Every change goes
    through :meth:`apply_move` / :meth:`undo_move`, which are exact inverses,
    so a search can explore hypothetical lines without copying the grid.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coord) -> Piece | None:
        row, col = coord
        return self._grid[row][col]

    def __setitem__(self, coord: Coord, piece: Piece | None) -> None:
        row, col = coord
        self._grid[row][col] = piece

    # -- Queries ------------------------------------------------------------

    def piece_at(self, row: int, col: int) -> Piece | None:
        """Piece on (*row*, *col*), or ``None`` for empty and off-board squares."""
        if not on_board(row, col):
            return None
        return self._grid[row][col]

    def color_at(self, row: int, col: int) -> Color | SquareState:
        """Color of the piece on (*row*, *col*).

        Returns ``SquareState.OFF`` for coordinates outside the board and
        ``SquareState.BLANK`` for empty squares; never raises.
        """
        if not on_board(row, col):
            return SquareState.OFF
        piece = self._grid[row][col]
        if piece is None:
            return SquareState.BLANK
        return piece.color

    def is_blank(self, row: int, col: int) -> bool:
        return self.color_at(row, col) is SquareState.BLANK

    def is_color(self, row: int, col: int, color: Color) -> bool:
        return self.color_at(row, col) == color

    def has_king(self, color: Color) -> bool:
        """Whether *color*'s king is still on the board."""
        king = Piece(color, PieceType.KING)
        return any(piece == king for row in self._grid for piece in row)

    def occupied(self) -> list[tuple[Coord, Piece]]:
        """All occupied squares in row-major order."""
        return [
            ((r, c), piece)
            for r, row in enumerate(self._grid)
            for c, piece in enumerate(row)
            if piece is not None
        ]

    # -- Move execution -----------------------------------------------------

    def apply_move(self, move: Move) -> Piece | None:
        """Move the piece on the origin to the target.

        Returns whatever occupied the target (possibly ``None``) so the
        caller can hand it back to :meth:`undo_move`.
        """
        grid = self._grid
        moving = grid[move.from_row][move.from_col]
        captured = grid[move.to_row][move.to_col]
        grid[move.from_row][move.from_col] = None
        grid[move.to_row][move.to_col] = moving
        return captured

    def undo_move(self, move: Move, captured: Piece | None) -> None:
        """Reverse :meth:`apply_move`, restoring *captured* on the target."""
        grid = self._grid
        moved = grid[move.to_row][move.to_col]
        grid[move.to_row][move.to_col] = captured
        grid[move.from_row][move.from_col] = moved

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[0, col] = Piece(Color.BLACK, pt)
            b[1, col] = Piece(Color.BLACK, PieceType.PAWN)
            b[6, col] = Piece(Color.WHITE, PieceType.PAWN)
            b[7, col] = Piece(Color.WHITE, pt)
        return b

    # -- Rendering ----------------------------------------------------------

    def render(self, *, unicode: bool = False) -> str:
        """Text diagram with rank numbers and file letters."""
        rows: list[str] = []
        for r, row in enumerate(self._grid):
            cells = []
            for piece in row:
                if piece is None:
                    cells.append(".")
                else:
                    cells.append(piece.symbol if unicode else str(piece))
            rows.append(f"{BOARD_SIZE - r} {' '.join(cells)}")
        rows.append("  " + " ".join(FILES))
        return "\n".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    # Mutable: compared by contents, never used as a dict key.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return self.render()
