"""Abstract interfaces for the game layer.

High-level GameController depends on these ABCs, not on concrete players.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chesslet.core.enums import Color

if TYPE_CHECKING:
    from chesslet.core.board import Board
    from chesslet.core.move import Move


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # AI is computing
    GAME_OVER = auto()


class GameEndReason(IntEnum):
    """Why a finished game ended."""

    NONE = 0
    KING_CAPTURED = auto()
    NO_MOVES = auto()
    RESIGNATION = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or AI)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def choose_move(self, board: Board) -> Move | None:
        """Pick a move on *board*; ``None`` means the player resigns."""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        fen: str | None = None,
        side_to_move: Color | None = None,
        unrestricted_black_double_step: bool = False,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def resign(self, color: Color) -> None:
        """Player of *color* resigns."""

    @abstractmethod
    def play_turn(self) -> bool:
        """Let the player to move act once. Returns True if a move was made."""
