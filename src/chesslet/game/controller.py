"""GameController: the central orchestrator of a chess game.

Coordinates: Players and GameState.
Emits events via simple callbacks so the terminal front end / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesslet.core.enums import Color, GameResult
from chesslet.core.move import Move
from chesslet.core.piece import Piece
from chesslet.game.interfaces import GamePhase, IGameController, IPlayer
from chesslet.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Piece | None, GameState], None]  # move, captured, state
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates moves, switches turns, notifies listeners.

    Turns are pulled synchronously with :meth:`play_turn`; there is no
    background thinking.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        fen: str | None = None,
        side_to_move: Color | None = None,
        unrestricted_black_double_step: bool = False,
    ) -> None:
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._state = GameState(unrestricted_black_double_step)
        self._state.setup(fen, side_to_move)
        _LOGGER.info("New game: %s (white) vs %s (black)", white.name, black.name)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def submit_move(self, move: Move) -> bool:
        if self._state.is_game_over:
            return False

        if move not in self._state.legal_moves():
            _LOGGER.debug("Rejected move %s for %s", move, self._state.side_to_move)
            return False

        captured = self._state.apply_move(move)
        self._emit_move(move, captured)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return True

        self._state.phase = GamePhase.AWAITING_MOVE
        self._emit_phase(GamePhase.AWAITING_MOVE)
        return True

    def resign(self, color: Color) -> None:
        if self._state.is_game_over:
            return
        self._state.resign(color)
        _LOGGER.info("%s resigns", color)
        self._emit_game_over(self._state.result)

    def play_turn(self) -> bool:
        if self._state.is_game_over:
            return False
        cp = self.current_player
        if cp is None:
            return False

        if not cp.is_human:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)

        move = cp.choose_move(self._state.board)
        if move is None:
            self.resign(cp.color)
            return False
        return self.submit_move(move)

    def run(self, max_plies: int | None = None) -> GameResult:
        """Play turns until the game ends, *max_plies* moves are made or a turn stalls."""
        while not self._state.is_game_over:
            if max_plies is not None and self._state.ply_count >= max_plies:
                break
            if not self.play_turn() and not self._state.is_game_over:
                _LOGGER.warning("%s made no move; stopping", self._state.side_to_move)
                break
        return self._state.result

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, move: Move, captured: Piece | None) -> None:
        for cb in self.events.on_move:
            cb(move, captured, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        _LOGGER.info("Game over: %s (%s)", result.name, self._state.end_reason.name)
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
