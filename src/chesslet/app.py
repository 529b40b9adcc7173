"""Terminal entry point: play against the engine."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from chesslet import __version__
from chesslet.config import EngineConfig, load_config
from chesslet.core.board import Board
from chesslet.core.enums import Color, GameResult
from chesslet.core.move import Move
from chesslet.core.move_generator import MoveGenerator
from chesslet.core.notation import parse_move
from chesslet.core.piece import Piece
from chesslet.engine.minimax import MinimaxEngine
from chesslet.game.controller import GameController
from chesslet.game.player import AIPlayer, HumanPlayer
from chesslet.game.state import GameState

_LOGGER = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

_QUIT_WORDS = frozenset({"quit", "exit", "resign"})
_RESULT_TEXT: dict[GameResult, str] = {
    GameResult.WHITE_WINS: "White wins.",
    GameResult.BLACK_WINS: "Black wins.",
    GameResult.DRAW: "Draw: no moves left.",
    GameResult.IN_PROGRESS: "Game stopped.",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chesslet",
        description="Play chess against a material minimax engine.",
    )
    parser.add_argument(
        "--computer",
        choices=("white", "black"),
        help="color the computer plays (asked interactively if omitted)",
    )
    parser.add_argument("--config", type=Path, help="TOML file with an [engine] table")
    parser.add_argument("--time-limit", type=float, help="seconds per engine move")
    parser.add_argument("--max-depth", type=int, help="stop deepening at this depth")
    parser.add_argument("--seed", type=int, help="seed for the root move shuffle")
    parser.add_argument("--fen", help="starting piece placement (FEN)")
    parser.add_argument("--unicode", action="store_true", help="draw pieces as symbols")
    parser.add_argument("--log-level", help="logging level (default from config)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_human_move(
    color: Color,
    input_fn: InputFn,
    output: OutputFn,
    *,
    unrestricted_black_double_step: bool = False,
) -> Callable[[Board], Move | None]:
    def read(board: Board) -> Move | None:
        gen = MoveGenerator(
            board,
            unrestricted_black_double_step=unrestricted_black_double_step,
        )
        legal = gen.generate_moves(color)
        output("Your move!")
        while True:
            try:
                text = input_fn("> ")
            except EOFError:
                return None
            if text.strip().lower() in _QUIT_WORDS:
                return None
            try:
                move = parse_move(text)
            except ValueError:
                output("Please enter a move (e.g. a1b2).")
                continue
            if move not in legal:
                output(f"Illegal move: {move}")
                continue
            return move

    return read


def _ask_computer_color(input_fn: InputFn, output: OutputFn) -> Color | None:
    prompt = "Should the computer go first? (y or n): "
    while True:
        try:
            answer = input_fn(prompt).strip().lower()
        except EOFError:
            return None
        if answer == "y":
            return Color.WHITE
        if answer == "n":
            return Color.BLACK
        prompt = "Please enter y or n: "


def run_game(
    config: EngineConfig,
    computer: Color,
    *,
    fen: str | None = None,
    unicode: bool = False,
    input_fn: InputFn = input,
    output: OutputFn = print,
) -> GameResult:
    """Play one game between the terminal user and the engine."""
    engine = MinimaxEngine(
        config.search_limits(),
        seed=config.seed,
        unrestricted_black_double_step=config.unrestricted_black_double_step,
    )
    ai = AIPlayer(computer, engine, name="chesslet")
    human = HumanPlayer(
        computer.opposite,
        "You",
        read_move=_read_human_move(
            computer.opposite,
            input_fn,
            output,
            unrestricted_black_double_step=config.unrestricted_black_double_step,
        ),
    )
    white, black = (ai, human) if computer == Color.WHITE else (human, ai)

    def on_move(move: Move, captured: Piece | None, state: GameState) -> None:
        if state.side_to_move != computer:
            result = ai.last_result
            if result is not None:
                output(f"Computer plays {move} (score {result.score}, depth {result.depth})")
        output(state.board.render(unicode=unicode))

    ctrl = GameController()
    ctrl.events.on_move.append(on_move)
    ctrl.new_game(
        white,
        black,
        fen=fen,
        unrestricted_black_double_step=config.unrestricted_black_double_step,
    )
    output(ctrl.state.board.render(unicode=unicode))

    while not ctrl.state.is_game_over:
        if ctrl.current_player is ai:
            output("Computer is thinking...")
        if not ctrl.play_turn() and not ctrl.state.is_game_over:
            break

    output(_RESULT_TEXT[ctrl.state.result])
    return ctrl.state.result


def main(argv: list[str] | None = None) -> int:
    """Launch the terminal game."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.config is not None and not args.config.is_file():
        parser.error(f"config file not found: {args.config}")
    try:
        config = load_config(args.config).merged(
            {
                "time_limit": args.time_limit,
                "max_depth": args.max_depth,
                "seed": args.seed,
                "log_level": args.log_level,
            }
        )
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _LOGGER.debug("Using %s", config)

    print(f"chesslet v{__version__}")
    print("------------------")
    if args.computer is not None:
        computer = Color.WHITE if args.computer == "white" else Color.BLACK
    else:
        computer = _ask_computer_color(input, print)
        if computer is None:
            return 0

    try:
        run_game(config, computer, fen=args.fen, unicode=args.unicode)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
