"""Tests for the terminal front end."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest

from chesslet.app import _ask_computer_color, main, run_game
from chesslet.config import EngineConfig
from chesslet.core.enums import Color, GameResult

KING_EN_PRISE = "k7/8/8/8/8/8/8/R3K3"
QUICK = EngineConfig(time_limit=0.0, max_depth=2)


def _replay(lines: Iterable[str]):
    """input() stand-in that replays *lines*, then hits end of file."""
    it = iter(lines)

    def read(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def _no_input(prompt: str) -> str:
    raise AssertionError(f"unexpected prompt: {prompt!r}")


class TestRunGame:
    def test_human_move_errors_then_win(self) -> None:
        out: list[str] = []
        result = run_game(
            QUICK,
            Color.BLACK,
            fen=KING_EN_PRISE,
            input_fn=_replay(["zz", "e2e4", "a1a8"]),
            output=out.append,
        )
        assert result == GameResult.WHITE_WINS
        assert "Your move!" in out
        assert "Please enter a move (e.g. a1b2)." in out
        assert "Illegal move: e2e4" in out
        assert out[-1] == "White wins."

    def test_computer_moves_first(self) -> None:
        out: list[str] = []
        result = run_game(QUICK, Color.WHITE, fen=KING_EN_PRISE, input_fn=_no_input, output=out.append)
        assert result == GameResult.WHITE_WINS
        assert "Computer is thinking..." in out
        assert any(line.startswith("Computer plays a1a8") for line in out)
        assert out[-1] == "White wins."

    def test_board_is_printed(self) -> None:
        out: list[str] = []
        run_game(QUICK, Color.WHITE, fen=KING_EN_PRISE, input_fn=_no_input, output=out.append)
        assert out[0].endswith("  a b c d e f g h")

    @pytest.mark.parametrize("lines", [["quit"], ["resign"], []])
    def test_quit_or_eof_resigns(self, lines: list[str]) -> None:
        out: list[str] = []
        result = run_game(
            QUICK,
            Color.BLACK,
            fen=KING_EN_PRISE,
            input_fn=_replay(lines),
            output=out.append,
        )
        assert result == GameResult.BLACK_WINS
        assert out[-1] == "Black wins."

    def test_bad_fen_raises(self) -> None:
        with pytest.raises(ValueError):
            run_game(QUICK, Color.WHITE, fen="xx", input_fn=_no_input, output=lambda s: None)


class TestAskComputerColor:
    def test_yes_means_computer_is_white(self) -> None:
        assert _ask_computer_color(_replay(["y"]), lambda s: None) == Color.WHITE

    def test_no_means_computer_is_black(self) -> None:
        assert _ask_computer_color(_replay(["N"]), lambda s: None) == Color.BLACK

    def test_reprompts_until_answered(self) -> None:
        prompts: list[str] = []
        answers = iter(["maybe", "y"])

        def read(prompt: str) -> str:
            prompts.append(prompt)
            return next(answers)

        assert _ask_computer_color(read, lambda s: None) == Color.WHITE
        assert prompts == [
            "Should the computer go first? (y or n): ",
            "Please enter y or n: ",
        ]

    def test_eof(self) -> None:
        assert _ask_computer_color(_replay([]), lambda s: None) is None


class TestMain:
    ARGS = ["--fen", KING_EN_PRISE, "--max-depth", "2", "--time-limit", "0"]

    @pytest.fixture(autouse=True)
    def _in_tmp(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)

    def test_plays_a_game(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--computer", "white", *self.ARGS]) == 0
        out = capsys.readouterr().out
        assert "chesslet v" in out
        assert "Computer plays a1a8" in out
        assert "White wins." in out

    def test_asks_for_color(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("builtins.input", _replay(["y"]))
        assert main(self.ARGS) == 0
        assert "Computer plays a1a8" in capsys.readouterr().out

    def test_reads_config_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "chesslet.toml").write_text("[engine]\nmax_depth = 2\ntime_limit = 0.0\n")
        assert main(["--computer", "white", "--fen", KING_EN_PRISE]) == 0
        assert "depth 2" in capsys.readouterr().out

    def test_wrongly_typed_config_value(self, tmp_path: Path) -> None:
        (tmp_path / "chesslet.toml").write_text("[engine]\ntime_limit = \"fast\"\n")
        with pytest.raises(SystemExit) as exc:
            main(["--computer", "white"])
        assert exc.value.code == 2

    def test_missing_config_file(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["--config", "nope.toml", "--computer", "white"])
        assert exc.value.code == 2

    def test_invalid_option_value(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["--computer", "white", "--time-limit", "-1"])
        assert exc.value.code == 2

    def test_invalid_fen(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--computer", "white", "--fen", "xx", "--max-depth", "2"]) == 2
        assert "error:" in capsys.readouterr().err

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert "0.1.0" in capsys.readouterr().out
