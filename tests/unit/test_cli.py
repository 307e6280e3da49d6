"""
Unit tests for the command line interface.
"""
import argparse
from typing import Callable, List

import pytest
from minefield import Board, cli


def _script(lines: List[str]) -> Callable[[], str]:
    pending = list(lines)

    def read_line() -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read_line


@pytest.fixture
def play_args() -> argparse.Namespace:
    return argparse.Namespace(width=9, height=9, mines=None, seed=None)


@pytest.fixture
def scripted_board(monkeypatch, corner_mine_board: Board) -> Board:
    """Make play() use the 3x3 corner-mine board."""
    monkeypatch.setattr(
        cli.Board, "from_config", lambda config, rng=None: corner_mine_board
    )
    return corner_mine_board


class TestPlay:
    """Test the interactive loop with scripted input."""

    def test_win(self, play_args, scripted_board, capsys) -> None:
        assert cli.play(play_args, _script(["nonsense", "3 3"])) == 0
        out = capsys.readouterr().out
        assert "Wrong input count (1)" in out
        assert "You won!" in out

    def test_loss_shows_mines(self, play_args, scripted_board, capsys) -> None:
        assert cli.play(play_args, _script(["f 2 1", "1 1"])) == 1
        out = capsys.readouterr().out
        assert "X F _" in out
        assert "You lost!" in out

    def test_out_of_bounds_reprompts(
        self, play_args, scripted_board, capsys
    ) -> None:
        assert cli.play(play_args, _script(["9 9"])) == 1
        assert "outside the board" in capsys.readouterr().out


class TestMain:
    """Test argument handling."""

    def test_generation_error_exit_code(self, capsys) -> None:
        assert cli.main(["play", "4", "4"]) == 2
        assert "Field too small" in capsys.readouterr().err

    def test_too_many_mines_exit_code(self, capsys) -> None:
        assert cli.main(["play", "9", "9", "--mines", "20"]) == 2
        assert "Too many mines" in capsys.readouterr().err

    @pytest.mark.parametrize("size", [["0", "8"], ["8", "0"]])
    def test_zero_size_field_exit_code(self, size: List[str], capsys) -> None:
        assert cli.main(["play", *size]) == 2
        assert "must be positive" in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys) -> None:
        assert cli.main([]) == 0
        assert "usage" in capsys.readouterr().out


class TestDemo:
    """Test the random-move demo."""

    def test_demo_runs_to_the_end(self, capsys) -> None:
        code = cli.main(["demo", "--seed", "0", "--delay", "0"])
        out = capsys.readouterr().out
        assert code in (0, 1)
        assert "Step 1 | Reward:" in out
        assert "Result: " + ("WON" if code == 0 else "LOST") in out

    def test_demo_is_reproducible(self, capsys) -> None:
        cli.main(["demo", "--seed", "5", "--delay", "0"])
        first = capsys.readouterr().out
        cli.main(["demo", "--seed", "5", "--delay", "0"])
        assert capsys.readouterr().out == first
