"""
Tests for tictactoe.cli
"""

import io
import itertools
import json
from unittest import mock

import pytest

from tictactoe import cli
from tictactoe.core.types import Mark

X = int(Mark.CROSS)
O = int(Mark.NAUGHT)
_ = int(Mark.EMPTY)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("TICTACTOE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TICTACTOE_HUMAN_MARK", raising=False)


class TestParseArgs:

    def test_move_with_board(self):
        args = cli.parse_args(["move", "--board", "{}"])
        assert args.command == "move"
        assert args.board == "{}"
        assert args.verbose is False

    def test_play_human(self):
        args = cli.parse_args(["-v", "play", "--human", "0"])
        assert args.command == "play"
        assert args.human == "0"
        assert args.verbose is True

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.parse_args([])


class TestMove:

    def test_prints_response(self, capsys):
        board = json.dumps({"board": [[O, _, _], [X, X, _], [_, _, _]]})
        assert cli.main(["move", "--board", board]) == 0

        response = json.loads(capsys.readouterr().out)
        assert response["board"] == [[O, _, _], [X, X, O], [_, _, _]]

    def test_reads_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO('{"board": [[88, 88, 0], [48, 48, 0], [88, 0, 0]]}'))
        assert cli.main(["move"]) == 0

        response = json.loads(capsys.readouterr().out)
        assert response["board"][1] == [O, O, O]
        assert response["result"] == 1

    def test_invalid_board(self, capsys):
        assert cli.main(["move", "--board", "nope"]) == 2
        assert "Invalid board" in capsys.readouterr().err

    def test_oversized_cell(self, capsys):
        board = '{"board": [[99999999999999999999, 0, 0], [0, 0, 0], [0, 0, 0]]}'
        assert cli.main(["move", "--board", board]) == 2
        assert "Invalid board" in capsys.readouterr().err


class TestPlay:

    def test_engine_never_loses(self, capsys):
        """Human X takes the first free cell each turn; the engine never loses."""
        cells = [f"{x},{y}" for y in range(3) for x in range(3)]
        moves = itertools.chain(["bad"], itertools.cycle(cells))
        with mock.patch("builtins.input", lambda _prompt: next(moves)):
            assert cli.main(["play"]) == 0

        out = capsys.readouterr().out
        assert "Illegal move" in out or "Invalid input" in out
        assert "GAME OVER" in out
        assert "X wins" not in out

    @pytest.mark.slow
    def test_engine_moves_first_when_human_is_naught(self, capsys):
        with mock.patch("builtins.input", side_effect=EOFError):
            assert cli.main(["play", "--human", "0"]) == 130

        out = capsys.readouterr().out
        assert "Engine (X) played: 0,0" in out
