"""Tests for the lifeboard command-line entry point."""

import pytest
from lifeboard import cli
from lifeboard.core.board import Board


class TestMain:
    """Test exit codes and user-facing diagnostics."""

    @pytest.mark.parametrize("argv,message", [
        (["10", "10"], "Error: not enough arguments"),
        (["10", "10", "10", "10"], "Error: too many arguments"),
        (["0", "10", "50"], "Error: invalid width: 0"),
        (["10", "abc", "50"], "Error: invalid height: abc"),
        (["10", "10", "150"], "Error: invalid percentage: 150"),
        (["-x", "10", "50"], "Error: invalid width: -x"),
        (["10", "-5", "50", "--delay", "0"], "Error: invalid height: -5"),
        (["99999999999999999999999", "1", "50"], "Error: invalid width: 99999999999999999999999"),
    ])
    def test_config_errors(self, argv, message, capsys, monkeypatch):
        """Invalid arguments print one line and never build a board."""
        def fail(*args, **kwargs):
            raise AssertionError("board must not be created")

        monkeypatch.setattr(cli, "create_board", fail)

        assert cli.main(argv) == 1
        captured = capsys.readouterr()
        assert captured.err.strip().splitlines()[-1] == message
        assert captured.out == ""

    def test_negative_seed_is_a_usage_error(self, capsys):
        """Bad option values exit through argparse before any board is built."""
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["3", "3", "50", "--seed", "-1"])
        assert excinfo.value.code == 2
        assert "--seed" in capsys.readouterr().err

    def test_runs_limited_generations(self, capsys):
        assert cli.main(["4", "3", "50", "--delay", "0", "--generations", "2", "--seed", "1"]) == 0
        out = capsys.readouterr().out
        # initial frame plus 2 cleared frames, 3 rows each
        assert out.count("\x1b[2K") == 6
        assert out.endswith("\n")

    def test_seed_gives_same_output(self, capsys):
        argv = ["5", "5", "40", "--delay", "0", "--generations", "3", "--seed", "42"]
        cli.main(argv)
        first = capsys.readouterr().out
        cli.main(argv)
        assert capsys.readouterr().out == first

    def test_interrupt_exits_cleanly(self, monkeypatch):
        """Ctrl-C ends the run with exit code 0."""
        def interrupt(self):
            raise KeyboardInterrupt

        monkeypatch.setattr(Board, "step", interrupt)
        assert cli.main(["3", "3", "50", "--delay", "0"]) == 0
