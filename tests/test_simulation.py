"""Tests for the print/sleep/step driving loop."""

import io

import pytest
from lifeboard.core.board import Board
from lifeboard.render import TerminalRenderer, ERASE_LINE
from lifeboard.simulation import Simulation


class TestSimulation:
    """Test loop cadence and frame output with an injected sleep."""

    def setup_method(self):
        self.stream = io.StringIO()
        self.sleeps = []
        self.board = Board.from_rows(["...", "###", "..."])
        self.simulation = Simulation(
            self.board, TerminalRenderer(self.stream), delay=0.5, sleep=self.sleeps.append
        )

    def test_runs_requested_generations(self):
        assert self.simulation.run(generations=3) == 3
        assert self.board.generation == 3
        assert self.sleeps == [0.5, 0.5, 0.5]

    def test_final_state(self):
        """Odd number of generations leaves the blinker vertical."""
        self.simulation.run(generations=3)
        assert self.board == Board.from_rows([".#.", ".#.", ".#."])

    def test_first_frame_not_cleared(self):
        """Initial frame is printed plain; each later frame clears the previous one."""
        self.simulation.run(generations=2)
        output = self.stream.getvalue()
        assert not output.startswith(ERASE_LINE)
        # 2 cleared frames of 3 lines each
        assert output.count(ERASE_LINE) == 6

    def test_zero_generations_prints_initial_frame(self):
        assert self.simulation.run(generations=0) == 0
        assert self.stream.getvalue() == "\n. . .\n# # #\n. . ."
        assert self.sleeps == []

    def test_unbounded_run_stops_on_interrupt(self):
        """Without a limit the loop only ends when interrupted."""
        def sleep(delay):
            self.sleeps.append(delay)
            if len(self.sleeps) > 4:
                raise KeyboardInterrupt

        simulation = Simulation(self.board, TerminalRenderer(self.stream), delay=0.0, sleep=sleep)
        with pytest.raises(KeyboardInterrupt):
            simulation.run()
        assert self.board.generation == 4

    def test_negative_delay_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            Simulation(self.board, TerminalRenderer(self.stream), delay=-0.1)
