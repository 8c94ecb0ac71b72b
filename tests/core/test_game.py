"""Tests for the GameOfLife driver loop."""

import signal
from unittest.mock import patch

import pytest
from termlife.core.game import GameOfLife
from termlife.core.grid import initialize
from termlife.core.seeding import SeedPolicy
from termlife.frontends.terminal import BufferUI


def make_blinker_game(**kwargs) -> GameOfLife:
    grid = initialize(3, 3, SeedPolicy.fixed([0, 0, 0, 1, 1, 1, 0, 0, 0]))
    return GameOfLife(grid, BufferUI(), rate=0, **kwargs)


class TestGameOfLife:
    """Test cases for the GameOfLife class."""

    def test_initialization(self):
        """Test game initialization."""
        game = make_blinker_game()
        assert game.generation == 0
        assert game.population == 3
        assert game.rate == 0
        assert not game.stopped

    def test_negative_rate(self):
        """Test a negative rate is rejected."""
        grid = initialize(3, 3, SeedPolicy.fixed([]))
        with pytest.raises(ValueError):
            GameOfLife(grid, BufferUI(), rate=-1)

    def test_step_replaces_grid(self):
        """Test stepping swaps in the next generation."""
        game = make_blinker_game()
        first = game.grid

        game.step()

        assert game.generation == 1
        assert game.grid is not first
        assert game.grid.to_list() == [[0, 1, 0], [0, 1, 0], [0, 1, 0]]

    def test_render_frame(self):
        """Test a frame clears the sink and writes the rendered grid."""
        game = make_blinker_game()
        game.render_frame()

        assert game.ui.clears == 1
        assert game.ui.frames == ["     \no o o\n     \n"]

    def test_render_frame_with_generation(self):
        """Test the optional generation header."""
        game = make_blinker_game(show_generation=True)
        game.step()
        game.render_frame()

        assert game.ui.frames[-1].startswith("Generation 1\n")

    def test_start_with_limit(self):
        """Test start draws the initial grid and one frame per step."""
        game = make_blinker_game()

        final = game.start(max_generations=4)

        assert final == 4
        assert len(game.ui.frames) == 5
        assert game.ui.clears == 5
        assert game.ui.frames[0] == game.ui.frames[2] == game.ui.frames[4]
        assert game.ui.frames[1] == game.ui.frames[3]

    def test_stop_before_start(self):
        """Test a pending stop request ends the loop before any step."""
        game = make_blinker_game()
        game.stop()

        final = game.start()

        assert final == 0
        assert game.stopped
        assert len(game.ui.frames) == 1

    def test_stop_from_sink(self):
        """Test stopping between steps ends an unbounded loop."""
        game = make_blinker_game()
        original_write = game.ui.write

        def write_and_stop(text):
            original_write(text)
            if len(game.ui.frames) == 3:
                game.stop()

        game.ui.write = write_and_stop

        assert game.start() == 2
        assert len(game.ui.frames) == 3

    def test_install_signal_handlers(self):
        """Test SIGINT and SIGTERM are routed to stop()."""
        game = make_blinker_game()
        previous_int = signal.getsignal(signal.SIGINT)
        previous_term = signal.getsignal(signal.SIGTERM)
        try:
            game.install_signal_handlers()
            handler = signal.getsignal(signal.SIGINT)
            assert signal.getsignal(signal.SIGTERM) == handler

            handler(signal.SIGINT, None)
            assert game.stopped
        finally:
            signal.signal(signal.SIGINT, previous_int)
            signal.signal(signal.SIGTERM, previous_term)

    def test_handlers_restored_after_start(self):
        """Test the previous handlers come back once the loop ends."""
        game = make_blinker_game()
        previous_int = signal.getsignal(signal.SIGINT)
        previous_term = signal.getsignal(signal.SIGTERM)
        try:
            game.install_signal_handlers()
            assert signal.getsignal(signal.SIGINT) != previous_int

            game.start(max_generations=1)

            assert signal.getsignal(signal.SIGINT) == previous_int
            assert signal.getsignal(signal.SIGTERM) == previous_term
        finally:
            signal.signal(signal.SIGINT, previous_int)
            signal.signal(signal.SIGTERM, previous_term)

    def test_interrupt_during_sleep_skips_step(self):
        """Test an interrupt arriving mid-sleep ends the loop before the next step."""
        game = make_blinker_game()
        game.rate = 0.5

        def interrupted_sleep(seconds):
            assert seconds == 0.5
            game._handle_interrupt(signal.SIGINT, None)

        with patch("termlife.core.game.time.sleep", side_effect=interrupted_sleep) as sleep:
            final = game.start()

        assert final == 0
        assert sleep.call_count == 1
        assert len(game.ui.frames) == 1

    def test_interrupt_handler_sets_flag_only(self):
        """Test the handler only flips the stop flag and never blocks."""
        game = make_blinker_game()
        game._handle_interrupt(signal.SIGTERM, None)
        game._handle_interrupt(signal.SIGTERM, None)

        assert game.stopped is True
        assert game.start() == 0
