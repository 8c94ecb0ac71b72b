"""Timed driver loop for Conway's Game of Life."""

import signal
import time
from typing import TYPE_CHECKING, Any, Dict, Optional

from .grid import Grid

if TYPE_CHECKING:
    from ..frontends.terminal import TextSink


class GameOfLife:
    """Runs a grid forward one generation per tick and draws every frame.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """

    def __init__(
        self,
        grid: Grid,
        ui: "TextSink",
        rate: float = 1.0,
        show_generation: bool = False,
    ) -> None:
        """Initialize the game.

        Args:
            grid: First generation
            ui: Sink receiving rendered frames
            rate: Seconds between generations
            show_generation: Print a generation header above every frame
        """
        if rate < 0:
            raise ValueError(f"Rate must be non-negative, got {rate}")

        self.grid = grid
        self.ui = ui
        self.rate = rate
        self.show_generation = show_generation
        self._generation = 0
        self._stop_requested = False
        self._previous_handlers: Dict[int, Any] = {}

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def stopped(self) -> bool:
        """Whether a stop has been requested."""
        return self._stop_requested

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self.grid = self.grid.step()
        self._generation += 1

    def render_frame(self) -> None:
        """Clear the sink and draw the current generation."""
        frame = self.grid.render()
        if self.show_generation:
            frame = f"Generation {self._generation}\n{frame}"

        self.ui.clear_screen()
        self.ui.write(frame)

    def stop(self) -> None:
        """Ask the loop to finish after the current step."""
        self._stop_requested = True

    def install_signal_handlers(self) -> None:
        """Stop the loop on SIGINT or SIGTERM instead of raising.

        The previous handlers are put back when start() returns.
        """
        self._previous_handlers = {
            signum: signal.signal(signum, self._handle_interrupt) for signum in (signal.SIGINT, signal.SIGTERM)
        }

    def restore_signal_handlers(self) -> None:
        """Reinstate the handlers replaced by install_signal_handlers()."""
        for signum, handler in self._previous_handlers.items():
            # None means the handler was not installed from Python
            if handler is not None:
                signal.signal(signum, handler)
        self._previous_handlers = {}

    def _handle_interrupt(self, signum, frame):
        """Handle keyboard interrupt gracefully."""
        self._stop_requested = True

    def start(self, max_generations: Optional[int] = None) -> int:
        """Draw generations until stopped.

        A stop request is honored between steps; a sleep in progress runs
        to the end of the current tick first.

        Args:
            max_generations: Stop after this many steps (None runs until stop())

        Returns:
            The last generation number drawn
        """
        try:
            self.render_frame()

            while max_generations is None or self._generation < max_generations:
                if self._stop_requested:
                    break

                time.sleep(self.rate)

                if self._stop_requested:
                    break

                self.step()
                self.render_frame()
        finally:
            self.restore_signal_handlers()

        return self._generation
