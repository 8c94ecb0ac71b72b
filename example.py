#!/usr/bin/env python3
"""
Example usage of the termlife package.
"""

from termlife import GameOfLife, GridConfig, Grid, PatternLibrary
from termlife.frontends import TerminalUI


def main():
    """Run a glider across a small grid for a few seconds."""
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    config = GridConfig(12, 12)
    grid = Grid.initialize(config, glider.to_seed_policy(config.width, config.height))

    game = GameOfLife(grid, TerminalUI(), rate=0.2, show_generation=True)
    game.install_signal_handlers()
    final = game.start(max_generations=30)

    print(f"Stopped at generation {final} with {game.population} live cells")


if __name__ == "__main__":
    main()
