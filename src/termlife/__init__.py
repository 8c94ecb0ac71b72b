"""Conway's Game of Life for the terminal."""

__version__ = "0.1.0"

from .core.errors import InvalidDimension
from .core.grid import Grid, GridConfig, initialize
from .core.game import GameOfLife
from .core.seeding import SeedPolicy
from .core.patterns import Pattern, PatternLibrary

__all__ = [
    "InvalidDimension",
    "Grid",
    "GridConfig",
    "initialize",
    "GameOfLife",
    "SeedPolicy",
    "Pattern",
    "PatternLibrary",
]
