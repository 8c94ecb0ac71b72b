"""Core Game of Life logic."""

from .errors import InvalidDimension
from .grid import Grid, GridConfig, initialize
from .game import GameOfLife
from .rules import apply_rules, next_state
from .seeding import SeedPolicy
from .patterns import Pattern, PatternLibrary

__all__ = [
    "InvalidDimension",
    "Grid",
    "GridConfig",
    "initialize",
    "GameOfLife",
    "apply_rules",
    "next_state",
    "SeedPolicy",
    "Pattern",
    "PatternLibrary",
]
