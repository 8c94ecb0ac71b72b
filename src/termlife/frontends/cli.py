"""Command-line interface for Conway's Game of Life."""

import argparse
import re
import sys
from typing import List, Optional

from ..core.errors import InvalidDimension
from ..core.game import GameOfLife
from ..core.grid import Grid, GridConfig
from ..core.patterns import PatternLibrary
from ..core.seeding import SeedPolicy
from .terminal import TerminalUI

_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")
_BARE_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def parse_duration(text: str) -> float:
    """Parse a duration such as ``1s``, ``500ms`` or ``1m30s``.

    A bare number is taken as seconds.

    Args:
        text: Duration string

    Returns:
        Duration in seconds

    Raises:
        ValueError: If the string is not a valid duration
    """
    text = text.strip()
    if not text:
        raise ValueError("empty duration")

    if _BARE_NUMBER.fullmatch(text):
        return float(text)

    total = 0.0
    position = 0
    for match in _DURATION_PART.finditer(text):
        if match.start() != position:
            break
        total += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        position = match.end()

    if position == 0 or position != len(text):
        raise ValueError(f"invalid duration {text!r}")

    return total


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="termlife",
        description="Run Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Random 10x10 grid, one generation per second
  termlife

  # Bigger grid, faster refresh
  termlife --size 40 --rate 250ms

  # Glider on a 20x20 grid, stop after 60 generations
  termlife -s 20 --pattern Glider --generations 60

  # List available patterns
  termlife --list-patterns

Press Ctrl+C to exit.
        """,
    )

    # Grid configuration
    parser.add_argument("-s", "--size", type=int, default=10, help="Width and height of the grid (default: 10)")

    parser.add_argument("-W", "--width", type=int, help="Grid width, overrides --size")

    parser.add_argument("-H", "--height", type=int, help="Grid height, overrides --size")

    parser.add_argument(
        "-r",
        "--rate",
        type=parse_duration,
        default=1.0,
        help="Time between generations, e.g. 1s, 500ms (default: 1s)",
    )

    parser.add_argument(
        "-g",
        "--generations",
        type=int,
        default=0,
        help="Stop after this many generations (default: 0, run until interrupted)",
    )

    # Seeding
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible first generation")

    parser.add_argument(
        "-p",
        "--pattern",
        type=str,
        help="Start from a named pattern instead of a random grid",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    # Output configuration
    parser.add_argument(
        "--show-generation",
        action="store_true",
        help="Print the generation number above each frame",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print setup details before starting",
    )

    return parser


def validate_args(args: argparse.Namespace, library: PatternLibrary) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments
        library: Pattern library used to resolve --pattern

    Returns:
        True if arguments are valid
    """
    errors = []

    # --size only matters for a dimension not given explicitly
    if args.size <= 0 and (args.width is None or args.height is None):
        errors.append("Size must be positive")

    if args.width is not None and args.width <= 0:
        errors.append("Width must be positive")

    if args.height is not None and args.height <= 0:
        errors.append("Height must be positive")

    if args.rate <= 0:
        errors.append("Rate must be positive")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.pattern and library.get_pattern(args.pattern) is None:
        errors.append(f"Pattern '{args.pattern}' not found")

    if errors:
        print("Error: Invalid arguments:", file=sys.stderr)
        for error in errors:
            print(f"  - {error}", file=sys.stderr)
        return False

    return True


def list_patterns(library: PatternLibrary) -> None:
    """Print the available patterns."""
    print("Available patterns:")
    for name in library.list_patterns():
        pattern = library.get_pattern(name)
        width, height = pattern.get_size()
        print(f"  {name}: {width}x{height}, {len(pattern.cells)} cells")
        if pattern.description:
            print(f"    {pattern.description}")


def build_game(args: argparse.Namespace, library: PatternLibrary, ui=None) -> GameOfLife:
    """Create the game described by parsed arguments.

    Raises:
        InvalidDimension: If the resulting grid size is not positive
    """
    width = args.width if args.width is not None else args.size
    height = args.height if args.height is not None else args.size
    config = GridConfig(width, height)

    if args.pattern:
        seed_policy = library.get_pattern(args.pattern).centered(width, height)
    else:
        seed_policy = SeedPolicy.random(seed=args.seed)

    if args.verbose:
        print(f"Initializing {width}x{height} grid")
        if args.pattern:
            print(f"Loading pattern '{args.pattern}'")
        else:
            print("Generating random population (rate: 50%)")
        print(f"Refreshing every {args.rate:g}s")

    grid = Grid.initialize(config, seed_policy)
    return GameOfLife(grid, ui or TerminalUI(), rate=args.rate, show_generation=args.show_generation)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    library = PatternLibrary()

    if args.list_patterns:
        list_patterns(library)
        return 0

    if not validate_args(args, library):
        return 1

    try:
        game = build_game(args, library)
        game.install_signal_handlers()
        game.start(max_generations=args.generations or None)
    except InvalidDimension as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nExiting...")
        return 0

    if game.stopped:
        print("\nExiting...")

    return 0


if __name__ == "__main__":
    sys.exit(main())
