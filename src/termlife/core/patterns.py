"""Common Conway's Game of Life starting patterns."""

from typing import Dict, List, Optional, Tuple

from .seeding import SeedPolicy


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (row, col) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size.

        Returns:
            Tuple of (width, height)
        """
        if not self.cells:
            return (0, 0)

        rows, cols = zip(*self.cells)
        return (max(cols) - min(cols) + 1, max(rows) - min(rows) + 1)

    def to_seed_policy(self, width: int, height: int, offset_row: int = 0, offset_col: int = 0) -> SeedPolicy:
        """Build a fixed seed policy placing this pattern on a grid.

        Cells that fall outside the grid are dropped.

        Args:
            width: Target grid width
            height: Target grid height
            offset_row: Vertical offset
            offset_col: Horizontal offset

        Returns:
            Fixed seed policy in row-major order
        """
        states = [False] * (width * height)
        for row, col in self.cells:
            r, c = row + offset_row, col + offset_col
            if 0 <= r < height and 0 <= c < width:
                states[r * width + c] = True
        return SeedPolicy.fixed(states)

    def centered(self, width: int, height: int) -> SeedPolicy:
        """Build a fixed seed policy with the pattern centered on the grid."""
        pattern_width, pattern_height = self.get_size()
        offset_col = max(0, (width - pattern_width) // 2)
        offset_row = max(0, (height - pattern_height) // 2)
        return self.to_seed_policy(width, height, offset_row, offset_col)


class PatternLibrary:
    """Library of named starting patterns."""

    def __init__(self) -> None:
        self.patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        # Still lifes
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life"))
        self.add_pattern(
            Pattern("Beehive", [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)], "Six-cell still life")
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 0), (0, 1), (0, 2)], "Period 2 oscillator"))
        self.add_pattern(
            Pattern("Toad", [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)], "Period 2 oscillator")
        )
        self.add_pattern(
            Pattern(
                "Beacon",
                [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)],
                "Period 2 oscillator made of two blocks",
            )
        )

        # Spaceships
        self.add_pattern(
            Pattern("Glider", [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)], "Moves diagonally until it hits an edge")
        )

    def add_pattern(self, pattern: Pattern) -> None:
        self.patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Look up a pattern by name, ignoring case.

        Returns:
            The pattern, or None if no pattern has that name
        """
        for pattern_name, pattern in self.patterns.items():
            if pattern_name.lower() == name.lower():
                return pattern
        return None

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self.patterns.keys())
