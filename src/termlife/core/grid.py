"""Grid data structure for Conway's Game of Life."""

from dataclasses import dataclass
from typing import Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .errors import InvalidDimension
from .rules import apply_rules
from .seeding import SeedPolicy

ALIVE_GLYPH = "o"
DEAD_GLYPH = " "

# Moore neighborhood; the center cell is excluded from its own count
_NEIGHBOR_KERNEL = (
    torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
)

_OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]


@dataclass(frozen=True)
class GridConfig:
    """Dimensions and display glyphs of a grid."""

    width: int
    height: int
    alive_glyph: str = ALIVE_GLYPH
    dead_glyph: str = DEAD_GLYPH

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimension(self.width, self.height)


class Grid:
    """A bounded 2D grid of live and dead cells.

    Cells are stored row-major in an int8 array of shape (height, width) and
    addressed as (row, col). Edges do not wrap: positions outside the grid
    simply do not exist.
    """

    def __init__(self, config: GridConfig, cells: np.ndarray) -> None:
        """Wrap an existing cell array.

        Args:
            config: Grid configuration
            cells: Array of shape (height, width); positive values are alive

        Raises:
            ValueError: If the array does not match the configured dimensions
        """
        if cells.shape != (config.height, config.width):
            raise ValueError(f"Cell array shape {cells.shape} doesn't match grid {config.height}x{config.width}")

        self.config = config
        # Any positive value is a live cell; stored strictly as 0/1
        self._cells = (cells > 0).astype(np.int8)

    @classmethod
    def initialize(cls, config: GridConfig, seed_policy: Optional[SeedPolicy] = None) -> "Grid":
        """Create a grid populated according to a seed policy.

        Args:
            config: Grid configuration
            seed_policy: How to populate the cells (random when omitted)

        Returns:
            New grid
        """
        if seed_policy is None:
            seed_policy = SeedPolicy.random()
        return cls(config, seed_policy.generate(config.width, config.height))

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.sum(self._cells > 0))

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        return bool(self._cells[row, col])

    def count_live_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of a cell.

        Only positions inside the grid are considered, so corner cells have
        three candidate neighbors and edge cells five.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbors (0-8)

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)

        count = 0
        for dr, dc in _OFFSETS:
            nr, nc = row + dr, col + dc
            if 0 <= nr < self.height and 0 <= nc < self.width:
                count += int(self._cells[nr, nc])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a zero-padded convolution.

        Returns:
            int8 array of shape (height, width) with each cell's live neighbor count
        """
        source = torch.from_numpy((self._cells > 0).astype(np.float32)).unsqueeze(0).unsqueeze(0)
        neighbors = F.conv2d(source, _NEIGHBOR_KERNEL, padding=1)
        return neighbors[0, 0].round().to(torch.int8).numpy()

    def step(self) -> "Grid":
        """Compute the next generation.

        Every cell is decided from the same snapshot of this grid, which is
        left untouched.

        Returns:
            New grid with the same configuration
        """
        return Grid(self.config, apply_rules(self._cells, self.count_all_neighbors()))

    def render(self) -> str:
        """Render the grid as text.

        One line per row, cells separated by single spaces and every row
        terminated by a newline.
        """
        glyphs = (self.config.dead_glyph, self.config.alive_glyph)
        lines = []
        for row in self._cells:
            lines.append(" ".join(glyphs[int(cell > 0)] for cell in row) + "\n")
        return "".join(lines)

    def to_list(self) -> list:
        """Convert grid to nested list of rows."""
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        return self.render()


def initialize(width: int, height: int, seed_policy: Optional[SeedPolicy] = None) -> Grid:
    """Create a grid of the given size.

    Args:
        width: Number of columns
        height: Number of rows
        seed_policy: How to populate the cells (random when omitted)

    Raises:
        InvalidDimension: If width or height is not positive
    """
    return Grid.initialize(GridConfig(width, height), seed_policy)
