"""Seed policies used to populate a freshly initialized grid."""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np

RANDOM = "random"
FIXED = "fixed"


@dataclass(frozen=True)
class SeedPolicy:
    """How the first generation is populated.

    A policy is either ``random`` (each cell alive independently with
    ``probability``) or ``fixed`` (explicit cell states consumed in row-major
    order, missing positions dead).
    """

    kind: str = RANDOM
    probability: float = 0.5
    seed: Optional[int] = None
    cells: Tuple[bool, ...] = ()

    def __post_init__(self) -> None:
        if self.kind not in (RANDOM, FIXED):
            raise ValueError(f"Unknown seed policy kind: {self.kind!r}")
        if not 0.0 <= self.probability <= 1.0:
            raise ValueError(f"Probability must be between 0.0 and 1.0, got {self.probability}")

    @classmethod
    def random(cls, probability: float = 0.5, seed: Optional[int] = None) -> "SeedPolicy":
        """Create a random seed policy.

        Args:
            probability: Chance each cell starts alive (0.0 to 1.0)
            seed: Optional seed for reproducible grids
        """
        return cls(kind=RANDOM, probability=probability, seed=seed)

    @classmethod
    def fixed(cls, cells: Iterable) -> "SeedPolicy":
        """Create a policy from explicit cell states in row-major order.

        Args:
            cells: Truthy values are alive, falsy values dead
        """
        return cls(kind=FIXED, cells=tuple(bool(cell) for cell in cells))

    def generate(self, width: int, height: int) -> np.ndarray:
        """Produce the initial cell array.

        Args:
            width: Number of columns
            height: Number of rows

        Returns:
            int8 array of shape (height, width)
        """
        if self.kind == RANDOM:
            rng = np.random.default_rng(self.seed)
            mask = rng.random((height, width)) < self.probability
            return mask.astype(np.int8)

        flat = np.zeros(width * height, dtype=np.int8)
        supplied = self.cells[: width * height]
        flat[: len(supplied)] = np.asarray(supplied, dtype=np.int8)
        return flat.reshape((height, width))
