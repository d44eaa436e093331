# neonsnake/core/grid.py  (pure geometry, no pygame)
from __future__ import annotations
import random
from typing import Iterable, Optional, Tuple
import numpy as np

Cell = Tuple[int, int]

class Grid:
    """Fixed-size toroidal board. Coordinates outside the board wrap, they are never rejected."""

    __slots__ = ("width", "height")

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid must be non-empty, got {width}x{height}")
        self.width = width
        self.height = height

    def wrap(self, cell: Cell) -> Cell:
        x, y = cell
        return (x % self.width, y % self.height)

    def step(self, cell: Cell, vec: Cell) -> Cell:
        return self.wrap((cell[0] + vec[0], cell[1] + vec[1]))

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def occupancy(self, occupied: Iterable[Cell]) -> np.ndarray:
        """Boolean (height, width) mask, True where a cell is taken."""
        mask = np.zeros((self.height, self.width), dtype=bool)
        for x, y in occupied:
            assert self.contains((x, y)), f"cell {(x, y)} outside {self.width}x{self.height}"
            mask[y, x] = True
        return mask

    def free_cells(self, occupied: Iterable[Cell]) -> np.ndarray:
        # flat indices (y * width + x) of every unoccupied cell
        return np.flatnonzero(~self.occupancy(occupied))

    def random_free_cell(self, rng: random.Random, occupied: Iterable[Cell]) -> Optional[Cell]:
        """Uniform pick over the free-cell set, or None when the board is full."""
        free = self.free_cells(occupied)
        if free.size == 0:
            return None
        y, x = divmod(int(rng.choice(free)), self.width)
        return (x, y)

    def __eq__(self, other) -> bool:
        return isinstance(other, Grid) and (self.width, self.height) == (other.width, other.height)

    def __hash__(self) -> int:
        return hash((self.width, self.height))

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"
