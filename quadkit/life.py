"""Conway's Game of Life on a bounded grid."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum


class CellState(Enum):
    ALIVE = "alive"
    DEAD = "dead"


def next_state(cell: CellState, neighbors: int) -> CellState:
    """Apply the Life rules to one cell given its count of live neighbours."""
    if cell is CellState.ALIVE:
        return CellState.ALIVE if neighbors in (2, 3) else CellState.DEAD
    return CellState.ALIVE if neighbors == 3 else CellState.DEAD


@dataclass
class LifeGrid:
    """A width x height grid stored row by row; cells outside count as dead."""

    width: int
    height: int
    cells: list[CellState] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("grid dimensions must be positive")
        if not self.cells:
            self.cells = [CellState.DEAD] * (self.width * self.height)
        elif len(self.cells) != self.width * self.height:
            raise ValueError("cell count does not match grid size")

    @classmethod
    def random(cls, width: int, height: int, rng: random.Random | None = None) -> LifeGrid:
        """Fill a grid where each cell is alive with probability 1 in 5."""
        rng = rng or random.Random()
        cells = [
            CellState.ALIVE if rng.randrange(5) == 0 else CellState.DEAD
            for _ in range(width * height)
        ]
        return cls(width, height, cells)

    def __getitem__(self, xy: tuple[int, int]) -> CellState:
        x, y = xy
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell {xy} is outside the grid")
        return self.cells[y * self.width + x]

    def __setitem__(self, xy: tuple[int, int], state: CellState) -> None:
        x, y = xy
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell {xy} is outside the grid")
        self.cells[y * self.width + x] = state

    def neighbors(self, x: int, y: int) -> int:
        """Number of live cells among the up to eight cells around (x, y)."""
        return sum(
            1
            for ny in range(max(y - 1, 0), min(y + 2, self.height))
            for nx in range(max(x - 1, 0), min(x + 2, self.width))
            if (nx, ny) != (x, y) and self.cells[ny * self.width + nx] is CellState.ALIVE
        )

    def step(self) -> None:
        """Advance the whole grid by one generation."""
        self.cells = [
            next_state(self.cells[y * self.width + x], self.neighbors(x, y))
            for y in range(self.height)
            for x in range(self.width)
        ]