"""
Coordinate value type and grid helpers.
"""

import random
from typing import NamedTuple

from .constants import GRID_SIZE


class Coordinate(NamedTuple):
    """A cell on the grid. (0, 0) is the top-left corner."""

    x: int
    y: int

    def shifted(self, dx: int, dy: int) -> "Coordinate":
        return Coordinate(self.x + dx, self.y + dy)

    def in_bounds(self, size: int = GRID_SIZE) -> bool:
        return 0 <= self.x < size and 0 <= self.y < size

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


def clamp(value: int, size: int = GRID_SIZE) -> int:
    """Clamp a single axis value into [0, size - 1]."""
    return max(0, min(size - 1, value))


def random_coordinate(rng: random.Random, size: int = GRID_SIZE) -> Coordinate:
    """
    Draw a coordinate uniformly over the whole grid.

    No cell is excluded, so the result may land on the player or an obstacle.
    """
    return Coordinate(rng.randrange(size), rng.randrange(size))
