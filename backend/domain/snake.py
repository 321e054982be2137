"""
Snake (obstacle) entity for the game engine.
"""

import random
from dataclasses import dataclass, replace
from typing import Iterable, Tuple

from .constants import (
    DIRECTION_DELTAS,
    DIRECTION_ORDER,
    GRID_SIZE,
    OPPOSITE,
    RIGHT,
    SNAKE_LENGTH,
    TURN_PROBABILITY,
)
from .coordinate import Coordinate


@dataclass(frozen=True)
class Snake:
    """
    An autonomous obstacle wandering the board.

    Attributes:
        id: unique, time-based identifier
        body: tuple of Coordinate from the oldest segment (tail) at index 0
            to the head at the end
        direction: current heading, one of UP/DOWN/LEFT/RIGHT
    """

    id: int
    body: Tuple[Coordinate, ...]
    direction: str = RIGHT

    @property
    def head(self) -> Coordinate:
        """Return the head position (last element)."""
        return self.body[-1]

    def occupies(self, cell: Coordinate) -> bool:
        return cell in self.body

    def advance(self, rng: random.Random, size: int = GRID_SIZE) -> "Snake":
        """
        Return this snake moved one cell.

        The heading may turn (never straight back) with TURN_PROBABILITY.
        A head leaving the board bounces: heading reverses and the head is
        pushed two cells along the reversed heading. Only the heading axis is
        corrected.
        """
        direction = self.direction
        candidates = [d for d in DIRECTION_ORDER if d != OPPOSITE[direction]]
        if rng.random() < TURN_PROBABILITY:
            direction = rng.choice(candidates)

        dx, dy = DIRECTION_DELTAS[direction]
        head = self.head.shifted(dx, dy)

        if not head.in_bounds(size):
            direction = OPPOSITE[direction]
            dx, dy = DIRECTION_DELTAS[direction]
            head = head.shifted(2 * dx, 2 * dy)

        return replace(self, body=self.body[1:] + (head,), direction=direction)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "body": [segment.to_dict() for segment in self.body],
            "direction": self.direction,
        }


def spawn_snake(
    rng: random.Random,
    snake_id: int,
    size: int = GRID_SIZE,
    length: int = SNAKE_LENGTH,
) -> Snake:
    """Lay out a new snake horizontally on the bottom row, heading RIGHT."""
    start_x = rng.randrange(size - length)
    start_y = size - 1
    body = tuple(Coordinate(start_x + i, start_y) for i in range(length))
    return Snake(id=snake_id, body=body, direction=RIGHT)


def advance_all(snakes: Iterable[Snake], rng: random.Random, size: int = GRID_SIZE) -> Tuple[Snake, ...]:
    """Advance every snake from the same snapshot."""
    return tuple(snake.advance(rng, size) for snake in snakes)
