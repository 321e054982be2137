"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import DOWN, LEFT, RIGHT, UP
from domain.coordinate import Coordinate
from domain.game_state import GameState
from .base import Player

DIRECTION_KEYS = {
    UP: "ArrowUp",
    DOWN: "ArrowDown",
    LEFT: "ArrowLeft",
    RIGHT: "ArrowRight",
}


class RandomPlayer(Player):
    """
    A random player that avoids walls and snake segments.

    Among the safe moves it prefers one that closes the distance to the food.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_key(self, game_state: GameState) -> Optional[str]:
        px, py = game_state.player

        # Calculate all possible next positions (origin is top-left)
        possible_moves = {
            UP:    Coordinate(px, py - 1),
            DOWN:  Coordinate(px, py + 1),
            LEFT:  Coordinate(px - 1, py),
            RIGHT: Coordinate(px + 1, py),
        }

        occupied = {segment for snake in game_state.snakes for segment in snake.body}

        # Filter out moves that:
        # 1. Hit walls (the move would be absorbed anyway)
        # 2. Land on a snake segment
        valid_moves: List[str] = []
        for move, target in possible_moves.items():
            if not target.in_bounds(game_state.size):
                continue
            if target in occupied:
                continue
            valid_moves.append(move)

        # Trapped: any direction will do
        if not valid_moves:
            return DIRECTION_KEYS[self.rng.choice(list(possible_moves))]

        food = game_state.food
        current_distance = _distance(game_state.player, food)
        closer = [m for m in valid_moves if _distance(possible_moves[m], food) < current_distance]
        if closer:
            return DIRECTION_KEYS[self.rng.choice(closer)]

        return DIRECTION_KEYS[self.rng.choice(valid_moves)]


def _distance(a: Coordinate, b: Coordinate) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)
