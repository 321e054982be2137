"""
Game rules that turn input and positions into actions.
"""

import random
from typing import List, Optional

from . import actions
from .actions import Action
from .constants import DIRECTION_DELTAS, KEY_BINDINGS
from .coordinate import Coordinate, clamp, random_coordinate
from .game_state import GameState


def direction_for_key(key: str) -> Optional[str]:
    """Map a KeyboardEvent.key value to a direction, or None for other keys."""
    return KEY_BINDINGS.get(key)


def next_player_position(position: Coordinate, direction: str, size: int) -> Coordinate:
    """One step in ``direction``, clamped to the board. Walls absorb the move."""
    dx, dy = DIRECTION_DELTAS[direction]
    return Coordinate(clamp(position.x + dx, size), clamp(position.y + dy, size))


def player_action_for_key(state: GameState, key: str) -> Optional[Action]:
    """MovePlayer for a direction key while playing; None otherwise."""
    if not state.is_playing:
        return None
    direction = direction_for_key(key)
    if direction is None:
        return None
    return actions.move_player(next_player_position(state.player, direction, state.size))


def player_hit_snake(state: GameState) -> bool:
    return any(snake.occupies(state.player) for snake in state.snakes)


def evaluate_collisions(state: GameState, rng: random.Random) -> List[Action]:
    """
    Food check first, then obstacles.

    Eating food yields IncreaseScore followed by SetFood with a fresh random
    cell. Touching any snake segment yields GameOver; scanning stops at the
    first hit.
    """
    if not state.is_playing:
        return []

    result: List[Action] = []
    if state.player == state.food:
        result.append(actions.increase_score())
        result.append(actions.set_food(random_coordinate(rng, state.size)))

    if player_hit_snake(state):
        result.append(actions.game_over())

    return result
