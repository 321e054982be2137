"""
State transitions understood by the reducer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from .coordinate import Coordinate
from .snake import Snake


class ActionType(str, Enum):
    MOVE_PLAYER = "MOVE_PLAYER"
    SET_FOOD = "SET_FOOD"
    INCREASE_SCORE = "INCREASE_SCORE"
    ADD_SNAKE = "ADD_SNAKE"
    MOVE_SNAKES = "MOVE_SNAKES"
    GAME_OVER = "GAME_OVER"
    RESET = "RESET"


@dataclass(frozen=True)
class Action:
    type: ActionType
    payload: Any = None


def move_player(position: Coordinate) -> Action:
    return Action(ActionType.MOVE_PLAYER, position)


def set_food(position: Coordinate) -> Action:
    return Action(ActionType.SET_FOOD, position)


def increase_score() -> Action:
    return Action(ActionType.INCREASE_SCORE)


def add_snake(snake: Snake) -> Action:
    return Action(ActionType.ADD_SNAKE, snake)


def move_snakes(snakes: Iterable[Snake]) -> Action:
    return Action(ActionType.MOVE_SNAKES, tuple(snakes))


def game_over() -> Action:
    return Action(ActionType.GAME_OVER)


def reset(food: Coordinate) -> Action:
    """Reset carries its freshly drawn food cell so the reducer stays pure."""
    return Action(ActionType.RESET, food)
