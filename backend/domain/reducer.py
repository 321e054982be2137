"""
Pure reducer: (GameState, Action) -> GameState.
"""

from dataclasses import replace

from .actions import Action, ActionType
from .constants import GAME_OVER, MAX_SNAKES
from .game_state import GameState, initial_state


def _move_player(state: GameState, action: Action) -> GameState:
    return replace(state, player=action.payload)


def _set_food(state: GameState, action: Action) -> GameState:
    return replace(state, food=action.payload)


def _increase_score(state: GameState, action: Action) -> GameState:
    return replace(state, score=state.score + 1)


def _add_snake(state: GameState, action: Action) -> GameState:
    if len(state.snakes) < MAX_SNAKES:
        return replace(state, snakes=state.snakes + (action.payload,))
    return state


def _move_snakes(state: GameState, action: Action) -> GameState:
    return replace(state, snakes=tuple(action.payload))


def _game_over(state: GameState, action: Action) -> GameState:
    return replace(state, status=GAME_OVER)


def _reset(state: GameState, action: Action) -> GameState:
    return initial_state(food=action.payload, size=state.size)


_HANDLERS = {
    ActionType.MOVE_PLAYER: _move_player,
    ActionType.SET_FOOD: _set_food,
    ActionType.INCREASE_SCORE: _increase_score,
    ActionType.ADD_SNAKE: _add_snake,
    ActionType.MOVE_SNAKES: _move_snakes,
    ActionType.GAME_OVER: _game_over,
    ActionType.RESET: _reset,
}


def game_reducer(state: GameState, action: Action) -> GameState:
    """
    Apply one action and return the next state. The input is never mutated.

    Raises:
        ValueError: if the action type is not recognized
    """
    handler = _HANDLERS.get(action.type)
    if handler is None:
        raise ValueError(f"Unknown action type: {action.type!r}")
    return handler(state, action)
