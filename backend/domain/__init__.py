"""
Domain entities for the Black Mamba game engine.

This module contains the core game entities and rules that are independent of
infrastructure concerns (timers, web server, rendering backends).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    GRID_SIZE, SNAKE_LENGTH, MAX_SNAKES,
    PLAYING, GAME_OVER,
)
from .coordinate import Coordinate
from .snake import Snake
from .game_state import GameState, initial_state
from .actions import Action, ActionType
from .reducer import game_reducer
from .renderer import render_cells

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'GRID_SIZE', 'SNAKE_LENGTH', 'MAX_SNAKES',
    'PLAYING', 'GAME_OVER',
    'Coordinate',
    'Snake',
    'GameState', 'initial_state',
    'Action', 'ActionType',
    'game_reducer',
    'render_cells',
]
