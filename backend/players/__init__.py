"""
Player implementations for Black Mamba.

Players drive the engine headlessly (simulations, demos) by choosing the key
a human would press.
"""

from .base import Player
from .random_player import RandomPlayer, DIRECTION_KEYS

__all__ = [
    'Player',
    'RandomPlayer',
    'DIRECTION_KEYS',
]
