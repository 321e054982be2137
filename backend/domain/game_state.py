"""
GameState entity - a snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from typing import Tuple

from .constants import GAME_OVER, GRID_SIZE, INITIAL_PLAYER_POSITION, PLAYING
from .coordinate import Coordinate
from .renderer import MARKER_SYMBOLS, render_cells
from .snake import Snake


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        player: the player's cell
        food: the food cell
        snakes: obstacles in spawn order
        score: food eaten since the last reset
        status: PLAYING or GAME_OVER
        size: board width and height
    """

    player: Coordinate
    food: Coordinate
    snakes: Tuple[Snake, ...] = ()
    score: int = 0
    status: str = PLAYING
    size: int = GRID_SIZE

    @property
    def is_playing(self) -> bool:
        return self.status == PLAYING

    @property
    def is_over(self) -> bool:
        return self.status == GAME_OVER

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        P = player
        F = food
        S = snake segment
        Rows are printed top to bottom, matching the grid origin at top left.
        """
        cells = render_cells(self)
        result = []
        for y in range(self.size):
            row = cells[y * self.size:(y + 1) * self.size]
            result.append(f"{y:2d} {' '.join(MARKER_SYMBOLS[c] for c in row)}")

        # x-axis labels, last digit only so columns stay aligned
        result.append("   " + " ".join(str(i % 10) for i in range(self.size)))

        return "\n".join(result)

    def to_dict(self) -> dict:
        return {
            "grid_size": self.size,
            "player": self.player.to_dict(),
            "food": self.food.to_dict(),
            "snakes": [snake.to_dict() for snake in self.snakes],
            "score": self.score,
            "status": self.status,
        }

    def __repr__(self):
        return (
            f"<GameState status={self.status}, score={self.score}, "
            f"player={tuple(self.player)}, food={tuple(self.food)}, snakes={len(self.snakes)}>"
        )


def initial_state(food: Coordinate, size: int = GRID_SIZE) -> GameState:
    """Fresh round: player centered, no snakes, score 0, PLAYING."""
    return GameState(
        player=Coordinate(*INITIAL_PLAYER_POSITION),
        food=food,
        snakes=(),
        score=0,
        status=PLAYING,
        size=size,
    )
