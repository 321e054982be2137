"""
Projection of a GameState onto a flat list of cell markers.
"""

from typing import List, Optional

from .constants import CELL_FOOD, CELL_PLAYER, CELL_SNAKE

MARKER_SYMBOLS = {
    None: ".",
    CELL_PLAYER: "P",
    CELL_FOOD: "F",
    CELL_SNAKE: "S",
}


def cell_index(x: int, y: int, size: int) -> int:
    return y * size + x


def render_cells(state) -> List[Optional[str]]:
    """
    Build ``size * size`` markers indexed by ``y * size + x``.

    Player is written first, then food, then every snake segment, so a later
    write wins when cells coincide. Segments outside the board are skipped.
    """
    size = state.size
    cells: List[Optional[str]] = [None] * (size * size)

    cells[cell_index(state.player.x, state.player.y, size)] = CELL_PLAYER
    cells[cell_index(state.food.x, state.food.y, size)] = CELL_FOOD

    for snake in state.snakes:
        for segment in snake.body:
            if segment.in_bounds(size):
                cells[cell_index(segment.x, segment.y, size)] = CELL_SNAKE

    return cells


def render_rows(state) -> List[List[Optional[str]]]:
    """Same markers as render_cells, split into rows."""
    cells = render_cells(state)
    size = state.size
    return [cells[y * size:(y + 1) * size] for y in range(size)]
