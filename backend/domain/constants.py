"""
Game constants for Black Mamba.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Fixed order used when picking a random heading
DIRECTION_ORDER = (UP, DOWN, LEFT, RIGHT)

OPPOSITE = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Origin is top-left: UP decreases y, DOWN increases y
DIRECTION_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Browser KeyboardEvent.key values -> direction
KEY_BINDINGS = {
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
}

# Game status
PLAYING = "PLAYING"
GAME_OVER = "GAME_OVER"

# Board and obstacle settings
GRID_SIZE = 25
INITIAL_PLAYER_POSITION = (12, 12)
SNAKE_LENGTH = 9
MAX_SNAKES = 7
TURN_PROBABILITY = 0.2

# Timer cadence
SNAKE_SPAWN_INTERVAL_MS = 7000
SNAKE_MOVE_INTERVAL_MS = 500

# Cell markers produced by the renderer
CELL_PLAYER = "player"
CELL_FOOD = "food"
CELL_SNAKE = "snake"
