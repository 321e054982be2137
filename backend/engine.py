"""
Game engine: the single writer of the authoritative GameState.

Every transition goes through ``dispatch``. After each one, the collision and
scoring rules are evaluated and their actions applied until the state settles.
"""

import logging
import random
import time
import uuid
from collections import Counter, deque
from typing import Callable, Deque, List, Optional

from domain import actions
from domain.actions import Action, ActionType
from domain.constants import GRID_SIZE, MAX_SNAKES
from domain.coordinate import random_coordinate
from domain.game_state import GameState, initial_state
from domain.reducer import game_reducer
from domain.rules import evaluate_collisions, player_action_for_key
from domain.snake import Snake, advance_all, spawn_snake

logger = logging.getLogger(__name__)

# (previous_state, new_state, action)
Listener = Callable[[GameState, GameState, Action], None]

HISTORY_LIMIT = 1000


class GameEngine:
    """
    Owns the game state and applies transitions serially.

    Attributes:
        rng: random source used for food, spawns and snake turns
        clock: returns seconds since the epoch; used for snake ids
        game_id: identifier for this engine instance
        state: the current (immutable) GameState
        history: most recent applied action types, oldest first
        transition_counts: number of applied actions per type
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
        game_id: Optional[str] = None,
        size: int = GRID_SIZE,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock if clock is not None else time.time
        self.game_id = game_id or str(uuid.uuid4())
        self.state: GameState = initial_state(random_coordinate(self.rng, size), size)
        self.history: Deque[ActionType] = deque(maxlen=HISTORY_LIMIT)
        self.transition_counts: Counter = Counter()
        self._listeners: List[Listener] = []
        logger.info("Game %s started; food at %s", self.game_id, tuple(self.state.food))

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener(previous, current, action)`` after every transition."""
        self._listeners.append(listener)

    def dispatch(self, action: Action) -> GameState:
        """Apply ``action``, then settle collisions and scoring."""
        self._apply(action)
        self._settle()
        return self.state

    def _apply(self, action: Action) -> None:
        previous = self.state
        self.state = game_reducer(previous, action)
        self.history.append(action.type)
        self.transition_counts[action.type] += 1

        if previous.is_playing and self.state.is_over:
            logger.info("Game %s over with score %s", self.game_id, self.state.score)

        for listener in self._listeners:
            listener(previous, self.state, action)

    def _settle(self) -> None:
        # A redrawn food cell may land on the player again, so keep going
        # until the rules produce nothing.
        while True:
            pending = evaluate_collisions(self.state, self.rng)
            if not pending:
                return
            for action in pending:
                if action.type == ActionType.INCREASE_SCORE:
                    logger.debug("Food eaten at %s", tuple(self.state.food))
                self._apply(action)

    # ------------------------------------------------------------------
    # Operations driven by input and timers
    # ------------------------------------------------------------------

    def handle_key(self, key: str) -> bool:
        """
        Move the player for a direction key.

        Returns True when a MovePlayer was dispatched. Keys are ignored after
        game over and for non-directional keys.
        """
        action = player_action_for_key(self.state, key)
        if action is None:
            return False
        self.dispatch(action)
        return True

    def spawn_tick(self) -> Optional[Snake]:
        """Spawn one snake on the bottom row. At the cap this is a no-op."""
        if not self.state.is_playing:
            return None

        snake = spawn_snake(self.rng, self._next_snake_id(), self.state.size)
        at_cap = len(self.state.snakes) >= MAX_SNAKES
        self.dispatch(actions.add_snake(snake))

        if at_cap:
            logger.debug("Snake cap of %s reached; spawn dropped", MAX_SNAKES)
            return None
        logger.debug("Spawned snake %s at %s", snake.id, tuple(snake.head))
        return snake

    def move_tick(self) -> None:
        """Advance every snake one cell."""
        if not self.state.is_playing:
            return
        self.dispatch(actions.move_snakes(advance_all(self.state.snakes, self.rng, self.state.size)))

    def reset(self) -> GameState:
        """Start a fresh round with new random food."""
        food = random_coordinate(self.rng, self.state.size)
        self.dispatch(actions.reset(food))
        logger.info("Game %s reset; food at %s", self.game_id, tuple(food))
        return self.state

    def _next_snake_id(self) -> int:
        snake_id = int(self.clock() * 1000)
        if self.state.snakes:
            snake_id = max(snake_id, max(s.id for s in self.state.snakes) + 1)
        return snake_id
