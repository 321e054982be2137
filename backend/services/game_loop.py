"""
Single control thread that owns the GameEngine.

Key presses and resets arrive from other threads (web requests) through an
inbox queue. Spawn and move timers run as jobs on a private
``schedule.Scheduler`` that exists only while the game is PLAYING.
"""

import logging
import queue
import threading
from typing import Optional, Tuple

import schedule

from config import LOOP_SLEEP_SECONDS
from domain.actions import Action, ActionType
from domain.constants import SNAKE_MOVE_INTERVAL_MS, SNAKE_SPAWN_INTERVAL_MS
from domain.game_state import GameState
from engine import GameEngine

logger = logging.getLogger(__name__)

SPAWN_TAG = "spawn"
MOVE_TAG = "move"

COMMAND_KEY = "key"
COMMAND_RESET = "reset"


class GameLoop:
    """
    Serializes every engine transition onto one thread.

    ``tick()`` drains the inbox and runs due timer jobs; ``run()`` repeats it
    until ``stop()`` is called.
    """

    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        scheduler: Optional[schedule.Scheduler] = None,
        sleep_seconds: float = LOOP_SLEEP_SECONDS,
    ):
        self.engine = engine or GameEngine()
        self.scheduler = scheduler or schedule.Scheduler()
        self.sleep_seconds = sleep_seconds
        self.inbox: "queue.Queue[Tuple[str, Optional[str]]]" = queue.Queue()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

        self.engine.subscribe(self._on_transition)
        if self.engine.state.is_playing:
            self._register_timers()

    @property
    def state(self) -> GameState:
        return self.engine.state

    @property
    def timers_active(self) -> bool:
        return bool(self.scheduler.get_jobs())

    # ------------------------------------------------------------------
    # Thread-safe entry points
    # ------------------------------------------------------------------

    def press_key(self, key: str) -> None:
        self.inbox.put((COMMAND_KEY, key))

    def request_reset(self) -> None:
        self.inbox.put((COMMAND_RESET, None))

    # ------------------------------------------------------------------
    # Control thread
    # ------------------------------------------------------------------

    def tick(self) -> None:
        """Apply queued commands in arrival order, then run due timers."""
        try:
            while True:
                try:
                    command, arg = self.inbox.get_nowait()
                except queue.Empty:
                    break
                self._handle_command(command, arg)
            self.scheduler.run_pending()
        except Exception:
            logger.exception("Game loop tick failed for game %s", self.engine.game_id)
            raise

    def run(self) -> None:
        logger.info(
            "Game loop running (spawn every %sms, move every %sms)",
            SNAKE_SPAWN_INTERVAL_MS,
            SNAKE_MOVE_INTERVAL_MS,
        )
        while not self._stop_event.is_set():
            self.tick()
            self._stop_event.wait(self.sleep_seconds)
        logger.info("Game loop stopped")

    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop_event.clear()
        # stop() clears the jobs of a game that may still be in progress
        if self.state.is_playing and not self.timers_active:
            self._register_timers()
        self._thread = threading.Thread(target=self.run, name="game-loop", daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = 2.0) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        self._clear_timers()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _handle_command(self, command: str, arg: Optional[str]) -> None:
        if command == COMMAND_KEY:
            self.engine.handle_key(arg)
        elif command == COMMAND_RESET:
            self.engine.reset()
        else:
            raise ValueError(f"Unknown game loop command: {command!r}")

    def _on_transition(self, previous: GameState, current: GameState, action: Action) -> None:
        if not current.is_playing:
            if self.timers_active:
                self._clear_timers()
            return

        # Reset restarts both timers from zero
        if action.type == ActionType.RESET or not self.timers_active:
            self._clear_timers()
            self._register_timers()

    def _register_timers(self) -> None:
        self.scheduler.every(SNAKE_SPAWN_INTERVAL_MS / 1000).seconds.do(self.engine.spawn_tick).tag(SPAWN_TAG)
        self.scheduler.every(SNAKE_MOVE_INTERVAL_MS / 1000).seconds.do(self.engine.move_tick).tag(MOVE_TAG)

    def _clear_timers(self) -> None:
        self.scheduler.clear()
