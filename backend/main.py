import argparse
import json
import logging
import random
from typing import Any, Dict, Optional

from config import HOST, LOG_FORMAT, LOG_LEVEL, PORT, get_game_seed
from domain.constants import SNAKE_MOVE_INTERVAL_MS, SNAKE_SPAWN_INTERVAL_MS
from engine import GameEngine
from players import Player, RandomPlayer

logger = logging.getLogger(__name__)

# Spawns happen once every this many move ticks (7000ms / 500ms)
MOVE_TICKS_PER_SPAWN = SNAKE_SPAWN_INTERVAL_MS // SNAKE_MOVE_INTERVAL_MS


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    max_ticks: int = 1000,
    seed: Optional[int] = None,
    player: Optional[Player] = None,
    show_board: bool = False,
) -> Dict[str, Any]:
    """
    Runs a headless game driven by a Player on simulated time.

    Each move tick the player presses one key, then every snake advances.
    Every MOVE_TICKS_PER_SPAWN ticks a snake spawns.

    Args:
        max_ticks: upper limit on move ticks before the run stops
        seed: seed for the engine and the default player
        player: key-pressing player; defaults to RandomPlayer
        show_board: print the ASCII board after every tick

    Returns:
        A dictionary summarizing the run (game_id, ticks, score, status,
        snakes, transitions).
    """
    rng = random.Random(seed)
    elapsed_ms = [0]
    engine = GameEngine(rng=rng, clock=lambda: elapsed_ms[0] / 1000)
    if player is None:
        player = RandomPlayer(random.Random(None if seed is None else seed + 1))

    ticks = 0
    while ticks < max_ticks and engine.state.is_playing:
        ticks += 1
        elapsed_ms[0] += SNAKE_MOVE_INTERVAL_MS

        key = player.get_key(engine.state)
        if key is not None:
            engine.handle_key(key)

        engine.move_tick()
        if ticks % MOVE_TICKS_PER_SPAWN == 0:
            engine.spawn_tick()

        if show_board:
            print(f"\nTick {ticks} | score {engine.state.score} | {engine.state.status}")
            print(engine.state.print_board())

    state = engine.state
    return {
        "game_id": engine.game_id,
        "ticks": ticks,
        "score": state.score,
        "status": state.status,
        "snakes": len(state.snakes),
        "transitions": {action_type.value: count for action_type, count in engine.transition_counts.items()},
    }


def serve(host: str, port: int, seed: Optional[int]) -> None:
    from web import create_app
    from services.game_loop import GameLoop

    loop = GameLoop(GameEngine(rng=random.Random(seed)))
    app = create_app(loop)
    loop.start()
    try:
        logger.info("Serving Black Mamba on http://%s:%s", host, port)
        app.run(host=host, port=port, use_reloader=False, threaded=True)
    finally:
        loop.stop()


# -------------------------------
# Main Entry Point
# -------------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Black Mamba: dodge the snakes, eat the food."
    )
    subparsers = parser.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser("serve", help="Run the browser game server (default)")
    serve_parser.add_argument("--host", type=str, default=HOST,
                              help="Interface to bind")
    serve_parser.add_argument("--port", type=int, default=PORT,
                              help="Port to listen on")
    serve_parser.add_argument("--seed", type=int, default=get_game_seed(),
                              help="Seed for a reproducible game")

    sim_parser = subparsers.add_parser("simulate", help="Play a headless game with a random player")
    sim_parser.add_argument("--ticks", type=int, default=1000,
                            help="Maximum number of move ticks")
    sim_parser.add_argument("--seed", type=int, default=get_game_seed(),
                            help="Seed for a reproducible game")
    sim_parser.add_argument("--show-board", action="store_true",
                            help="Print the board after every tick")

    args = parser.parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    if args.command == "simulate":
        if args.ticks <= 0:
            raise ValueError("--ticks must be positive")
        result = run_simulation(max_ticks=args.ticks, seed=args.seed, show_board=args.show_board)
        print("\nSimulation Result Summary:")
        print(json.dumps(result, indent=2))
        return result

    serve(
        host=getattr(args, "host", HOST),
        port=getattr(args, "port", PORT),
        seed=getattr(args, "seed", get_game_seed()),
    )
    return None


if __name__ == "__main__":
    main()
