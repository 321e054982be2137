"""
Runtime settings for the Black Mamba server.

Values come from the environment (optionally a .env file). Game rules are
fixed in domain/constants.py and are not configurable here.
"""

import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

# Sleep between scheduler passes on the game loop thread
LOOP_SLEEP_SECONDS = float(os.getenv("LOOP_SLEEP_SECONDS", "0.05"))


def get_game_seed() -> Optional[int]:
    """Seed for the game's random source; None means nondeterministic."""
    raw = os.getenv("GAME_SEED")
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


def get_allowed_origins() -> List[str]:
    """
    CORS origins for /api/*.

    Configured via CORS_ALLOWED_ORIGINS (comma-separated); falls back to
    local development origins.
    """
    allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
    if allowed_origins_env:
        return [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
    return [
        f"http://localhost:{PORT}",
        f"http://127.0.0.1:{PORT}",
    ]
