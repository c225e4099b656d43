"""
Configuration settings for the Second Turn game lookup services.
"""

import os
from pathlib import Path

# Data and logs default to the directory the process is started from
DATA_DIR = Path(os.environ.get("SECOND_TURN_DATA_DIR", Path.cwd() / "data"))
# Logs directory for per-run logs
LOGS_DIR = Path(os.environ.get("SECOND_TURN_LOGS_DIR", Path.cwd() / "second_turn_cache" / "logs"))


def _int_from_env(name: str, default: int) -> int:
    try:
        value = int(os.environ.get(name, default))
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


# BoardGameGeek XML API2
BGG_API_URL = os.environ.get("BGG_API_URL", "https://boardgamegeek.com/xmlapi2").rstrip("/")
# BGG hands out application tokens; requests go out anonymously when unset
BGG_API_TOKEN = os.environ.get("BGG_API_TOKEN") or None
BGG_TIMEOUT = _int_from_env("BGG_TIMEOUT", 10)  # seconds
USER_AGENT = os.environ.get("SECOND_TURN_USER_AGENT", "SecondTurn/0.1 (+https://secondturn.games)")

# Raw BGG item types requested when the caller passes no kind filter
DEFAULT_SEARCH_TYPES = ["boardgame", "boardgameexpansion"]

# Catalog cache
CATALOG_CACHE_SIZE = _int_from_env("CATALOG_CACHE_SIZE", 1024)

# Local index (BGG rank dump)
BOARDGAMES_CSV = Path(os.environ.get("BOARDGAMES_CSV", DATA_DIR / "boardgames_ranks.csv"))
SEARCH_RESULT_LIMIT = 50

# Placeholder used when the catalog returns no usable name
UNKNOWN_GAME_NAME = "Unknown Game"
