from pathlib import Path
import logging
import os
from dotenv import load_dotenv

ENV_PATH = Path(__file__).parent.parent / ".env"

load_dotenv(dotenv_path=ENV_PATH)


def _env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return str(v).strip().lower() in {"1", "true", "yes", "on"}


def _env_log_level(name: str, default: str = "INFO") -> str:
    """Level name from the environment; unknown names fall back to `default`."""
    v = (os.getenv(name) or default).strip().upper()
    if not isinstance(logging.getLevelName(v), int):
        return default
    return v


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data/games.db")
DB_ECHO = _env_bool("DB_ECHO", False)
LOG_LEVEL = _env_log_level("LOG_LEVEL")

# Dashboard breakdown sizes
STATS_TOP_N = int(os.getenv("STATS_TOP_N", "20"))
STATS_RECENT_COMPLETIONS = int(os.getenv("STATS_RECENT_COMPLETIONS", "5"))
