import os

from garage_query.core.query import DEFAULT_CHEAP_THRESHOLD

DEFAULT_INVENTORY_PATH = "inventory.json"
DEFAULT_LOG_LEVEL = "WARNING"


def get_inventory_path() -> str:
    return os.getenv("GARAGE_INVENTORY", DEFAULT_INVENTORY_PATH)


def get_cheap_threshold() -> int:
    raw = os.getenv("GARAGE_CHEAP_THRESHOLD")
    if raw is None or not raw.strip():
        return DEFAULT_CHEAP_THRESHOLD
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"GARAGE_CHEAP_THRESHOLD must be an integer, got {raw!r}") from None


def get_log_level() -> str:
    return os.getenv("GARAGE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
