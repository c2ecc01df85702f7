"""File-based cache for NEO API payloads, with TTL expiry."""

from __future__ import annotations

import json
import logging
import re
import time
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_CACHE_DIR = Path.home() / ".cache" / "asteroid-impact"

# TTLs in seconds
NEO_FEED_TTL = 3600  # 1 hour; today's feed gains approaches during the day
NEO_LOOKUP_TTL = 86400  # 24 hours

_UNSAFE = re.compile(r"[^A-Za-z0-9_.-]+")


def get_cache_dir() -> Path:
    """Return the cache directory, creating it if needed."""
    _CACHE_DIR.mkdir(parents=True, exist_ok=True)
    return _CACHE_DIR


def cache_key(*parts: str) -> str:
    """Build a filesystem-safe key, e.g. ('feed', '2024-01-01') -> 'neo_feed_2024-01-01.json'."""
    return "neo_" + "_".join(_UNSAFE.sub("-", p) for p in parts) + ".json"


def load_cached(key: str, max_age_seconds: int) -> Any | None:
    """Return the cached JSON payload if present and fresh, else None."""
    path = get_cache_dir() / key
    if not path.exists():
        return None

    try:
        envelope = json.loads(path.read_text(encoding="utf-8"))
        stored_at = envelope["stored_at"]
        payload = envelope["payload"]
    except (json.JSONDecodeError, KeyError, TypeError):
        logger.debug("Discarding unreadable cache entry %s", key)
        return None

    if time.time() - stored_at > max_age_seconds:
        logger.debug("Cache expired for %s", key)
        return None

    logger.debug("Cache hit for %s", key)
    return payload


def store_cached(key: str, payload: Any) -> None:
    """Store a JSON-serialisable payload with the current timestamp."""
    text = json.dumps({"stored_at": time.time(), "payload": payload})
    (get_cache_dir() / key).write_text(text, encoding="utf-8")
    logger.debug("Cached %s (%d bytes)", key, len(text))
