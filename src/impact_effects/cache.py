"""File-based cache for NeoWs feed responses with TTL expiry."""

from __future__ import annotations

import hashlib
import json
import logging
import time
from pathlib import Path

logger = logging.getLogger(__name__)

_CACHE_DIR = Path.home() / ".cache" / "impact-effects"

# Close-approach data for a date range is revised as orbits are refined
NEOWS_TTL = 6 * 3600


def get_cache_dir() -> Path:
    """Return the cache directory, creating it if needed."""
    _CACHE_DIR.mkdir(parents=True, exist_ok=True)
    return _CACHE_DIR


def cache_key(prefix: str, **params: str) -> str:
    """Stable file name for a request; parameter order does not matter."""
    canonical = "&".join(f"{k}={params[k]}" for k in sorted(params))
    digest = hashlib.sha256(canonical.encode("utf-8")).hexdigest()[:16]
    return f"{prefix}-{digest}.json"


def cache_get(key: str, max_age_seconds: int) -> bytes | None:
    """Return cached bytes if fresh, else None."""
    cache_dir = get_cache_dir()
    data_path = cache_dir / key
    meta_path = cache_dir / f"{key}.meta"

    if not data_path.exists() or not meta_path.exists():
        return None

    try:
        stored_at = json.loads(meta_path.read_text())["timestamp"]
    except (json.JSONDecodeError, KeyError):
        logger.debug("Ignoring corrupt cache metadata for %s", key)
        return None
    age = time.time() - stored_at
    if age > max_age_seconds:
        logger.debug("Cache expired for %s (%.0fs old)", key, age)
        return None

    logger.debug("Cache hit for %s", key)
    return data_path.read_bytes()


def cache_put(key: str, data: bytes) -> None:
    """Store bytes in cache with current timestamp."""
    cache_dir = get_cache_dir()
    (cache_dir / key).write_bytes(data)
    (cache_dir / f"{key}.meta").write_text(json.dumps({"timestamp": time.time()}))
    logger.debug("Cached %s (%d bytes)", key, len(data))
