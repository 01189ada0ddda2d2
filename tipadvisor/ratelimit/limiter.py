from __future__ import annotations

import logging
import math
import threading
import time
from typing import Any

from .config import DEFAULT_RATE_LIMIT_CONFIG, RateLimitConfig

logger = logging.getLogger(__name__)

# Process-local; resets on restart and is not shared between workers.
_windows: dict[str, dict[str, Any]] = {}
_lock = threading.Lock()


def client_key(forwarded_for: str | None, host: str | None) -> str:
    """Pick the key a request is limited under: first proxy hop, then socket host."""
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first
    return host or "anonymous"


def _prune_expired(now: float, window_seconds: float) -> None:
    expired = [k for k, w in _windows.items() if now - w["started_at"] > window_seconds]
    for k in expired:
        del _windows[k]


def is_rate_limited(key: str, config: RateLimitConfig = DEFAULT_RATE_LIMIT_CONFIG) -> bool:
    if not config.enabled:
        return False

    now = time.time()
    with _lock:
        window = _windows.get(key)

        if window is None or now - window["started_at"] > config.window_seconds:
            _prune_expired(now, config.window_seconds)
            _windows[key] = {"count": 1, "started_at": now}
            return False

        if window["count"] >= config.max_requests:
            logger.warning("Rate limit hit for %s (%d requests)", key, window["count"])
            return True

        window["count"] += 1
        return False


def rate_limit_headers(config: RateLimitConfig = DEFAULT_RATE_LIMIT_CONFIG) -> dict[str, str]:
    seconds = math.ceil(config.window_seconds)
    return {
        "Retry-After": str(seconds),
        "X-RateLimit-Limit": str(config.max_requests),
        "X-RateLimit-Reset": str(seconds),
    }


def active_windows() -> int:
    return len(_windows)


def clear_rate_limits() -> None:
    with _lock:
        _windows.clear()
