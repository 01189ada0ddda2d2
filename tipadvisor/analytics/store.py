from __future__ import annotations

import time
from typing import Any

RECOMMENDATION = "recommendation"
CALCULATION = "calculation"
PROFILE_NOT_FOUND = "profile_not_found"

_events: list[dict[str, Any]] = []


def record_event(event_type: str, data: dict[str, Any]) -> None:
    _events.append({"type": event_type, "timestamp": time.time(), **data})


def get_events(event_type: str | None = None) -> list[dict[str, Any]]:
    """Return recorded events, optionally only those of one type."""
    if event_type is None:
        return list(_events)
    return [e for e in _events if e["type"] == event_type]


def clear_events() -> None:
    _events.clear()
