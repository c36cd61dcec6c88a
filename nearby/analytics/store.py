from __future__ import annotations

import time
from typing import Any

_events: list[dict[str, Any]] = []


def record_event(event_type: str, data: dict[str, Any]) -> None:
    _events.append({
        "type": event_type,
        "timestamp": time.time(),
        **data,
    })


def record_search(
    query: str | None,
    max_radius_km: float | None,
    results_returned: int,
    response_time_ms: float,
    outcome: str = "ok",
) -> None:
    """Record one HTTP search; ``outcome`` is "ok" or the error class name."""
    record_event("search", {
        "query": query,
        "input_kind": "text" if query is not None else "coordinates",
        "max_radius_km": max_radius_km,
        "results_returned": results_returned,
        "response_time_ms": response_time_ms,
        "outcome": outcome,
    })


def get_events() -> list[dict[str, Any]]:
    return _events


def clear_events() -> None:
    _events.clear()
