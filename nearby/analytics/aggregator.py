from __future__ import annotations

from collections import Counter
from typing import Any


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    searches = [e for e in events if e["type"] == "search"]
    total = len(searches)

    # Average response time
    times = [s["response_time_ms"] for s in searches if "response_time_ms" in s]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Top free-text queries
    query_counter: Counter[str] = Counter()
    for s in searches:
        if s.get("query"):
            query_counter[s["query"].strip().lower()] += 1
    top_queries = [{"name": n, "count": c} for n, c in query_counter.most_common(10)]

    # Text vs coordinate input
    input_kinds = dict(Counter(s.get("input_kind", "unknown") for s in searches))

    # Radius filter usage
    radius_count = sum(1 for s in searches if s.get("max_radius_km") is not None)
    radius_usage = round(radius_count / total * 100, 1) if total else 0.0

    # Results per successful search
    successful = [s for s in searches if s.get("outcome", "ok") == "ok"]
    returned = [s.get("results_returned", 0) for s in successful]
    avg_results = round(sum(returned) / len(returned), 1) if returned else 0.0

    # Failures by error class
    failures = dict(Counter(s["outcome"] for s in searches if s.get("outcome", "ok") != "ok"))

    return {
        "total_searches": total,
        "avg_response_time_ms": avg_time,
        "top_queries": top_queries,
        "input_kinds": input_kinds,
        "radius_filter_usage": radius_usage,
        "avg_results_returned": avg_results,
        "failures": failures,
    }
