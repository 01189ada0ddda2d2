from __future__ import annotations

from collections import Counter
from typing import Any

from .store import CALCULATION, PROFILE_NOT_FOUND, RECOMMENDATION


def _mean(values: list[float]) -> float:
    return round(sum(values) / len(values), 1) if values else 0.0


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    recs = [e for e in events if e["type"] == RECOMMENDATION]
    calcs = [e for e in events if e["type"] == CALCULATION]
    misses = [e for e in events if e["type"] == PROFILE_NOT_FOUND]
    total = len(recs)

    # Top countries
    country_counter: Counter[str] = Counter(r.get("country", "unknown") for r in recs)
    top_countries = [{"name": n, "count": c} for n, c in country_counter.most_common(10)]

    # Recommended percentage distribution
    pct_counter: Counter[str] = Counter()
    for r in recs:
        pct_counter[f"{r['recommended_tip_percentage']:g}"] += 1

    strategy_usage = dict(Counter(r.get("strategy", "unknown") for r in recs))

    service_types: Counter[str] = Counter()
    for r in recs:
        if r.get("service_type"):
            service_types[r["service_type"]] += 1

    preset_hits = sum(1 for r in recs if r.get("preset_percentage") is not None)

    return {
        "total_recommendations": total,
        "total_calculations": len(calcs),
        "unknown_country_lookups": len(misses),
        "avg_recommended_percentage": _mean([r["recommended_tip_percentage"] for r in recs]),
        "avg_service_quality": _mean([r["service_quality"] for r in recs]),
        "avg_food_quality": _mean([r["food_quality"] for r in recs]),
        "avg_response_time_ms": _mean([r["response_time_ms"] for r in recs if "response_time_ms" in r]),
        "top_countries": top_countries,
        "percentage_distribution": dict(pct_counter),
        "strategy_usage": strategy_usage,
        "service_type_usage": dict(service_types),
        "preset_match_rate": round(preset_hits / total * 100, 1) if total else 0.0,
    }
