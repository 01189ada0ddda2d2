from __future__ import annotations

import logging
import time

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from .analytics.aggregator import compute_analytics
from .analytics.store import (
    CALCULATION,
    PROFILE_NOT_FOUND,
    RECOMMENDATION,
    get_events,
    record_event,
)
from .calculator.breakdown import calculate_tip
from .calculator.models import TipBreakdown, TipCalculationRequest
from .countries.data_store import ProfileNotFound, get_profile, list_countries
from .ratelimit.limiter import client_key, is_rate_limited, rate_limit_headers
from .recommendations.models import (
    CountryTippingProfile,
    RatingPair,
    ServiceType,
    TipRecommendationRequest,
    TipRecommendationResponse,
)
from .recommendations.presets import (
    PREDEFINED_TIP_PERCENTAGES,
    match_preset,
    nearest_preset,
)
from .recommendations.strategies import get_strategy

logger = logging.getLogger(__name__)

app = FastAPI(title="Tip Advisor API", version="1.0.0")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "countries": list_countries(),
        "service_types": [s.value for s in ServiceType],
        "predefined_tip_percentages": list(PREDEFINED_TIP_PERCENTAGES),
    }


@app.get("/countries/{name}", response_model=CountryTippingProfile)
def country_profile(name: str) -> CountryTippingProfile:
    try:
        return get_profile(name)
    except ProfileNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


# ── Calculator ───────────────────────────────────────────────────────────


@app.post("/calculate", response_model=TipBreakdown)
def calculate(body: TipCalculationRequest) -> TipBreakdown:
    breakdown = calculate_tip(body.bill_amount, body.tip_percentage, body.split_count)
    record_event(CALCULATION, {
        "bill_amount": body.bill_amount,
        "tip_percentage": body.tip_percentage,
        "split_count": body.split_count,
    })
    return breakdown


# ── Recommendation ───────────────────────────────────────────────────────


@app.post("/recommend-tip", response_model=TipRecommendationResponse)
def recommend_tip(body: TipRecommendationRequest, request: Request):
    key = client_key(
        request.headers.get("x-forwarded-for"),
        request.client.host if request.client else None,
    )
    if is_rate_limited(key):
        return JSONResponse(
            {"detail": "Too many requests"},
            status_code=429,
            headers=rate_limit_headers(),
        )

    start_time = time.time()

    if body.current_tip_percentage is not None:
        raise HTTPException(
            status_code=409,
            detail="Clear the tip percentage first to get a recommendation",
        )

    try:
        strategy = get_strategy(body.strategy)
    except KeyError:
        raise HTTPException(status_code=422, detail=f"Unknown strategy '{body.strategy}'") from None

    # 1. Resolve the country before the engine runs
    try:
        profile = get_profile(body.country)
    except ProfileNotFound as exc:
        record_event(PROFILE_NOT_FOUND, {"country": body.country})
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    # 2. Recommend
    ratings = RatingPair(service_quality=body.service_quality, food_quality=body.food_quality)
    recommendation = strategy.recommend(profile, ratings)
    pct = recommendation.recommended_tip_percentage

    # 3. Optional bill breakdown at the recommended rate
    breakdown = None
    if body.bill_amount is not None:
        breakdown = calculate_tip(body.bill_amount, pct, body.split_count)

    preset = match_preset(pct)
    response = TipRecommendationResponse(
        country=body.country,
        recommended_tip_percentage=pct,
        explanation=recommendation.explanation,
        strategy=recommendation.strategy,
        preset_percentage=preset,
        nearest_preset_percentage=nearest_preset(pct),
        message=f"Recommendation: {pct:g}%",
        breakdown=breakdown,
    )

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event(RECOMMENDATION, {
        "country": body.country,
        "service_quality": body.service_quality,
        "food_quality": body.food_quality,
        "service_type": body.service_type.value if body.service_type else None,
        "recommended_tip_percentage": pct,
        "preset_percentage": preset,
        "strategy": recommendation.strategy,
        "response_time_ms": elapsed_ms,
    })

    return response


# ── Analytics ────────────────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())
