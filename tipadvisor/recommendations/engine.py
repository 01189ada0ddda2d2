from __future__ import annotations

import math

from .models import CountryTippingProfile

NEUTRAL_RATING = 3

# Non-customary countries: (minimum average, percentage), checked in order.
NON_CUSTOMARY_TIERS = ((4, 10.0), (3, 5.0))

ONE_STEP_INCREASE, ONE_STEP_CAP = 5, 20
TWO_STEP_INCREASE, TWO_STEP_CAP = 10, 25
DECREASE_PER_STEP, DECREASE_FLOOR = 3, 5


def average_rating(service_quality: int, food_quality: int) -> float:
    return (service_quality + food_quality) / 2


def _steps(distance: float) -> int:
    # Half-step averages (2.5, 3.5) still count as one step.
    return max(1, math.floor(distance))


def recommend(
    profile: CountryTippingProfile,
    service_quality: int,
    food_quality: int,
) -> float:
    """
    Recommend a tip percentage for one dining experience.

    ``service_quality`` and ``food_quality`` must already be validated to the
    1-5 range; the caps and the floor are absolute and do not depend on the
    country's base percentage.
    """
    average = average_rating(service_quality, food_quality)

    if not profile.tipping_customary:
        for minimum, percentage in NON_CUSTOMARY_TIERS:
            if average >= minimum:
                return percentage
        return 0.0

    base = profile.recommended_percentage

    if average > NEUTRAL_RATING:
        if _steps(average - NEUTRAL_RATING) >= 2:
            return min(base + TWO_STEP_INCREASE, TWO_STEP_CAP)
        return min(base + ONE_STEP_INCREASE, ONE_STEP_CAP)

    if average < NEUTRAL_RATING:
        drop = _steps(NEUTRAL_RATING - average)
        return max(base - drop * DECREASE_PER_STEP, DECREASE_FLOOR)

    return base
