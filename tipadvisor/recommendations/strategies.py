from __future__ import annotations

from typing import Protocol

from .engine import NEUTRAL_RATING, recommend
from .models import CountryTippingProfile, RatingPair, TipRecommendation


class RecommendationStrategy(Protocol):
    """Anything that can turn a country profile and ratings into a recommendation."""

    name: str

    def recommend(
        self, profile: CountryTippingProfile, ratings: RatingPair
    ) -> TipRecommendation: ...


def _format_pct(value: float) -> str:
    return f"{value:g}%"


def explain(profile: CountryTippingProfile, ratings: RatingPair, percentage: float) -> str:
    average = ratings.average
    rated = f"an average rating of {average:g}/5"

    if not profile.tipping_customary:
        if percentage == 0:
            return f"Tipping isn't customary here and {rated} doesn't call for one."
        return (
            f"Tipping isn't customary here, but {rated} "
            f"merits a small {_format_pct(percentage)} tip."
        )

    base = _format_pct(profile.recommended_percentage)
    if average > NEUTRAL_RATING:
        return f"The usual tip here is {base}; {rated} raises it to {_format_pct(percentage)}."
    if average < NEUTRAL_RATING:
        return f"The usual tip here is {base}; {rated} lowers it to {_format_pct(percentage)}."
    return f"The usual tip here is {base}, which fits {rated}."


class RuleBasedStrategy:
    name = "rule_based"

    def recommend(
        self, profile: CountryTippingProfile, ratings: RatingPair
    ) -> TipRecommendation:
        percentage = recommend(profile, ratings.service_quality, ratings.food_quality)
        return TipRecommendation(
            recommended_tip_percentage=percentage,
            explanation=explain(profile, ratings, percentage),
            strategy=self.name,
        )


STRATEGIES: dict[str, RecommendationStrategy] = {
    RuleBasedStrategy.name: RuleBasedStrategy(),
}


def get_strategy(name: str = RuleBasedStrategy.name) -> RecommendationStrategy:
    """Look up a registered strategy by name; raises ``KeyError`` if unknown."""
    return STRATEGIES[name]
