from __future__ import annotations

import pytest

from tipadvisor.recommendations.engine import average_rating, recommend
from tipadvisor.recommendations.models import CountryTippingProfile

NOT_CUSTOMARY = CountryTippingProfile(tipping_customary=False)


def _customary(base: float) -> CountryTippingProfile:
    return CountryTippingProfile(tipping_customary=True, recommended_percentage=base)


# ── Countries where tipping isn't expected ───────────────────────────────


def test_not_customary_excellent_ratings():
    assert recommend(NOT_CUSTOMARY, 5, 5) == 10


def test_not_customary_neutral_ratings():
    assert recommend(NOT_CUSTOMARY, 3, 3) == 5


def test_not_customary_poor_ratings():
    assert recommend(NOT_CUSTOMARY, 1, 2) == 0


@pytest.mark.parametrize("service, food, expected", [
    (4, 4, 10),
    (4, 3, 5),
    (3, 2, 0),
])
def test_not_customary_tier_boundaries(service, food, expected):
    assert recommend(NOT_CUSTOMARY, service, food) == expected


def test_not_customary_ignores_base_percentage():
    profile = CountryTippingProfile(tipping_customary=False, recommended_percentage=18)
    assert recommend(profile, 5, 5) == 10


# ── Countries where tipping is customary ─────────────────────────────────


def test_customary_neutral_keeps_base():
    assert recommend(_customary(15), 3, 3) == 15


def test_customary_one_step_increase():
    assert recommend(_customary(15), 5, 4) == 20


def test_customary_two_step_increase():
    assert recommend(_customary(15), 5, 5) == 25


def test_customary_two_step_decrease():
    assert recommend(_customary(18), 1, 1) == 12


def test_customary_half_step_above_neutral_counts_as_one_step():
    assert recommend(_customary(10), 4, 3) == 15


def test_customary_half_step_below_neutral_counts_as_one_step():
    assert recommend(_customary(15), 3, 2) == 12


def test_one_step_cap_is_absolute():
    # 22 + 5 would exceed the one-step ceiling
    assert recommend(_customary(22), 4, 4) == 20


@pytest.mark.parametrize("base", range(20, 31))
def test_two_step_cap_dominates_base(base):
    assert recommend(_customary(base), 5, 5) == 25


@pytest.mark.parametrize("base", range(5, 11))
@pytest.mark.parametrize("service, food", [(1, 1), (1, 2), (2, 1)])
def test_decrease_never_goes_below_floor(base, service, food):
    assert recommend(_customary(base), service, food) >= 5


def test_recommend_is_deterministic():
    profile = _customary(12)
    results = {recommend(profile, 4, 5) for _ in range(20)}
    assert results == {17}


def test_average_rating_is_real_valued():
    assert average_rating(3, 4) == 3.5
