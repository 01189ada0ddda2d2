from __future__ import annotations

import pytest

from tipadvisor.countries.data_store import (
    ProfileNotFound,
    get_profile,
    list_countries,
    reload_countries,
)


def test_get_profile_customary_country():
    profile = get_profile("United States")
    assert profile.tipping_customary is True
    assert profile.recommended_percentage == 18


def test_get_profile_non_customary_country():
    assert get_profile("Japan").tipping_customary is False


def test_get_profile_unknown_country():
    with pytest.raises(ProfileNotFound) as excinfo:
        get_profile("Atlantis")
    assert excinfo.value.country == "Atlantis"
    assert "Atlantis" in str(excinfo.value)


def test_get_profile_requires_exact_name():
    with pytest.raises(ProfileNotFound):
        get_profile("united states")


def test_list_countries_sorted():
    countries = list_countries()
    assert countries == sorted(countries)
    assert "Canada" in countries


def test_reload_from_custom_file(tmp_path):
    path = tmp_path / "countries.csv"
    path.write_text(
        "country,tipping_customary,recommended_percentage\n"
        "Freedonia,true,22\n"
    )
    reload_countries(path)

    assert list_countries() == ["Freedonia"]
    assert get_profile("Freedonia").recommended_percentage == 22


def test_duplicate_countries_rejected(tmp_path):
    path = tmp_path / "countries.csv"
    path.write_text(
        "country,tipping_customary,recommended_percentage\n"
        "Freedonia,true,22\n"
        "Freedonia,false,0\n"
    )
    reload_countries(path)

    with pytest.raises(ValueError):
        list_countries()


def test_missing_columns_rejected(tmp_path):
    path = tmp_path / "countries.csv"
    path.write_text("country,recommended_percentage\nFreedonia,22\n")
    reload_countries(path)

    with pytest.raises(ValueError):
        get_profile("Freedonia")


def test_negative_percentage_rejected(tmp_path):
    path = tmp_path / "countries.csv"
    path.write_text(
        "country,tipping_customary,recommended_percentage\n"
        "Freedonia,true,-5\n"
    )
    reload_countries(path)

    with pytest.raises(ValueError, match="Freedonia"):
        get_profile("Freedonia")
