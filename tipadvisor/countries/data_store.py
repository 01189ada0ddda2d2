from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from ..recommendations.models import CountryTippingProfile
from .config import DEFAULT_COUNTRIES_CONFIG

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["country", "tipping_customary", "recommended_percentage"]

_df: pd.DataFrame | None = None
_path: Path | None = None


class ProfileNotFound(LookupError):
    """No tipping profile exists for the requested country name."""

    def __init__(self, country: str) -> None:
        super().__init__(country)
        self.country = country

    def __str__(self) -> str:
        return f"No tipping data for country '{self.country}'"


def _parse_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"true", "1", "yes", "y"}


def _load(path: Path) -> pd.DataFrame:
    df = pd.read_csv(path)

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{path} is missing columns: {', '.join(missing)}")

    df["country"] = df["country"].astype(str).str.strip()
    dupes = df.loc[df["country"].duplicated(), "country"].tolist()
    if dupes:
        raise ValueError(f"{path} has duplicate countries: {', '.join(dupes)}")

    df["tipping_customary"] = df["tipping_customary"].apply(_parse_bool)
    df["recommended_percentage"] = df["recommended_percentage"].fillna(0).astype(float)
    negative = df.loc[df["recommended_percentage"] < 0, "country"].tolist()
    if negative:
        raise ValueError(f"{path} has negative tip percentages for: {', '.join(negative)}")

    logger.info("Loaded tipping data for %d countries from %s", len(df), path)
    return df.set_index("country", drop=False)


def get_dataframe() -> pd.DataFrame:
    """Return the in-memory country table, loading it on first call."""
    global _df, _path
    if _df is None:
        _path = _path or DEFAULT_COUNTRIES_CONFIG.data_path
        _df = _load(_path)
    return _df


def reload_countries(path: Path | None = None) -> None:
    """Drop the cached table; the next access reads ``path`` (or the default)."""
    global _df, _path
    _df = None
    _path = Path(path) if path is not None else None


def list_countries() -> list[str]:
    return sorted(get_dataframe()["country"].tolist())


def get_profile(country: str) -> CountryTippingProfile:
    """Resolve a country name (exact match) to its tipping profile."""
    df = get_dataframe()
    if country not in df.index:
        logger.warning("Tipping profile lookup failed for %r", country)
        raise ProfileNotFound(country)
    row = df.loc[country]
    return CountryTippingProfile(
        tipping_customary=bool(row["tipping_customary"]),
        recommended_percentage=float(row["recommended_percentage"]),
    )
