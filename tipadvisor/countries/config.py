from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_CSV = Path(__file__).resolve().parent.parent / "data" / "countries.csv"


@dataclass(frozen=True)
class CountriesConfig:
    data_path: Path = field(
        default_factory=lambda: Path(os.getenv("TIPADVISOR_COUNTRIES_PATH", str(_BUNDLED_CSV)))
    )


DEFAULT_COUNTRIES_CONFIG = CountriesConfig()
