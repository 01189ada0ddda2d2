from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class RateLimitConfig:
    window_seconds: float = field(
        default_factory=lambda: float(os.getenv("TIPADVISOR_RATE_LIMIT_WINDOW", "10"))
    )
    max_requests: int = field(
        default_factory=lambda: int(os.getenv("TIPADVISOR_RATE_LIMIT_MAX", "10"))
    )
    enabled: bool = True


DEFAULT_RATE_LIMIT_CONFIG = RateLimitConfig()
