from __future__ import annotations

import pytest

from tipadvisor.analytics.store import clear_events
from tipadvisor.countries.data_store import reload_countries
from tipadvisor.ratelimit.limiter import clear_rate_limits


@pytest.fixture(autouse=True)
def _reset_state():
    clear_rate_limits()
    clear_events()
    reload_countries()
    yield
    reload_countries()
