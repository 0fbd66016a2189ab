from __future__ import annotations

import pytest

from flagmoji import registry
from flagmoji.logging_utils import _rate_limiter


@pytest.fixture(autouse=True)
def _fresh_state():
    _rate_limiter.reset()
    yield
    registry.set_country_source(None)
    _rate_limiter.reset()


@pytest.fixture
def static_countries():
    source = registry.StaticCodeSource(["US", "gb", "DO", "FR", "XK"])
    registry.set_country_source(source)
    return source
