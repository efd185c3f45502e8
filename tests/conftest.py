from __future__ import annotations

import pytest

from builders import fixed_clock, make_context
from skywatch.config import get_settings


@pytest.fixture
def context():
    return make_context()


@pytest.fixture
def clock():
    return fixed_clock


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Settings are cached per process; tests get a clean, LLM-free environment."""
    monkeypatch.setenv("SKYWATCH_ALERT_LLM_ENABLED", "false")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
