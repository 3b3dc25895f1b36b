"""Integration test fixtures — a live OpenAI-compatible endpoint.

Configure it through the usual settings, e.g.::

    VIBESORT_AI__API_KEY=... pytest -m integration

Tests are skipped when no API key is configured.
"""

from __future__ import annotations

import pytest

from vibesort.client.client import AsyncVibesort
from vibesort.config.settings import Settings


@pytest.fixture(scope="session")
def live_settings() -> Settings:
    settings = Settings()
    if not settings.ai.api_key:
        pytest.skip("VIBESORT_AI__API_KEY not set")
    return settings


@pytest.fixture
def live_sorter(live_settings: Settings) -> AsyncVibesort:
    return AsyncVibesort.from_settings(live_settings.ai)
