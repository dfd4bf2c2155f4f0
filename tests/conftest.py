# tests/conftest.py
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from tea_api.api.dependencies import get_tea_repository
from tea_api.core.config import Settings
from tea_api.main import app, limiter


@pytest.fixture
def test_settings() -> Settings:
    return Settings(rate_limit_requests=20, rate_limit_window_seconds=60)


@pytest.fixture
def client(
    test_settings: Settings, monkeypatch: pytest.MonkeyPatch
) -> Generator[TestClient, None, None]:
    # Reset the repository singleton so each test starts with an empty store
    # and IDs counting from 1 again.
    get_tea_repository.cache_clear()
    limiter.reset()
    # The rate limit is read from the settings on every request, outside of
    # FastAPI's dependency injection, so it is patched at module level.
    monkeypatch.setattr("tea_api.core.rate_limit.get_settings", lambda: test_settings)
    try:
        with TestClient(app) as c:
            yield c
    finally:
        get_tea_repository.cache_clear()


@pytest.fixture
def green_tea() -> dict:
    return {"name": "Green Tea", "price": 100}
