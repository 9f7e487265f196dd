from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient

from app.api import deps
from app.core.config import Settings
from app.factory import create_app
from tests.fakes import FakeWeatherProvider

REPUBLIC_DAY = date(2026, 1, 26)


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        env="test",
        debug=True,
        docs_enabled=False,
        cors_origins=["http://localhost"],
        trusted_hosts=["testserver", "localhost"],
        azure_maps_subscription_key=None,
        weather_timeout_seconds=1.0,
        api_rate_limit_max=100,
        page_rate_limit_max=200,
        rate_limit_window_seconds=15 * 60,
    )


@pytest.fixture()
def today() -> date:
    return REPUBLIC_DAY


@pytest.fixture()
def fake_provider() -> FakeWeatherProvider:
    return FakeWeatherProvider()


@pytest.fixture()
def client(settings: Settings, fake_provider: FakeWeatherProvider, today: date) -> TestClient:
    app = create_app(settings)
    app.dependency_overrides[deps.get_weather_provider] = lambda: fake_provider
    app.dependency_overrides[deps.get_today] = lambda: today
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def mock_client(settings: Settings, today: date) -> TestClient:
    app = create_app(settings)
    app.dependency_overrides[deps.get_today] = lambda: today
    with TestClient(app) as client:
        yield client
