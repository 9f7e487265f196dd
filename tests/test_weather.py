from __future__ import annotations

from fastapi.testclient import TestClient

from app.models.weather import WeatherReading
from app.services.weather import CITIES

EXPECTED_KEYS = {
    "city",
    "temperature",
    "feelsLike",
    "humidity",
    "description",
    "icon",
    "windSpeed",
    "pressure",
    "isMockData",
    "errorMessage",
    "holidayName",
}


def test_weather_returns_one_enriched_row_per_city(client: TestClient) -> None:
    resp = client.get("/api/weather")
    assert resp.status_code == 200, resp.text
    rows = resp.json()
    assert [r["city"] for r in rows] == [c.name for c in CITIES]
    assert set(rows[0].keys()) == EXPECTED_KEYS
    assert all(r["isMockData"] is False for r in rows)

    holidays = {r["city"]: r["holidayName"] for r in rows}
    assert holidays["Mumbai"] == "Republic Day"
    assert holidays["Bangalore"] == "Republic Day"
    assert holidays["Sydney"] == "Australia Day"
    assert holidays["Singapore"] is None


def test_weather_mock_mode_without_credential(mock_client: TestClient) -> None:
    rows = mock_client.get("/api/weather").json()
    assert len(rows) == 5
    for r in rows:
        assert r["isMockData"] is True
        assert r["errorMessage"] is None
        assert 25 <= r["temperature"] <= 35
        assert 26 <= r["feelsLike"] <= 36
        assert 60 <= r["humidity"] <= 90
        assert 0 <= r["windSpeed"] <= 5
        assert 1010 <= r["pressure"] <= 1030


def test_weather_degrades_single_city(client: TestClient, fake_provider) -> None:
    fake_provider.fail["Bangkok"] = RuntimeError("upstream down")
    rows = client.get("/api/weather").json()
    by_city = {r["city"]: r for r in rows}
    assert len(rows) == 5
    assert by_city["Bangkok"]["isMockData"] is True
    assert by_city["Bangkok"]["errorMessage"] == "Using sample data"
    assert sum(r["isMockData"] for r in rows) == 1


def test_cities_endpoint(client: TestClient) -> None:
    resp = client.get("/api/cities")
    assert resp.status_code == 200, resp.text
    rows = resp.json()
    assert [r["name"] for r in rows] == [c.name for c in CITIES]
    mumbai = rows[2]
    assert mumbai["timezone"] == "Asia/Kolkata"
    assert mumbai["country"] == "India"
    assert mumbai["localTime"].endswith("+05:30")


def test_healthz_reports_mock_mode(mock_client: TestClient) -> None:
    resp = mock_client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json()["mock_mode"] is True


def test_weather_passes_through_out_of_range_provider_values(
    client: TestClient, fake_provider
) -> None:
    fake_provider.readings["Sydney"] = WeatherReading(
        city="Sydney",
        temperature=21,
        feels_like=20,
        humidity=120,
        description="odd sensor",
        icon="02d",
        wind_speed=-1.0,
        pressure=1015,
        is_mock_data=False,
    )
    resp = client.get("/api/weather")
    assert resp.status_code == 200, resp.text
    sydney = {r["city"]: r for r in resp.json()}["Sydney"]
    assert sydney["humidity"] == 120
    assert sydney["windSpeed"] == -1.0
    assert sydney["isMockData"] is False
