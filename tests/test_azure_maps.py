from __future__ import annotations

import asyncio

import httpx
import pytest

from app.clients.azure_maps import AzureMapsClient, kmh_to_ms, map_icon, round_half_up
from app.clients.base import WeatherProviderError
from app.models.weather import City
from tests.fakes import azure_conditions

MUMBAI = City("Mumbai", 19.0760, 72.8777, "Asia/Kolkata")


def _fetch(handler, city: City = MUMBAI):
    async def run():
        client = AzureMapsClient(
            subscription_key="test-key",
            timeout_seconds=1.0,
            transport=httpx.MockTransport(handler),
        )
        try:
            return await client.fetch_current(city)
        finally:
            await client.aclose()

    return asyncio.run(run())


def test_fetch_current_normalizes_conditions() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=azure_conditions())

    reading = _fetch(handler)

    params = seen[0].url.params
    assert params["api-version"] == "1.1"
    assert params["query"] == "19.076,72.8777"
    assert params["subscription-key"] == "test-key"

    assert reading.city == "Mumbai"
    assert reading.temperature == 29
    assert reading.feels_like == 33
    assert reading.humidity == 79
    assert reading.description == "mostly cloudy"
    assert reading.icon == "04d"
    assert reading.wind_speed == 5.0
    assert reading.pressure == 1008
    assert reading.is_mock_data is False
    assert reading.error_message is None


def test_fetch_current_uses_night_icon_variant() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=azure_conditions(iconCode=1, isDayTime=False))

    assert _fetch(handler).icon == "01n"


def test_fetch_current_rounds_halves_up() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json=azure_conditions(
                temperature={"value": 26.5, "unit": "C"},
                realFeelTemperature={"value": 30.5, "unit": "C"},
                relativeHumidity=72.5,
                pressure={"value": 1008.5, "unit": "mb"},
            ),
        )

    reading = _fetch(handler)
    assert (reading.temperature, reading.feels_like, reading.humidity, reading.pressure) == (
        27,
        31,
        73,
        1009,
    )


def test_fetch_current_raises_on_http_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": {"message": "Invalid key"}})

    with pytest.raises(httpx.HTTPStatusError):
        _fetch(handler)


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"results": []},
        {"results": ["nope"]},
        {"results": [{"phrase": "Sunny"}]},
        {"results": [azure_conditions()["results"][0] | {"phrase": None}]},
        {"results": [azure_conditions()["results"][0] | {"phrase": 7}]},
        [],
    ],
)
def test_fetch_current_rejects_malformed_payload(payload) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    with pytest.raises(WeatherProviderError):
        _fetch(handler)


def test_fetch_current_rejects_non_json() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>oops</html>")

    with pytest.raises(WeatherProviderError):
        _fetch(handler)


def test_icon_mapping() -> None:
    assert map_icon(1) == "01d"
    assert map_icon(1, is_daytime=False) == "01n"
    assert map_icon(15, is_daytime=False) == "11n"
    assert map_icon(999) == "02d"
    assert map_icon(None, is_daytime=False) == "02n"
    assert map_icon("18") == "09d"


def test_kmh_to_ms() -> None:
    assert kmh_to_ms(0) == 0.0
    assert kmh_to_ms(10) == 2.8
    assert kmh_to_ms(36) == 10.0


def test_round_half_up() -> None:
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4) == 2
    assert round_half_up(-0.5) == 0
    assert round_half_up("1008.5") == 1009
