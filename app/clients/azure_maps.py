from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import httpx

from app.clients.base import WeatherProviderError
from app.models.weather import City, WeatherReading

AZURE_MAPS_CURRENT_CONDITIONS_URL = (
    "https://atlas.microsoft.com/weather/currentConditions/json"
)
AZURE_MAPS_API_VERSION = "1.1"

KMH_TO_MS = 0.277778


@dataclass(frozen=True)
class IconVariants:
    day: str
    night: str

    def pick(self, is_daytime: bool) -> str:
        return self.day if is_daytime else self.night


def _icon(base: str) -> IconVariants:
    return IconVariants(day=f"{base}d", night=f"{base}n")


# Azure Maps icon codes -> OpenWeatherMap-style icon names.
ICON_TABLE: dict[int, IconVariants] = {
    1: _icon("01"),  # sunny / clear
    2: _icon("02"),  # mostly sunny
    3: _icon("02"),  # partly sunny
    4: _icon("03"),  # intermittent clouds
    5: _icon("03"),  # hazy sunshine
    6: _icon("04"),  # mostly cloudy
    7: _icon("04"),  # cloudy
    8: _icon("04"),  # dreary
    11: _icon("50"),  # fog
    12: _icon("10"),  # showers
    13: _icon("10"),
    14: _icon("10"),
    15: _icon("11"),  # thunderstorms
    16: _icon("11"),
    17: _icon("11"),
    18: _icon("09"),  # rain
    19: _icon("13"),  # flurries
    20: _icon("13"),
    21: _icon("13"),
    22: _icon("13"),  # snow
    23: _icon("13"),
    24: _icon("13"),  # ice
    25: _icon("13"),  # sleet
    26: _icon("13"),  # freezing rain
    29: _icon("13"),  # rain and snow
    30: _icon("01"),  # hot
    31: _icon("01"),  # cold
    32: _icon("50"),  # windy
}
DEFAULT_ICON = _icon("02")


def map_icon(icon_code: Any, is_daytime: bool = True) -> str:
    try:
        variants = ICON_TABLE.get(int(icon_code), DEFAULT_ICON)
    except (TypeError, ValueError):
        variants = DEFAULT_ICON
    return variants.pick(is_daytime)


def round_half_up(value: Any) -> int:
    """Round to the nearest integer with .5 going up, unlike ``round()``."""
    return math.floor(float(value) + 0.5)


def kmh_to_ms(value: float) -> float:
    return round(float(value) * KMH_TO_MS, 1)


def provider_error_message(exc: BaseException) -> str | None:
    """Best-effort extraction of Azure's ``error.message`` from a failed call."""
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            body = exc.response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict) and isinstance(error.get("message"), str):
                return error["message"]
    return None


class AzureMapsClient:
    def __init__(
        self,
        *,
        subscription_key: str,
        timeout_seconds: float,
        base_url: str = AZURE_MAPS_CURRENT_CONDITIONS_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._subscription_key = subscription_key
        self._client = httpx.AsyncClient(
            timeout=timeout_seconds,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_current(self, city: City) -> WeatherReading:
        resp = await self._client.get(
            self._base_url,
            params={
                "api-version": AZURE_MAPS_API_VERSION,
                "query": f"{city.lat},{city.lon}",
                "subscription-key": self._subscription_key,
            },
        )
        resp.raise_for_status()
        try:
            payload = resp.json()
        except ValueError as e:
            raise WeatherProviderError("Azure Maps returned invalid JSON") from e

        current = self._extract_current(payload)
        phrase = current.get("phrase")
        if not isinstance(phrase, str):
            raise WeatherProviderError(f"Missing conditions phrase for {city.name}")
        try:
            return WeatherReading(
                city=city.name,
                temperature=round_half_up(current["temperature"]["value"]),
                feels_like=round_half_up(current["realFeelTemperature"]["value"]),
                humidity=round_half_up(current["relativeHumidity"]),
                description=phrase.lower(),
                icon=map_icon(current.get("iconCode"), bool(current.get("isDayTime", True))),
                wind_speed=kmh_to_ms(current["wind"]["speed"]["value"]),
                pressure=round_half_up(current["pressure"]["value"]),
                is_mock_data=False,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise WeatherProviderError(
                f"Unexpected Azure Maps conditions for {city.name}"
            ) from e

    @staticmethod
    def _extract_current(payload: Any) -> dict[str, Any]:
        if not isinstance(payload, dict):
            raise WeatherProviderError("Unexpected Azure Maps response shape")
        results = payload.get("results")
        if not isinstance(results, list) or not results:
            raise WeatherProviderError("Azure Maps response contained no results")
        first = results[0]
        if not isinstance(first, dict):
            raise WeatherProviderError("Unexpected results entry shape")
        return first
