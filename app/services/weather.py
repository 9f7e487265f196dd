from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Sequence

from app.clients.azure_maps import provider_error_message, round_half_up
from app.clients.base import WeatherProvider
from app.models.weather import City, WeatherReading

logger = logging.getLogger(__name__)

CITIES: tuple[City, ...] = (
    City("Singapore", 1.3521, 103.8198, "Asia/Singapore"),
    City("Bangalore", 12.9716, 77.5946, "Asia/Kolkata"),
    City("Mumbai", 19.0760, 72.8777, "Asia/Kolkata"),
    City("Sydney", -33.8688, 151.2093, "Australia/Sydney"),
    City("Bangkok", 13.7563, 100.5018, "Asia/Bangkok"),
)

MOCK_CONDITIONS: tuple[tuple[str, str], ...] = (
    ("clear sky", "01d"),
    ("few clouds", "02d"),
    ("scattered clouds", "03d"),
    ("partly cloudy", "04d"),
)
FALLBACK_CONDITION = ("partly cloudy", "02d")
FALLBACK_ERROR_MESSAGE = "Using sample data"


def mock_reading(
    city: City,
    *,
    rng: random.Random,
    condition: tuple[str, str] = FALLBACK_CONDITION,
    error_message: str | None = None,
) -> WeatherReading:
    description, icon = condition
    return WeatherReading(
        city=city.name,
        temperature=round_half_up(25 + rng.random() * 10),
        feels_like=round_half_up(26 + rng.random() * 10),
        humidity=round_half_up(60 + rng.random() * 30),
        description=description,
        icon=icon,
        wind_speed=round(rng.random() * 5, 1),
        pressure=round_half_up(1010 + rng.random() * 20),
        is_mock_data=True,
        error_message=error_message,
    )


class WeatherService:
    """Current conditions for a fixed city list, one reading per city.

    Each provider call is bounded by ``timeout_seconds`` and any failure is
    replaced with a mock reading for that city only. With no provider
    configured every city is served from mock data.
    """

    def __init__(
        self,
        *,
        provider: WeatherProvider | None,
        cities: Sequence[City] | None = None,
        timeout_seconds: float = 10.0,
        rng: random.Random | None = None,
    ) -> None:
        self._provider = provider
        self._cities = tuple(cities or CITIES)
        self._timeout_seconds = timeout_seconds
        self._rng = rng or random.Random()

    @property
    def cities(self) -> tuple[City, ...]:
        return self._cities

    @property
    def provider_configured(self) -> bool:
        return self._provider is not None

    async def fetch_city(self, city: City) -> WeatherReading:
        if self._provider is None:
            return mock_reading(city, rng=self._rng)
        try:
            return await asyncio.wait_for(
                self._provider.fetch_current(city), timeout=self._timeout_seconds
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Weather provider timed out for %s after %ss",
                city.name,
                self._timeout_seconds,
            )
            return mock_reading(
                city, rng=self._rng, error_message=FALLBACK_ERROR_MESSAGE
            )
        except Exception as e:  # noqa: BLE001 - degrade this city only
            message = provider_error_message(e)
            logger.warning(
                "Error fetching weather for %s: %s", city.name, message or e
            )
            return mock_reading(
                city, rng=self._rng, error_message=message or FALLBACK_ERROR_MESSAGE
            )

    async def fetch_all(self) -> list[WeatherReading]:
        if self._provider is None:
            logger.info("No weather provider credential configured; using mock data")
            return [
                mock_reading(city, rng=self._rng, condition=self._rng.choice(MOCK_CONDITIONS))
                for city in self._cities
            ]
        return list(await asyncio.gather(*(self.fetch_city(c) for c in self._cities)))

    def mock_all(self) -> list[WeatherReading]:
        return [mock_reading(city, rng=self._rng) for city in self._cities]
