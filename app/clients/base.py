from __future__ import annotations

from typing import Protocol

from app.models.weather import City, WeatherReading


class WeatherProviderError(Exception):
    """Raised when a provider answers with a payload we cannot normalize."""


class WeatherProvider(Protocol):
    async def fetch_current(self, city: City) -> WeatherReading: ...

    async def aclose(self) -> None: ...
