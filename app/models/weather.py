from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class City:
    name: str
    lat: float
    lon: float
    timezone: str


@dataclass(frozen=True)
class WeatherReading:
    city: str
    temperature: int
    feels_like: int
    humidity: int
    description: str
    icon: str
    wind_speed: float
    pressure: int
    is_mock_data: bool = False
    error_message: str | None = None


@dataclass(frozen=True)
class EnrichedReading(WeatherReading):
    holiday_name: str | None = None
