from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WeatherReport(CamelModel):
    city: str
    temperature: int
    feels_like: int
    humidity: int
    description: str
    icon: str
    wind_speed: float
    pressure: int
    is_mock_data: bool
    error_message: str | None = None
    holiday_name: str | None = None


class CityInfo(CamelModel):
    name: str
    lat: float
    lon: float
    timezone: str
    country: str | None = None
    local_time: str
