from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import date

from app.models.weather import EnrichedReading, WeatherReading
from app.services.holidays import HolidayCalendar
from app.services.weather import WeatherService

logger = logging.getLogger(__name__)


class CityReportService:
    """Joins per-city weather with today's holiday status."""

    def __init__(self, *, weather: WeatherService, calendar: HolidayCalendar) -> None:
        self._weather = weather
        self._calendar = calendar

    async def build(self, *, today: date | None = None) -> list[EnrichedReading]:
        try:
            readings = await self._weather.fetch_all()
        except Exception:
            logger.exception("Weather aggregation failed; serving mock data for all cities")
            readings = self._weather.mock_all()

        names = [c.name for c in self._weather.cities]
        holiday_by_city: dict[str, str | None] = {}
        try:
            for status in self._calendar.holidays_today(names, today=today):
                holiday_by_city[status.city] = status.holiday_name
        except Exception:
            logger.exception("Holiday lookup failed; skipping holiday enrichment")
            holiday_by_city = {}

        return [_enrich(r, holiday_by_city.get(r.city)) for r in readings]


def _enrich(reading: WeatherReading, holiday_name: str | None) -> EnrichedReading:
    return EnrichedReading(**asdict(reading), holiday_name=holiday_name)
