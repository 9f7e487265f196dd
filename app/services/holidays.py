from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import date

from app.data.holidays import CITY_TO_COUNTRY, PUBLIC_HOLIDAYS
from app.models.holiday import CityHolidayStatus, HolidayEntry


def format_date(day: date) -> str:
    """Render ``day`` as ``YYYY-MM-DD`` using its own calendar fields.

    Datetimes are not shifted to UTC first, so an aware datetime late in the
    evening keeps its local date.
    """
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


class HolidayCalendar:
    def __init__(
        self,
        *,
        holidays: Mapping[str, Sequence[HolidayEntry]] = PUBLIC_HOLIDAYS,
        city_to_country: Mapping[str, str] = CITY_TO_COUNTRY,
    ) -> None:
        self._holidays = holidays
        self._city_to_country = city_to_country

    def country_for(self, city: str) -> str | None:
        return self._city_to_country.get(city)

    def holiday_on(self, city: str, day: date) -> HolidayEntry | None:
        country = self.country_for(city)
        if country is None:
            return None
        key = format_date(day)
        for entry in self._holidays.get(country, ()):
            if format_date(entry.date) == key:
                return entry
        return None

    def holidays_today(
        self, cities: Iterable[str], *, today: date | None = None
    ) -> list[CityHolidayStatus]:
        today = today or date.today()
        statuses: list[CityHolidayStatus] = []
        for city in cities:
            entry = self.holiday_on(city, today)
            if entry is None:
                statuses.append(CityHolidayStatus(city=city, is_holiday=False))
            else:
                statuses.append(
                    CityHolidayStatus(
                        city=city,
                        is_holiday=True,
                        holiday_name=entry.name,
                        date=entry.date,
                    )
                )
        return statuses

    def holidays_in_year(self, city: str, year: int) -> list[HolidayEntry]:
        country = self.country_for(city)
        if country is None:
            return []
        return [e for e in self._holidays.get(country, ()) if e.date.year == year]
