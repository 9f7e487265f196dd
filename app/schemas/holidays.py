from __future__ import annotations

import datetime as dt

from pydantic import Field

from app.schemas.weather import CamelModel


class CityHoliday(CamelModel):
    city: str
    holiday_name: str
    date: dt.date


class HolidaysToday(CamelModel):
    date: dt.date
    has_holiday: bool
    holidays: list[CityHoliday] = Field(default_factory=list)


class CityHolidayStatusResponse(CamelModel):
    city: str
    is_holiday: bool
    holiday_name: str | None = None
    date: dt.date | None = None
    message: str | None = None


class HolidayItem(CamelModel):
    date: dt.date
    name: str


class CityYearHolidays(CamelModel):
    city: str
    country: str | None = None
    year: int
    holidays: list[HolidayItem] = Field(default_factory=list)
