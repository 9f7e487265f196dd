from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from app.api.deps import Today, get_holiday_calendar
from app.schemas.holidays import (
    CityHoliday,
    CityHolidayStatusResponse,
    CityYearHolidays,
    HolidayItem,
    HolidaysToday,
)
from app.services.holidays import HolidayCalendar
from app.services.weather import CITIES

router = APIRouter(prefix="/holidays")

NO_HOLIDAY_MESSAGE = "No public holiday today"

CityName = Annotated[str, Path(min_length=1, max_length=64)]


@router.get("/today", response_model=HolidaysToday)
def holidays_today(
    calendar: Annotated[HolidayCalendar, Depends(get_holiday_calendar)],
    today: Today,
) -> HolidaysToday:
    statuses = calendar.holidays_today([c.name for c in CITIES], today=today)
    holidays = [
        CityHoliday(city=s.city, holiday_name=s.holiday_name, date=s.date)
        for s in statuses
        if s.is_holiday
    ]
    return HolidaysToday(date=today, has_holiday=bool(holidays), holidays=holidays)


@router.get(
    "/city/{city_name}",
    response_model=CityHolidayStatusResponse,
    response_model_exclude_none=True,
)
def city_holiday_today(
    city_name: CityName,
    calendar: Annotated[HolidayCalendar, Depends(get_holiday_calendar)],
    today: Today,
) -> CityHolidayStatusResponse:
    entry = calendar.holiday_on(city_name, today)
    if entry is None:
        return CityHolidayStatusResponse(
            city=city_name, is_holiday=False, message=NO_HOLIDAY_MESSAGE
        )
    return CityHolidayStatusResponse(
        city=city_name, is_holiday=True, holiday_name=entry.name, date=entry.date
    )


@router.get("/city/{city_name}/year", response_model=CityYearHolidays)
def city_holidays_for_year(
    city_name: CityName,
    calendar: Annotated[HolidayCalendar, Depends(get_holiday_calendar)],
    today: Today,
    year: Annotated[int | None, Query(ge=1900, le=2100)] = None,
) -> CityYearHolidays:
    year = year or today.year
    return CityYearHolidays(
        city=city_name,
        country=calendar.country_for(city_name),
        year=year,
        holidays=[
            HolidayItem(date=e.date, name=e.name)
            for e in calendar.holidays_in_year(city_name, year)
        ],
    )
