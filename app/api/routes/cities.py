from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends

from app.api.deps import get_holiday_calendar
from app.schemas.weather import CityInfo
from app.services.holidays import HolidayCalendar
from app.services.weather import CITIES

router = APIRouter(prefix="/cities")


@router.get("", response_model=list[CityInfo])
def list_cities(
    calendar: Annotated[HolidayCalendar, Depends(get_holiday_calendar)],
) -> list[CityInfo]:
    now = datetime.now(tz=timezone.utc)
    return [
        CityInfo(
            name=c.name,
            lat=c.lat,
            lon=c.lon,
            timezone=c.timezone,
            country=calendar.country_for(c.name),
            local_time=now.astimezone(ZoneInfo(c.timezone)).isoformat(timespec="seconds"),
        )
        for c in CITIES
    ]
