from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.deps import get_holiday_calendar, get_settings
from app.core.config import Settings
from app.services.holidays import HolidayCalendar
from app.services.weather import CITIES
from app.web.templates import templates

router = APIRouter()

WEATHER_POLL_INTERVAL_MS = 10 * 60 * 1000
CLOCK_TICK_MS = 1000


@router.get("/", include_in_schema=False)
def index(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    calendar: Annotated[HolidayCalendar, Depends(get_holiday_calendar)],
):
    cities = [
        {
            "name": c.name,
            "timezone": c.timezone,
            "country": calendar.country_for(c.name),
        }
        for c in CITIES
    ]
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "request": request,
            "title": "City Weather & Holidays",
            "cities": cities,
            "mock_mode": not settings.weather_provider_configured,
            "poll_interval_ms": WEATHER_POLL_INTERVAL_MS,
            "clock_tick_ms": CLOCK_TICK_MS,
        },
    )
