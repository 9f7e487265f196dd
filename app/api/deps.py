from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timezone
from typing import Annotated

from fastapi import Depends, HTTPException, Request, Response, status

from app.clients.base import WeatherProvider
from app.core.config import Settings
from app.services.holidays import HolidayCalendar
from app.services.rate_limit import FixedWindowRateLimiter
from app.services.reports import CityReportService
from app.services.weather import WeatherService

API_RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."
PAGE_RATE_LIMIT_MESSAGE = "Too many requests, please try again later."

_calendar = HolidayCalendar()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_today() -> date:
    return date.today()


def get_holiday_calendar() -> HolidayCalendar:
    return _calendar


def get_weather_provider(request: Request) -> WeatherProvider | None:
    return getattr(request.app.state, "weather_provider", None)


def get_weather_service(
    settings: Annotated[Settings, Depends(get_settings)],
    provider: Annotated[WeatherProvider | None, Depends(get_weather_provider)],
) -> WeatherService:
    return WeatherService(
        provider=provider, timeout_seconds=settings.weather_timeout_seconds
    )


def get_report_service(
    weather: Annotated[WeatherService, Depends(get_weather_service)],
    calendar: Annotated[HolidayCalendar, Depends(get_holiday_calendar)],
) -> CityReportService:
    return CityReportService(weather=weather, calendar=calendar)


def client_key(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def rate_limited(limiter_attr: str, message: str) -> Callable[[Request, Response], None]:
    """Build a dependency enforcing the limiter stored at ``app.state.<limiter_attr>``."""

    def _enforce(request: Request, response: Response) -> None:
        limiter: FixedWindowRateLimiter | None = getattr(
            request.app.state, limiter_attr, None
        )
        if limiter is None:
            return
        decision = limiter.hit(client_key(request), now=datetime.now(tz=timezone.utc))
        if not decision.allowed:
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=message,
                headers={
                    **decision.headers(),
                    "Retry-After": str(decision.reset_after_seconds),
                },
            )
        response.headers.update(decision.headers())

    return _enforce


api_rate_limit = rate_limited("api_rate_limiter", API_RATE_LIMIT_MESSAGE)
page_rate_limit = rate_limited("page_rate_limiter", PAGE_RATE_LIMIT_MESSAGE)

Today = Annotated[date, Depends(get_today)]
