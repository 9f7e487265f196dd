from __future__ import annotations

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import Today, get_report_service
from app.schemas.weather import WeatherReport
from app.services.reports import CityReportService

router = APIRouter(prefix="/weather")


@router.get("", response_model=list[WeatherReport])
async def city_weather(
    service: Annotated[CityReportService, Depends(get_report_service)],
    today: Today,
) -> list[WeatherReport]:
    rows = await service.build(today=today)
    return [WeatherReport.model_validate(asdict(r)) for r in rows]
