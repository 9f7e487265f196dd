from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class HolidayEntry:
    date: date
    name: str


@dataclass(frozen=True)
class CityHolidayStatus:
    city: str
    is_holiday: bool
    holiday_name: str | None = None
    date: date | None = None
