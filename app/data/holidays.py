from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from types import MappingProxyType

from app.models.holiday import HolidayEntry


def _entries(*rows: tuple[str, str]) -> tuple[HolidayEntry, ...]:
    return tuple(HolidayEntry(date=date.fromisoformat(d), name=n) for d, n in rows)


PUBLIC_HOLIDAYS: Mapping[str, tuple[HolidayEntry, ...]] = MappingProxyType(
    {
        "Singapore": _entries(
            ("2026-01-01", "New Year's Day"),
            ("2026-01-29", "Chinese New Year"),
            ("2026-01-30", "Chinese New Year"),
            ("2026-04-03", "Good Friday"),
            ("2026-05-01", "Labour Day"),
            ("2026-05-21", "Vesak Day"),
            ("2026-08-09", "National Day"),
            ("2026-10-24", "Deepavali"),
            ("2026-12-25", "Christmas Day"),
        ),
        # Bangalore, Mumbai
        "India": _entries(
            ("2026-01-26", "Republic Day"),
            ("2026-03-14", "Holi"),
            ("2026-04-02", "Good Friday"),
            ("2026-04-06", "Mahavir Jayanti"),
            ("2026-05-01", "Labour Day"),
            ("2026-08-15", "Independence Day"),
            ("2026-10-02", "Gandhi Jayanti"),
            ("2026-10-15", "Dussehra"),
            ("2026-10-24", "Diwali"),
            ("2026-11-14", "Guru Nanak's Birthday"),
            ("2026-12-25", "Christmas Day"),
        ),
        # Sydney
        "Australia": _entries(
            ("2026-01-01", "New Year's Day"),
            ("2026-01-26", "Australia Day"),
            ("2026-04-03", "Good Friday"),
            ("2026-04-04", "Saturday before Easter Sunday"),
            ("2026-04-06", "Easter Monday"),
            ("2026-04-25", "ANZAC Day"),
            ("2026-06-08", "Queen's Birthday"),
            ("2026-12-25", "Christmas Day"),
            ("2026-12-26", "Boxing Day"),
        ),
        # Bangkok
        "Thailand": _entries(
            ("2026-01-01", "New Year's Day"),
            ("2026-02-16", "Makha Bucha Day"),
            ("2026-04-06", "Chakri Memorial Day"),
            ("2026-04-13", "Songkran Festival"),
            ("2026-04-14", "Songkran Festival"),
            ("2026-04-15", "Songkran Festival"),
            ("2026-05-01", "Labour Day"),
            ("2026-05-04", "Coronation Day"),
            ("2026-05-15", "Visakha Bucha Day"),
            ("2026-07-28", "King's Birthday"),
            ("2026-08-12", "Queen Mother's Birthday"),
            ("2026-10-13", "King Bhumibol Memorial Day"),
            ("2026-10-23", "Chulalongkorn Day"),
            ("2026-12-05", "King's Birthday"),
            ("2026-12-10", "Constitution Day"),
            ("2026-12-31", "New Year's Eve"),
        ),
    }
)

CITY_TO_COUNTRY: Mapping[str, str] = MappingProxyType(
    {
        "Singapore": "Singapore",
        "Bangalore": "India",
        "Mumbai": "India",
        "Sydney": "Australia",
        "Bangkok": "Thailand",
    }
)
