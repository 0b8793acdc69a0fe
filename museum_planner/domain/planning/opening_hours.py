"""Free-text opening-hours parsing.

Accepted shapes::

    "Mon 11-5; Wed 11-5; Thu 11-8; Fri-Sun 11-5"
    "Mon-Sun 10-5"
    "Tue-Fri 10-6:30; Sat 10-9; Sun 10-6:30"
"""

from __future__ import annotations

import re
from datetime import date

from museum_planner.domain.enums import OpenState
from museum_planner.domain.models import OpenStatus, Venue

# ISO weekdays
DAY_MAP = {"mon": 1, "tue": 2, "wed": 3, "thu": 4, "fri": 5, "sat": 6, "sun": 7}

_ENTRY_RE = re.compile(r"^([A-Za-z-]+)\s+\d")
_RANGE_RE = re.compile(r"^([a-z]{3})-([a-z]{3})$")


def expand_day_range(text: str) -> list[int]:
    normalized = text.strip().lower()
    match = _RANGE_RE.match(normalized)
    if match:
        start = DAY_MAP.get(match.group(1))
        end = DAY_MAP.get(match.group(2))
        if start is None or end is None:
            return []
        if start <= end:
            return list(range(start, end + 1))
        # wraps past Sunday, e.g. Fri-Sun
        return list(range(start, 8)) + list(range(1, end + 1))
    single = DAY_MAP.get(normalized)
    return [single] if single is not None else []


def open_weekdays(opening_hours: str | None) -> set[int]:
    if not opening_hours:
        return set()
    days: set[int] = set()
    for entry in opening_hours.split(";"):
        match = _ENTRY_RE.match(entry.strip())
        if match:
            days.update(expand_day_range(match.group(1)))
    return days


def is_open_on_weekday(opening_hours: str | None, iso_weekday: int) -> bool:
    return iso_weekday in open_weekdays(opening_hours)


def venue_open_status(venue: Venue, day: date) -> OpenStatus:
    if not venue.opening_hours:
        return OpenStatus(status=OpenState.UNKNOWN, note="Hours not available")
    if "temporarily closed" in venue.opening_hours.lower():
        return OpenStatus(status=OpenState.CLOSED, note="Temporarily closed")
    if is_open_on_weekday(venue.opening_hours, day.isoweekday()):
        return OpenStatus(status=OpenState.OPEN)
    return OpenStatus(status=OpenState.CLOSED)


__all__ = ["DAY_MAP", "expand_day_range", "is_open_on_weekday", "open_weekdays", "venue_open_status"]
