"""Promotional discount programs for a single venue, evaluated against "now".

All calendar arithmetic runs in one civil timezone. ``now`` is converted once
on entry; naive datetimes are read as UTC.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from museum_planner.domain.enums import StatusVariant
from museum_planner.domain.models import DiscountRow, EligibilityItem, HoursRow, MemberNote
from museum_planner.domain.pricing.date_constraint import first_full_weekend
from museum_planner.domain.pricing.eligibility import user_age

DEFAULT_TIMEZONE = "America/Chicago"
DEFAULT_OPENING_HOUR = 11
DEFAULT_CLOSING_MINUTES = 17 * 60
DEFAULT_MEMBER_VENUE_ID = "museum_00001"

# Bounds for forward scans
OPEN_DAY_SCAN_DAYS = 14
SEASON_SCAN_DAYS = 60
WEEKEND_SCAN_MONTHS = 3

WINTER_FREE_START = date(2026, 1, 5)
WINTER_FREE_END = date(2026, 2, 28)
WINTER_FREE_WEEKDAYS = frozenset({1, 3, 4, 5})  # Mon, Wed, Thu, Fri

_DAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_HOURS_RE = re.compile(r"(\d{1,2})(?::(\d{2}))?\s*[–-]\s*(\d{1,2})(?::(\d{2}))?")


def format_next_eligible(moment: datetime) -> str:
    """``Thu, Feb 12 • 11:00 AM``"""
    hour12 = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{moment:%a}, {moment:%b} {moment.day} • {hour12}:{moment.minute:02d} {suffix}"


def _has_type(items: list[EligibilityItem], item_type: str) -> bool:
    return any(item.type == item_type for item in items)


def _resident_of(items: list[EligibilityItem], place: str) -> bool:
    for item in items:
        if item.type == "local_resident":
            return any(place in loc for loc in item.locations)
    return False


@dataclass(frozen=True)
class _Status:
    label: str = "Not eligible"
    variant: StatusVariant = StatusVariant.INACTIVE
    next_eligible: Optional[datetime] = None

    @property
    def valid(self) -> bool:
        return self.variant == StatusVariant.VALID


class DiscountCalendarResolver:
    """Current validity and next eligible time for one venue's programs."""

    def __init__(
        self,
        hours: list[HoursRow],
        *,
        tz: str = DEFAULT_TIMEZONE,
        opening_hour: int = DEFAULT_OPENING_HOUR,
        member_venue_id: str = DEFAULT_MEMBER_VENUE_ID,
        winter_start: date = WINTER_FREE_START,
        winter_end: date = WINTER_FREE_END,
    ) -> None:
        self._hours = {row.day.strip()[:3].title(): row.hours for row in hours}
        self._tz = ZoneInfo(tz)
        self._opening_hour = opening_hour
        self._member_venue_id = member_venue_id
        self._winter_start = winter_start
        self._winter_end = winter_end

    # ── clock and hours ──

    def localize(self, now: datetime) -> datetime:
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return now.astimezone(self._tz)

    def _hours_for(self, day: date) -> Optional[str]:
        return self._hours.get(_DAY_ABBR[day.isoweekday() - 1])

    def is_open_on(self, day: date) -> bool:
        hours = self._hours_for(day)
        return hours is not None and hours.strip().lower() != "closed"

    def closing_minutes(self, day: date) -> int:
        match = _HOURS_RE.search(self._hours_for(day) or "")
        if not match:
            return DEFAULT_CLOSING_MINUTES
        hour = int(match.group(3))
        minute = int(match.group(4) or 0)
        if hour <= 12:
            hour += 12
        return hour * 60 + minute

    def _minutes(self, local: datetime) -> int:
        return local.hour * 60 + local.minute

    def is_open_now(self, local: datetime) -> bool:
        if not self.is_open_on(local.date()):
            return False
        minutes = self._minutes(local)
        return self._opening_hour * 60 <= minutes < self.closing_minutes(local.date())

    def _before_opening(self, local: datetime) -> bool:
        return self._minutes(local) < self._opening_hour * 60

    def opening_at(self, day: date) -> datetime:
        return datetime.combine(day, time(self._opening_hour), tzinfo=self._tz)

    def next_open_day(self, local: datetime) -> Optional[datetime]:
        day = local.date()
        for _ in range(OPEN_DAY_SCAN_DAYS):
            day += timedelta(days=1)
            if self.is_open_on(day):
                return self.opening_at(day)
        return None

    def next_winter_day(self, local: datetime) -> Optional[datetime]:
        day = local.date()
        for _ in range(SEASON_SCAN_DAYS):
            day += timedelta(days=1)
            if day > self._winter_end:
                return None
            if day < self._winter_start:
                continue
            if day.isoweekday() in WINTER_FREE_WEEKDAYS and self.is_open_on(day):
                return self.opening_at(day)
        return None

    def next_first_full_weekend(self, local: datetime) -> Optional[datetime]:
        year, month = local.year, local.month
        for _ in range(WEEKEND_SCAN_MONTHS):
            for day in first_full_weekend(year, month):
                start = self.opening_at(day)
                if start > local and self.is_open_on(day):
                    return start
            year, month = (year + 1, 1) if month == 12 else (year, month + 1)
        return None

    # ── program statuses ──

    def _always_free_status(self, local: datetime) -> _Status:
        if self.is_open_now(local):
            return _Status("Valid now", StatusVariant.VALID)
        if self.is_open_on(local.date()):
            if self._before_opening(local):
                return _Status("Not yet today", StatusVariant.INACTIVE, self.opening_at(local.date()))
            return _Status("Closed for today", StatusVariant.INACTIVE, self.next_open_day(local))
        return _Status("Not today (museum closed)", StatusVariant.INACTIVE, self.next_open_day(local))

    def _winter_status(self, local: datetime) -> _Status:
        today = local.date()
        if not self._winter_start <= today <= self._winter_end:
            upcoming = self.next_winter_day(local) if today < self._winter_start else None
            return _Status("Seasonal (not active now)", StatusVariant.SEASONAL, upcoming)
        if today.isoweekday() in WINTER_FREE_WEEKDAYS and self.is_open_on(today):
            if self._before_opening(local):
                label = f"Not yet. Starts at {self._opening_hour}:00 today."
                return _Status(label, StatusVariant.INACTIVE, self.opening_at(today))
            if self._minutes(local) < self.closing_minutes(today):
                return _Status("Valid now", StatusVariant.VALID)
            return _Status("Closed for today", StatusVariant.INACTIVE, self.next_winter_day(local))
        return _Status("Not today", StatusVariant.INACTIVE, self.next_winter_day(local))

    def _weekend_status(self, local: datetime) -> _Status:
        today = local.date()
        on_weekend = today in first_full_weekend(today.year, today.month)
        if on_weekend and self.is_open_now(local):
            return _Status("Valid now", StatusVariant.VALID)
        if on_weekend and self.is_open_on(today):
            if self._before_opening(local):
                label = f"Not yet. Opens at {self._opening_hour}:00 today."
                return _Status(label, StatusVariant.INACTIVE, self.opening_at(today))
            return _Status("Closed for today", StatusVariant.INACTIVE, self.next_first_full_weekend(local))
        return _Status("Not today", StatusVariant.INACTIVE, self.next_first_full_weekend(local))

    def _row(
        self,
        row_id: str,
        icon: str,
        name: str,
        qualifies: bool,
        status: _Status,
        base_price: float,
        *,
        description: str = "",
        note: str = "",
        always_free: bool = False,
    ) -> DiscountRow:
        if not qualifies:
            status = _Status()
        applicable = qualifies and status.valid
        # Always-free groups pay nothing whenever they qualify; timed programs only while valid.
        free = qualifies if always_free else applicable
        return DiscountRow(
            id=row_id,
            icon=icon,
            name=name,
            description=description,
            note=note,
            qualifies=qualifies,
            applicable_now=applicable,
            your_price=0.0 if free else base_price,
            base_price=base_price,
            status_label=status.label,
            status_variant=status.variant,
            next_eligible=format_next_eligible(status.next_eligible) if status.next_eligible else None,
        )

    def compute_rows(
        self,
        eligibilities: list[EligibilityItem],
        base_price: float,
        ticket_category: str,
        now: datetime,
    ) -> list[DiscountRow]:
        local = self.localize(now)
        free_status = self._always_free_status(local)
        age = user_age(eligibilities, local.date())

        is_child = ticket_category == "child" or (age is not None and age < 14)
        is_teen = ticket_category == "teen" or (age is not None and 14 <= age < 18)
        il_resident = _resident_of(eligibilities, "Illinois")

        rows = [
            self._row("child_free", "👶", "Children under 14", is_child, free_status, base_price, always_free=True),
            self._row(
                "chicago_teen",
                "🏙️",
                "Chicago Resident Teen (14–17)",
                is_teen and _resident_of(eligibilities, "Chicago"),
                free_status,
                base_price,
                always_free=True,
            ),
            self._row(
                "link_wic",
                "🏛️",
                "LINK / WIC (Museums for All)",
                _has_type(eligibilities, "snap_ebt"),
                free_status,
                base_price,
                always_free=True,
            ),
            self._row(
                "military",
                "🎖️",
                "Active-duty Military",
                _has_type(eligibilities, "military") or _has_type(eligibilities, "blue_star"),
                free_status,
                base_price,
                always_free=True,
            ),
            self._row(
                "il_educator",
                "📝",
                "Illinois Educator",
                _has_type(eligibilities, "teacher") and il_resident,
                free_status,
                base_price,
                always_free=True,
            ),
            self._row(
                "winter_free",
                "❄️",
                "Free Winter Weekdays (IL Residents)",
                il_resident,
                self._winter_status(local),
                base_price,
                description=(
                    f"{self._winter_start:%b} {self._winter_start.day} – "
                    f"{self._winter_end:%b} {self._winter_end.day}, {self._winter_end.year} · Open weekdays only"
                ),
            ),
            self._row(
                "boa",
                "💳",
                "Bank of America — Museums on Us",
                _has_type(eligibilities, "bofa_museums_on_us"),
                self._weekend_status(local),
                base_price,
                note="General admission only; bring eligible card + photo ID.",
            ),
            self._library_row(eligibilities, local, base_price),
        ]
        return rows

    def _library_row(self, eligibilities: list[EligibilityItem], local: datetime, base_price: float) -> DiscountRow:
        qualifies = any(
            item.type == "library_pass" and any("chicago" in lib.lower() for lib in item.libraries)
            for item in eligibilities
        )
        if qualifies:
            label = "May be valid today" if self.is_open_now(local) else "Program-based; verify at venue"
            status = _Status(label, StatusVariant.INFO)
        else:
            status = _Status()
        # Informational only: never applicable now and never scanned forward.
        return DiscountRow(
            id="cpl_passport",
            icon="📚",
            name="CPL Kids Museum Passport",
            note="Family admission through Chicago Public Library",
            qualifies=qualifies,
            applicable_now=False,
            your_price=0.0 if qualifies else base_price,
            base_price=base_price,
            status_label=status.label,
            status_variant=status.variant,
        )

    def member_note(self, eligibilities: list[EligibilityItem]) -> MemberNote:
        is_member = any(
            item.type == "museum_membership"
            and any(m.museum_id == self._member_venue_id for m in item.museum_memberships)
            for item in eligibilities
        )
        if is_member:
            return MemberNote(is_member=True, text="Member-only hour: 10–11 a.m. daily (quieter viewing).")
        return MemberNote(is_member=False, text="10–11 a.m. is reserved for members.")


__all__ = [
    "DEFAULT_TIMEZONE",
    "DiscountCalendarResolver",
    "WINTER_FREE_END",
    "WINTER_FREE_START",
    "format_next_eligible",
]
