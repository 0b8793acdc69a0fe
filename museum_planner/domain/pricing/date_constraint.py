"""Calendar predicates for ticket rule date constraints."""

from __future__ import annotations

from datetime import date

from museum_planner.domain.enums import WeekRule
from museum_planner.domain.models import DateConstraint

_SUNDAY = 7
_SATURDAY = 6


def sunday_based_weekday(day: date) -> int:
    """Weekday with Sunday=0 .. Saturday=6."""
    return day.isoweekday() % 7


def first_full_weekend(year: int, month: int) -> tuple[date, date]:
    """Saturday and Sunday of the first weekend lying entirely inside the month.

    The first Saturday is always on day 1-7, so the Sunday after it is at
    most day 8 and never leaves the month.
    """
    first_sat = ((6 - sunday_based_weekday(date(year, month, 1))) % 7) + 1
    return date(year, month, first_sat), date(year, month, first_sat + 1)


def _matches_week_rule(rule: WeekRule, day: date) -> bool:
    if rule == WeekRule.FIRST_SUNDAY:
        return day.isoweekday() == _SUNDAY and day.day <= 7
    if rule == WeekRule.FIRST_SATURDAY:
        return day.isoweekday() == _SATURDAY and day.day <= 7
    sat, sun = first_full_weekend(day.year, day.month)
    return day.day in (sat.day, sun.day)


def matches_date_constraint(constraint: DateConstraint | None, day: date) -> bool:
    if constraint is None:
        return True
    if constraint.day_of_week is not None and day.isoweekday() not in constraint.day_of_week:
        return False
    if constraint.month_range is not None and day.month not in constraint.month_range:
        return False
    if constraint.week_rule is not None and not _matches_week_rule(constraint.week_rule, day):
        return False
    return True


__all__ = ["first_full_weekend", "matches_date_constraint", "sunday_based_weekday"]
