"""Eligibility matching between a rule's requirements and a user profile."""

from __future__ import annotations

from datetime import date
from typing import Optional

from museum_planner.domain.constants import SENIOR_MIN_AGE
from museum_planner.domain.models import EligibilityItem, RuleEligibility, UserLocation


def _find(items: list[EligibilityItem], item_type: str) -> Optional[EligibilityItem]:
    for item in items:
        if item.type == item_type:
            return item
    return None


def parse_birth_date(value: str | None) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None


def age_on(birth: date, on_date: date) -> int:
    age = on_date.year - birth.year
    if (on_date.month, on_date.day) < (birth.month, birth.day):
        age -= 1
    return age


def user_age(items: list[EligibilityItem], on_date: date) -> Optional[int]:
    age_item = _find(items, "age_based")
    if age_item is None:
        return None
    birth = parse_birth_date(age_item.date_of_birth)
    if birth is None:
        return None
    return age_on(birth, on_date)


def _local_locations(items: list[EligibilityItem]) -> list[str]:
    resident = _find(items, "local_resident")
    return list(resident.locations) if resident else []


def _matches_residence(target: str, home_value: str, locations: list[str]) -> bool:
    # One-directional: a declared location containing the target counts.
    return home_value == target or any(target in loc for loc in locations)


def matches_eligibility(
    rule: RuleEligibility | None,
    items: list[EligibilityItem],
    location: UserLocation,
    on_date: date,
) -> bool:
    if rule is None:
        return True

    if rule.resident_state:
        if not _matches_residence(rule.resident_state, location.region, _local_locations(items)):
            return False

    if rule.resident_city:
        if not _matches_residence(rule.resident_city, location.city, _local_locations(items)):
            return False

    if rule.is_student and _find(items, "student") is None:
        return False

    if rule.is_senior:
        age = user_age(items, on_date)
        if age is None or age < SENIOR_MIN_AGE:
            return False

    if rule.max_age is not None:
        age = user_age(items, on_date)
        if age is None or age > rule.max_age:
            return False

    if rule.has_program and _find(items, rule.has_program) is None:
        return False

    return True


__all__ = ["age_on", "matches_eligibility", "parse_birth_date", "user_age"]
