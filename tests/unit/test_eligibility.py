"""Eligibility matching tests."""

from __future__ import annotations

from datetime import date

from museum_planner.domain.models import EligibilityItem, RuleEligibility, UserLocation
from museum_planner.domain.pricing.eligibility import age_on, matches_eligibility

ON = date(2026, 10, 19)
NOWHERE = UserLocation()


def _match(rule: RuleEligibility | None, items: list[EligibilityItem], location: UserLocation = NOWHERE, on=ON) -> bool:
    return matches_eligibility(rule, items, location, on)


def test_no_requirement_always_matches():
    assert _match(None, [])


def test_resident_state_from_home_region():
    rule = RuleEligibility(resident_state="Illinois")
    assert _match(rule, [], UserLocation(city="Chicago", region="Illinois", country="US"))
    assert not _match(rule, [], UserLocation(city="Madison", region="Wisconsin", country="US"))


def test_resident_state_from_local_resident_locations_is_substring():
    rule = RuleEligibility(resident_state="Illinois")
    resident = EligibilityItem(type="local_resident", locations=["Evanston, Illinois"])
    assert _match(rule, [resident])


def test_resident_match_is_one_directional():
    rule = RuleEligibility(resident_city="Chicago Heights")
    resident = EligibilityItem(type="local_resident", locations=["Chicago"])
    assert not _match(rule, [resident])


def test_resident_city_from_home_city():
    rule = RuleEligibility(resident_city="Chicago")
    assert _match(rule, [], UserLocation(city="Chicago"))
    assert not _match(rule, [], UserLocation(city="chicago"))


def test_student_and_program_need_matching_item_type():
    assert _match(RuleEligibility(is_student=True), [EligibilityItem(type="student")])
    assert not _match(RuleEligibility(is_student=True), [EligibilityItem(type="teacher")])
    assert _match(RuleEligibility(has_program="teacher"), [EligibilityItem(type="teacher")])
    assert not _match(RuleEligibility(has_program="library_pass"), [EligibilityItem(type="teacher")])


def test_age_is_calendar_exact():
    birth = date(1961, 10, 20)
    assert age_on(birth, date(2026, 10, 19)) == 64
    assert age_on(birth, date(2026, 10, 20)) == 65


def test_senior_boundary_on_birthday():
    rule = RuleEligibility(is_senior=True)
    items = [EligibilityItem(type="age_based", date_of_birth="1961-10-20")]
    assert not _match(rule, items, on=date(2026, 10, 19))
    assert _match(rule, items, on=date(2026, 10, 20))


def test_senior_without_birth_date_is_a_non_match():
    rule = RuleEligibility(is_senior=True)
    assert not _match(rule, [EligibilityItem(type="age_based")])
    assert not _match(rule, [EligibilityItem(type="age_based", date_of_birth="sometime")])
    assert not _match(rule, [])


def test_max_age_is_inclusive():
    items = [EligibilityItem(type="age_based", date_of_birth="2013-01-01")]
    assert _match(RuleEligibility(max_age=13), items)
    assert not _match(RuleEligibility(max_age=12), items)


def test_all_present_requirements_are_anded():
    rule = RuleEligibility(resident_state="Illinois", is_student=True)
    location = UserLocation(region="Illinois")
    assert not _match(rule, [], location)
    assert not _match(rule, [EligibilityItem(type="student")])
    assert _match(rule, [EligibilityItem(type="student")], location)


def test_expired_membership_metadata_is_not_checked():
    item = EligibilityItem.model_validate(
        {"type": "museum_membership", "museum_memberships": [{"museum_id": "m1", "expires_on": "2020-01-01"}]}
    )
    assert _match(RuleEligibility(has_program="museum_membership"), [item])
