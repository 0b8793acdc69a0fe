"""Ticket price resolution tests."""

from __future__ import annotations

from datetime import date

from museum_planner.domain.enums import Confidence
from museum_planner.domain.models import EligibilityItem, TicketRuleEntry, UserLocation
from museum_planner.domain.pricing.resolver import PriceResolver, resolve_price

MONDAY = date(2026, 10, 19)
TUESDAY = date(2026, 10, 20)
HOME = UserLocation(city="Chicago", region="Illinois", country="US")


def _entry(*rules: dict, base_price: float = 40.0) -> TicketRuleEntry:
    return TicketRuleEntry.model_validate({"basePrice": base_price, "rules": list(rules)})


def _free(rule_id: str, **extra) -> dict:
    return {"id": rule_id, "type": "free", "notes": f"{rule_id} note", **extra}


def _discount(rule_id: str, amount: float, **extra) -> dict:
    return {"id": rule_id, "type": "discount", "discountAmount": amount, "notes": f"{rule_id} note", **extra}


def test_missing_entry_is_unknown_not_an_error():
    result = resolve_price("nope", MONDAY, [], HOME, {})
    assert result.price is None
    assert result.confidence == Confidence.UNKNOWN
    assert result.notes == ["Ticket rules not available yet"]
    assert result.savings == 0


def test_free_rule_with_weekday_and_program():
    kb = {
        "m1": _entry(
            _free("teacher_monday", eligibility={"hasProgram": "teacher"}, dateConstraint={"dayOfWeek": [1]})
        )
    }
    teacher = [EligibilityItem(type="teacher")]

    tuesday = resolve_price("m1", TUESDAY, teacher, HOME, kb)
    assert tuesday.price == 40
    assert tuesday.applied_rule_ids == []
    assert tuesday.savings == 0

    monday = resolve_price("m1", MONDAY, teacher, HOME, kb)
    assert monday.price == 0
    assert monday.applied_rule_ids == ["teacher_monday"]
    assert monday.confidence == Confidence.HIGH
    assert monday.savings == 40


def test_best_discount_wins_and_only_its_notes_are_reported():
    kb = {
        "m1": _entry(
            _discount("student", 10, eligibility={"isStudent": True}),
            _discount("senior", 20, eligibility={"isSenior": True}),
        )
    }
    items = [
        EligibilityItem(type="student"),
        EligibilityItem(type="age_based", date_of_birth="1956-03-01"),
    ]
    result = resolve_price("m1", MONDAY, items, HOME, kb)
    assert result.price == 20
    assert result.applied_rule_ids == ["senior"]
    assert result.notes == ["senior note"]
    assert result.savings == 20


def test_discount_ties_keep_the_first_rule():
    kb = {"m1": _entry(_discount("first", 10), _discount("second", 10))}
    result = resolve_price("m1", MONDAY, [], HOME, kb)
    assert result.applied_rule_ids == ["first"]


def test_free_rule_takes_precedence_over_discounts():
    kb = {"m1": _entry(_discount("big", 35), _free("everyone"))}
    result = resolve_price("m1", MONDAY, [], HOME, kb)
    assert result.price == 0
    assert result.applied_rule_ids == ["everyone"]


def test_discount_larger_than_base_price_clamps_to_zero():
    kb = {"m1": _entry(_discount("huge", 100), base_price=25)}
    result = resolve_price("m1", MONDAY, [], HOME, kb)
    assert result.price == 0
    assert result.savings == 25


def test_price_always_within_base_bounds():
    kb = {"m1": _entry(_discount("a", 5), _discount("b", 15, dateConstraint={"dayOfWeek": [2]}), _discount("c", 90))}
    for day in (MONDAY, TUESDAY):
        result = resolve_price("m1", day, [], HOME, kb)
        assert 0 <= result.price <= 40


def test_resolution_is_idempotent():
    kb = {"m1": _entry(_discount("resident", 15, eligibility={"residentState": "Illinois"}))}
    resolver = PriceResolver(kb, [EligibilityItem(type="student")], HOME)
    first = resolver.resolve("m1", MONDAY)
    second = resolver.resolve("m1", MONDAY)
    assert first == second
    assert first.price == 25
