"""Cheapest applicable admission price for one venue on one date."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from functools import reduce
from typing import NamedTuple, Optional

from museum_planner.domain.constants import RULES_NOT_AVAILABLE_NOTE
from museum_planner.domain.enums import Confidence
from museum_planner.domain.models import (
    DiscountRule,
    EligibilityItem,
    FreeRule,
    PriceResult,
    TicketRuleEntry,
    UserLocation,
)
from museum_planner.domain.pricing.date_constraint import matches_date_constraint
from museum_planner.domain.pricing.eligibility import matches_eligibility


class _Best(NamedTuple):
    price: float
    rule: Optional[DiscountRule]


def _rule_applies(
    rule: FreeRule | DiscountRule,
    day: date,
    items: list[EligibilityItem],
    location: UserLocation,
) -> bool:
    return matches_date_constraint(rule.date_constraint, day) and matches_eligibility(
        rule.eligibility, items, location, day
    )


def _keep_cheaper(base_price: float):
    def step(best: _Best, rule: DiscountRule) -> _Best:
        candidate = max(0.0, base_price - rule.discount_amount)
        # Strict improvement only: on ties the earlier rule stays.
        if candidate < best.price:
            return _Best(candidate, rule)
        return best

    return step


def unavailable_price() -> PriceResult:
    return PriceResult(
        price=None,
        applied_rule_ids=[],
        notes=[RULES_NOT_AVAILABLE_NOTE],
        confidence=Confidence.UNKNOWN,
        savings=0.0,
    )


def resolve_entry(
    entry: TicketRuleEntry,
    day: date,
    items: list[EligibilityItem],
    location: UserLocation,
) -> PriceResult:
    base = entry.base_price
    for rule in entry.rules:
        if isinstance(rule, FreeRule) and _rule_applies(rule, day, items, location):
            return PriceResult(
                price=0.0,
                applied_rule_ids=[rule.id],
                notes=[rule.notes],
                confidence=Confidence.HIGH,
                savings=base,
            )

    candidates = [
        rule
        for rule in entry.rules
        if isinstance(rule, DiscountRule) and _rule_applies(rule, day, items, location)
    ]
    best = reduce(_keep_cheaper(base), candidates, _Best(base, None))
    return PriceResult(
        price=best.price,
        applied_rule_ids=[best.rule.id] if best.rule else [],
        notes=[best.rule.notes] if best.rule else [],
        confidence=Confidence.HIGH,
        savings=base - best.price,
    )


def resolve_price(
    venue_id: str,
    day: date,
    items: list[EligibilityItem],
    location: UserLocation,
    knowledge_base: Mapping[str, TicketRuleEntry],
) -> PriceResult:
    entry = knowledge_base.get(venue_id)
    if entry is None:
        return unavailable_price()
    return resolve_entry(entry, day, items, location)


class PriceResolver:
    """Binds a knowledge base and a traveler profile for repeated lookups."""

    def __init__(
        self,
        knowledge_base: Mapping[str, TicketRuleEntry],
        items: list[EligibilityItem],
        location: UserLocation | None = None,
    ) -> None:
        self._knowledge_base = knowledge_base
        self._items = list(items)
        self._location = location or UserLocation()

    def resolve(self, venue_id: str, day: date) -> PriceResult:
        return resolve_price(venue_id, day, self._items, self._location, self._knowledge_base)


__all__ = ["PriceResolver", "resolve_entry", "resolve_price", "unavailable_price"]
