"""Validating construction of typed ticket rules from raw knowledge-base records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from museum_planner.domain.enums import RuleKind
from museum_planner.domain.exceptions import InvalidTicketRule
from museum_planner.domain.models import DiscountRule, FreeRule, TicketRule, TicketRuleEntry

_RULE_ADAPTER: TypeAdapter[FreeRule | DiscountRule] = TypeAdapter(TicketRule)
_KINDS = {kind.value for kind in RuleKind}


def _sunday_zero_to_iso(days: list[int]) -> list[int]:
    return [7 if day == 0 else day for day in days]


def _is_positive(amount: Any) -> bool:
    if amount is None or isinstance(amount, bool):
        return False
    try:
        return float(amount) > 0
    except (TypeError, ValueError):
        return False


def build_ticket_rule(raw: Mapping[str, Any], *, sunday_zero_weekdays: bool = False) -> FreeRule | DiscountRule:
    """Build a free or discount rule, rejecting records that cannot price anything.

    ``sunday_zero_weekdays`` converts ``dayOfWeek`` lists written with
    Sunday=0 (the format of exported ticket_rules.json files) to ISO weekdays.
    """
    data = dict(raw)
    rule_id = str(data.get("id") or "")
    kind = data.get("type")
    if kind not in _KINDS:
        raise InvalidTicketRule(rule_id, f"unknown rule type: {kind!r}")
    if kind == RuleKind.DISCOUNT.value:
        amount = data.get("discount_amount", data.get("discountAmount"))
        if not _is_positive(amount):
            raise InvalidTicketRule(rule_id, f"discount rule needs a positive discount amount, got {amount!r}")

    if sunday_zero_weekdays:
        key = "date_constraint" if "date_constraint" in data else "dateConstraint"
        constraint = data.get(key)
        if isinstance(constraint, Mapping):
            constraint = dict(constraint)
            for day_key in ("day_of_week", "dayOfWeek"):
                if isinstance(constraint.get(day_key), list):
                    constraint[day_key] = _sunday_zero_to_iso(constraint[day_key])
            data[key] = constraint

    try:
        return _RULE_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise InvalidTicketRule(rule_id, str(exc)) from exc


def build_rule_entry(raw: Mapping[str, Any], *, sunday_zero_weekdays: bool = False) -> TicketRuleEntry:
    data = dict(raw)
    rules = [build_ticket_rule(item, sunday_zero_weekdays=sunday_zero_weekdays) for item in data.pop("rules", [])]
    try:
        return TicketRuleEntry.model_validate({**data, "rules": rules})
    except ValidationError as exc:
        raise InvalidTicketRule("", str(exc)) from exc


def parse_knowledge_base(
    raw: Mapping[str, Mapping[str, Any]],
    *,
    sunday_zero_weekdays: bool = False,
) -> dict[str, TicketRuleEntry]:
    return {
        str(venue_id): build_rule_entry(entry, sunday_zero_weekdays=sunday_zero_weekdays)
        for venue_id, entry in raw.items()
    }


__all__ = ["build_rule_entry", "build_ticket_rule", "parse_knowledge_base"]
