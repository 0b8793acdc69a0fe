"""Ticket price resolution."""

from museum_planner.domain.pricing.date_constraint import first_full_weekend, matches_date_constraint
from museum_planner.domain.pricing.eligibility import age_on, matches_eligibility
from museum_planner.domain.pricing.resolver import PriceResolver, resolve_price
from museum_planner.domain.pricing.rules import build_ticket_rule, parse_knowledge_base

__all__ = [
    "PriceResolver",
    "age_on",
    "build_ticket_rule",
    "first_full_weekend",
    "matches_date_constraint",
    "matches_eligibility",
    "parse_knowledge_base",
    "resolve_price",
]
