"""Itinerary and ticket-plan generation over a trip's date range."""

from __future__ import annotations

from datetime import date, timedelta

from museum_planner.domain.constants import DEFAULT_CURRENCY
from museum_planner.domain.exceptions import InvalidDateRange
from museum_planner.domain.models import (
    ItineraryDay,
    PlanRequest,
    PlanResult,
    TicketPlanItem,
    TicketRuleEntry,
    Venue,
    normalize_profile,
)
from museum_planner.domain.planning.price_grid import PriceGrid
from museum_planner.domain.planning.strategies import SchedulingStrategy, strategy_for
from museum_planner.domain.pricing.resolver import PriceResolver


def date_range(start: date, end: date) -> list[date]:
    if end < start:
        raise InvalidDateRange(f"end date {end.isoformat()} is before start date {start.isoformat()}")
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def filter_by_city(venues: list[Venue], city: str) -> list[Venue]:
    if not city:
        return list(venues)
    wanted = city.strip().lower()
    return [venue for venue in venues if venue.city.lower() == wanted]


def build_ticket_plan(
    itinerary: list[ItineraryDay],
    ticket_rules: dict[str, TicketRuleEntry],
    *,
    default_currency: str = DEFAULT_CURRENCY,
) -> list[TicketPlanItem]:
    plan: list[TicketPlanItem] = []
    seen: set[str] = set()
    for day in itinerary:
        for item in day.venues:
            if item.venue.id in seen:
                continue
            seen.add(item.venue.id)
            entry = ticket_rules.get(item.venue.id)
            plan.append(
                TicketPlanItem(
                    venue=item.venue,
                    best_price=item.price_result,
                    base_price=entry.base_price if entry else None,
                    currency=(entry.currency if entry else None) or default_currency,
                    pricing_notes=entry.pricing_notes if entry else "",
                    rules_available=entry is not None,
                )
            )
    return plan


def generate_plan(
    request: PlanRequest,
    *,
    strategy: SchedulingStrategy | None = None,
    default_currency: str = DEFAULT_CURRENCY,
) -> PlanResult:
    venues = filter_by_city(request.venues, request.city)
    dates = date_range(request.start_date, request.end_date)
    resolver = PriceResolver(
        request.ticket_rules,
        normalize_profile(request.eligibility),
        request.user_location,
    )
    grid = PriceGrid(venues, dates, resolver)
    itinerary = (strategy or strategy_for(request.mode)).assign(venues, dates, grid)
    ticket_plan = build_ticket_plan(itinerary, request.ticket_rules, default_currency=default_currency)
    return PlanResult(itinerary=itinerary, ticket_plan=ticket_plan)


__all__ = ["build_ticket_plan", "date_range", "filter_by_city", "generate_plan"]
