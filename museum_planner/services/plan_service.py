"""Application service for pricing, planning and discount use-cases."""

from __future__ import annotations

from datetime import datetime, timezone

from museum_planner.config.settings import PlannerSettings, resolve_settings
from museum_planner.domain.discounts.calendar import DiscountCalendarResolver
from museum_planner.domain.exceptions import DomainError
from museum_planner.domain.models import PlanRequest, PlanResult, PriceResult, normalize_profile
from museum_planner.domain.planning.plan import generate_plan
from museum_planner.domain.pricing.resolver import resolve_price
from museum_planner.infrastructure.logging import StructuredLogger, get_logger
from museum_planner.services.contracts import DiscountRequest, DiscountResponse, PriceRequest


def price_venue(request: PriceRequest, *, logger: StructuredLogger | None = None) -> PriceResult:
    log = logger or get_logger()
    result = resolve_price(
        request.venue_id,
        request.date,
        normalize_profile(request.eligibility),
        request.user_location,
        request.ticket_rules,
    )
    log.event(
        "price_resolved",
        venue_id=request.venue_id,
        date=request.date.isoformat(),
        price=result.price,
        confidence=result.confidence.value,
    )
    return result


def execute_plan(
    request: PlanRequest,
    *,
    settings: PlannerSettings | None = None,
    logger: StructuredLogger | None = None,
) -> PlanResult:
    cfg = settings or resolve_settings()
    log = logger or get_logger()
    log.start(
        "plan",
        mode=request.mode.value,
        city=request.city,
        venues=len(request.venues),
        start=request.start_date.isoformat(),
        end=request.end_date.isoformat(),
    )
    try:
        result = generate_plan(request, default_currency=cfg.default_currency)
    except DomainError as exc:
        log.error("plan", str(exc))
        raise
    missing = [item.venue.id for item in result.ticket_plan if not item.rules_available]
    if missing:
        log.warning("plan", "ticket rules missing for scheduled venues", venue_ids=missing)
    log.end(
        "plan",
        days=len(result.itinerary),
        scheduled=len(result.ticket_plan),
    )
    return result


def discounts_for_venue(
    request: DiscountRequest,
    *,
    settings: PlannerSettings | None = None,
    logger: StructuredLogger | None = None,
) -> DiscountResponse:
    cfg = settings or resolve_settings()
    log = logger or get_logger()
    resolver = DiscountCalendarResolver(request.hours, tz=cfg.timezone, member_venue_id=request.venue_id)
    items = normalize_profile(request.eligibility)
    now = request.now or datetime.now(timezone.utc)
    rows = resolver.compute_rows(items, request.base_price, request.ticket_category, now)
    log.event(
        "discounts_computed",
        venue_id=request.venue_id,
        qualifying=sum(1 for row in rows if row.qualifies),
        applicable_now=sum(1 for row in rows if row.applicable_now),
    )
    return DiscountResponse(rows=rows, member_note=resolver.member_note(items))


__all__ = ["discounts_for_venue", "execute_plan", "price_venue"]
