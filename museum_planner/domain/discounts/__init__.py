"""Venue-scoped promotional discount calendar."""

from museum_planner.domain.discounts.calendar import DiscountCalendarResolver, format_next_eligible
from museum_planner.domain.discounts.categories import TICKET_CATEGORIES, base_price_from_admission

__all__ = [
    "DiscountCalendarResolver",
    "TICKET_CATEGORIES",
    "base_price_from_admission",
    "format_next_eligible",
]
