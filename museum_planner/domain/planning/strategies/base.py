"""Base types for scheduling strategies."""

from __future__ import annotations

from datetime import date
from typing import Protocol

from museum_planner.domain.constants import SUGGESTED_DURATION_HOURS
from museum_planner.domain.models import ItineraryDay, ItineraryVenue, Venue
from museum_planner.domain.planning.price_grid import PriceGrid


class SchedulingStrategy(Protocol):
    """Assigns venues to the days of a trip."""

    def assign(self, venues: list[Venue], dates: list[date], grid: PriceGrid) -> list[ItineraryDay]:
        ...


def visit(venue: Venue, day: date, grid: PriceGrid) -> ItineraryVenue:
    return ItineraryVenue(
        venue=venue,
        open_status=grid.status(venue, day),
        price_result=grid.price(venue, day),
        suggested_duration_hours=SUGGESTED_DURATION_HOURS,
    )


__all__ = ["SchedulingStrategy", "visit"]
