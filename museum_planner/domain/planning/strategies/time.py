"""Time-optimized scheduling: pair each anchor with its nearest open neighbor."""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from museum_planner.domain.models import ItineraryDay, ItineraryVenue, Venue
from museum_planner.domain.planning.price_grid import PriceGrid
from museum_planner.domain.planning.strategies.base import visit
from museum_planner.planner.distance import venue_distance

VenueDistanceFn = Callable[[Venue, Venue], float]


def _pop_first_open(pool: list[Venue], day: date, grid: PriceGrid) -> Optional[Venue]:
    for idx, venue in enumerate(pool):
        if not grid.is_closed(venue, day):
            return pool.pop(idx)
    return None


def _pop_nearest_open(
    anchor: Venue,
    pool: list[Venue],
    day: date,
    grid: PriceGrid,
    distance_fn: VenueDistanceFn,
) -> Optional[Venue]:
    best_idx = -1
    best_dist = float("inf")
    for idx, venue in enumerate(pool):
        if grid.is_closed(venue, day):
            continue
        dist = distance_fn(anchor, venue)
        if dist < best_dist:
            best_idx = idx
            best_dist = dist
    if best_idx < 0:
        return None
    return pool.pop(best_idx)


class TimeStrategy:
    def __init__(self, distance_fn: VenueDistanceFn = venue_distance) -> None:
        self._distance_fn = distance_fn

    def assign(self, venues: list[Venue], dates: list[date], grid: PriceGrid) -> list[ItineraryDay]:
        pool = list(venues)
        itinerary: list[ItineraryDay] = []
        for day in dates:
            if not pool:
                break
            day_venues: list[ItineraryVenue] = []
            anchor = _pop_first_open(pool, day, grid)
            if anchor is not None:
                day_venues.append(visit(anchor, day, grid))
                neighbor = _pop_nearest_open(anchor, pool, day, grid, self._distance_fn)
                if neighbor is not None:
                    day_venues.append(visit(neighbor, day, grid))
            itinerary.append(ItineraryDay(date=day, venues=day_venues))

        for day in dates[len(itinerary):]:
            itinerary.append(ItineraryDay(date=day))
        return itinerary


__all__ = ["TimeStrategy", "VenueDistanceFn"]
