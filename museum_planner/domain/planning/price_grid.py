"""Per-(venue, date) price and open-status lookups for one planning call."""

from __future__ import annotations

from datetime import date

from museum_planner.domain.models import OpenStatus, PriceResult, Venue
from museum_planner.domain.planning.opening_hours import venue_open_status
from museum_planner.domain.pricing.resolver import PriceResolver


class PriceGrid:
    def __init__(self, venues: list[Venue], dates: list[date], resolver: PriceResolver) -> None:
        self._prices: dict[tuple[str, date], PriceResult] = {}
        self._status: dict[tuple[str, date], OpenStatus] = {}
        for venue in venues:
            for day in dates:
                key = (venue.id, day)
                self._prices[key] = resolver.resolve(venue.id, day)
                self._status[key] = venue_open_status(venue, day)

    def price(self, venue: Venue, day: date) -> PriceResult:
        return self._prices[(venue.id, day)]

    def status(self, venue: Venue, day: date) -> OpenStatus:
        return self._status[(venue.id, day)]

    def is_closed(self, venue: Venue, day: date) -> bool:
        return self.status(venue, day).is_closed


__all__ = ["PriceGrid"]
