"""Money-optimized scheduling: put each venue on its cheapest open day."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from museum_planner.domain.constants import FREE_SCORE, MAX_VENUES_PER_DAY, UNKNOWN_PRICE_SCORE
from museum_planner.domain.models import ItineraryDay, ItineraryVenue, PriceResult, Venue
from museum_planner.domain.planning.price_grid import PriceGrid
from museum_planner.domain.planning.strategies.base import visit


@dataclass(frozen=True)
class ScoredVenue:
    venue: Venue
    score: float
    preferred_date: date


def price_score(result: PriceResult) -> float:
    if result.price is None:
        return UNKNOWN_PRICE_SCORE
    if result.price == 0:
        return FREE_SCORE
    return result.savings


def score_venue(venue: Venue, dates: list[date], grid: PriceGrid) -> ScoredVenue | None:
    """Highest score over the open dates; the earliest date wins ties.

    Returns None when the venue is closed on every date.
    """
    best_score = -1.0
    best_date = dates[0] if dates else None
    for day in dates:
        if grid.is_closed(venue, day):
            continue
        score = price_score(grid.price(venue, day))
        if score > best_score:
            best_score = score
            best_date = day
    if best_score < 0 or best_date is None:
        return None
    return ScoredVenue(venue=venue, score=best_score, preferred_date=best_date)


class MoneyStrategy:
    def __init__(self, max_per_day: int = MAX_VENUES_PER_DAY) -> None:
        self._max_per_day = max_per_day

    def rank(self, venues: list[Venue], dates: list[date], grid: PriceGrid) -> list[ScoredVenue]:
        scored = [row for row in (score_venue(venue, dates, grid) for venue in venues) if row is not None]
        return sorted(scored, key=lambda row: -row.score)

    def assign(self, venues: list[Venue], dates: list[date], grid: PriceGrid) -> list[ItineraryDay]:
        ranked = self.rank(venues, dates, grid)
        assigned: set[str] = set()
        itinerary: list[ItineraryDay] = []
        for day in dates:
            day_venues: list[ItineraryVenue] = []
            for row in ranked:
                if row.venue.id in assigned:
                    continue
                if len(day_venues) >= self._max_per_day:
                    break
                if grid.is_closed(row.venue, day):
                    continue
                # The preferred date is soft: an empty day takes any open venue.
                if row.preferred_date == day or len(day_venues) < 1:
                    day_venues.append(visit(row.venue, day, grid))
                    assigned.add(row.venue.id)
            itinerary.append(ItineraryDay(date=day, venues=day_venues))
        return itinerary


__all__ = ["MoneyStrategy", "ScoredVenue", "price_score", "score_venue"]
