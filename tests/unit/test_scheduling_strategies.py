"""Money and time scheduling strategy tests."""

from __future__ import annotations

from datetime import date

from museum_planner.domain.models import TicketRuleEntry, UserLocation, Venue
from museum_planner.domain.planning.plan import date_range
from museum_planner.domain.planning.price_grid import PriceGrid
from museum_planner.domain.planning.strategies import MoneyStrategy, TimeStrategy
from museum_planner.domain.pricing.resolver import PriceResolver
from museum_planner.planner.distance import venue_distance

SUNDAY = date(2026, 10, 18)
TUESDAY = date(2026, 10, 20)


def _venue(vid: str, *, lat: float = 41.88, lon: float = -87.62, hours: str = "Mon-Sun 10-5") -> Venue:
    return Venue(id=vid, name=vid.upper(), lat=lat, lon=lon, opening_hours=hours, city="Chicago")


def _grid(venues: list[Venue], dates: list[date], kb: dict[str, TicketRuleEntry] | None = None) -> PriceGrid:
    return PriceGrid(venues, dates, PriceResolver(kb or {}, [], UserLocation()))


def _kb() -> dict[str, TicketRuleEntry]:
    return {
        "free_monday": TicketRuleEntry.model_validate(
            {"basePrice": 20, "rules": [{"id": "mon", "type": "free", "dateConstraint": {"dayOfWeek": [1]}}]}
        ),
        "discounted": TicketRuleEntry.model_validate(
            {"basePrice": 30, "rules": [{"id": "d", "type": "discount", "discountAmount": 15}]}
        ),
    }


def _ids(day) -> list[str]:
    return [item.venue.id for item in day.venues]


def test_money_ranks_free_then_savings_then_unknown():
    venues = [_venue("unknown"), _venue("discounted"), _venue("free_monday")]
    dates = date_range(SUNDAY, TUESDAY)
    ranked = MoneyStrategy().rank(venues, dates, _grid(venues, dates, _kb()))
    assert [row.venue.id for row in ranked] == ["free_monday", "discounted", "unknown"]
    assert [row.score for row in ranked] == [100, 15, 5]
    assert ranked[0].preferred_date == date(2026, 10, 19)
    # equal scores on every date: the first date wins
    assert ranked[1].preferred_date == SUNDAY


def test_money_preferred_date_is_soft_for_an_empty_day():
    venues = [_venue("unknown"), _venue("discounted"), _venue("free_monday")]
    dates = date_range(SUNDAY, TUESDAY)
    itinerary = MoneyStrategy().assign(venues, dates, _grid(venues, dates, _kb()))
    assert [_ids(day) for day in itinerary] == [["free_monday", "discounted"], ["unknown"], []]
    assert itinerary[0].venues[0].price_result.price == 20


def test_money_uses_preferred_date_when_closed_earlier():
    venues = [_venue("unknown"), _venue("discounted"), _venue("free_monday", hours="Mon-Sat 10-5")]
    dates = date_range(SUNDAY, TUESDAY)
    itinerary = MoneyStrategy().assign(venues, dates, _grid(venues, dates, _kb()))
    assert [_ids(day) for day in itinerary] == [["discounted", "unknown"], ["free_monday"], []]
    assert itinerary[1].venues[0].price_result.price == 0


def test_money_drops_venues_closed_on_every_date():
    venues = [_venue("shut", hours="Temporarily closed"), _venue("discounted")]
    dates = date_range(SUNDAY, TUESDAY)
    itinerary = MoneyStrategy().assign(venues, dates, _grid(venues, dates, _kb()))
    assert [vid for day in itinerary for vid in _ids(day)] == ["discounted"]


def test_money_caps_days_and_only_uses_open_days():
    venues = [_venue(f"v{i}", hours="Mon 10-5; Wed-Sun 10-5") for i in range(7)]
    dates = date_range(SUNDAY, date(2026, 10, 24))
    grid = _grid(venues, dates)
    itinerary = MoneyStrategy().assign(venues, dates, grid)
    for day in itinerary:
        assert len(day.venues) <= 2
        for item in day.venues:
            assert not grid.is_closed(item.venue, day.date)
    assert _ids(itinerary[2]) == []  # Tuesday is closed for everyone


def test_time_pairs_nearest_neighbors():
    venues = [
        _venue("north_a", lat=42.00, lon=-87.70),
        _venue("south_a", lat=41.70, lon=-87.60),
        _venue("north_b", lat=42.01, lon=-87.70),
        _venue("south_b", lat=41.71, lon=-87.60),
    ]
    dates = date_range(SUNDAY, TUESDAY)
    itinerary = TimeStrategy().assign(venues, dates, _grid(venues, dates))
    assert len(itinerary) == 3
    assert [_ids(day) for day in itinerary] == [["north_a", "north_b"], ["south_a", "south_b"], []]


def test_time_partner_is_nearest_among_remaining_at_assignment():
    venues = [
        _venue(f"v{i}", lat=41.8 + (i * 7 % 5) * 0.01, lon=-87.6 - (i * 3 % 4) * 0.01)
        for i in range(6)
    ]
    dates = date_range(SUNDAY, TUESDAY)
    itinerary = TimeStrategy().assign(venues, dates, _grid(venues, dates))
    remaining = list(venues)
    for day in itinerary:
        if len(day.venues) == 2:
            anchor, partner = (item.venue for item in day.venues)
            others = [v for v in remaining if v.id not in (anchor.id, partner.id)]
            assert all(venue_distance(anchor, partner) <= venue_distance(anchor, v) for v in others)
        for item in day.venues:
            remaining = [v for v in remaining if v.id != item.venue.id]


def test_time_skips_closed_anchor_and_pads_days():
    venues = [_venue("weekdays", hours="Mon-Fri 10-5"), _venue("always")]
    dates = date_range(SUNDAY, date(2026, 10, 21))
    itinerary = TimeStrategy().assign(venues, dates, _grid(venues, dates))
    assert [_ids(day) for day in itinerary] == [["always"], ["weekdays"], [], []]
    assert [day.date for day in itinerary] == dates


def test_time_uses_injected_distance():
    venues = [_venue("a"), _venue("b"), _venue("c")]
    dates = [SUNDAY]
    prefer_c = TimeStrategy(distance_fn=lambda x, y: 0.0 if y.id == "c" else 1.0)
    itinerary = prefer_c.assign(venues, dates, _grid(venues, dates))
    assert _ids(itinerary[0]) == ["a", "c"]
