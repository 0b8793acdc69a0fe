"""Ticket categories and admission-table lookups."""

from __future__ import annotations

import re
from typing import NamedTuple

from museum_planner.domain.models import AdmissionRow


class TicketCategory(NamedTuple):
    id: str
    label: str
    default_price: float


TICKET_CATEGORIES = (
    TicketCategory("adult", "Adult", 40.0),
    TicketCategory("senior", "Senior (65+)", 34.0),
    TicketCategory("student", "Student", 34.0),
    TicketCategory("teen", "Teen (14–17)", 34.0),
    TicketCategory("child", "Child (<14)", 0.0),
)
TICKET_CATEGORY_IDS = frozenset(category.id for category in TICKET_CATEGORIES)

# ticket category id -> admission table label
_ADMISSION_LABELS = {
    "adult": "Adult",
    "senior": "Seniors (65+)",
    "student": "Students",
    "teen": "Teens (14–17)",
    "child": "Children",
}
_FALLBACK_BASE_PRICE = 40.0
_PRICE_RE = re.compile(r"\d+(?:\.\d+)?")


def base_price_from_admission(admission: list[AdmissionRow], ticket_id: str) -> float:
    """Price for ``ticket_id`` from a venue admission table; "Free" reads as 0."""
    label = _ADMISSION_LABELS.get(ticket_id, "Adult")
    for row in admission:
        if row.category == label:
            match = _PRICE_RE.search(row.price)
            return float(match.group(0)) if match else 0.0
    return _FALLBACK_BASE_PRICE


__all__ = ["TICKET_CATEGORIES", "TICKET_CATEGORY_IDS", "TicketCategory", "base_price_from_admission"]
