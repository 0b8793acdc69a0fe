"""Domain package exports."""

from museum_planner.domain.enums import Confidence, OpenState, PlanMode, RuleKind, StatusVariant, WeekRule
from museum_planner.domain.exceptions import DomainError, InvalidDateRange, InvalidTicketRule
from museum_planner.domain.models import (
    DateConstraint,
    DiscountRow,
    DiscountRule,
    EligibilityItem,
    FreeRule,
    ItineraryDay,
    ItineraryVenue,
    PlanRequest,
    PlanResult,
    PriceResult,
    RuleEligibility,
    TicketPlanItem,
    TicketRuleEntry,
    UserLocation,
    Venue,
)

__all__ = [
    "Confidence",
    "DateConstraint",
    "DiscountRow",
    "DiscountRule",
    "DomainError",
    "EligibilityItem",
    "FreeRule",
    "InvalidDateRange",
    "InvalidTicketRule",
    "ItineraryDay",
    "ItineraryVenue",
    "OpenState",
    "PlanMode",
    "PlanRequest",
    "PlanResult",
    "PriceResult",
    "RuleEligibility",
    "RuleKind",
    "StatusVariant",
    "TicketPlanItem",
    "TicketRuleEntry",
    "UserLocation",
    "Venue",
    "WeekRule",
]
