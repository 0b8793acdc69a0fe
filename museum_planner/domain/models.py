"""Pydantic domain models."""

from __future__ import annotations

import datetime as dt
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from museum_planner.domain.constants import DEFAULT_CURRENCY
from museum_planner.domain.enums import Confidence, OpenState, PlanMode, StatusVariant, WeekRule


class _KnowledgeModel(BaseModel):
    """Accepts both snake_case and the camelCase keys used by ticket_rules.json."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Venue(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    lat: float = 0.0
    lon: float = 0.0
    opening_hours: Optional[str] = None
    city: str = ""
    state: str = ""
    country: str = ""


class MuseumMembership(BaseModel):
    museum_id: str
    expires_on: Optional[dt.date] = None


class EligibilityItem(BaseModel):
    type: str
    locations: list[str] = Field(default_factory=list)
    date_of_birth: Optional[str] = None
    schools: list[str] = Field(default_factory=list)
    libraries: list[str] = Field(default_factory=list)
    companies: list[str] = Field(default_factory=list)
    cities: list[str] = Field(default_factory=list)
    museum_memberships: list[MuseumMembership] = Field(default_factory=list)


def normalize_profile(items: list[EligibilityItem]) -> list[EligibilityItem]:
    """Collapse a profile to one item per type, keeping the first."""
    seen: set[str] = set()
    kept: list[EligibilityItem] = []
    for item in items:
        if item.type in seen:
            continue
        seen.add(item.type)
        kept.append(item)
    return kept


class UserLocation(BaseModel):
    city: str = ""
    region: str = ""
    country: str = ""


# ISO weekday, 1=Monday .. 7=Sunday
Weekday = Annotated[int, Field(ge=1, le=7)]
Month = Annotated[int, Field(ge=1, le=12)]


class DateConstraint(_KnowledgeModel):
    day_of_week: Optional[list[Weekday]] = None
    month_range: Optional[list[Month]] = None
    week_rule: Optional[WeekRule] = None
    time_window: Optional[str] = None


class RuleEligibility(_KnowledgeModel):
    resident_state: Optional[str] = None
    resident_city: Optional[str] = None
    is_student: Optional[bool] = None
    is_senior: Optional[bool] = None
    max_age: Optional[int] = None
    has_program: Optional[str] = None


class _RuleBase(_KnowledgeModel):
    id: str
    eligibility: Optional[RuleEligibility] = None
    date_constraint: Optional[DateConstraint] = None
    notes: str = ""
    requires_reservation: bool = False


class FreeRule(_RuleBase):
    type: Literal["free"] = "free"


class DiscountRule(_RuleBase):
    type: Literal["discount"] = "discount"
    discount_amount: float = Field(gt=0)


TicketRule = Annotated[Union[FreeRule, DiscountRule], Field(discriminator="type")]


class TicketRuleEntry(_KnowledgeModel):
    # None falls back to the configured default currency
    currency: Optional[str] = None
    base_price: float = Field(ge=0)
    pricing_notes: str = ""
    rules: list[TicketRule] = Field(default_factory=list)


class PriceResult(BaseModel):
    price: Optional[float] = None
    applied_rule_ids: list[str] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)
    confidence: Confidence = Confidence.UNKNOWN
    savings: float = 0.0


class OpenStatus(BaseModel):
    status: OpenState = OpenState.UNKNOWN
    note: str = ""

    @property
    def is_closed(self) -> bool:
        return self.status == OpenState.CLOSED


class ItineraryVenue(BaseModel):
    venue: Venue
    open_status: OpenStatus
    price_result: PriceResult
    suggested_duration_hours: float = 2.0


class ItineraryDay(BaseModel):
    date: dt.date
    venues: list[ItineraryVenue] = Field(default_factory=list)


class TicketPlanItem(BaseModel):
    venue: Venue
    best_price: PriceResult
    base_price: Optional[float] = None
    currency: str = DEFAULT_CURRENCY
    pricing_notes: str = ""
    rules_available: bool = False


class PlanRequest(BaseModel):
    city: str = ""
    start_date: dt.date
    end_date: dt.date
    mode: PlanMode = PlanMode.MONEY
    eligibility: list[EligibilityItem] = Field(default_factory=list)
    user_location: UserLocation = Field(default_factory=UserLocation)
    venues: list[Venue] = Field(default_factory=list)
    ticket_rules: dict[str, TicketRuleEntry] = Field(default_factory=dict)


class PlanResult(BaseModel):
    itinerary: list[ItineraryDay] = Field(default_factory=list)
    ticket_plan: list[TicketPlanItem] = Field(default_factory=list)


class HoursRow(BaseModel):
    day: str
    hours: str


class AdmissionRow(BaseModel):
    category: str
    price: str = ""


class DiscountRow(BaseModel):
    id: str
    icon: str = ""
    name: str
    description: str = ""
    note: str = ""
    qualifies: bool = False
    applicable_now: bool = False
    your_price: float = 0.0
    base_price: float = 0.0
    status_label: str = "Not eligible"
    status_variant: StatusVariant = StatusVariant.INACTIVE
    next_eligible: Optional[str] = None


class MemberNote(BaseModel):
    is_member: bool = False
    text: str = ""


class ErrorResponse(BaseModel):
    error: bool = True
    code: str = "UNKNOWN"
    message: str = ""
    details: list[str] = Field(default_factory=list)
