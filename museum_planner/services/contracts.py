"""Request/response contracts shared by the HTTP API and the CLI."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from museum_planner.domain.discounts.categories import TICKET_CATEGORY_IDS, base_price_from_admission
from museum_planner.domain.models import (
    AdmissionRow,
    DiscountRow,
    EligibilityItem,
    HoursRow,
    MemberNote,
    TicketRuleEntry,
    UserLocation,
)


class PriceRequest(BaseModel):
    venue_id: str = Field(min_length=1)
    date: dt.date
    eligibility: list[EligibilityItem] = Field(default_factory=list)
    user_location: UserLocation = Field(default_factory=UserLocation)
    ticket_rules: dict[str, TicketRuleEntry] = Field(default_factory=dict)


class DiscountRequest(BaseModel):
    venue_id: str = Field(default="museum_00001")
    hours: list[HoursRow] = Field(default_factory=list)
    eligibility: list[EligibilityItem] = Field(default_factory=list)
    admission: list[AdmissionRow] = Field(default_factory=list)
    base_price: Optional[float] = Field(default=None, ge=0, description="Derived from admission when omitted")
    ticket_category: str = Field(default="adult")
    now: Optional[dt.datetime] = Field(default=None, description="Defaults to the current time")

    @model_validator(mode="after")
    def _resolve_base_price(self) -> "DiscountRequest":
        if self.ticket_category not in TICKET_CATEGORY_IDS:
            raise ValueError(f"unknown ticket category: {self.ticket_category!r}")
        if self.base_price is None:
            self.base_price = base_price_from_admission(self.admission, self.ticket_category)
        return self


class DiscountResponse(BaseModel):
    rows: list[DiscountRow] = Field(default_factory=list)
    member_note: MemberNote = Field(default_factory=MemberNote)


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = ""


__all__ = ["DiscountRequest", "DiscountResponse", "HealthResponse", "PriceRequest"]
