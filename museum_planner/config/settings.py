"""Environment-driven runtime settings."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from museum_planner.domain.constants import DEFAULT_CURRENCY
from museum_planner.domain.discounts.calendar import DEFAULT_TIMEZONE

_TRUTHY = {"1", "true", "yes", "on"}


def _is_enabled(value: str | None, default: bool = False) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


class PlannerSettings(BaseModel):
    timezone: str = Field(default=DEFAULT_TIMEZONE)
    default_currency: str = Field(default=DEFAULT_CURRENCY)
    log_json: bool = Field(default=True)
    rate_limit_max: int = Field(default=60)
    rate_limit_window: int = Field(default=60)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    enable_docs: bool = Field(default=False)


def resolve_settings() -> PlannerSettings:
    origins = [item.strip() for item in os.getenv("CORS_ORIGINS", "*").split(",") if item.strip()]
    return PlannerSettings(
        timezone=os.getenv("PLANNER_TIMEZONE", "").strip() or DEFAULT_TIMEZONE,
        default_currency=os.getenv("PLANNER_DEFAULT_CURRENCY", "").strip() or DEFAULT_CURRENCY,
        log_json=_is_enabled(os.getenv("PLANNER_LOG_JSON"), default=True),
        rate_limit_max=_int_env("RATE_LIMIT_MAX", 60),
        rate_limit_window=_int_env("RATE_LIMIT_WINDOW", 60),
        cors_origins=origins or ["*"],
        enable_docs=_is_enabled(os.getenv("ENABLE_DOCS")),
    )


__all__ = ["PlannerSettings", "resolve_settings"]
