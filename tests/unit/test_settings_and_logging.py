"""Settings resolution and structured logger tests."""

from __future__ import annotations

import io
import json

import pytest
from pydantic import ValidationError

from museum_planner.config.settings import resolve_settings
from museum_planner.domain.discounts.categories import TICKET_CATEGORIES, base_price_from_admission
from museum_planner.domain.models import AdmissionRow
from museum_planner.infrastructure.logging import StructuredLogger
from museum_planner.services.contracts import DiscountRequest


def test_settings_defaults():
    settings = resolve_settings()
    assert settings.timezone == "America/Chicago"
    assert settings.default_currency == "USD"
    assert settings.cors_origins == ["*"]
    assert settings.enable_docs is False


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PLANNER_TIMEZONE", "America/New_York")
    monkeypatch.setenv("RATE_LIMIT_MAX", "not-a-number")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("ENABLE_DOCS", "yes")
    monkeypatch.setenv("PLANNER_DEFAULT_CURRENCY", "EUR")
    settings = resolve_settings()
    assert settings.timezone == "America/New_York"
    assert settings.rate_limit_max == 60
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
    assert settings.enable_docs is True
    assert settings.default_currency == "EUR"
    assert settings.log_json is False


def test_structured_logger_emits_json_lines():
    buffer = io.StringIO()
    logger = StructuredLogger(trace_id="abc", output=buffer)
    logger.start("plan", mode="money")
    logger.end("plan", days=3)
    lines = [json.loads(line) for line in buffer.getvalue().splitlines()]
    assert [line["event"] for line in lines] == ["plan_start", "plan_end"]
    assert all(line["trace_id"] == "abc" for line in lines)
    assert lines[1]["days"] == 3
    assert lines[1]["duration_ms"] >= 0


def test_disabled_logger_writes_nothing():
    buffer = io.StringIO()
    StructuredLogger(output=buffer, enabled=False).event("price_resolved")
    assert buffer.getvalue() == ""


def test_base_price_from_admission_table():
    admission = [
        AdmissionRow(category="Adult", price="$32"),
        AdmissionRow(category="Students", price="$26.50"),
        AdmissionRow(category="Children", price="Free"),
    ]
    assert base_price_from_admission(admission, "adult") == 32
    assert base_price_from_admission(admission, "student") == 26.5
    assert base_price_from_admission(admission, "child") == 0
    assert base_price_from_admission(admission, "senior") == 40
    assert [c.id for c in TICKET_CATEGORIES] == ["adult", "senior", "student", "teen", "child"]


def test_discount_request_derives_base_price_from_admission():
    admission = [{"category": "Adult", "price": "$32"}, {"category": "Teens (14–17)", "price": "$26"}]
    assert DiscountRequest(admission=admission).base_price == 32
    assert DiscountRequest(admission=admission, ticket_category="teen").base_price == 26
    assert DiscountRequest(admission=admission, base_price=12).base_price == 12
    assert DiscountRequest().base_price == 40


def test_discount_request_rejects_unknown_ticket_category():
    with pytest.raises(ValidationError, match="unknown ticket category"):
        DiscountRequest(ticket_category="vip")
