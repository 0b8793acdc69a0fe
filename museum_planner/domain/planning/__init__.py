"""Deterministic visit planning."""

from museum_planner.domain.planning.plan import build_ticket_plan, date_range, generate_plan

__all__ = ["build_ticket_plan", "date_range", "generate_plan"]
