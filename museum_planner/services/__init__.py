"""Use-case services over the planning engine."""

from museum_planner.services.plan_service import discounts_for_venue, execute_plan, price_venue

__all__ = ["discounts_for_venue", "execute_plan", "price_venue"]
