"""Runtime configuration."""

from museum_planner.config.settings import PlannerSettings, resolve_settings

__all__ = ["PlannerSettings", "resolve_settings"]
