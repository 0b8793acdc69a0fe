"""Geometry helpers used by the planning strategies."""

from museum_planner.planner.distance import haversine, venue_distance

__all__ = ["haversine", "venue_distance"]
