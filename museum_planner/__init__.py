"""Eligibility-aware museum ticket pricing and visit planning."""

__version__ = "0.1.0"
