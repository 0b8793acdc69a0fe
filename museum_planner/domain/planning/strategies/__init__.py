"""Scheduling strategies, one per planning mode."""

from museum_planner.domain.enums import PlanMode
from museum_planner.domain.planning.strategies.base import SchedulingStrategy
from museum_planner.domain.planning.strategies.money import MoneyStrategy
from museum_planner.domain.planning.strategies.time import TimeStrategy


def strategy_for(mode: PlanMode) -> SchedulingStrategy:
    if mode == PlanMode.TIME:
        return TimeStrategy()
    return MoneyStrategy()


__all__ = ["MoneyStrategy", "SchedulingStrategy", "TimeStrategy", "strategy_for"]
