"""Domain enums."""

from enum import Enum


class RuleKind(str, Enum):
    FREE = "free"
    DISCOUNT = "discount"


class WeekRule(str, Enum):
    FIRST_SUNDAY = "first_sunday"
    FIRST_SATURDAY = "first_saturday"
    FIRST_FULL_WEEKEND = "first_full_weekend"


class Confidence(str, Enum):
    HIGH = "high"
    LOW = "low"
    UNKNOWN = "unknown"


class PlanMode(str, Enum):
    MONEY = "money"
    TIME = "time"


class OpenState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    UNKNOWN = "unknown"


class StatusVariant(str, Enum):
    VALID = "valid"
    INACTIVE = "inactive"
    SEASONAL = "seasonal"
    INFO = "info"
