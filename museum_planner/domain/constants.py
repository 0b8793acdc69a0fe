"""Domain constants shared by deterministic logic."""

MAX_VENUES_PER_DAY = 2
SUGGESTED_DURATION_HOURS = 2.0

SENIOR_MIN_AGE = 65

# Money-mode scoring
FREE_SCORE = 100.0
UNKNOWN_PRICE_SCORE = 5.0

DEFAULT_CURRENCY = "USD"
RULES_NOT_AVAILABLE_NOTE = "Ticket rules not available yet"
