"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""


class InvalidTicketRule(DomainError):
    """Raised when a ticket rule record cannot be turned into a typed rule."""

    def __init__(self, rule_id: str, message: str):
        self.rule_id = rule_id
        super().__init__(f"[{rule_id or '?'}] {message}")


class InvalidDateRange(DomainError):
    """Raised when a planning range ends before it starts."""
