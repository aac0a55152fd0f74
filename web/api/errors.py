"""API errors and validation helpers."""


class NotAvailableError(Exception):
    """Provider document is not available (not configured, or nothing cached yet)."""

    def __init__(self, message: str = "Data not available", hint: str | None = None):
        self.message = message
        self.hint = hint
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


# Daily series cover at most one year
MIN_DAYS = 1
MAX_DAYS = 365


def validate_days(days: int) -> None:
    """Validate a daily-series window length."""
    if not MIN_DAYS <= days <= MAX_DAYS:
        raise ValidationError(f"Invalid days: {days}. Must be between {MIN_DAYS} and {MAX_DAYS}")
