class DateTransError(Exception):
    """Base error."""

class OutOfRangeError(DateTransError, OverflowError):
    """Raised when a computed date cannot be represented by the host date type."""
