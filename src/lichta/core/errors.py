class LichTaError(Exception):
    """Base error."""

class InvalidDate(LichTaError, ValueError):
    """Raised when a (year, month, day) triple does not denote a real calendar date."""

class AstronomicalRangeError(LichTaError, ValueError):
    """Raised when a date lies outside the span the truncated series are validated for."""
