class AmlichError(Exception):
    """Base error."""

class InvalidLunarDateError(AmlichError, ValueError):
    """Raised when a (day, month, year[, leap]) label has no civil date."""

class InternalInvariantError(AmlichError, AssertionError):
    """A bounded search overran its bound, or a computed label is impossible.

    Signals a defect in the new-moon/anchor arithmetic, never bad input.
    """

class EngineUnavailableError(AmlichError, RuntimeError):
    """Raised when an optional backend (e.g. the DE422 ephemeris) is not available."""
