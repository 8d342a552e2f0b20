"""Construction errors raised by the meters."""


class OpmeterError(Exception):
    """Base class for opmeter errors."""


class InvalidThresholdError(OpmeterError, ValueError):
    """Aggregate meter threshold outside 1..=255."""


class NonPositiveIntervalError(OpmeterError, ValueError):
    """Rate meter interval is zero or negative."""
