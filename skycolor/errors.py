"""Error types raised by the sky color engine."""


class FormatError(ValueError):
    """Malformed hex color or time-of-day string."""


class InvariantError(RuntimeError):
    """A lookup table has no entry for a value the classifier produced."""
