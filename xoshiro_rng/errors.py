class RandomError(Exception):
    """Base error for the xoshiro_rng package."""


class InvalidRangeError(RandomError, ValueError):
    """Raised by the checked helpers for an empty or inverted range."""


class RangeOverflowError(RandomError, OverflowError):
    """Raised by the checked helpers when a span does not fit in 64 bits."""


class InvalidStateError(RandomError, ValueError):
    """Raised when restoring a state vector that is malformed or all zero."""


class UnknownVariantError(RandomError, KeyError):
    """Raised when a generator flavor name is not registered."""


class ConfigError(RandomError, ValueError):
    """Raised when a sampling run is configured inconsistently."""
