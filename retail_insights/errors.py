class RetailInsightsError(Exception):
    """Base class for errors raised by this package."""


class DecodeError(RetailInsightsError):
    """Raw input could not be read as tabular text at all."""
