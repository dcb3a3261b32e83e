class SunclockError(Exception):
    """Base error."""

class UnknownZenithError(SunclockError, ValueError):
    """Raised when a zenith name does not match one of the four presets."""

class UnknownPlaceError(SunclockError, KeyError):
    """Raised when a place preset is not registered."""

class EventDoesNotOccurError(SunclockError):
    """Raised when a clock time is requested for a rise/set that never happens."""
