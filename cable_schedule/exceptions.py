"""Exception types for the cable schedule engine."""


class CableScheduleError(Exception):
    """Base class for all cable schedule errors."""
    pass


class ValidationError(CableScheduleError):
    """Raised when a caller passes arguments that cannot be repaired.

    Examples are a split count below 2 or a page size of zero. Data-quality
    problems in persisted entries are never reported this way.
    """
    pass


class ScheduleParseError(CableScheduleError):
    """Exception raised for cable schedule import errors."""
    pass


class RepositoryError(CableScheduleError):
    """Exception raised by repository implementations."""
    pass


class SettingsError(CableScheduleError):
    """Exception raised when schedule settings are invalid."""
    pass
