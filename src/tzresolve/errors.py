"""Exception types for date/time resolution."""

from __future__ import annotations


class DateTimeError(ValueError):
    """Base exception for date/time resolution errors."""


class DateTimeParseError(DateTimeError):
    """Raised when text does not match the expected date or timestamp format."""


class InvalidTimezoneError(DateTimeParseError):
    """Raised when a zone identifier is not a recognized IANA timezone."""


class DateTimeConversionError(DateTimeError):
    """Raised when a wall-clock moment cannot be mapped to an absolute instant."""


class NonexistentLocalTimeError(DateTimeConversionError):
    """Raised when a wall-clock time falls in a DST gap of its zone.

    Example: 2021-03-14 02:30 in America/New_York, where clocks jump from
    02:00 to 03:00. No instant has that reading, so nothing is returned.
    """


class InvalidDateError(DateTimeError):
    """Raised when a date is outside the valid range of the representation involved."""
