"""Bridging between Python date/datetime values and numpy.datetime64.

numpy stores dates as integer counts since the UNIX epoch, so its supported
range differs from Python's:
- datetime64[D] covers years far outside datetime.date's 1..9999
- datetime64[ns] only covers roughly 1677-09-21 .. 2262-04-11

Conversions that fall outside the target's range raise InvalidDateError
instead of wrapping or clamping.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, tzinfo

import numpy as np

from .errors import InvalidDateError
from .zones import convert_zone, get_local_zone

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_INT64_MIN = np.iinfo(np.int64).min
_INT64_MAX = np.iinfo(np.int64).max


def _ensure_datetime64(value: np.datetime64) -> np.datetime64:
    if not isinstance(value, np.datetime64):
        raise TypeError(f"Expected numpy.datetime64, got {type(value).__name__}")
    if np.isnat(value):
        raise InvalidDateError("Cannot convert NaT")
    return value


def date_to_datetime64(d: date) -> np.datetime64:
    """Convert a calendar date to a day-resolution numpy.datetime64."""
    if isinstance(d, datetime):
        d = d.date()
    return np.datetime64(d.isoformat(), "D")


def datetime64_to_date(value: np.datetime64) -> date:
    """Convert a numpy.datetime64 (any unit, truncated to days) to a calendar date.

    Raises:
        InvalidDateError: If value is NaT or its year is outside 1..9999.
    """
    value = _ensure_datetime64(value)
    days = int(value.astype("datetime64[D]").astype(np.int64))
    try:
        return date(1970, 1, 1) + timedelta(days=days)
    except OverflowError as e:
        raise InvalidDateError(f"Date out of range for datetime.date: {value}") from e


def instant_to_datetime64(dt: datetime) -> np.datetime64:
    """Convert an aware datetime to a UTC-based nanosecond numpy.datetime64.

    Raises:
        ValueError: If dt is naive.
        InvalidDateError: If dt is outside the datetime64[ns] range.
    """
    if dt.tzinfo is None:
        raise ValueError(f"Expected timezone-aware datetime, got naive: {dt}")

    # Exact integer arithmetic; float timestamps lose sub-microsecond precision
    delta = convert_zone(dt, UTC) - _EPOCH
    nanos = (delta.days * 86_400 + delta.seconds) * 1_000_000_000 + delta.microseconds * 1_000
    if not _INT64_MIN < nanos <= _INT64_MAX:
        raise InvalidDateError(f"Instant out of range for datetime64[ns]: {dt.isoformat()}")
    return np.datetime64(nanos, "ns")


def datetime64_to_instant(value: np.datetime64, *, local_tz: tzinfo | None = None) -> datetime:
    """Interpret a numpy.datetime64 as UTC and return it in the local zone.

    Sub-microsecond precision is truncated.

    Raises:
        InvalidDateError: If value is NaT or outside the datetime range.
    """
    value = _ensure_datetime64(value)
    micros = int(value.astype("datetime64[us]").astype(np.int64))
    zone = local_tz if local_tz is not None else get_local_zone()
    try:
        return (_EPOCH + timedelta(microseconds=micros)).astimezone(zone)
    except OverflowError as e:
        raise InvalidDateError(f"Instant out of range for datetime: {value}") from e
