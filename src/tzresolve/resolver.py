"""Resolve a calendar date plus an hour hint into a local instant.

The resolver turns (date, hour selector, optional IANA zone) into exactly one
timezone-aware datetime expressed in the process's local timezone:
- The hour selector picks either hh:00:00.000 or the end of the day (23:59:59.999)
- The wall-clock time is interpreted in the named zone, or the local zone
- DST gaps fail with NonexistentLocalTimeError
- DST overlaps resolve to the earlier of the two instants
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, tzinfo

from .errors import DateTimeParseError, InvalidDateError, NonexistentLocalTimeError
from .global_config import (
    AMERICAN_DATE_FORMAT,
    END_OF_DAY_HOUR,
    END_OF_DAY_TIME,
    ISO_DATE_FORMAT,
)
from .zones import convert_zone, earliest_candidate, get_local_zone, local_candidates, parse_zone


@dataclass(frozen=True)
class HourSelector:
    """Hour-of-day hint: a specific hour (0-23) or the end of the day.

    `hour is None` means end of day.
    """

    hour: int | None

    def __post_init__(self) -> None:
        if self.hour is not None and not 0 <= self.hour <= 23:
            raise InvalidDateError(f"Hour must be between 0 and 23, got {self.hour}")

    @classmethod
    def at(cls, hour: int) -> HourSelector:
        return cls(hour)

    @classmethod
    def end_of_day(cls) -> HourSelector:
        return cls(None)

    @classmethod
    def coerce(cls, value: int | HourSelector) -> HourSelector:
        """Accept a selector or a plain integer hour (>= 24 means end of day)."""
        if isinstance(value, HourSelector):
            return value
        if value < 0:
            raise InvalidDateError(f"Hour must be non-negative, got {value}")
        if value >= END_OF_DAY_HOUR:
            return cls.end_of_day()
        return cls.at(value)

    @property
    def is_end_of_day(self) -> bool:
        return self.hour is None

    def wall_time(self) -> time:
        if self.hour is None:
            return END_OF_DAY_TIME
        return time(self.hour)


def parse_calendar_date(text: str, fmt: str) -> date:
    """Parse a calendar date from text using a strptime pattern.

    Args:
        text: Date text (e.g., "02-10-2020").
        fmt: strptime pattern (e.g., "%m-%d-%Y").

    Returns:
        Parsed date.

    Raises:
        DateTimeParseError: If text does not match fmt or names an invalid
            date (month 13, February 30, ...).
    """
    try:
        return datetime.strptime(text, fmt).date()
    except (ValueError, TypeError) as e:
        raise DateTimeParseError(f"Cannot parse date {text!r} with format {fmt!r}") from e


def resolve(
    day: date,
    hour: int | HourSelector,
    zone: str | None = None,
    *,
    local_tz: tzinfo | None = None,
) -> datetime:
    """Convert a calendar date at the given hour to a local instant.

    Args:
        day: Calendar date.
        hour: Hour selector, or an integer hour where values >= 24 mean end
            of day (23:59:59.999).
        zone: IANA zone the wall-clock time belongs to. None means the local
            zone.
        local_tz: Local zone to use. Defaults to get_local_zone().

    Returns:
        Tz-aware datetime in the local zone.

    Raises:
        InvalidTimezoneError: If zone is not a valid IANA zone.
        NonexistentLocalTimeError: If the wall-clock time falls in a DST gap.
        InvalidDateError: If hour is negative, or the date is so close to
            year 1 or year 9999 that the instant is not representable.
    """
    selector = HourSelector.coerce(hour)
    # Validate the zone before interpreting anything
    source_zone = parse_zone(zone) if zone is not None else None
    target_zone = local_tz if local_tz is not None else get_local_zone()

    dt_naive = datetime.combine(day, selector.wall_time())
    interpret_in = source_zone if source_zone is not None else target_zone

    instant = earliest_candidate(local_candidates(dt_naive, interpret_in))
    if instant is None:
        raise NonexistentLocalTimeError(
            f"Nonexistent local time: {dt_naive.isoformat()} in {interpret_in}"
        )
    return convert_zone(instant, target_zone)


def resolve_from_text(
    text: str,
    fmt: str,
    hour: int | HourSelector,
    zone: str | None = None,
    *,
    local_tz: tzinfo | None = None,
) -> datetime:
    """Parse text with fmt, then resolve it as in `resolve`."""
    return resolve(parse_calendar_date(text, fmt), hour, zone, local_tz=local_tz)


def resolve_from_text_american(
    text: str,
    hour: int | HourSelector,
    zone: str | None = None,
    *,
    local_tz: tzinfo | None = None,
) -> datetime:
    """Resolve a month-day-year date such as "02-10-2020"."""
    return resolve_from_text(text, AMERICAN_DATE_FORMAT, hour, zone, local_tz=local_tz)


def resolve_from_text_iso(
    text: str,
    hour: int | HourSelector,
    zone: str | None = None,
    *,
    local_tz: tzinfo | None = None,
) -> datetime:
    """Resolve a year-month-day date such as "2020-02-10"."""
    return resolve_from_text(text, ISO_DATE_FORMAT, hour, zone, local_tz=local_tz)
