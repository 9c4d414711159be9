"""Direct conversions to local instants that need no hour selector."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, tzinfo

from .errors import DateTimeParseError, InvalidDateError
from .global_config import OFFSET_TEXT_FORMAT
from .zones import convert_zone, earliest_candidate, get_local_zone, local_candidates

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def _target_zone(local_tz: tzinfo | None) -> tzinfo:
    return local_tz if local_tz is not None else get_local_zone()


def from_epoch_seconds(seconds: int, *, local_tz: tzinfo | None = None) -> datetime:
    """Convert seconds since 1970-01-01T00:00:00Z to a local instant.

    Raises:
        InvalidDateError: If seconds is negative or beyond the datetime range,
            including after conversion to the local zone.
    """
    if seconds < 0:
        raise InvalidDateError(f"Epoch seconds must be non-negative, got {seconds}")
    try:
        instant = UNIX_EPOCH + timedelta(seconds=seconds)
    except OverflowError as e:
        raise InvalidDateError(f"Epoch seconds out of range: {seconds}") from e
    return convert_zone(instant, _target_zone(local_tz))


def format_offset(offset_minutes: int) -> str:
    """Render a signed minute offset as +HHMM / -HHMM."""
    sign = "-" if offset_minutes < 0 else "+"
    hours, minutes = divmod(abs(offset_minutes), 60)
    return f"{sign}{hours:02d}{minutes:02d}"


def from_offset_text(
    text: str,
    offset_minutes: int = 0,
    *,
    local_tz: tzinfo | None = None,
) -> datetime:
    """Parse a timestamp whose UTC offset was stripped, re-attaching the offset.

    Storage layers that drop the offset return text such as
    "2020-02-10 18:00:00.123"; the caller knows the offset it was written with.

    Args:
        text: Timestamp text, YYYY-MM-DD HH:MM:SS.fff (1-6 fractional digits).
        offset_minutes: Signed UTC offset of text in minutes. Defaults to 0 (UTC).
        local_tz: Local zone to use. Defaults to get_local_zone().

    Returns:
        Tz-aware datetime in the local zone.

    Raises:
        DateTimeParseError: If the text with the offset spliced on does not
            parse as a fixed-offset timestamp.
        InvalidDateError: If the local wall-clock time is outside years 1..9999.
    """
    stamped = f"{text}{format_offset(offset_minutes)}"
    try:
        parsed = datetime.strptime(stamped, OFFSET_TEXT_FORMAT)
    except (ValueError, TypeError) as e:
        raise DateTimeParseError(f"Cannot parse timestamp: {stamped!r}") from e
    return convert_zone(parsed, _target_zone(local_tz))


def construct_exact(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    *,
    local_tz: tzinfo | None = None,
) -> datetime | None:
    """Build a local instant from explicit wall-clock fields.

    The fields are interpreted in the local zone. Returns None when they do
    not form a valid date/time, the local time falls in a DST gap, or the
    instant is outside the representable range. On a DST overlap the earlier
    instant is returned.
    """
    try:
        dt_naive = datetime(year, month, day, hour, minute, second)
    except (ValueError, OverflowError):
        return None

    zone = _target_zone(local_tz)
    try:
        instant = earliest_candidate(local_candidates(dt_naive, zone))
        if instant is None:
            return None
        return convert_zone(instant, zone)
    except InvalidDateError:
        return None
