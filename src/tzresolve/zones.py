"""Timezone lookup and DST-aware interpretation of naive wall-clock times.

This module is the single place that knows:
- Which timezone counts as "local" for the running process
- How IANA zone names are validated
- Which absolute instants a naive wall-clock time maps to in a zone

A naive wall-clock time maps to zero instants (it falls in a spring-forward
gap), one instant, or two instants (it falls in a fall-back overlap).
Callers pick among the candidates with `earliest_candidate`.
"""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime, tzinfo
from enum import Enum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tzlocal import get_localzone

from .errors import InvalidDateError, InvalidTimezoneError
from .global_config import LOCAL_TZ_ENV_VAR

logger = logging.getLogger(__name__)


class LocalTimeKind(str, Enum):
    UNIQUE = "unique"
    AMBIGUOUS = "ambiguous"
    NONEXISTENT = "nonexistent"


def parse_zone(name: str) -> ZoneInfo:
    """Look up an IANA timezone by name.

    Args:
        name: IANA timezone identifier (e.g., "America/Vancouver").

    Returns:
        ZoneInfo for the identifier.

    Raises:
        InvalidTimezoneError: If name is not a recognized IANA zone.
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidTimezoneError(f"Invalid IANA timezone: {name!r}")

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise InvalidTimezoneError(f"Invalid IANA timezone: {name}") from e


def get_local_zone() -> tzinfo:
    """Return the process's local timezone.

    The zone named by the TZRESOLVE_LOCAL_TZ environment variable wins when
    set; otherwise the host configuration is consulted through tzlocal.
    Read on every call so tests and long-lived processes see changes.

    Raises:
        InvalidTimezoneError: If the override or host zone is not recognized.
    """
    override = os.getenv(LOCAL_TZ_ENV_VAR, "").strip()
    if override:
        return parse_zone(override)

    try:
        return get_localzone()
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidTimezoneError(f"Cannot determine host timezone: {e}") from e


def convert_zone(dt: datetime, zone: tzinfo) -> datetime:
    """Convert an aware datetime to zone, rejecting results outside years 1..9999.

    Raises:
        InvalidDateError: If the converted wall-clock time is not representable.
    """
    try:
        return dt.astimezone(zone)
    except OverflowError as e:
        raise InvalidDateError(f"Date out of range after conversion to {zone}: {dt.isoformat()}") from e


def local_candidates(dt_naive: datetime, zone: tzinfo) -> tuple[datetime, ...]:
    """Return every UTC instant whose wall-clock reading in zone equals dt_naive.

    Tries both fold values and keeps those that convert back to the original
    wall-clock time.

    Args:
        dt_naive: Naive datetime (no timezone info).
        zone: Timezone to interpret dt_naive in.

    Returns:
        Tz-aware UTC datetimes in ascending order. Empty for a
        spring-forward gap, two entries for a fall-back overlap.

    Raises:
        ValueError: If dt_naive is timezone-aware.
        InvalidDateError: If dt_naive is so close to year 1 or year 9999 that
            its UTC instant is not representable.
    """
    if dt_naive.tzinfo is not None:
        raise ValueError(f"Expected naive datetime, got timezone-aware: {dt_naive}")

    candidates: list[datetime] = []
    for fold in (0, 1):
        utc_dt = convert_zone(dt_naive.replace(tzinfo=zone, fold=fold), UTC)
        # Naive comparison ignores fold, so this checks the wall-clock fields only
        if convert_zone(utc_dt, zone).replace(tzinfo=None) != dt_naive:
            continue
        if utc_dt not in candidates:
            candidates.append(utc_dt)

    return tuple(sorted(candidates))


def classify_local_time(dt_naive: datetime, zone: tzinfo) -> LocalTimeKind:
    """Classify a naive wall-clock time as unique, ambiguous or nonexistent in zone."""
    count = len(local_candidates(dt_naive, zone))
    if count == 0:
        return LocalTimeKind.NONEXISTENT
    if count == 1:
        return LocalTimeKind.UNIQUE
    return LocalTimeKind.AMBIGUOUS


def earliest_candidate(candidates: tuple[datetime, ...]) -> datetime | None:
    """Pick the instant to use for a wall-clock time.

    Policy: on a fall-back overlap the earlier of the two instants wins.
    None means the wall-clock time does not exist.
    """
    if not candidates:
        return None
    if len(candidates) > 1:
        logger.debug(
            "Ambiguous local time, choosing earlier instant %s over %s",
            candidates[0].isoformat(),
            ", ".join(c.isoformat() for c in candidates[1:]),
        )
    return min(candidates)
