"""
tzresolve core package.

Resolves partially-specified date inputs into canonical local instants:
- Calendar date + hour hint (+ optional IANA zone) -> local datetime (`tzresolve.resolver`)
- DST gap/overlap detection and the earlier-instant policy (`tzresolve.zones`)
- Epoch seconds, offset-stripped timestamps, exact fields (`tzresolve.conversions`)
- numpy.datetime64 bridging (`tzresolve.bridge`)
- A minimal Typer-based CLI (`tzresolve.cli`)

Configuration:
- Shared constants and environment variable names live in `tzresolve.global_config`.
"""

from .bridge import (
    date_to_datetime64,
    datetime64_to_date,
    datetime64_to_instant,
    instant_to_datetime64,
)
from .conversions import construct_exact, from_epoch_seconds, from_offset_text
from .errors import (
    DateTimeConversionError,
    DateTimeError,
    DateTimeParseError,
    InvalidDateError,
    InvalidTimezoneError,
    NonexistentLocalTimeError,
)
from .resolver import (
    HourSelector,
    parse_calendar_date,
    resolve,
    resolve_from_text,
    resolve_from_text_american,
    resolve_from_text_iso,
)
from .zones import (
    LocalTimeKind,
    classify_local_time,
    earliest_candidate,
    get_local_zone,
    local_candidates,
    parse_zone,
)

__all__ = [
    # Resolver
    "HourSelector",
    "parse_calendar_date",
    "resolve",
    "resolve_from_text",
    "resolve_from_text_american",
    "resolve_from_text_iso",
    # Zones
    "LocalTimeKind",
    "classify_local_time",
    "earliest_candidate",
    "get_local_zone",
    "local_candidates",
    "parse_zone",
    # Conversions
    "construct_exact",
    "from_epoch_seconds",
    "from_offset_text",
    # numpy bridge
    "date_to_datetime64",
    "datetime64_to_date",
    "datetime64_to_instant",
    "instant_to_datetime64",
    # Errors
    "DateTimeConversionError",
    "DateTimeError",
    "DateTimeParseError",
    "InvalidDateError",
    "InvalidTimezoneError",
    "NonexistentLocalTimeError",
]
