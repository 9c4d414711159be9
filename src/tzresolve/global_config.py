"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only simple,
shared constants that many modules can import: the date patterns used by
the preset parsers and the environment variables the package reads.
"""

from datetime import time

# Date patterns (strptime mini-language)
AMERICAN_DATE_FORMAT = "%m-%d-%Y"  # 02-10-2020
ISO_DATE_FORMAT = "%Y-%m-%d"  # 2020-02-10

# Stored timestamps with the UTC offset stripped, e.g. 2020-02-10 18:00:00.123
OFFSET_TEXT_FORMAT = "%Y-%m-%d %H:%M:%S.%f%z"

# Wall time used for the end-of-day hour selector (last millisecond of the day)
END_OF_DAY_TIME = time(23, 59, 59, 999_000)
END_OF_DAY_HOUR = 24

# Environment variables (read at call time, never cached)
LOCAL_TZ_ENV_VAR = "TZRESOLVE_LOCAL_TZ"
LOG_LEVEL_ENV_VAR = "TZRESOLVE_LOG_LEVEL"
