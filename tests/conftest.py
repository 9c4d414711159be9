from __future__ import annotations

from zoneinfo import ZoneInfo

import pytest

from tzresolve.global_config import LOCAL_TZ_ENV_VAR

# America/New_York transitions used throughout the tests:
# - 2021-03-14 02:00 -> 03:00 (02:xx does not exist)
# - 2021-11-07 02:00 -> 01:00 (01:xx happens twice)
LOCAL_ZONE_NAME = "America/New_York"


@pytest.fixture(autouse=True)
def fixed_local_zone(monkeypatch: pytest.MonkeyPatch) -> str:
    """
    Pins the "local" timezone so results do not depend on the host running the tests.
    Automatically applied to all tests.
    """
    monkeypatch.setenv(LOCAL_TZ_ENV_VAR, LOCAL_ZONE_NAME)
    return LOCAL_ZONE_NAME


@pytest.fixture
def local_zone() -> ZoneInfo:
    return ZoneInfo(LOCAL_ZONE_NAME)


@pytest.fixture
def utc_zone() -> ZoneInfo:
    return ZoneInfo("UTC")
