"""CLI tests for the convert and zone commands."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from tzresolve.cli.main import app

runner = CliRunner()


@pytest.mark.integration
def test_resolve_american_format() -> None:
    result = runner.invoke(
        app, ["convert", "resolve", "02-10-2020", "--format", "american", "--hour", "18"]
    )
    assert result.exit_code == 0, result.output
    assert "2020-02-10T18:00:00-05:00" in result.output


@pytest.mark.integration
def test_resolve_custom_pattern() -> None:
    result = runner.invoke(app, ["convert", "resolve", "10-2020-02", "-f", "%d-%Y-%m", "--hour", "18"])
    assert result.exit_code == 0, result.output
    assert "2020-02-10T18:00:00-05:00" in result.output


@pytest.mark.integration
def test_resolve_end_of_day_in_foreign_zone() -> None:
    result = runner.invoke(
        app, ["convert", "resolve", "2020-02-10", "--end-of-day", "--zone", "Asia/Tokyo"]
    )
    assert result.exit_code == 0, result.output
    assert "2020-02-10T09:59:59.999000-05:00" in result.output


@pytest.mark.integration
def test_resolve_hour_sentinel() -> None:
    result = runner.invoke(app, ["convert", "resolve", "2020-02-10", "--hour", "24"])
    assert result.exit_code == 0, result.output
    assert "2020-02-10T23:59:59.999000-05:00" in result.output


@pytest.mark.integration
def test_resolve_invalid_zone_fails() -> None:
    result = runner.invoke(app, ["convert", "resolve", "2020-02-10", "--zone", "Bogus/Zone"])
    assert result.exit_code == 1
    assert "✗ resolve failed" in result.output
    assert "Invalid IANA timezone" in result.output


@pytest.mark.integration
def test_resolve_nonexistent_fails() -> None:
    result = runner.invoke(app, ["convert", "resolve", "2021-03-14", "--hour", "2"])
    assert result.exit_code == 1
    assert "Nonexistent local time" in result.output


@pytest.mark.integration
def test_resolve_invalid_date_fails() -> None:
    result = runner.invoke(app, ["convert", "resolve", "2020-02-30"])
    assert result.exit_code == 1
    assert "Cannot parse date" in result.output


@pytest.mark.integration
def test_epoch() -> None:
    result = runner.invoke(app, ["convert", "epoch", "1587099600"])
    assert result.exit_code == 0, result.output
    assert "2020-04-17T01:00:00-04:00" in result.output


@pytest.mark.integration
def test_offset() -> None:
    result = runner.invoke(
        app, ["convert", "offset", "2020-02-10 18:00:00.000", "--minutes=-300"]
    )
    assert result.exit_code == 0, result.output
    assert "2020-02-10T18:00:00-05:00" in result.output


@pytest.mark.integration
def test_exact_valid() -> None:
    result = runner.invoke(app, ["convert", "exact", "2021", "11", "7", "1", "30", "0"])
    assert result.exit_code == 0, result.output
    assert "2021-11-07T01:30:00-04:00" in result.output


@pytest.mark.integration
def test_exact_nonexistent_fails() -> None:
    result = runner.invoke(app, ["convert", "exact", "2021", "3", "14", "2", "30", "0"])
    assert result.exit_code == 1
    assert "no result" in result.output


@pytest.mark.integration
def test_zone_command(fixed_local_zone: str) -> None:
    result = runner.invoke(app, ["zone", "--verbose"])
    assert result.exit_code == 0, result.output
    assert fixed_local_zone in result.output
    assert "TZRESOLVE_LOCAL_TZ" in result.output


@pytest.mark.integration
def test_failure_logged_under_command_logger(caplog: pytest.LogCaptureFixture) -> None:
    result = runner.invoke(app, ["convert", "resolve", "2020-02-10", "--zone", "Bogus/Zone"])
    assert result.exit_code == 1
    (record,) = [r for r in caplog.records if r.name == "tzresolve.cli.base.convert"]
    assert record.getMessage() == "Error during resolve"
