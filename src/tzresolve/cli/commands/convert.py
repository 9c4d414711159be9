"""Conversion commands: resolve dates, epoch seconds, offset text and exact fields."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

import typer

from ...conversions import construct_exact, from_epoch_seconds, from_offset_text
from ...global_config import AMERICAN_DATE_FORMAT, ISO_DATE_FORMAT
from ...resolver import HourSelector, resolve_from_text
from ..base import BaseCLI

app = typer.Typer(
    name="convert",
    help="Resolve date inputs into local instants",
)

FORMAT_PRESETS = {
    "iso": ISO_DATE_FORMAT,
    "american": AMERICAN_DATE_FORMAT,
}


def _format_pattern(fmt: str) -> str:
    return FORMAT_PRESETS.get(fmt.lower(), fmt)


@app.command("resolve")
def resolve_command(
    date_text: Annotated[
        str,
        typer.Argument(help="Calendar date text, e.g. 2020-02-10"),
    ],
    fmt: Annotated[
        str,
        typer.Option(
            "-f",
            "--format",
            help="Date pattern: 'iso', 'american' or a strptime pattern such as '%d-%Y-%m'",
        ),
    ] = "iso",
    hour: Annotated[
        int,
        typer.Option("--hour", min=0, help="Hour of day (0-23); 24 or more means end of day"),
    ] = 0,
    end_of_day: Annotated[
        bool,
        typer.Option("--end-of-day", help="Use 23:59:59.999 instead of --hour"),
    ] = False,
    zone: Annotated[
        str | None,
        typer.Option("-z", "--zone", help="IANA zone of the date (default: local zone)"),
    ] = None,
) -> None:
    """Resolve a calendar date at an hour into a local instant.

    Wall-clock times that occur twice (DST fall-back) resolve to the earlier
    instant; wall-clock times skipped by DST spring-forward fail.
    """
    cli = BaseCLI("convert")
    selector = HourSelector.end_of_day() if end_of_day else hour

    def _resolve() -> datetime:
        return resolve_from_text(date_text, _format_pattern(fmt), selector, zone)

    cli.handle_cli_operation(operation="resolve", op_callable=_resolve)


@app.command("epoch")
def epoch_command(
    seconds: Annotated[
        int,
        typer.Argument(min=0, help="Seconds since 1970-01-01T00:00:00Z"),
    ],
) -> None:
    """Convert UNIX epoch seconds into a local instant."""
    cli = BaseCLI("convert")
    cli.handle_cli_operation(operation="epoch", op_callable=lambda: from_epoch_seconds(seconds))


@app.command("offset")
def offset_command(
    text: Annotated[
        str,
        typer.Argument(help="Timestamp without offset, e.g. '2020-02-10 18:00:00.000'"),
    ],
    minutes: Annotated[
        int,
        typer.Option("-m", "--minutes", help="Signed UTC offset of TEXT in minutes"),
    ] = 0,
) -> None:
    """Attach a UTC offset to an offset-stripped timestamp and convert to local time."""
    cli = BaseCLI("convert")
    cli.handle_cli_operation(
        operation="offset",
        op_callable=lambda: from_offset_text(text, minutes),
    )


@app.command("exact")
def exact_command(
    year: Annotated[int, typer.Argument()],
    month: Annotated[int, typer.Argument()],
    day: Annotated[int, typer.Argument()],
    hour: Annotated[int, typer.Argument()] = 0,
    minute: Annotated[int, typer.Argument()] = 0,
    second: Annotated[int, typer.Argument()] = 0,
) -> None:
    """Build a local instant from explicit wall-clock fields.

    Exits with code 1 when the fields are not a valid date/time or the local
    time does not exist.
    """
    cli = BaseCLI("convert")
    cli.handle_cli_operation(
        operation="exact",
        op_callable=lambda: construct_exact(year, month, day, hour, minute, second),
        fail_on_none=True,
    )
