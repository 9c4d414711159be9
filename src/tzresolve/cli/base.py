from __future__ import annotations

import logging
import os
from collections.abc import Callable, Generator
from contextlib import contextmanager
from datetime import datetime
from typing import Any

import typer

from ..global_config import LOG_LEVEL_ENV_VAR

_LOGGING_CONFIGURED = False


def configure_logging(level: int | str | None = None) -> None:
    """Configure CLI-wide logging once.

    Sets up basic logging configuration for the CLI. Safe to call multiple
    times; only configures on first call.

    Args:
        level: Logging level. Defaults to TZRESOLVE_LOG_LEVEL, else WARNING.

    Side Effects:
        - Configures Python logging module globally.
        - Sets module-level flag to prevent reconfiguration.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    resolved = level if level is not None else os.getenv(LOG_LEVEL_ENV_VAR, "WARNING").upper()
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger hooked into the shared CLI configuration."""
    return logging.getLogger(name)


@contextmanager
def handle_errors(
    operation: str,
    *,
    logger: logging.Logger | None = None,
) -> Generator[None, None, None]:
    """Provide consistent exception handling for CLI operations.

    Context manager that catches exceptions, logs them, displays user-friendly
    error messages, and exits with code 1. Re-raises typer.Exit to allow
    normal CLI exit flow.

    Args:
        operation: Human-readable operation name for error messages.
        logger: Logger instance. Defaults to module logger if None.

    Raises:
        typer.Exit: Always exits with code 1 on exception (except typer.Exit
            which is re-raised).

    User Output:
        - Prints error message via typer.secho() in red: "✗ {operation} failed: {exc}".
    """
    logger = logger or get_logger(__name__)
    try:
        yield
    except typer.Exit:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error during %s", operation)
        typer.secho(f"✗ {operation} failed: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc


def format_result(result: Any, *, operation: str | None = None) -> str:
    """Format a resolution result into CLI-friendly text.

    Datetimes render as ISO 8601 with offset, dicts as one key per line.
    """
    op_label = operation or "Result"

    if result is None:
        return f"✗ {op_label}: no result"

    if isinstance(result, datetime):
        return f"✓ {op_label}: {result.isoformat()}"

    if isinstance(result, dict):
        lines = [f"✓ {op_label}"]
        for key, value in result.items():
            rendered = value.isoformat() if isinstance(value, datetime) else value
            lines.append(f"  {key}: {rendered}")
        return "\n".join(lines)

    return f"{op_label}: {result!r}"


class BaseCLI:
    """Utility base class for CLI command groups."""

    def __init__(self, domain: str) -> None:
        self.domain = domain
        # One child logger per command group, e.g. tzresolve.cli.base.convert
        self.logger = get_logger(f"{__name__}.{domain}")

    def handle_cli_operation(
        self,
        *,
        operation: str,
        op_callable: Callable[[], Any],
        fail_on_none: bool = False,
    ) -> Any:
        """Run an operation with consistent logging, formatting, and errors.

        Args:
            operation: Human-readable operation name for error handling.
            op_callable: Callable that performs the operation and returns
                a result.
            fail_on_none: Exit with code 1 when the operation returns None.

        Returns:
            Result from op_callable.
        """
        with handle_errors(operation, logger=self.logger):
            result = op_callable()

        if result is None and fail_on_none:
            typer.secho(format_result(result, operation=operation), fg=typer.colors.RED, err=True)
            raise typer.Exit(1)

        typer.echo(format_result(result, operation=operation))
        return result
