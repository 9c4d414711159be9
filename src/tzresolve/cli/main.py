from __future__ import annotations

from typing import Annotated

import typer

from ..global_config import LOCAL_TZ_ENV_VAR
from ..zones import get_local_zone
from .base import BaseCLI, configure_logging
from .commands.convert import app as convert_app

configure_logging()
app = typer.Typer(
    help="Resolve partially-specified dates into local instants",
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(convert_app, name="convert")


@app.command("zone")
def zone(
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show where the zone came from"),
    ] = False,
) -> None:
    """Display the local timezone used for every conversion."""
    cli = BaseCLI("zone")

    def _zone() -> dict:
        result: dict = {"local_zone": str(get_local_zone())}
        if verbose:
            result["override_variable"] = LOCAL_TZ_ENV_VAR
        return result

    cli.handle_cli_operation(operation="zone", op_callable=_zone)


def main() -> None:
    """Main entry point for package CLI.

    Invokes the Typer application, which handles command parsing and
    execution.
    """
    app()


if __name__ == "__main__":
    main()
