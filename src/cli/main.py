"""CLI principal de datez (Typer).

    datez 2021-07-21.16:00:00 Australia/Canberra America/Caracas

El tiempo se lee en la primera zona, se convierte a UTC y se imprime en UTC,
en cada zona listada y en la zona local (si se puede descubrir).
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.markup import escape

from adapters.local_zone import LocalZoneResolver, default_sources
from adapters.zoneinfo_database import ZoneInfoDatabase
from cli.logging_setup import configure_logging
from core.config import load_settings
from core.domain.errors import DatezError
from core.services.conversion_pipeline import ConversionRequest, run_conversion

app = typer.Typer(
    add_completion=False,
    help="Show a time given in one timezone in UTC, in other timezones and in local time.",
)

_console = Console(highlight=False, soft_wrap=True, emoji=False)
_err_console = Console(stderr=True, highlight=False, soft_wrap=True)

logger = logging.getLogger(__name__)


@app.command()
def convert(
    time: str = typer.Argument(
        ...,
        metavar="TIME",
        help="ISO 8601 time without UTC offset, e.g. 2021-07-21.16:00:00 or 2021-07-21T16:00:00.",
    ),
    zones: list[str] = typer.Argument(
        ...,
        metavar="ZONE...",
        help="tz database names; TIME is read in the first one.",
    ),
    no_local: bool = typer.Option(
        False,
        "--no-local",
        help="Do not append the local timezone.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Verbose logs on stderr.",
    ),
) -> None:
    """Convert TIME, read in the first ZONE, to UTC, every ZONE and local time."""

    try:
        settings = load_settings()
        configure_logging("DEBUG" if debug else settings.log_level)

        database = ZoneInfoDatabase()
        resolver = LocalZoneResolver(default_sources(settings), database)
        request = ConversionRequest(
            time=time,
            zones=zones,
            include_local=settings.show_local and not no_local,
        )
        result = run_conversion(request, database, resolver)
    except DatezError as exc:
        logger.debug("conversion failed", exc_info=True)
        _err_console.print(f"[bold red]error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=exc.exit_code) from exc

    for line in result.lines():
        _console.print(line, markup=False)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
