"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from adapters.local_zone import LocalZoneResolver, default_sources
from adapters.zoneinfo_database import ZoneInfoDatabase
from cli.ui_components import build_database_table, build_sources_table
from core.config import load_settings, write_user_env_vars
from core.domain.errors import DatezError

app = typer.Typer(no_args_is_help=True, help="Timezone database and local zone diagnostics.")

_console = Console()
_err_console = Console(stderr=True, highlight=False, soft_wrap=True)


@app.command()
def run() -> None:
    """Show where zone rules come from and how the local zone is discovered."""

    try:
        settings = load_settings()
    except DatezError as exc:
        _err_console.print(f"[bold red]error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=exc.exit_code) from exc

    database = ZoneInfoDatabase()
    resolver = LocalZoneResolver(default_sources(settings), database)

    _console.print(build_database_table(database.source_summary()))

    reports = resolver.inspect()
    _console.print(build_sources_table(reports))

    local_zone = next((r.accepted for r in reports if r.accepted), None)
    if local_zone:
        _console.print(f"[green]Local zone:[/green] {local_zone}")
    else:
        _console.print(
            "[yellow]Local zone unresolved.[/yellow] Set TZ or run `datez-doctor set-local <ZONE>`."
        )


@app.command(name="set-local")
def set_local(
    zone: str = typer.Argument(..., metavar="ZONE", help="tz database name, e.g. Europe/London."),
) -> None:
    """Store ZONE as the local zone in the user config .env."""

    database = ZoneInfoDatabase()
    if not database.contains(zone):
        raise typer.BadParameter(f"unknown timezone {zone!r}", param_hint="ZONE")

    env_path = write_user_env_vars({"DATEZ_LOCAL_ZONE": zone})
    _console.print(f"[green]Saved local zone to:[/green] {env_path}")
