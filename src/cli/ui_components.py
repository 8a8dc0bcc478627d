"""Componentes de UI para la CLI (Rich).

Tablas reutilizables por `datez-doctor`; la salida de conversión es texto
plano y no pasa por aquí.
"""

from __future__ import annotations

from rich.table import Table

from adapters.local_zone import SourceReport


def build_database_table(summary: dict[str, str]) -> Table:
    """Tabla con el origen de las reglas de zonas horarias."""

    table = Table(title="Timezone database")
    table.add_column("Item", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for key, value in summary.items():
        table.add_row(key, value)
    return table


def build_sources_table(reports: list[SourceReport]) -> Table:
    """Tabla con lo que devolvió cada fuente de zona local."""

    table = Table(title="Local zone sources")
    table.add_column("Source", style="cyan", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Candidates", style="dim")
    for report in reports:
        if report.accepted:
            status = f"OK ({report.accepted})"
        elif report.candidates:
            status = "REJECTED"
        else:
            status = "NONE"
        table.add_row(report.source, status, ", ".join(report.candidates) or "-")
    return table
