"""Resolución de la zona horaria local.

Recorre las fuentes en orden y devuelve el primer identificador que la base
de datos reconoce. Nunca es fatal: si nada funciona devuelve `None` y la CLI
omite la línea de zona local.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Sequence

from adapters.local_zone.environment import ConfiguredZoneSource, EnvironmentZoneSource
from adapters.local_zone.posix import SymlinkZoneSource
from adapters.local_zone.windows import WindowsRegistryZoneSource
from core.config import AppSettings
from core.interfaces.local_zone import LocalZoneSource
from core.interfaces.timezone_database import TimezoneDatabase

logger = logging.getLogger(__name__)


def default_sources(settings: AppSettings, platform: str | None = None) -> list[LocalZoneSource]:
    """Sources for the host platform family, in lookup order."""

    platform = platform or sys.platform
    sources: list[LocalZoneSource] = [
        EnvironmentZoneSource(settings.local_zone_env_var),
        ConfiguredZoneSource(settings),
    ]
    if platform.startswith("win"):
        sources.append(WindowsRegistryZoneSource())
    else:
        sources.append(SymlinkZoneSource(settings.localtime_path))
    return sources


@dataclass
class SourceReport:
    """What a single source yielded, for diagnostics."""

    source: str
    candidates: list[str] = field(default_factory=list)
    accepted: str | None = None


class LocalZoneResolver:
    """Finds the host's zone id using a list of `LocalZoneSource`s."""

    def __init__(self, sources: Sequence[LocalZoneSource], database: TimezoneDatabase) -> None:
        self._sources = list(sources)
        self._database = database

    def resolve(self) -> str | None:
        for report in self.inspect(stop_at_first=True):
            if report.accepted:
                logger.debug("local zone %r from %s", report.accepted, report.source)
                return report.accepted
        logger.debug("local zone unresolved")
        return None

    def inspect(self, stop_at_first: bool = False) -> list[SourceReport]:
        """Try every source and report what each one yielded."""

        reports: list[SourceReport] = []
        for source in self._sources:
            report = SourceReport(source=source.name)
            reports.append(report)
            for candidate in source.candidates():
                report.candidates.append(candidate)
                if self._database.contains(candidate):
                    report.accepted = candidate
                    break
                logger.debug("%s: rejected candidate %r", source.name, candidate)
            if report.accepted and stop_at_first:
                break
        return reports
