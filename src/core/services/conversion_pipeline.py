"""Orquestación de una conversión completa.

La CLI delega aquí todo el flujo (parseo, validación, conversión, proyección)
y solo se ocupa de imprimir. El orden es lineal y falla rápido: nada se
proyecta hasta que el timestamp y todas las zonas son válidos.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from core.domain.errors import UsageError
from core.domain.models import UTC_ALIASES, UTC_ZONE, Instant, ZonedTime
from core.interfaces.local_zone import LocalZoneLookup
from core.interfaces.timezone_database import TimezoneDatabase
from core.services.instant_converter import to_instant
from core.services.presenter import format_zoned_time
from core.services.projector import project
from core.services.timestamp_parser import parse_timestamp

logger = logging.getLogger(__name__)


@dataclass
class ConversionRequest:
    """Parameters of a single conversion run."""

    time: str
    zones: Sequence[str]
    include_local: bool = True


@dataclass
class ConversionResult:
    """Output of a pipeline invocation, in print order."""

    instant: Instant
    projections: list[ZonedTime] = field(default_factory=list)
    local_zone: str | None = None

    def lines(self) -> list[str]:
        return [format_zoned_time(zoned) for zoned in self.projections]


def run_conversion(
    request: ConversionRequest,
    database: TimezoneDatabase,
    resolver: LocalZoneLookup | None = None,
) -> ConversionResult:
    """Convert `request.time` (wall time in the first zone) into every zone.

    Order of the projections: UTC, each listed zone in input order, then the
    local zone when it resolves and was not printed already.
    """

    zones = list(request.zones)
    if not zones:
        raise UsageError("at least one timezone is required after the time")

    timestamp = parse_timestamp(request.time)
    for zone_id in zones:
        database.rules(zone_id)

    instant = to_instant(timestamp, zones[0], database)
    logger.debug("%s in %s is %s", request.time, zones[0], instant.moment.isoformat())

    targets = [UTC_ZONE, *zones]
    local_zone: str | None = None
    if request.include_local and resolver is not None:
        local_zone = resolver.resolve()
        if local_zone in targets or local_zone in UTC_ALIASES:
            logger.debug("local zone %s already listed", local_zone)
        elif local_zone is not None:
            targets.append(local_zone)

    return ConversionResult(
        instant=instant,
        projections=[project(instant, zone_id, database) for zone_id in targets],
        local_zone=local_zone,
    )
