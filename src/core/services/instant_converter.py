"""Conversión de un timestamp sin offset a un `Instant` absoluto.

El timestamp se interpreta como hora de pared en la zona indicada. Cerca de
un cambio de horario hay horas que no existen (gap) u horas que se repiten
(overlap); la política es fija:

- gap: se usa el offset vigente justo antes del salto
  (`2021-03-28 01:30 Europe/London` -> `01:30Z`, que se muestra `02:30+0100`).
- overlap: se elige la primera ocurrencia, con el offset previo al cambio
  (`2021-10-31 01:30 Europe/London` -> `00:30Z`).

En ambos casos gana el offset anterior a la transición, que es lo que
`fold=0` produce en `datetime` (PEP 495).
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from enum import Enum

from core.domain.errors import TimestampParseError
from core.domain.models import Instant, NaiveTimestamp
from core.interfaces.timezone_database import TimezoneDatabase

logger = logging.getLogger(__name__)


class WallTimeKind(str, Enum):
    """How a wall-clock time maps onto instants in a zone."""

    NORMAL = "normal"
    GAP = "gap"
    OVERLAP = "overlap"


def _offsets(wall: datetime, rules: tzinfo):
    before = wall.replace(tzinfo=rules, fold=0).utcoffset()
    after = wall.replace(tzinfo=rules, fold=1).utcoffset()
    return before, after


def classify_wall_time(wall: datetime, rules: tzinfo) -> WallTimeKind:
    """Classify a naive `wall` time in `rules` as normal, gap or overlap."""

    before, after = _offsets(wall, rules)
    if before == after:
        return WallTimeKind.NORMAL

    # Round-tripping through UTC only reproduces the wall time when it exists.
    aware = wall.replace(tzinfo=rules, fold=0)
    back = aware.astimezone(timezone.utc).astimezone(rules).replace(tzinfo=None, fold=0)
    if back != wall:
        return WallTimeKind.GAP
    return WallTimeKind.OVERLAP


def to_instant(timestamp: NaiveTimestamp, zone_id: str, database: TimezoneDatabase) -> Instant:
    """Return the `Instant` that `timestamp` denotes as wall time in `zone_id`.

    Raises `UnknownZoneError` when `zone_id` is not in the database.
    """

    rules = database.rules(zone_id)
    wall = timestamp.to_datetime()

    try:
        kind = classify_wall_time(wall, rules)
        moment = wall.replace(tzinfo=rules, fold=0).astimezone(timezone.utc)
    except OverflowError as exc:
        raise TimestampParseError(wall.isoformat(), f"out of range in {zone_id}") from exc

    if kind is not WallTimeKind.NORMAL:
        logger.debug(
            "%s falls in a DST %s in %s; using the pre-transition offset",
            wall.isoformat(),
            kind.value,
            zone_id,
        )
    return Instant(moment=moment, precision=timestamp.precision)
