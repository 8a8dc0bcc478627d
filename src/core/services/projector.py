"""Proyección de un `Instant` en una zona: offset y hora de pared local."""

from __future__ import annotations

from core.domain.errors import TimestampParseError
from core.domain.models import Instant, ZonedTime
from core.interfaces.timezone_database import TimezoneDatabase


def project(instant: Instant, zone_id: str, database: TimezoneDatabase) -> ZonedTime:
    """Project `instant` into `zone_id`.

    Pure: the same (instant, zone) pair always yields the same offset and wall
    clock. `zone_id` is expected to be validated already; an unknown id here
    propagates as `UnknownZoneError`.
    """

    try:
        offset = database.resolve(zone_id, instant)
        local = instant.moment.replace(tzinfo=None) + offset
    except OverflowError as exc:
        raise TimestampParseError(instant.moment.isoformat(), f"out of range in {zone_id}") from exc
    return ZonedTime(instant=instant, zone_id=zone_id, offset=offset, local=local)
