"""Base de datos de zonas horarias sobre `zoneinfo`.

- Usa la base tz del sistema (TZPATH) y el paquete `tzdata` como respaldo.
- `"UTC"` es una pseudo-zona fija, sin reglas de DST.
- Las reglas cargadas se memorizan por instancia; la instancia se crea una
  vez por ejecución y se pasa a cada componente que la necesita.
"""

from __future__ import annotations

import logging
import zoneinfo
from datetime import timedelta, timezone, tzinfo
from functools import cached_property
from importlib.metadata import PackageNotFoundError, version

from core.domain.errors import UnknownZoneError
from core.domain.models import UTC_ZONE, Instant

logger = logging.getLogger(__name__)


class ZoneInfoDatabase:
    """`TimezoneDatabase` backed by the IANA tz database."""

    def __init__(self) -> None:
        self._rules: dict[str, tzinfo] = {UTC_ZONE: timezone.utc}

    @cached_property
    def available(self) -> frozenset[str]:
        """Every canonical key known to the system tz data and `tzdata`."""

        return frozenset(zoneinfo.available_timezones())

    def rules(self, zone_id: str) -> tzinfo:
        cached = self._rules.get(zone_id)
        if cached is not None:
            return cached

        try:
            rules = zoneinfo.ZoneInfo(zone_id)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError) as exc:
            logger.debug("zone lookup failed for %r: %s", zone_id, exc)
            raise UnknownZoneError(zone_id) from exc

        # Case-insensitive filesystems load "europe/london"; keys are case-sensitive.
        if zone_id not in self.available:
            logger.debug("zone %r loaded but is not a canonical key", zone_id)
            raise UnknownZoneError(zone_id)

        self._rules[zone_id] = rules
        return rules

    def resolve(self, zone_id: str, instant: Instant) -> timedelta:
        offset = instant.moment.astimezone(self.rules(zone_id)).utcoffset()
        if offset is None:
            raise UnknownZoneError(zone_id)
        return offset

    def contains(self, zone_id: str) -> bool:
        try:
            self.rules(zone_id)
        except UnknownZoneError:
            return False
        return True

    def source_summary(self) -> dict[str, str]:
        """Where the rules come from, for diagnostics."""

        try:
            tzdata_version = version("tzdata")
        except PackageNotFoundError:
            tzdata_version = "not installed"

        return {
            "tzpath": ", ".join(zoneinfo.TZPATH) or "(empty)",
            "tzdata": tzdata_version,
            "zones": str(len(self.available)),
        }
