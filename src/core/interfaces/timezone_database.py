"""Contrato de la base de datos de zonas horarias."""

from __future__ import annotations

from datetime import timedelta, tzinfo
from typing import Protocol, runtime_checkable

from core.domain.models import Instant


@runtime_checkable
class TimezoneDatabase(Protocol):
    """Read-only lookup of UTC-offset rules by zone identifier.

    Rules:
    - `"UTC"` is a pseudo-zone with a fixed zero offset and no DST.
    - Unknown identifiers raise `UnknownZoneError`; they never default to UTC.
    - Offsets depend on the instant, so historical dates use historical rules.
    """

    def rules(self, zone_id: str) -> tzinfo:
        """Return the offset rules for `zone_id` as a `tzinfo`."""

        ...

    def resolve(self, zone_id: str, instant: Instant) -> timedelta:
        """Return the offset in effect for `zone_id` at `instant`."""

        ...

    def contains(self, zone_id: str) -> bool:
        """Whether `zone_id` is a known identifier. Never raises."""

        ...
