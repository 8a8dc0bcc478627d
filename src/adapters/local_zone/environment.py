"""Fuentes de zona local basadas en configuración: variable de entorno y settings."""

from __future__ import annotations

import os
from typing import Iterator, Mapping

from adapters.local_zone.paths import zone_candidates_from_path
from core.config import AppSettings
from core.interfaces.local_zone import LocalZoneSource


class EnvironmentZoneSource(LocalZoneSource):
    """Reads a zone override from an environment variable (`TZ` by default).

    Accepted values:
    - `Area/City`
    - POSIX style `:Area/City`
    - an absolute path into a zoneinfo tree (`/usr/share/zoneinfo/Area/City`)
    """

    def __init__(self, variable: str = "TZ", environ: Mapping[str, str] | None = None) -> None:
        self.variable = variable
        self.name = f"env:{variable}"
        self._environ = environ if environ is not None else os.environ

    def candidates(self) -> Iterator[str]:
        value = (self._environ.get(self.variable) or "").strip()
        if value.startswith(":"):
            value = value[1:].strip()
        if not value:
            return

        if value.startswith("/"):
            yield from zone_candidates_from_path(value)
            return
        yield value


class ConfiguredZoneSource(LocalZoneSource):
    """Yields `DATEZ_LOCAL_ZONE` (env or user `.env`) when set."""

    name = "settings:local_zone"

    def __init__(self, settings: AppSettings) -> None:
        self._settings = settings

    def candidates(self) -> Iterator[str]:
        if self._settings.local_zone:
            yield self._settings.local_zone
