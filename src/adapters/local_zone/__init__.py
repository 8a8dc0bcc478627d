"""Descubrimiento de la zona horaria local (una fuente por plataforma)."""

from adapters.local_zone.environment import ConfiguredZoneSource, EnvironmentZoneSource
from adapters.local_zone.posix import SymlinkZoneSource
from adapters.local_zone.resolver import LocalZoneResolver, SourceReport, default_sources
from adapters.local_zone.windows import WindowsRegistryZoneSource

__all__ = [
	"ConfiguredZoneSource",
	"EnvironmentZoneSource",
	"LocalZoneResolver",
	"SourceReport",
	"SymlinkZoneSource",
	"WindowsRegistryZoneSource",
	"default_sources",
]
