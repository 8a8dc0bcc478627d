"""Fuente Windows: la zona configurada en el registro del sistema.

Windows no usa identificadores IANA; el nombre de zona de Windows se traduce
con la tabla `WINDOWS_ZONE_NAMES` (territorio "001" de CLDR windowsZones).
"""

from __future__ import annotations

import logging
from typing import Iterator

from core.interfaces.local_zone import LocalZoneSource

logger = logging.getLogger(__name__)

TIME_ZONE_INFORMATION_KEY = r"SYSTEM\CurrentControlSet\Control\TimeZoneInformation"
REGISTRY_VALUES = ("TimeZoneKeyName", "StandardName")

WINDOWS_ZONE_NAMES: dict[str, str] = {
    "Dateline Standard Time": "Etc/GMT+12",
    "UTC-11": "Etc/GMT+11",
    "Hawaiian Standard Time": "Pacific/Honolulu",
    "Alaskan Standard Time": "America/Anchorage",
    "Pacific Standard Time": "America/Los_Angeles",
    "US Mountain Standard Time": "America/Phoenix",
    "Mountain Standard Time": "America/Denver",
    "Central America Standard Time": "America/Guatemala",
    "Central Standard Time": "America/Chicago",
    "Central Standard Time (Mexico)": "America/Mexico_City",
    "Canada Central Standard Time": "America/Regina",
    "SA Pacific Standard Time": "America/Bogota",
    "Eastern Standard Time": "America/New_York",
    "US Eastern Standard Time": "America/Indiana/Indianapolis",
    "Venezuela Standard Time": "America/Caracas",
    "Atlantic Standard Time": "America/Halifax",
    "SA Western Standard Time": "America/La_Paz",
    "Pacific SA Standard Time": "America/Santiago",
    "Newfoundland Standard Time": "America/St_Johns",
    "E. South America Standard Time": "America/Sao_Paulo",
    "Argentina Standard Time": "America/Argentina/Buenos_Aires",
    "UTC-02": "Etc/GMT+2",
    "Azores Standard Time": "Atlantic/Azores",
    "UTC": "Etc/UTC",
    "GMT Standard Time": "Europe/London",
    "Greenwich Standard Time": "Atlantic/Reykjavik",
    "W. Europe Standard Time": "Europe/Berlin",
    "Central Europe Standard Time": "Europe/Budapest",
    "Romance Standard Time": "Europe/Paris",
    "Central European Standard Time": "Europe/Warsaw",
    "W. Central Africa Standard Time": "Africa/Lagos",
    "GTB Standard Time": "Europe/Bucharest",
    "E. Europe Standard Time": "Europe/Chisinau",
    "Egypt Standard Time": "Africa/Cairo",
    "FLE Standard Time": "Europe/Kyiv",
    "Israel Standard Time": "Asia/Jerusalem",
    "South Africa Standard Time": "Africa/Johannesburg",
    "Russian Standard Time": "Europe/Moscow",
    "Arab Standard Time": "Asia/Riyadh",
    "Iran Standard Time": "Asia/Tehran",
    "Arabian Standard Time": "Asia/Dubai",
    "Pakistan Standard Time": "Asia/Karachi",
    "India Standard Time": "Asia/Kolkata",
    "Nepal Standard Time": "Asia/Kathmandu",
    "Bangladesh Standard Time": "Asia/Dhaka",
    "SE Asia Standard Time": "Asia/Bangkok",
    "China Standard Time": "Asia/Shanghai",
    "Singapore Standard Time": "Asia/Singapore",
    "Taipei Standard Time": "Asia/Taipei",
    "Tokyo Standard Time": "Asia/Tokyo",
    "Korea Standard Time": "Asia/Seoul",
    "Cen. Australia Standard Time": "Australia/Adelaide",
    "AUS Central Standard Time": "Australia/Darwin",
    "E. Australia Standard Time": "Australia/Brisbane",
    "AUS Eastern Standard Time": "Australia/Sydney",
    "Tasmania Standard Time": "Australia/Hobart",
    "W. Australia Standard Time": "Australia/Perth",
    "New Zealand Standard Time": "Pacific/Auckland",
    "Tonga Standard Time": "Pacific/Tongatapu",
}


def read_registry_zone_names() -> list[str]:
    """Raw zone names from the registry, `TimeZoneKeyName` first."""

    try:
        import winreg
    except ImportError:
        return []

    names: list[str] = []
    try:
        with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, TIME_ZONE_INFORMATION_KEY) as key:
            for value_name in REGISTRY_VALUES:
                try:
                    value, _ = winreg.QueryValueEx(key, value_name)
                except OSError:
                    continue
                value = str(value).split("\x00", 1)[0].strip()
                if value:
                    names.append(value)
    except OSError as exc:
        logger.debug("cannot open registry key %s: %s", TIME_ZONE_INFORMATION_KEY, exc)
    return names


class WindowsRegistryZoneSource(LocalZoneSource):
    """Maps the Windows zone name from the registry to an IANA id."""

    name = "windows:registry"

    def __init__(self, reader=read_registry_zone_names) -> None:
        self._reader = reader

    def candidates(self) -> Iterator[str]:
        for raw in self._reader():
            mapped = WINDOWS_ZONE_NAMES.get(raw)
            if mapped:
                yield mapped
            yield raw
