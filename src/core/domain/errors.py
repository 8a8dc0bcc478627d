"""Errores del dominio.

Cada error lleva su `exit_code`, así la CLI solo traduce excepciones a
códigos de salida sin conocer el detalle de cada fallo.
"""

from __future__ import annotations


class DatezError(Exception):
    """Base for every fatal error raised by the conversion core."""

    exit_code: int = 1


class UsageError(DatezError):
    """The request is missing the zone list."""

    exit_code = 2


class TimestampParseError(DatezError):
    """The time argument is not a valid offset-less timestamp."""

    exit_code = 3

    def __init__(self, text: str, reason: str | None = None) -> None:
        self.text = text
        self.reason = reason
        message = f"invalid time {text!r}: must be ISO 8601 / RFC 3339 without a UTC offset"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnknownZoneError(DatezError):
    """The zone identifier is not in the timezone database."""

    exit_code = 4

    def __init__(self, zone_id: str) -> None:
        self.zone_id = zone_id
        super().__init__(f"unknown timezone {zone_id!r}")


class ConfigurationError(DatezError):
    """A `DATEZ_*` setting (environment or `.env`) has an invalid value."""

    exit_code = 5
