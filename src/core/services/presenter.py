"""Formato de salida: `YYYY-MM-DD.HH:MM:SS[.fff]±HHMM (Zona)`."""

from __future__ import annotations

from datetime import timedelta

from core.domain.models import ZonedTime


def format_offset(offset: timedelta) -> str:
    """`±HHMM`; a seconds component (historical LMT) is truncated."""

    total_seconds = int(offset.total_seconds())
    sign = "-" if total_seconds < 0 else "+"
    minutes = abs(total_seconds) // 60
    hours, minutes = divmod(minutes, 60)
    return f"{sign}{hours:02d}{minutes:02d}"


def format_zoned_time(zoned: ZonedTime) -> str:
    local = zoned.local
    # strftime("%Y") does not zero-pad years before 1000 on glibc.
    text = (
        f"{local.year:04d}-{local.month:02d}-{local.day:02d}"
        f".{local.hour:02d}:{local.minute:02d}:{local.second:02d}"
    )
    if zoned.precision:
        text += "." + f"{local.microsecond:06d}"[: zoned.precision]
    return f"{text}{format_offset(zoned.offset)} ({zoned.label})"
