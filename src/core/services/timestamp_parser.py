"""Parsing of the offset-less time argument."""

from __future__ import annotations

import re
from datetime import datetime

from pydantic import ValidationError

from core.domain.errors import TimestampParseError
from core.domain.models import NaiveTimestamp

TIME_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d.%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y%m%d%H%M%S",
    "%Y%m%d.%H%M%S",
    "%Y%m%dT%H%M%S",
    "%Y%m%d %H%M%S",
)

_FRACTION = re.compile(r"^(?P<base>.+\d)\.(?P<fraction>\d+)$")
# Exact field widths; strptime alone accepts 1-digit fields.
_LAYOUT = re.compile(r"^(?:\d{4}-\d{2}-\d{2}[.T ]\d{2}:\d{2}:\d{2}|\d{8}[.T ]?\d{6})$")
MAX_FRACTION_DIGITS = 6


def _strptime_any(text: str) -> datetime | None:
    if not _LAYOUT.match(text):
        return None
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def parse_timestamp(text: str) -> NaiveTimestamp:
    """Parse `text` into a `NaiveTimestamp`.

    Accepts the layouts in `TIME_FORMATS`, optionally followed by a `.` and
    1-6 fractional-second digits. Anything carrying a UTC offset or `Z` is
    rejected.
    """

    raw = text.strip()
    if not raw:
        raise TimestampParseError(text, "empty")

    parsed = _strptime_any(raw)
    fraction = ""
    if parsed is None:
        match = _FRACTION.match(raw)
        if match:
            fraction = match.group("fraction")
            if len(fraction) > MAX_FRACTION_DIGITS:
                raise TimestampParseError(text, "at most 6 fractional digits")
            parsed = _strptime_any(match.group("base"))

    if parsed is None:
        raise TimestampParseError(text)

    microsecond = int(fraction.ljust(MAX_FRACTION_DIGITS, "0")) if fraction else 0
    try:
        return NaiveTimestamp.from_datetime(
            parsed.replace(microsecond=microsecond),
            precision=len(fraction),
        )
    except ValidationError as exc:
        raise TimestampParseError(text) from exc
