from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from core.domain.models import Instant, NaiveTimestamp


def test_naive_timestamp_round_trips_datetime() -> None:
    value = datetime(2021, 7, 21, 16, 0, 0, 123_000)
    ts = NaiveTimestamp.from_datetime(value, precision=3)
    assert ts.to_datetime() == value
    assert ts.precision == 3


def test_naive_timestamp_rejects_invalid_calendar_date() -> None:
    with pytest.raises(ValidationError):
        NaiveTimestamp(year=2021, month=2, day=30)


def test_naive_timestamp_rejects_tzinfo() -> None:
    with pytest.raises(ValueError):
        NaiveTimestamp.from_datetime(datetime(2021, 7, 21, tzinfo=timezone.utc))


def test_naive_timestamp_is_frozen() -> None:
    ts = NaiveTimestamp(year=2021, month=7, day=21)
    with pytest.raises(ValidationError):
        ts.hour = 3


def test_instant_normalizes_to_utc() -> None:
    plus_ten = timezone(timedelta(hours=10))
    instant = Instant(moment=datetime(2021, 7, 21, 16, tzinfo=plus_ten))
    assert instant.moment == datetime(2021, 7, 21, 6, tzinfo=timezone.utc)
    assert instant.moment.utcoffset() == timedelta(0)


def test_instant_requires_aware_datetime() -> None:
    with pytest.raises(ValidationError):
        Instant(moment=datetime(2021, 7, 21, 6))
