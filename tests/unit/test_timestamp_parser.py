from __future__ import annotations

import pytest

from core.domain.errors import TimestampParseError
from core.services.timestamp_parser import parse_timestamp


@pytest.mark.parametrize(
    "text",
    [
        "2021-07-21.16:00:00",
        "2021-07-21T16:00:00",
        "2021-07-21 16:00:00",
        "20210721160000",
        "20210721.160000",
        "20210721T160000",
        "20210721 160000",
        "  2021-07-21.16:00:00  ",
    ],
)
def test_accepted_layouts(text: str) -> None:
    ts = parse_timestamp(text)
    assert (ts.year, ts.month, ts.day) == (2021, 7, 21)
    assert (ts.hour, ts.minute, ts.second) == (16, 0, 0)
    assert ts.microsecond == 0
    assert ts.precision == 0


def test_fractional_seconds_keep_their_precision() -> None:
    ts = parse_timestamp("2021-07-21.16:00:00.250")
    assert ts.microsecond == 250_000
    assert ts.precision == 3

    ts = parse_timestamp("2021-07-21T16:00:00.000001")
    assert ts.microsecond == 1
    assert ts.precision == 6


@pytest.mark.parametrize(
    "text",
    [
        "",
        "bad",
        "not-a-date",
        "2021-13-40.99:99:99",
        "3000:13:0034:34:33",
        "3000:13:00 34:34:33",
        "3000:13:00.34:34:33",
        "3000:13:00T34:34:33",
        "2021-02-30.12:00:00",
        "2021-07-21.24:00:00",
        "2021-07-21T16:00:00Z",
        "2021-07-21T16:00:00+02:00",
        "2021-07-21.16:00:00.1234567",
        "2021-07-21",
        "202112345",
        "2021123456",
        "2021-7-21.16:00:00",
        "20210721.16000",
        "20210721.1600001",
    ],
)
def test_malformed_timestamps(text: str) -> None:
    with pytest.raises(TimestampParseError) as excinfo:
        parse_timestamp(text)
    assert excinfo.value.text == text
    assert excinfo.value.exit_code == 3
