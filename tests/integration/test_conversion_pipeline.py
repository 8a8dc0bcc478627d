from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from adapters.zoneinfo_database import ZoneInfoDatabase
from core.domain.errors import TimestampParseError, UnknownZoneError, UsageError
from core.services.conversion_pipeline import ConversionRequest, run_conversion

TIME = "2021-07-21.16:00:00"
ZONES = ["Australia/Canberra", "America/Caracas"]
BASE_LINES = [
    "2021-07-21.06:00:00+0000 (UTC)",
    "2021-07-21.16:00:00+1000 (Australia/Canberra)",
    "2021-07-21.02:00:00-0400 (America/Caracas)",
]


class StaticResolver:
    def __init__(self, zone: str | None) -> None:
        self.zone = zone
        self.calls = 0

    def resolve(self) -> str | None:
        self.calls += 1
        return self.zone


def test_without_local_zone(database: ZoneInfoDatabase) -> None:
    result = run_conversion(ConversionRequest(TIME, ZONES), database, StaticResolver(None))

    assert result.lines() == BASE_LINES
    assert result.local_zone is None
    assert result.instant.moment == datetime(2021, 7, 21, 6, tzinfo=timezone.utc)


def test_local_zone_is_appended(database: ZoneInfoDatabase) -> None:
    result = run_conversion(ConversionRequest(TIME, ZONES), database, StaticResolver("Europe/London"))

    assert result.lines() == [*BASE_LINES, "2021-07-21.07:00:00+0100 (Europe/London)"]
    assert result.local_zone == "Europe/London"


@pytest.mark.parametrize(
    "local", ["Australia/Canberra", "America/Caracas", "UTC", "Etc/UTC", "Etc/Zulu", "Zulu"]
)
def test_local_zone_already_printed_is_not_duplicated(database: ZoneInfoDatabase, local: str) -> None:
    result = run_conversion(ConversionRequest(TIME, ZONES), database, StaticResolver(local))
    assert result.lines() == BASE_LINES


def test_local_zone_can_be_disabled(database: ZoneInfoDatabase) -> None:
    resolver = StaticResolver("Europe/London")
    request = ConversionRequest(TIME, ZONES, include_local=False)

    assert run_conversion(request, database, resolver).lines() == BASE_LINES
    assert resolver.calls == 0


def test_listed_zones_keep_input_order_and_duplicates(database: ZoneInfoDatabase) -> None:
    request = ConversionRequest("2021-07-21T07:00:00", ["Europe/London", "UTC", "Europe/London"])
    lines = run_conversion(request, database).lines()
    assert lines == [
        "2021-07-21.06:00:00+0000 (UTC)",
        "2021-07-21.07:00:00+0100 (Europe/London)",
        "2021-07-21.06:00:00+0000 (UTC)",
        "2021-07-21.07:00:00+0100 (Europe/London)",
    ]


def test_usage_error_without_zones(database: ZoneInfoDatabase) -> None:
    with pytest.raises(UsageError):
        run_conversion(ConversionRequest(TIME, []), database)


def test_unknown_listed_zone_fails_before_any_projection(database: ZoneInfoDatabase) -> None:
    resolver = StaticResolver("Europe/London")
    with pytest.raises(UnknownZoneError) as excinfo:
        run_conversion(ConversionRequest(TIME, ["Australia/Canberra", "Mars/Noplace"]), database, resolver)

    assert excinfo.value.zone_id == "Mars/Noplace"
    assert resolver.calls == 0


def test_unknown_first_zone(database: ZoneInfoDatabase) -> None:
    with pytest.raises(UnknownZoneError) as excinfo:
        run_conversion(ConversionRequest(TIME, ["Mars/Noplace"]), database)
    assert excinfo.value.zone_id == "Mars/Noplace"


@pytest.mark.parametrize("time", ["2021-13-40.99:99:99", "not-a-date"])
def test_timestamp_is_parsed_before_zones_are_resolved(database: ZoneInfoDatabase, time: str) -> None:
    with pytest.raises(TimestampParseError):
        run_conversion(ConversionRequest(time, ["Mars/Noplace"]), database)


def test_dst_gap_uses_pre_transition_offset(database: ZoneInfoDatabase) -> None:
    lines = run_conversion(ConversionRequest("2021-03-28.01:30:00", ["Europe/London"]), database).lines()
    assert lines == [
        "2021-03-28.01:30:00+0000 (UTC)",
        "2021-03-28.02:30:00+0100 (Europe/London)",
    ]


def test_dst_overlap_picks_earlier_occurrence(database: ZoneInfoDatabase) -> None:
    lines = run_conversion(ConversionRequest("2021-10-31.01:30:00", ["Europe/London"]), database).lines()
    assert lines == [
        "2021-10-31.00:30:00+0000 (UTC)",
        "2021-10-31.01:30:00+0100 (Europe/London)",
    ]


def test_sub_second_precision_is_preserved(database: ZoneInfoDatabase) -> None:
    lines = run_conversion(
        ConversionRequest("2021-07-21T16:00:00.123456", ["Australia/Canberra"]), database
    ).lines()
    assert lines == [
        "2021-07-21.06:00:00.123456+0000 (UTC)",
        "2021-07-21.16:00:00.123456+1000 (Australia/Canberra)",
    ]


def test_historical_offsets(database: ZoneInfoDatabase) -> None:
    result = run_conversion(ConversionRequest("2012-07-01.16:00:00", ["Europe/Moscow"]), database)
    assert result.projections[1].offset == timedelta(hours=4)
    assert result.lines()[0] == "2012-07-01.12:00:00+0000 (UTC)"
