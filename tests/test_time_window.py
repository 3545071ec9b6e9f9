from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from app.settings.settings import booking_settings
from app.utils.time_window import (
    FixedClock,
    ZoneClock,
    format_minutes,
    is_valid_calendar_date,
    is_valid_date_format,
    is_valid_time_format,
    slot_start,
    to_minutes,
)


@pytest.mark.parametrize("time_str, minutes", [("00:00", 0), ("09:30", 570), ("23:59", 1439)])
def test_to_minutes(time_str: str, minutes: int) -> None:
    assert to_minutes(time_str) == minutes
    assert format_minutes(minutes) == time_str


@pytest.mark.parametrize("value", ["2025-01-01", "2024-02-29"])
def test_valid_dates(value: str) -> None:
    assert is_valid_date_format(value)
    assert is_valid_calendar_date(value)


def test_date_format_and_calendar_validity_are_separate_checks() -> None:
    assert not is_valid_date_format("2025-1-01")
    assert not is_valid_date_format("20250101")
    assert is_valid_date_format("2025-13-01")
    assert not is_valid_calendar_date("2025-13-01")
    assert not is_valid_calendar_date("2025-02-30")


@pytest.mark.parametrize("value", ["24:00", "9:00", "09:60", "0900", ""])
def test_invalid_times(value: str) -> None:
    assert not is_valid_time_format(value)


def test_slot_start_is_aware_in_operating_zone() -> None:
    zone = ZoneInfo("Asia/Kolkata")
    start = slot_start("2025-01-01", "09:30", zone)
    assert start == datetime(2025, 1, 1, 9, 30, tzinfo=zone)
    assert start.utcoffset().total_seconds() == 5.5 * 3600


def test_fixed_clock_reads_naive_instants_in_its_zone() -> None:
    clock = FixedClock(datetime(2025, 1, 1, 23, 45))
    assert clock.now().tzinfo == ZoneInfo("Asia/Kolkata")
    assert clock.today().isoformat() == "2025-01-01"


def test_fixed_clock_converts_aware_instants() -> None:
    clock = FixedClock(datetime(2025, 1, 1, 20, 0, tzinfo=ZoneInfo("UTC")))
    # 20:00 UTC is already the next day in India
    assert clock.today().isoformat() == "2025-01-02"


def test_zone_clock_is_pinned_to_zone() -> None:
    clock = ZoneClock("Asia/Kolkata")
    assert clock.now().tzinfo == ZoneInfo("Asia/Kolkata")


def test_fixed_clock_defaults_to_configured_zone(monkeypatch) -> None:
    monkeypatch.setattr(booking_settings, "TIMEZONE", "UTC")
    clock = FixedClock(datetime(2025, 1, 1, 23, 45))
    assert clock.zone == ZoneInfo("UTC")
