import re
from datetime import date as date_type
from datetime import datetime
from typing import Protocol
from zoneinfo import ZoneInfo

from app.settings.settings import booking_settings

DATE_FORMAT_REGEX = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TIME_FORMAT_REGEX = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def to_minutes(time_str: str) -> int:
    """Convert a zero-padded ``HH:mm`` string to minutes after midnight."""
    hours, minutes = time_str.split(":")
    return int(hours) * 60 + int(minutes)


def format_minutes(total_minutes: int) -> str:
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def is_valid_date_format(date_str: str) -> bool:
    return bool(DATE_FORMAT_REGEX.match(date_str))


def is_valid_calendar_date(date_str: str) -> bool:
    try:
        date_type.fromisoformat(date_str)
    except ValueError:
        return False
    return True


def is_valid_time_format(time_str: str) -> bool:
    return bool(TIME_FORMAT_REGEX.match(time_str))


def slot_start(date_str: str, start_time: str, zone: ZoneInfo) -> datetime:
    """
    Build the aware instant at which a slot starts.

    Every eligibility comparison goes through this value, so comparisons
    never mix naive and aware datetimes or cross date boundaries as strings.
    """
    naive = datetime.fromisoformat(f"{date_str}T{start_time}:00")
    return naive.replace(tzinfo=zone)


class Clock(Protocol):
    zone: ZoneInfo

    def now(self) -> datetime: ...

    def today(self) -> date_type: ...


class ZoneClock:
    """Wall clock pinned to the operating time zone."""

    def __init__(self, zone_name: str):
        self.zone = ZoneInfo(zone_name)

    def now(self) -> datetime:
        return datetime.now(self.zone)

    def today(self) -> date_type:
        return self.now().date()


class FixedClock:
    """Clock frozen at a given instant. Naive instants are read in the operating time zone."""

    def __init__(self, instant: datetime, zone_name: str | None = None):
        self.zone = ZoneInfo(zone_name or booking_settings.TIMEZONE)
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=self.zone)
        self.instant = instant.astimezone(self.zone)

    def now(self) -> datetime:
        return self.instant

    def today(self) -> date_type:
        return self.instant.date()
