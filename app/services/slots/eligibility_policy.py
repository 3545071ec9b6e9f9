import logging
from datetime import date as date_type
from datetime import datetime, timedelta
from typing import Any

from app.database.models.slot import SlotModel
from app.exceptions.slots_exceptions import ErrorCode, InputError, PolicyError, PolicyRule
from app.settings.settings import BookingSettings
from app.utils.time_window import (
    Clock,
    is_valid_calendar_date,
    is_valid_date_format,
    is_valid_time_format,
    slot_start,
)

logger = logging.getLogger(__name__)


def _is_missing(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip() == ""
    return value is None


class EligibilityPolicy:
    """
    Time-relative rules deciding whether a slot may be created, listed,
    booked or cancelled.

    Every rule reads "now" from the injected clock, which is pinned to the
    operating time zone, so client clocks never take part in a decision.
    """

    def __init__(self, clock: Clock, settings: BookingSettings):
        self.clock = clock
        self.settings = settings

    def validate_slot_creation_input(
        self, date: str | None, start_time: str | None, end_time: str | None, interval_minutes: int | None
    ) -> None:
        if any(_is_missing(value) for value in (date, start_time, end_time, interval_minutes)):
            raise InputError(ErrorCode.ALL_FIELDS_REQUIRED)

        self.validate_slot_date(date)

        if not is_valid_time_format(start_time) or not is_valid_time_format(end_time):
            raise InputError(ErrorCode.INVALID_TIME_FORMAT)

        # zero-padded HH:mm on the same date compares correctly as text
        if start_time >= end_time:
            raise InputError(ErrorCode.INVALID_TIME_RANGE)

        if interval_minutes <= 0:
            raise InputError(ErrorCode.INVALID_INTERVAL)
        if interval_minutes > self.settings.MAX_INTERVAL_MINUTES:
            raise InputError(ErrorCode.INTERVAL_TOO_LARGE)

    def validate_date_format(self, date: str) -> None:
        if not is_valid_date_format(date):
            raise InputError(ErrorCode.INVALID_DATE_FORMAT)
        if not is_valid_calendar_date(date):
            raise InputError(ErrorCode.INVALID_DATE)

    def validate_slot_date(self, date: str) -> None:
        self.validate_date_format(date)
        if date_type.fromisoformat(date) < self.clock.today():
            raise PolicyError(ErrorCode.PAST_DATE)

    def is_today(self, date: str) -> bool:
        return date_type.fromisoformat(date) == self.clock.today()

    def is_at_least_n_minutes_ahead(self, date: str, start_time: str, now: datetime, minutes: int) -> bool:
        return slot_start(date, start_time, self.clock.zone) >= now + timedelta(minutes=minutes)

    def is_bookable(self, slot: SlotModel, now: datetime | None = None) -> bool:
        now = now or self.clock.now()
        return self.is_at_least_n_minutes_ahead(
            slot.date, slot.start_time, now, self.settings.MIN_BOOKING_LEAD_MINUTES
        )

    def validate_booking_window(self, slot: SlotModel) -> None:
        if not self.is_bookable(slot):
            logger.info(f"Slot {slot.id} starts in less than {self.settings.MIN_BOOKING_LEAD_MINUTES} minutes")
            raise PolicyError(ErrorCode.TOO_LATE_TO_BOOK, PolicyRule.BOOKING_WINDOW_CLOSED)

    def validate_cancellation(self, slot: SlotModel | None, user_id: str) -> None:
        # unknown slots and other users' bookings are reported identically
        if slot is None or not slot.is_booked or slot.booked_by != user_id:
            raise PolicyError(ErrorCode.CANCEL_NOT_ALLOWED)

        now = self.clock.now()
        starts_at = slot_start(slot.date, slot.start_time, self.clock.zone)
        if starts_at < now:
            raise PolicyError(ErrorCode.CANCEL_NOT_ALLOWED, PolicyRule.PAST_SLOT)

        cancel_deadline = starts_at - timedelta(hours=self.settings.MIN_CANCEL_LEAD_HOURS)
        if now > cancel_deadline:
            raise PolicyError(ErrorCode.CANCEL_NOT_ALLOWED, PolicyRule.CANCEL_WINDOW_CLOSED)
