from dataclasses import dataclass

from app.utils.time_window import format_minutes, to_minutes


@dataclass(frozen=True)
class SlotCandidate:
    date: str
    start_time: str
    end_time: str


def generate_slots(date: str, start_time: str, end_time: str, interval_minutes: int) -> list[SlotCandidate]:
    """
    Splits [start_time, end_time) on date into back-to-back slots of
    interval_minutes each, in ascending order.

    A trailing remainder shorter than the interval is dropped. When not even
    one interval fits the result is empty; callers report that as NO_SLOTS.
    Input is expected to be validated already.
    """
    slots = []
    cursor = to_minutes(start_time)
    end = to_minutes(end_time)

    while cursor + interval_minutes <= end:
        slots.append(
            SlotCandidate(
                date=date,
                start_time=format_minutes(cursor),
                end_time=format_minutes(cursor + interval_minutes),
            )
        )
        cursor += interval_minutes

    return slots
