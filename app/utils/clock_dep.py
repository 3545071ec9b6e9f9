from typing import Annotated

from fastapi import Depends

from app.settings.settings import booking_settings
from app.utils.time_window import Clock, ZoneClock


def get_clock() -> Clock:
    return ZoneClock(booking_settings.TIMEZONE)


ClockDep = Annotated[Clock, Depends(get_clock)]
