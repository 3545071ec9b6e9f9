import pytest

from app.exceptions.slots_exceptions import ConflictError, ErrorCode, InputError, PolicyError
from app.schemas.slots.slot import SlotsCreateRequestSchema
from app.services.slots.slots_service import SlotsService
from tests.conftest import ALICE_ID, TODAY, TOMORROW


@pytest.fixture
def slots_service(slots_repository, policy) -> SlotsService:
    return SlotsService(slots_repository, policy)


def _request(date=TOMORROW, start_time="09:00", end_time="10:00", interval_minutes=30) -> SlotsCreateRequestSchema:
    return SlotsCreateRequestSchema(
        date=date, start_time=start_time, end_time=end_time, interval_minutes=interval_minutes
    )


async def test_create_slots(slots_service) -> None:
    created = await slots_service.create_slots(_request())
    assert (created.total_slots, created.created, created.duplicates) == (2, 2, 0)


async def test_create_slots_twice(slots_service, slots_repository) -> None:
    await slots_service.create_slots(_request())
    with pytest.raises(ConflictError) as exc_info:
        await slots_service.create_slots(_request())
    assert exc_info.value.code == ErrorCode.ALL_DUPLICATE
    assert len(await slots_repository.find_available(TOMORROW)) == 2


async def test_widening_the_range_only_adds_new_slots(slots_service) -> None:
    await slots_service.create_slots(_request())
    created = await slots_service.create_slots(_request(end_time="11:00"))
    assert (created.total_slots, created.created, created.duplicates) == (4, 2, 2)


async def test_range_too_short_reports_no_slots(slots_service) -> None:
    with pytest.raises(InputError) as exc_info:
        await slots_service.create_slots(_request(end_time="09:20"))
    assert exc_info.value.code == ErrorCode.NO_SLOTS


async def test_invalid_input_never_reaches_the_store(slots_service, slots_repository) -> None:
    with pytest.raises(InputError) as exc_info:
        await slots_service.create_slots(_request(interval_minutes=121))
    assert exc_info.value.code == ErrorCode.INTERVAL_TOO_LARGE
    assert await slots_repository.find_available(TOMORROW) == []


async def test_available_slots_today_respect_lead_time(slots_service, make_slot) -> None:
    await make_slot(TODAY, "07:30", "08:00")
    await make_slot(TODAY, "08:00", "08:30")
    await make_slot(TODAY, "08:29", "08:59")
    await make_slot(TODAY, "08:30", "09:00")
    await make_slot(TODAY, "09:00", "09:30")

    slots = await slots_service.get_available_slots(TODAY)
    assert [slot.start_time for slot in slots] == ["08:30", "09:00"]


async def test_available_slots_on_future_dates_are_not_filtered(slots_service, make_slot) -> None:
    await make_slot(TOMORROW, "00:00", "00:30")
    await make_slot(TOMORROW, "08:00", "08:30", booked_by=ALICE_ID)

    slots = await slots_service.get_available_slots(TOMORROW)
    assert [slot.start_time for slot in slots] == ["00:00"]


@pytest.mark.parametrize(
    "date, code",
    [(None, ErrorCode.INVALID_INPUT), ("2025/01/02", ErrorCode.INVALID_DATE_FORMAT), ("2024-12-31", ErrorCode.PAST_DATE)],
)
async def test_available_slots_date_validation(slots_service, date, code) -> None:
    with pytest.raises((InputError, PolicyError)) as exc_info:
        await slots_service.get_available_slots(date)
    assert exc_info.value.code == code


async def test_booked_overview_accepts_past_dates(slots_service, make_slot, users) -> None:
    await make_slot("2024-12-31", "09:00", "09:30", booked_by=ALICE_ID)
    slots = await slots_service.get_booked_slots("2024-12-31")
    assert [slot.booked_by_user.name for slot in slots] == ["Alice"]


async def test_delete_slot(slots_service, make_slot) -> None:
    slot = await make_slot(TOMORROW, "09:00", "09:30")
    await slots_service.delete_slot(slot.id)
    assert await slots_service.get_available_slots(TOMORROW) == []
