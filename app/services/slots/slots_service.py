import logging
from typing import Sequence
from uuid import UUID

from app.database.models.slot import SlotModel
from app.exceptions.slots_exceptions import ErrorCode, InputError
from app.repository.slots_repository import SlotsRepository
from app.schemas.slots.slot import SlotsCreatedSchema, SlotsCreateRequestSchema
from app.services.slots.eligibility_policy import EligibilityPolicy
from app.services.slots.slot_generator import generate_slots

logger = logging.getLogger(__name__)


class SlotsService:
    def __init__(self, slots_repository: SlotsRepository, policy: EligibilityPolicy):
        self.slots_repository = slots_repository
        self.policy = policy

    async def create_slots(self, request: SlotsCreateRequestSchema) -> SlotsCreatedSchema:
        logger.info(f"Creating slots: {request}")
        self.policy.validate_slot_creation_input(
            request.date, request.start_time, request.end_time, request.interval_minutes
        )

        candidates = generate_slots(request.date, request.start_time, request.end_time, request.interval_minutes)
        if not candidates:
            logger.warning(f"No slots fit between {request.start_time} and {request.end_time}")
            raise InputError(ErrorCode.NO_SLOTS)

        created, duplicates = await self.slots_repository.insert_new(candidates)
        logger.info(f"Created {created} slots for {request.date}, skipped {duplicates} duplicates")
        return SlotsCreatedSchema(total_slots=len(candidates), created=created, duplicates=duplicates)

    async def get_available_slots(self, date: str | None) -> Sequence[SlotModel]:
        if not date:
            raise InputError(ErrorCode.INVALID_INPUT)
        self.policy.validate_slot_date(date)

        slots = await self.slots_repository.find_available(date)
        if self.policy.is_today(date):
            now = self.policy.clock.now()
            slots = [slot for slot in slots if self.policy.is_bookable(slot, now)]
        logger.info(f"Found {len(slots)} available slots for {date}")
        return slots

    async def get_booked_slots(self, date: str | None = None) -> Sequence[SlotModel]:
        if date is not None:
            # past dates stay readable in the booked overview
            self.policy.validate_date_format(date)
        return await self.slots_repository.find_all_booked(date)

    async def delete_slot(self, slot_id: UUID) -> None:
        await self.slots_repository.delete_unbooked(slot_id)

