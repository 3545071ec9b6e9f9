import logging
from typing import Sequence
from uuid import UUID

from app.database.models.slot import SlotModel
from app.exceptions.slots_exceptions import ConflictError, ErrorCode, PolicyError
from app.repository.slots_repository import SlotsRepository
from app.services.slots.eligibility_policy import EligibilityPolicy

logger = logging.getLogger(__name__)


class BookingsService:
    """
    The only writer of a slot's booking state.

    Correctness against double booking rests entirely on the repository's
    conditional updates: the precondition is checked and the new state is
    written by one statement, so at most one concurrent caller can win.
    Unknown slots and lost races produce the same outcome, which keeps slot
    existence hidden from callers that could not book it anyway.
    """

    def __init__(self, user_id: str, slots_repository: SlotsRepository, policy: EligibilityPolicy):
        self.user_id = user_id
        self.slots_repository = slots_repository
        self.policy = policy

    async def reserve(self, slot_id: UUID) -> SlotModel:
        logger.info(f"User {self.user_id} booking slot {slot_id}")
        slot = await self.slots_repository.get_or_none(slot_id)
        if slot is not None and not slot.is_booked:
            self.policy.validate_booking_window(slot)

        booked = await self.slots_repository.conditional_reserve(slot_id, self.user_id)
        if booked is None:
            logger.info(f"Slot {slot_id} unavailable for user {self.user_id}")
            raise ConflictError(ErrorCode.SLOT_ALREADY_BOOKED)

        logger.info(f"Slot {slot_id} booked by user {self.user_id}")
        return booked

    async def cancel(self, slot_id: UUID) -> SlotModel:
        logger.info(f"User {self.user_id} cancelling booking for slot {slot_id}")
        slot = await self.slots_repository.get_or_none(slot_id)
        self.policy.validate_cancellation(slot, self.user_id)

        released = await self.slots_repository.conditional_release(slot_id, self.user_id)
        if released is None:
            logger.info(f"Slot {slot_id} changed before it could be released for user {self.user_id}")
            raise PolicyError(ErrorCode.CANCEL_NOT_ALLOWED)

        logger.info(f"Slot {slot_id} released by user {self.user_id}")
        return released

    async def get_my_bookings(self) -> Sequence[SlotModel]:
        return await self.slots_repository.find_booked_by_user(self.user_id)
