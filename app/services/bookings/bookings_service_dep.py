from typing import Annotated

from fastapi import Depends

from app.authorization.caller_id_dep import CallerIdDep
from app.repository.repository import get_repository
from app.repository.slots_repository import SlotsRepository
from app.services.bookings.bookings_service import BookingsService
from app.services.slots.eligibility_policy_dep import EligibilityPolicyDep


class BookingsChecker:
    async def __call__(
        self,
        caller_id: CallerIdDep,
        policy: EligibilityPolicyDep,
        slots_repository: Annotated[SlotsRepository, Depends(get_repository(SlotsRepository))],
    ) -> BookingsService:
        return BookingsService(caller_id, slots_repository, policy)


bookings_checker = BookingsChecker()
BookingsServiceDep = Annotated[BookingsService, Depends(bookings_checker)]
