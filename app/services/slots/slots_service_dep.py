from typing import Annotated

from fastapi import Depends

from app.repository.repository import get_repository
from app.repository.slots_repository import SlotsRepository
from app.services.slots.eligibility_policy_dep import EligibilityPolicyDep
from app.services.slots.slots_service import SlotsService


class SlotsChecker:
    async def __call__(
        self,
        policy: EligibilityPolicyDep,
        slots_repository: Annotated[SlotsRepository, Depends(get_repository(SlotsRepository))],
    ) -> SlotsService:
        return SlotsService(slots_repository, policy)


slots_checker = SlotsChecker()
SlotsServiceDep = Annotated[SlotsService, Depends(slots_checker)]
