from typing import Annotated

from fastapi import Depends

from app.services.slots.eligibility_policy import EligibilityPolicy
from app.settings.settings import booking_settings
from app.utils.clock_dep import ClockDep


async def get_eligibility_policy(clock: ClockDep) -> EligibilityPolicy:
    return EligibilityPolicy(clock, booking_settings)


EligibilityPolicyDep = Annotated[EligibilityPolicy, Depends(get_eligibility_policy)]
