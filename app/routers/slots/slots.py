import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends

from app.authorization.admin_user_dep import IsAdminUsrDep
from app.authorization.caller_id_dep import get_caller_id
from app.schemas.slots.slot import (
    BookedSlotWithUserSchema,
    SlotSchema,
    SlotsCreatedSchema,
    SlotsCreateRequestSchema,
)
from app.services.slots.slots_service_dep import SlotsServiceDep

slots_router = APIRouter(prefix="/slots", tags=["Slots"])
logger = logging.getLogger(__name__)


@slots_router.post(path="", status_code=201, response_model=SlotsCreatedSchema, dependencies=[IsAdminUsrDep])
async def create_slots(request: SlotsCreateRequestSchema, slots_service: SlotsServiceDep) -> SlotsCreatedSchema:
    logger.info(f"Generating slots for {request.date}")
    return await slots_service.create_slots(request)


@slots_router.get(
    path="", status_code=200, response_model=List[SlotSchema], dependencies=[Depends(get_caller_id)]
)
async def get_available_slots(slots_service: SlotsServiceDep, date: str | None = None) -> List[SlotSchema]:
    return await slots_service.get_available_slots(date)


@slots_router.get(
    path="/booked", status_code=200, response_model=List[BookedSlotWithUserSchema], dependencies=[IsAdminUsrDep]
)
async def get_booked_slots(slots_service: SlotsServiceDep, date: str | None = None) -> List[BookedSlotWithUserSchema]:
    return await slots_service.get_booked_slots(date)


@slots_router.delete(path="/{slot_id}", status_code=204, response_model=None, dependencies=[IsAdminUsrDep])
async def delete_slot(slot_id: UUID, slots_service: SlotsServiceDep) -> None:
    logger.info(f"Deleting slot {slot_id}")
    await slots_service.delete_slot(slot_id)
