import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter

from app.schemas.slots.slot import BookingSchema
from app.services.bookings.bookings_service_dep import BookingsServiceDep

bookings_router = APIRouter(prefix="/bookings", tags=["Bookings"])
logger = logging.getLogger(__name__)


@bookings_router.get(path="/my-bookings", status_code=200, response_model=List[BookingSchema])
async def get_my_bookings(bookings_service: BookingsServiceDep) -> List[BookingSchema]:
    return await bookings_service.get_my_bookings()


@bookings_router.post(path="/{slot_id}", status_code=200, response_model=BookingSchema)
async def book_slot(slot_id: UUID, bookings_service: BookingsServiceDep) -> BookingSchema:
    return await bookings_service.reserve(slot_id)


@bookings_router.delete(path="/{slot_id}", status_code=200, response_model=BookingSchema)
async def cancel_booking(slot_id: UUID, bookings_service: BookingsServiceDep) -> BookingSchema:
    return await bookings_service.cancel(slot_id)
