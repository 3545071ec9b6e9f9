from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, computed_field

from app.schemas.users.user import PublicUserSchema


class SlotsCreateRequestSchema(BaseModel):
    """
    Time range to split into slots for a single date.
    """

    date: str | None = Field(default=None, examples=["2025-01-01"])
    start_time: str | None = Field(default=None, examples=["09:00"])
    end_time: str | None = Field(default=None, examples=["17:00"])
    interval_minutes: int | None = Field(default=None, examples=[30])


class SlotsCreatedSchema(BaseModel):
    message: str = "Slots created successfully"
    total_slots: int
    created: int
    duplicates: int


class SlotSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    date: str
    start_time: str
    end_time: str
    is_booked: bool


class BookingSchema(SlotSchema):
    booked_by: str | None = None


class BookedSlotWithUserSchema(SlotSchema):
    booked_by: str | None = None
    booked_by_user: PublicUserSchema | None = Field(default=None, exclude=True)

    @computed_field
    def user(self) -> PublicUserSchema | None:
        return self.booked_by_user
