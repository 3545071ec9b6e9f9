from sqlalchemy import Boolean, CheckConstraint, Column, Index, String, UniqueConstraint
from sqlalchemy.orm import relationship

from app.database.models.base import Base
from app.database.models.utils import ModelTemplate, UIDType


class SlotModel(ModelTemplate, Base):
    __tablename__ = "slots"

    date = Column(String(10), nullable=False)
    start_time = Column(String(5), nullable=False)
    end_time = Column(String(5), nullable=False)
    is_booked = Column(Boolean, nullable=False, default=False)
    # opaque caller id handed over by the gateway, not necessarily a users row
    booked_by = Column(UIDType, nullable=True)

    booked_by_user = relationship(
        "UserModel",
        primaryjoin="foreign(SlotModel.booked_by) == UserModel.id",
        viewonly=True,
    )

    __table_args__ = (
        UniqueConstraint("date", "start_time", "end_time", name="_slot_date_time_uc"),
        CheckConstraint("start_time < end_time", name="_slot_time_order_ck"),
        CheckConstraint(
            "(is_booked AND booked_by IS NOT NULL) OR (NOT is_booked AND booked_by IS NULL)",
            name="_slot_booked_by_ck",
        ),
        Index("ix_slot_date", "date"),
        Index("ix_slot_booked_by", "booked_by"),
    )
