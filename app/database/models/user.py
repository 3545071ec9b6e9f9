from enum import Enum

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from app.database.models.base import Base
from app.database.models.utils import DateTemplate, UIDType


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    USER = "USER"


class UserModel(DateTemplate, Base):
    __tablename__ = "users"

    id = Column(UIDType, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True)
    role = Column(String, nullable=False, default=UserRole.USER)

    slots = relationship(
        "SlotModel",
        primaryjoin="UserModel.id == foreign(SlotModel.booked_by)",
        viewonly=True,
    )
