from .base import Base
from .slot import SlotModel
from .user import UserModel, UserRole

__all__ = ["Base", "SlotModel", "UserModel", "UserRole"]
