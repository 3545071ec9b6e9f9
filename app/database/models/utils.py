import uuid

from sqlalchemy import UUID, Column, DateTime, String, func

UIDType = String


class DateTemplate:
    creation_date = Column(DateTime, server_default=func.now(), nullable=False)
    last_update = Column(DateTime, server_default=func.now(), onupdate=func.now())


class ModelTemplate(DateTemplate):
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
