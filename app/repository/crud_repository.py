from typing import Any, Generic, Sequence, Type, TypeVar

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.models.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class Repository(Generic[ModelType]):
    def __init__(self, session: AsyncSession, model: Type[ModelType]):
        self.session = session
        self.model = model

    async def get(self, id: Any) -> ModelType | None:
        return await self.session.get(self.model, id, populate_existing=True)

    async def _create(self, obj: ModelType) -> ModelType:
        self.session.add(obj)
        await self.session.commit()
        await self.session.refresh(obj)
        return obj

    async def _get_with_conditions(self, conditions) -> ModelType | None:
        query = select(self.model).where(and_(*conditions))
        res = await self.session.execute(query)
        return res.scalars().first()

    async def _get_many_with_conditions(
        self, conditions, offset: int = 0, limit: int = 1000, order_by=None, options=None
    ) -> Sequence[ModelType]:
        query = select(self.model).where(and_(*conditions))
        if order_by is not None:
            query = query.order_by(*order_by)
        if options:
            query = query.options(*options)
        query = query.offset(offset).limit(limit)
        res = await self.session.execute(query)
        return res.scalars().all()
