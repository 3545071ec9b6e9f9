import functools
import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.database.models.slot import SlotModel
from app.exceptions.slots_exceptions import (
    ConflictError,
    ErrorCode,
    NotFoundError,
    PolicyError,
    StoreError,
)
from app.repository.crud_repository import Repository
from app.services.slots.slot_generator import SlotCandidate

logger = logging.getLogger(__name__)


def store_operation(method):
    """Roll back and surface any unexpected database fault as a StoreError."""

    @functools.wraps(method)
    async def wrapper(self: "SlotsRepository", *args, **kwargs):
        try:
            return await method(self, *args, **kwargs)
        except SQLAlchemyError as e:
            logger.exception(f"Slot store failure in {method.__name__}")
            await self.session.rollback()
            raise StoreError() from e

    return wrapper


class SlotsRepository(Repository[SlotModel]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, SlotModel)

    @store_operation
    async def insert_new(self, candidates: Sequence[SlotCandidate]) -> tuple[int, int]:
        """
        Persists the candidates that do not exist yet for their date.

        Existing start times are filtered out first. That read can race with a
        concurrent identical request, so the unique constraint on
        (date, start_time, end_time) stays the real guard: if the batch insert
        trips it, every remaining candidate is retried on its own and only the
        rows this call actually wrote are reported as inserted.

        Returns:
            (inserted, skipped) counts over the given candidates.
        """
        if not candidates:
            return 0, 0

        date = candidates[0].date
        existing = await self.session.scalars(select(SlotModel.start_time).where(SlotModel.date == date))
        taken = set(existing.all())
        fresh = [candidate for candidate in candidates if candidate.start_time not in taken]
        if not fresh:
            logger.info(f"All {len(candidates)} slots for {date} already exist")
            raise ConflictError(ErrorCode.ALL_DUPLICATE, details={"created": 0, "duplicates": len(candidates)})

        logger.info(f"Bulk creating {len(fresh)} slots for {date}, {len(candidates) - len(fresh)} already present")
        try:
            self.session.add_all([self._to_model(candidate) for candidate in fresh])
            await self.session.commit()
            inserted = len(fresh)
        except IntegrityError:
            await self.session.rollback()
            logger.info(f"Concurrent slot creation detected for {date}, inserting one by one")
            inserted = await self._insert_one_by_one(fresh)

        if inserted == 0:
            raise ConflictError(ErrorCode.DUPLICATE, details={"created": 0, "duplicates": len(candidates)})
        logger.info(f"Successfully created {inserted} slots for {date}")
        return inserted, len(candidates) - inserted

    async def _insert_one_by_one(self, candidates: Sequence[SlotCandidate]) -> int:
        inserted = 0
        for candidate in candidates:
            self.session.add(self._to_model(candidate))
            try:
                await self.session.commit()
                inserted += 1
            except IntegrityError:
                await self.session.rollback()
                logger.info(f"Slot {candidate.date} {candidate.start_time}-{candidate.end_time} already exists")
        return inserted

    @store_operation
    async def find_available(self, date: str) -> Sequence[SlotModel]:
        conditions = [SlotModel.date == date, SlotModel.is_booked.is_(False)]
        return await self._get_many_with_conditions(conditions, order_by=[SlotModel.start_time])

    @store_operation
    async def find_booked_by_user(self, user_id: str) -> Sequence[SlotModel]:
        conditions = [SlotModel.booked_by == user_id, SlotModel.is_booked.is_(True)]
        return await self._get_many_with_conditions(conditions, order_by=[SlotModel.date, SlotModel.start_time])

    @store_operation
    async def find_all_booked(self, date: str | None = None) -> Sequence[SlotModel]:
        """
        Fetches every booked slot, optionally for one date, eagerly loading
        the user who booked it.
        """
        conditions = [SlotModel.is_booked.is_(True)]
        if date is not None:
            conditions.append(SlotModel.date == date)
        return await self._get_many_with_conditions(
            conditions,
            order_by=[SlotModel.date, SlotModel.start_time],
            options=[selectinload(SlotModel.booked_by_user)],
        )

    @store_operation
    async def get_or_none(self, slot_id: UUID) -> SlotModel | None:
        return await self.get(slot_id)

    @store_operation
    async def delete_unbooked(self, slot_id: UUID) -> None:
        logger.info(f"Deleting slot {slot_id}")
        slot = await self.get(slot_id)
        if slot is None:
            raise NotFoundError()
        if slot.is_booked:
            raise PolicyError(ErrorCode.SLOT_IS_BOOKED)

        res = await self.session.execute(
            delete(SlotModel).where(SlotModel.id == slot_id, SlotModel.is_booked.is_(False))
        )
        await self.session.commit()
        if res.rowcount == 0:
            # booked or removed between the read and the delete
            if await self.get(slot_id) is None:
                raise NotFoundError()
            raise PolicyError(ErrorCode.SLOT_IS_BOOKED)
        logger.info(f"Deleted slot {slot_id}")

    @store_operation
    async def conditional_reserve(self, slot_id: UUID, user_id: str) -> SlotModel | None:
        """
        Books the slot for user_id only if it is still free.

        Returns the updated slot, or None when no row matched the precondition
        (unknown id, already booked, or lost a concurrent race).
        """
        stmt = (
            update(SlotModel)
            .where(SlotModel.id == slot_id, SlotModel.is_booked.is_(False))
            .values(is_booked=True, booked_by=user_id, last_update=func.now())
            .execution_options(synchronize_session=False)
        )
        return await self._conditional_update(stmt, slot_id)

    @store_operation
    async def conditional_release(self, slot_id: UUID, user_id: str) -> SlotModel | None:
        """Frees the slot only if it is currently booked by user_id."""
        stmt = (
            update(SlotModel)
            .where(SlotModel.id == slot_id, SlotModel.is_booked.is_(True), SlotModel.booked_by == user_id)
            .values(is_booked=False, booked_by=None, last_update=func.now())
            .execution_options(synchronize_session=False)
        )
        return await self._conditional_update(stmt, slot_id)

    async def _conditional_update(self, stmt, slot_id: UUID) -> SlotModel | None:
        res = await self.session.execute(stmt)
        if res.rowcount != 1:
            await self.session.rollback()
            return None
        await self.session.commit()
        return await self.get(slot_id)

    @staticmethod
    def _to_model(candidate: SlotCandidate) -> SlotModel:
        return SlotModel(
            date=candidate.date,
            start_time=candidate.start_time,
            end_time=candidate.end_time,
            is_booked=False,
        )
