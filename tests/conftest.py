import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from datetime import datetime  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402

from app.database.models import Base, SlotModel, UserModel, UserRole  # noqa: E402
from app.database.session_dep import get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.repository.slots_repository import SlotsRepository  # noqa: E402
from app.services.slots.eligibility_policy import EligibilityPolicy  # noqa: E402
from app.settings.settings import BookingSettings  # noqa: E402
from app.utils.clock_dep import get_clock  # noqa: E402
from app.utils.time_window import FixedClock  # noqa: E402

# 2025-01-01 08:00 in the operating time zone
NOW = datetime(2025, 1, 1, 8, 0)
TODAY = "2025-01-01"
TOMORROW = "2025-01-02"
IN_THREE_DAYS = "2025-01-04"

ADMIN_ID = "admin-1"
ALICE_ID = "alice-1"
BOB_ID = "bob-1"
# known to the gateway but without a users row
GATEWAY_USER_ID = "gateway-user-42"


@pytest.fixture
async def engine(tmp_path):
    # on-disk database so separate sessions use separate connections
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'slots.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, expire_on_commit=False, autocommit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def users(session_factory):
    async with session_factory() as session:
        session.add_all(
            [
                UserModel(id=ADMIN_ID, name="Admin", email="admin@example.com", role=UserRole.ADMIN.value),
                UserModel(id=ALICE_ID, name="Alice", email="alice@example.com", role=UserRole.USER.value),
                UserModel(id=BOB_ID, name="Bob", email="bob@example.com", role=UserRole.USER.value),
            ]
        )
        await session.commit()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def booking_settings() -> BookingSettings:
    return BookingSettings()


@pytest.fixture
def policy(clock, booking_settings) -> EligibilityPolicy:
    return EligibilityPolicy(clock, booking_settings)


@pytest.fixture
def slots_repository(session) -> SlotsRepository:
    return SlotsRepository(session)


@pytest.fixture
def make_slot(session_factory):
    async def _make_slot(date: str, start_time: str, end_time: str, booked_by: str | None = None) -> SlotModel:
        async with session_factory() as session:
            slot = SlotModel(
                date=date,
                start_time=start_time,
                end_time=end_time,
                is_booked=booked_by is not None,
                booked_by=booked_by,
            )
            session.add(slot)
            await session.commit()
            await session.refresh(slot)
            return slot

    return _make_slot


@pytest.fixture
async def client(session_factory, clock, users):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
