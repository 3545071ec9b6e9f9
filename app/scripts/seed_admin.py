"""
Creates the default admin user when it does not exist yet.

    python -m app.scripts.seed_admin
"""
import asyncio
import logging
import uuid

from app.database.database import SessionLocal
from app.database.models.user import UserRole
from app.repository.users_repository import UsersRepository
from app.settings.settings import AdminSeedSettings

logger = logging.getLogger(__name__)


async def seed_admin(users_repository: UsersRepository, settings: AdminSeedSettings) -> bool:
    existing = await users_repository.get_by_email(settings.EMAIL)
    if existing is not None:
        logger.info(f"Admin {settings.EMAIL} already exists")
        return False

    admin = await users_repository.create_user(str(uuid.uuid4()), settings.NAME, settings.EMAIL, UserRole.ADMIN)
    logger.info(f"Admin user created with id {admin.id}")
    return True


async def main() -> None:
    async with SessionLocal() as session:
        await seed_admin(UsersRepository(session), AdminSeedSettings())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    asyncio.run(main())
