from app.database.models import UserRole
from app.repository.users_repository import UsersRepository
from app.scripts.seed_admin import seed_admin
from app.settings.settings import AdminSeedSettings


async def test_seed_admin_is_idempotent(session) -> None:
    users_repository = UsersRepository(session)
    settings = AdminSeedSettings(NAME="Root", EMAIL="root@example.com")

    assert await seed_admin(users_repository, settings) is True
    assert await seed_admin(users_repository, settings) is False

    admin = await users_repository.get_by_email("root@example.com")
    assert admin.name == "Root"
    assert await users_repository.get_role(admin.id) == UserRole.ADMIN
