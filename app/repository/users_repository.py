from sqlalchemy.ext.asyncio import AsyncSession

from app.database.models.user import UserModel, UserRole
from app.repository.crud_repository import Repository


class UsersRepository(Repository[UserModel]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, UserModel)

    async def get_role(self, user_id: str) -> UserRole | None:
        user = await self.get(user_id)
        if user is None:
            return None
        return UserRole(user.role)

    async def get_by_email(self, email: str) -> UserModel | None:
        return await self._get_with_conditions([UserModel.email == email])

    async def create_user(self, user_id: str, name: str, email: str, role: UserRole) -> UserModel:
        return await self._create(UserModel(id=user_id, name=name, email=email, role=role.value))
