from typing import Annotated

from fastapi import Depends

from app.authorization.caller_id_dep import CallerIdDep
from app.database.models.user import UserRole
from app.exceptions.slots_exceptions import AuthorizationError, ErrorCode
from app.repository.repository import get_repository
from app.repository.users_repository import UsersRepository


class IsAdminUsrChecker:
    async def __call__(
        self,
        caller_id: CallerIdDep,
        users_repository: Annotated[UsersRepository, Depends(get_repository(UsersRepository))],
    ) -> str:
        role = await users_repository.get_role(caller_id)
        if role != UserRole.ADMIN:
            raise AuthorizationError(ErrorCode.FORBIDDEN)
        return caller_id


is_admin_usr_checker = IsAdminUsrChecker()
IsAdminUsrDep = Depends(is_admin_usr_checker)
