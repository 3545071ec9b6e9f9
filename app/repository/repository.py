from typing import Callable, Coroutine, Type, TypeVar

from app.database.session_dep import SessionDep
from app.repository.crud_repository import Repository

RepositoryT = TypeVar("RepositoryT", bound=Repository)


def get_repository(repository: Type[RepositoryT]) -> Callable[..., Coroutine[None, None, RepositoryT]]:
    """Builds a FastAPI dependency that binds `repository` to the request's session."""

    async def _get_repository(session: SessionDep) -> RepositoryT:
        return repository(session)

    return _get_repository
