from typing import Annotated

from fastapi import Depends, Header

from app.exceptions.slots_exceptions import AuthorizationError, ErrorCode


async def get_caller_id(x_user_id: Annotated[str | None, Header()] = None) -> str:
    # set by the authenticating gateway once the credentials are verified
    if not x_user_id:
        raise AuthorizationError(ErrorCode.UNAUTHORIZED)
    return x_user_id


CallerIdDep = Annotated[str, Depends(get_caller_id)]
