import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.exceptions.slots_exceptions import ConflictError, ErrorCode, InputError, SlotsError, StoreError

logger = logging.getLogger(__name__)


def _error_response(exc: SlotsError) -> JSONResponse:
    error = {"code": exc.code.value, "message": exc.message}
    if exc.rule is not None:
        error["rule"] = exc.rule.value
    if exc.details is not None:
        error["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content={"error": error})


async def slots_error_handler(request: Request, exc: SlotsError) -> JSONResponse:
    if isinstance(exc, StoreError):
        logger.error(f"Storage failure on {request.method} {request.url.path}")
    elif isinstance(exc, ConflictError):
        logger.info(f"Conflict on {request.method} {request.url.path}: {exc.code.value}")
    else:
        logger.warning(f"Rejected {request.method} {request.url.path}: {exc.code.value}")
    return _error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Malformed request on {request.method} {request.url.path}: {exc.errors()}")
    return _error_response(InputError(ErrorCode.INVALID_INPUT))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SlotsError, slots_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
