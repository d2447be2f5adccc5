import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.domain.errors import TaskNotFoundError, TaskValidationError

logger = logging.getLogger(__name__)

INVALID_BODY_ERROR = "request body must be a JSON object"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def task_validation_error_handler(
    request: Request, exc: TaskValidationError
) -> JSONResponse:
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc)
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


async def task_not_found_handler(
    request: Request, exc: TaskNotFoundError
) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, str(exc))


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.debug("Invalid body on %s %s: %s", request.method, request.url.path, exc.errors())
    return _error(status.HTTP_400_BAD_REQUEST, INVALID_BODY_ERROR)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskValidationError, task_validation_error_handler)
    app.add_exception_handler(TaskNotFoundError, task_not_found_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
