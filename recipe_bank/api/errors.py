import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from recipe_bank.core.exceptions import (
    InvalidJSONError,
    InvalidQueryParamsError,
    MissingPathParamError,
    RecipeBankError,
)
from recipe_bank.schemas import APIError, APIResponse

logger = logging.getLogger(__name__)


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    body = APIResponse(success=False, error=APIError(code=code, message=message))
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def recipe_bank_error_handler(request: Request, exc: RecipeBankError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.exception(
            f"Request failed: {request.method} {request.url.path}: {exc}", exc_info=exc
        )
    else:
        logger.error(f"Request failed: {request.method} {request.url.path}: {exc}")
    return error_response(exc.status_code, exc.code, exc.detail)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    location = errors[0]["loc"] if errors else ()
    source = location[0] if location else "body"
    param = str(location[1]) if len(location) > 1 else ""

    if source == "query":
        error: RecipeBankError = InvalidQueryParamsError(param)
    elif source == "path":
        error = MissingPathParamError(param)
    else:
        error = InvalidJSONError(f"request body rejected: {errors}")
    return await recipe_bank_error_handler(request, error)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.error(f"Request failed: {request.method} {request.url.path}: {exc.detail}")
    code = "not_found" if exc.status_code == 404 else "http_error"
    return error_response(exc.status_code, code, str(exc.detail))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        f"Request failed: {request.method} {request.url.path}: {exc}", exc_info=exc
    )
    return error_response(500, "internal_error", RecipeBankError.public_message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RecipeBankError, recipe_bank_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
