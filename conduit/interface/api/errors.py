"""Translate domain errors into HTTP responses.

Client errors use the ``{"errors": {field: message}}`` body.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from conduit.domain.error import (
    DuplicateUniqueError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    NotFoundError,
    ValidationError,
)


def _errors(status_code: int, errors: dict[str, str]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"errors": errors})


async def handle_validation_error(request: Request, exc: ValidationError):
    return _errors(status.HTTP_422_UNPROCESSABLE_ENTITY, {exc.field: exc.message})


async def handle_duplicate_error(request: Request, exc: DuplicateUniqueError):
    logfire.info("Duplicate unique value", field=exc.field, path=request.url.path)
    return _errors(status.HTTP_422_UNPROCESSABLE_ENTITY, {exc.field: exc.message})


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
):
    errors = {}
    for error in exc.errors():
        field = str(error["loc"][-1]) if error.get("loc") else "body"
        errors.setdefault(field, error["msg"])
    return _errors(status.HTTP_422_UNPROCESSABLE_ENTITY, errors)


async def handle_invalid_credentials(request: Request, exc: InvalidCredentialsError):
    return _errors(status.HTTP_401_UNAUTHORIZED, {"email or password": "is invalid"})


async def handle_missing_token(request: Request, exc: MissingTokenError):
    return _errors(status.HTTP_401_UNAUTHORIZED, {"token": "is missing"})


async def handle_invalid_token(request: Request, exc: InvalidTokenError):
    logfire.info("Rejected token", reason=str(exc), path=request.url.path)
    return _errors(status.HTTP_401_UNAUTHORIZED, {"token": "is invalid"})


async def handle_not_found(request: Request, exc: NotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={exc.resource.lower(): "not found"},
    )


async def handle_forbidden(request: Request, exc: ForbiddenError):
    logfire.warn(
        "Forbidden",
        resource=exc.resource,
        resource_id=exc.resource_id,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={exc.resource.lower(): "forbidden"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers for every domain error.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(DuplicateUniqueError, handle_duplicate_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(InvalidCredentialsError, handle_invalid_credentials)
    app.add_exception_handler(MissingTokenError, handle_missing_token)
    app.add_exception_handler(InvalidTokenError, handle_invalid_token)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(ForbiddenError, handle_forbidden)
