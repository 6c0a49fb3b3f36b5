"""Mapping of domain and request errors to ``ErrorResponse`` bodies.

``InvalidInputError`` becomes 400, ``ResourceNotFoundError`` 404. Request
bodies that fail validation become 400 as well; when the failure is an
unknown status or priority token the message names the field, the value
and the allowed values.
"""

import logging
from collections.abc import Sequence
from enum import Enum
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..errors import InvalidInputError, ResourceNotFoundError
from ..schemas.transformations import ErrorResponse
from ..schemas.unified_models import TaskPriority, TaskStatus


logger = logging.getLogger(__name__)

ENUM_FIELDS: dict[str, type[Enum]] = {
    "status": TaskStatus,
    "priority": TaskPriority,
}

GENERIC_FORMAT_MESSAGE = "Invalid request format."


def describe_validation_errors(errors: Sequence[dict[str, Any]]) -> str:
    """Build a client-facing message from pydantic validation errors."""
    for error in errors:
        if error.get("type") != "enum":
            continue

        field = next(
            (part for part in reversed(error.get("loc", ())) if isinstance(part, str)),
            "unknown",
        )
        enum_class = ENUM_FIELDS.get(field)
        if enum_class is not None:
            allowed = ", ".join(member.value for member in enum_class)
        else:
            allowed = error.get("ctx", {}).get("expected", "")

        return (
            f"Invalid value '{error.get('input')}' for field '{field}'. "
            f"Allowed values are: [{allowed}]"
        )
    return GENERIC_FORMAT_MESSAGE


def error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    """Render an ``ErrorResponse`` for the current request."""
    body = ErrorResponse(
        status=status_code, message=message, details=f"uri={request.url.path}"
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def handle_invalid_input(request: Request, exc: InvalidInputError) -> JSONResponse:
    return error_response(request, status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_not_found(request: Request, exc: ResourceNotFoundError) -> JSONResponse:
    return error_response(request, status.HTTP_404_NOT_FOUND, str(exc))


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = describe_validation_errors(exc.errors())
    logger.debug(f"Request validation failed on {request.url.path}: {exc.errors()}")
    return error_response(request, status.HTTP_400_BAD_REQUEST, message)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers above to ``app``."""
    app.add_exception_handler(InvalidInputError, handle_invalid_input)
    app.add_exception_handler(ResourceNotFoundError, handle_not_found)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
