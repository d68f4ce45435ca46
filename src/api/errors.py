# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Error mapping and exception handlers.

Registry failures arrive as ``Err`` values and are turned into
``HTTPException`` here. Every error leaves the API as
``{"error": "<message>"}``:
- HTTP errors (including unmatched routes) keep their status and detail
- Malformed request bodies become 400 "Invalid request body"
- Anything unexpected becomes 500 "Internal Server Error" and is logged
"""

import logging
from typing import NoReturn, TypeVar

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.middleware import REQUEST_ID_HEADER
from src.domains.registry import Err, ErrorKind, Ok, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Everything not listed maps to 400
_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def raise_for_error(err: Err) -> NoReturn:
    """Raise the HTTPException matching a registry error.

    Args:
        err: Failed registry result.

    Raises:
        HTTPException: 404 for NOT_FOUND, 400 for any other kind.
    """
    raise HTTPException(
        status_code=_STATUS_BY_KIND.get(err.kind, status.HTTP_400_BAD_REQUEST),
        detail=err.message,
    )


def unwrap(result: Result[T]) -> T:
    """Return the payload of an ``Ok`` or raise for an ``Err``."""
    match result:
        case Ok(value=value):
            return value
        case Err() as err:
            raise_for_error(err)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ``{"error": detail}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as 400."""
    logger.info("Invalid request body: path=%s, errors=%s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and hide their details from clients."""
    logger.exception(
        "Unhandled error: method=%s, path=%s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    request_id = getattr(request.state, "request_id", None)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal Server Error"},
        headers={REQUEST_ID_HEADER: request_id} if request_id else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to an application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
