# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Request context middleware.

Binds a request id to the structlog context for the duration of each
request and logs one line per completed request. The id is taken from
the ``X-Request-ID`` header when present and echoed back on the response.
Requests whose handler raises are logged as failed with status 500
before the error propagates to the exception handlers.

Example:
    GET /students
    X-Request-ID: 7f3c1e

    HTTP/1.1 200 OK
    X-Request-ID: 7f3c1e
"""

import time
import uuid
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from src.utils.logging import bind_context, clear_context, get_logger

logger = get_logger(__name__)

# Header carrying the request id in both directions
REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware binding a request id and logging request outcomes.

    The id is stored in ``request.state.request_id`` and bound to the
    logging context so every log line emitted while handling the request
    carries it.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Process the request with a bound request id.

        Args:
            request: Incoming HTTP request.
            call_next: Next middleware or route handler.

        Returns:
            Response with the request id header set.
        """
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
        request.state.request_id = request_id

        clear_context()
        bind_context(request_id=request_id)
        start = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception:
                logger.error(
                    "Request failed",
                    method=request.method,
                    path=request.url.path,
                    status=500,
                    duration_ms=round((time.perf_counter() - start) * 1000, 2),
                )
                raise

            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status=response.status_code,
                duration_ms=duration_ms,
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            clear_context()
