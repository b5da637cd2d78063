"""FastAPI middleware components."""

from __future__ import annotations

import time
import uuid

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

logger = structlog.get_logger()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware to add request ID to each request.

    The ID is stored in request.state.request_id and returned in
    the X-Request-ID response header.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process request and add request ID.

        Args:
            request: Incoming request
            call_next: Next middleware/handler

        Returns:
            Response with X-Request-ID header
        """
        # Reuse the caller's request ID when one is supplied
        request_id = request.headers.get("X-Request-ID")
        if not request_id:
            request_id = str(uuid.uuid4())

        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request/response logging.

    Logs request details and response status with timing information.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process request and log details.

        Args:
            request: Incoming request
            call_next: Next middleware/handler

        Returns:
            Response
        """
        start_time = time.perf_counter()

        # Set by RequestIDMiddleware
        request_id = getattr(request.state, "request_id", "unknown")

        logger.info(
            "request_started",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            "request_completed",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )

        response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"

        return response


class CaseInsensitivePrefixMiddleware(BaseHTTPMiddleware):
    """Rewrite any casing of a route prefix to its canonical form.

    Lets clients call ``/api/todo`` or ``/API/TODO`` for routes
    registered under ``/api/Todo``.
    """

    def __init__(self, app: ASGIApp, prefix: str) -> None:
        """Initialize middleware.

        Args:
            app: Wrapped ASGI application
            prefix: Canonical route prefix (e.g., "/api/Todo")
        """
        super().__init__(app)
        self.prefix = prefix.rstrip("/")
        self._folded = self.prefix.casefold()

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        path: str = request.scope["path"]
        head, rest = path[: len(self.prefix)], path[len(self.prefix) :]

        if (
            head != self.prefix
            and head.casefold() == self._folded
            and (not rest or rest.startswith("/"))
        ):
            request.scope["path"] = self.prefix + rest

        return await call_next(request)
