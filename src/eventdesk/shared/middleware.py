"""
Request correlation middleware.

Every request gets a correlation id, taken from ``X-Request-ID`` when the
caller sends one, stored in ``correlation_id_var`` for the structured log
formatter and echoed back on the response.
"""

import time
import uuid
from typing import Any, Callable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from eventdesk.shared.logging import correlation_id_var, get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def generate_correlation_id() -> str:
    """Generate a new correlation ID."""
    return str(uuid.uuid4())


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Extract or generate a correlation ID and log each request."""

    def __init__(
        self,
        app: Any,
        header_name: str = REQUEST_ID_HEADER,
        generator: Callable[[], str] = generate_correlation_id,
        exclude_paths: list[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.header_name = header_name
        self.generator = generator
        self.exclude_paths = exclude_paths or ["/health"]

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        correlation_id = request.headers.get(self.header_name) or self.generator()
        token = correlation_id_var.set(correlation_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers[self.header_name] = correlation_id

            if not any(request.url.path.startswith(p) for p in self.exclude_paths):
                logger.info(
                    "Request completed",
                    extra={
                        "method": request.method,
                        "path": request.url.path,
                        "status_code": response.status_code,
                        "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                    },
                )
            return response
        finally:
            correlation_id_var.reset(token)
