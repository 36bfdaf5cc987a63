"""
Request logging middleware.
Logs one line per API request with method, path, status and duration.
"""

from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
import logging
import time

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that times requests and logs those under the API prefix.
    Adds an X-Processing-Time header to every response.
    """

    def __init__(self, app: ASGIApp, path_prefix: str = "/api", max_line_length: int = 80):
        super().__init__(app)
        self.path_prefix = path_prefix
        self.max_line_length = max_line_length

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request through the logging middleware.

        Args:
            request: FastAPI request object
            call_next: Next middleware/handler in chain

        Returns:
            Response object with timing header
        """
        start_time = time.perf_counter()
        path = request.url.path

        try:
            response = await call_next(request)
        except Exception as exc:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"{request.method} {path} failed after {duration_ms:.0f}ms: "
                f"{type(exc).__name__} - {exc}",
                extra={
                    "path": path,
                    "method": request.method,
                    "error_type": type(exc).__name__
                },
                exc_info=True
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        response.headers["X-Processing-Time"] = f"{duration_ms / 1000:.3f}"

        if path.startswith(self.path_prefix):
            line = f"{request.method} {path} {response.status_code} in {duration_ms:.0f}ms"
            if len(line) > self.max_line_length:
                line = line[:self.max_line_length - 1] + "…"
            logger.info(line)

        return response
