"""
Request Logging Middleware

Logs one line per HTTP request: method, path, status code, processing time
and client IP. Short ids appear in the path, so the log doubles as a record
of which links were created and opened.
"""

import logging
import time

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger("sharelink")


def get_client_ip(request: Request) -> str:
    """
    Client IP address, honouring X-Forwarded-For from a proxy.

    X-Forwarded-For can contain multiple IPs; the first one is the client.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware logging each request/response pair."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        process_time = time.perf_counter() - start_time

        # Format: METHOD PATH STATUS_CODE PROCESS_TIME_MS CLIENT_IP
        logger.info(
            f"{request.method} {request.url.path} "
            f"{response.status_code} {process_time*1000:.2f}ms "
            f"IP:{get_client_ip(request)}"
        )

        response.headers["X-Process-Time"] = str(process_time)
        return response


def add_logging_middleware(app: FastAPI) -> None:
    """Add request logging middleware to ``app``."""
    app.add_middleware(LoggingMiddleware)
