"""
Request context middleware for log correlation.

WHAT: Middleware that extracts request context (IP address, user agent,
request ID) and makes it available throughout the request lifecycle.

WHY: One candidate request fans out into several calls to the Party and
Election services. A request ID carried in every log line ties those
calls back to the request that caused them.

HOW: Stores the context on request.state and in a ContextVar, so services
and lookup clients can read it without receiving the request object.
"""

import logging
import time
import uuid
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Optional, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@dataclass
class RequestContext:
    """
    Container for request-scoped context data.

    Fields:
    - request_id: Unique identifier for the request (for log correlation)
    - ip_address: Client's real IP (considering proxies)
    - user_agent: Client's browser/application identifier
    - path: Request path
    - method: HTTP method (GET, POST, etc.)
    """

    request_id: str
    ip_address: str
    user_agent: Optional[str]
    path: str
    method: str


_request_context: ContextVar[Optional[RequestContext]] = ContextVar(
    "request_context", default=None
)


def get_request_context() -> Optional[RequestContext]:
    """
    Get the current request context.

    Returns:
        RequestContext if within a request, None otherwise
    """
    return _request_context.get()


def get_request_id() -> Optional[str]:
    """Return the current request ID, or None outside a request."""
    context = _request_context.get()
    return context.request_id if context else None


def get_client_ip(request: Request) -> str:
    """
    Extract the real client IP address from a request.

    HOW: Checks headers in order of trust:
    1. X-Real-IP (set by some proxies like nginx)
    2. X-Forwarded-For (comma-separated list, first is original client)
    3. request.client.host (direct connection IP)

    Args:
        request: The incoming request

    Returns:
        Client IP address as string
    """
    x_real_ip = request.headers.get("X-Real-IP")
    if x_real_ip:
        return x_real_ip.strip()

    # Format: "client, proxy1, proxy2"
    x_forwarded_for = request.headers.get("X-Forwarded-For")
    if x_forwarded_for:
        return x_forwarded_for.split(",")[0].strip()

    if request.client and request.client.host:
        return request.client.host

    return "unknown"


def get_user_agent(request: Request) -> Optional[str]:
    """Extract the User-Agent header from a request."""
    return request.headers.get("User-Agent")


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware that captures and stores request context.

    WHAT: Assigns every request an ID, records client details, and logs
    the outcome with its duration.

    HOW: An incoming X-Request-ID header is reused so IDs assigned by a
    gateway or by a calling service survive the hop. Otherwise a UUID4
    is generated. The ID is echoed in the response headers.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request and add context.

        Args:
            request: Incoming request
            call_next: Next middleware/handler

        Returns:
            Response with request ID header added
        """
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        context = RequestContext(
            request_id=request_id,
            ip_address=get_client_ip(request),
            user_agent=get_user_agent(request),
            path=request.url.path,
            method=request.method,
        )

        request.state.context = context
        token = _request_context.set(context)
        started = time.perf_counter()

        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id

            logger.info(
                "%s %s -> %s (%.1f ms) client=%s agent=%s",
                context.method,
                context.path,
                response.status_code,
                (time.perf_counter() - started) * 1000,
                context.ip_address,
                context.user_agent or "-",
            )
            return response

        finally:
            _request_context.reset(token)
