"""
Storefront API — Request ID Middleware
========================================

What:  Assigns an ID to each incoming request and returns it in X-Request-ID.
How:   Reuses the client's X-Request-ID header when it is a short token of
       safe characters, otherwise generates a short UUID. The ID is stored in
       a ContextVar for loggers and in request.state for handlers and the
       500 handler, which runs outside this middleware.
"""

import logging
import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Client IDs end up in log lines and response headers
_CLIENT_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,64}")

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return str(uuid.uuid4())[:8]


def resolve_request_id(client_value: str | None) -> str:
    """Return the client's ID if it is acceptable, else a freshly generated one."""
    if client_value and _CLIENT_ID_PATTERN.fullmatch(client_value):
        return client_value
    rid = new_request_id()
    if client_value:
        logger.debug("Replaced malformed client request ID with %s", rid)
    return rid


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that tags every request and response with a request ID."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
