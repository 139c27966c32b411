"""
SEO Gateway — Request ID Middleware
====================================

What:  Tags each request with a short correlation ID and echoes it back.
How:   Reuses an incoming X-Request-ID header or generates an 8-char UUID
       prefix; stores it in a ContextVar and on request.state; sets the
       X-Request-ID response header.
Who:   Applied to every request; read by the access logger and the
       exception handlers in main.py.

A page render touches the access log, the metadata fetcher's fallback
warning and possibly an error handler; the shared ID ties those lines
together for one request.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns and propagates the per-request correlation ID."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or new_request_id()

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
