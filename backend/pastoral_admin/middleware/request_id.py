"""
Pastoral Admin Backend — Request ID Middleware
================================================

What:  Assigns a correlation ID to each request and echoes it back in the
       X-Request-ID response header.
How:   A client-supplied X-Request-ID is kept; otherwise a short random ID
       is generated. The ID lives in a ContextVar so log calls and the
       exception handlers can read it without access to the request.
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
    """Eight hex characters; enough to correlate log lines of one request."""
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Behavior:
        1. Reuse the caller's X-Request-ID when present, else generate one
        2. Publish it through request_id_var and request.state.request_id
        3. Copy it onto the response
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
