"""
Pastoral Admin Backend — Rate Limiting Middleware
===================================================

What:  Per-IP sliding window limiter in front of every route.
How:   Keeps the timestamps of each client's requests inside the window.
       A client at the limit gets 429 with Retry-After set to the seconds
       until its oldest request leaves the window.

Limits:
    Constructed with max_requests / window_seconds, which create_app() takes
    from RATE_LIMIT_REQUESTS / RATE_LIMIT_WINDOW.

State is in-process; each worker process enforces its own limit.
"""

import logging
import time
from collections import defaultdict, deque
from typing import Callable, Deque, Dict

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from pastoral_admin.exceptions import RateLimitExceededError
from pastoral_admin.middleware.request_id import REQUEST_ID_HEADER, new_request_id

logger = logging.getLogger(__name__)

# Inactive clients are swept after this many tracked requests
SWEEP_EVERY = 1000


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Sliding window rate limiter keyed by client IP.

    Excluded paths (health probes and API docs) are never counted.
    """

    EXCLUDED_PATHS = {"/health", "/docs", "/openapi.json", "/redoc"}

    def __init__(
        self,
        app,
        max_requests: int = 150,
        window_seconds: int = 60,
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__(app)
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._hits: Dict[str, Deque[float]] = defaultdict(deque)
        self._since_sweep = 0

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.EXCLUDED_PATHS:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        now = self._clock()
        window_start = now - self.window_seconds

        hits = self._hits[client_ip]
        while hits and hits[0] <= window_start:
            hits.popleft()

        if len(hits) >= self.max_requests:
            retry_after = int(hits[0] + self.window_seconds - now) + 1
            logger.warning(
                "Rate limit exceeded for IP %s: %d requests in %ds window",
                client_ip,
                len(hits),
                self.window_seconds,
            )
            # Runs before RequestIDMiddleware, so the id is taken or minted here
            request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
            return self._reject(RateLimitExceededError(retry_after=retry_after), request_id)

        hits.append(now)

        self._since_sweep += 1
        if self._since_sweep >= SWEEP_EVERY:
            self._sweep(window_start)

        return await call_next(request)

    @staticmethod
    def _reject(exc: RateLimitExceededError, request_id: str) -> JSONResponse:
        # Raised errors never reach the app's exception handlers from here,
        # so the error envelope is built in place
        return JSONResponse(
            status_code=429,
            content={
                "error": "rate_limit_exceeded",
                "message": exc.message,
                "request_id": request_id,
                "details": exc.context,
            },
            headers={"Retry-After": str(exc.retry_after), REQUEST_ID_HEADER: request_id},
        )

    def _sweep(self, window_start: float) -> None:
        """Drop clients with no request inside the current window."""
        self._since_sweep = 0
        idle = [ip for ip, hits in self._hits.items() if not hits or hits[-1] <= window_start]
        for ip in idle:
            del self._hits[ip]
        if idle:
            logger.debug("Swept %d idle rate-limit entries", len(idle))
