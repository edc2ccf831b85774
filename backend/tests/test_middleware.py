"""
Pastoral Admin Backend — Middleware Tests
===========================================

What:  Rate limiter window arithmetic and request ID propagation, on a bare
       FastAPI app so no database is involved.
"""

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from pastoral_admin.middleware.logging import level_for_status
from pastoral_admin.middleware.rate_limit import RateLimitMiddleware
from pastoral_admin.middleware.request_id import RequestIDMiddleware, request_id_var


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def build_app(clock: FakeClock, max_requests: int = 2, window_seconds: int = 60) -> FastAPI:
    app = FastAPI()

    @app.get("/ping")
    async def ping():
        return {"request_id": request_id_var.get("")}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        RateLimitMiddleware,
        max_requests=max_requests,
        window_seconds=window_seconds,
        clock=clock,
    )
    return app


@pytest.fixture
def clock():
    return FakeClock()


@pytest_asyncio.fixture
async def client(clock):
    transport = ASGITransport(app=build_app(clock))
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


class TestRateLimit:

    @pytest.mark.asyncio
    async def test_rejects_over_limit_with_retry_after(self, client, clock):
        assert (await client.get("/ping")).status_code == 200
        clock.now += 10
        assert (await client.get("/ping")).status_code == 200

        response = await client.get("/ping")

        assert response.status_code == 429
        assert response.json()["error"] == "rate_limit_exceeded"
        # Oldest request (t=1000) leaves the window at t=1060; now is t=1010
        assert response.headers["Retry-After"] == "51"

    @pytest.mark.asyncio
    async def test_rejection_carries_request_id(self, client):
        await client.get("/ping")
        await client.get("/ping")

        response = await client.get("/ping")

        rid = response.headers["X-Request-ID"]
        assert len(rid) == 8
        assert response.json()["request_id"] == rid

    @pytest.mark.asyncio
    async def test_rejection_keeps_client_request_id(self, client):
        await client.get("/ping")
        await client.get("/ping")

        response = await client.get("/ping", headers={"X-Request-ID": "frontend-43"})

        assert response.status_code == 429
        assert response.headers["X-Request-ID"] == "frontend-43"
        assert response.json()["request_id"] == "frontend-43"

    @pytest.mark.asyncio
    async def test_window_slides(self, client, clock):
        await client.get("/ping")
        await client.get("/ping")
        clock.now += 61

        assert (await client.get("/ping")).status_code == 200

    @pytest.mark.asyncio
    async def test_health_not_counted(self, client):
        for _ in range(5):
            assert (await client.get("/health")).status_code == 200
        assert (await client.get("/ping")).status_code == 200


class TestRequestId:

    @pytest.mark.asyncio
    async def test_generated_when_absent(self, client):
        response = await client.get("/ping")

        rid = response.headers["X-Request-ID"]
        assert len(rid) == 8
        assert response.json()["request_id"] == rid

    @pytest.mark.asyncio
    async def test_client_id_kept(self, client):
        response = await client.get("/ping", headers={"X-Request-ID": "frontend-42"})
        assert response.headers["X-Request-ID"] == "frontend-42"


def test_access_log_levels():
    assert level_for_status(200) == 20
    assert level_for_status(404) == 30
    assert level_for_status(503) == 40
