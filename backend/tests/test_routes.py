"""
Pastoral Admin Backend — API Route Tests
==========================================

What:  End-to-end HTTP behavior: status codes, error envelopes, the admin
       key guard and response headers. Runs the real app on in-memory SQLite.
"""

import uuid
from unittest.mock import AsyncMock

import pytest

from conftest import address_payload, church_payload
from pastoral_admin.dependencies import get_church_service
from pastoral_admin.exceptions import InternalError


async def create_church(client, **overrides):
    response = await client.post("/api/admin/church", json=church_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()


class TestChurchRoutes:

    @pytest.mark.asyncio
    async def test_create_returns_201(self, test_client):
        body = await create_church(test_client, website_url="", phone_number="555-0100")

        assert uuid.UUID(body["id"])
        assert body["name"] == "St. Mary's Cathedral"
        assert body["is_active"] is True
        assert body["website_url"] is None
        assert body["phone_number"] == "555-0100"

    @pytest.mark.asyncio
    async def test_duplicate_name_returns_409(self, test_client):
        await create_church(test_client)

        response = await test_client.post("/api/admin/church", json=church_payload())

        assert response.status_code == 409
        body = response.json()
        assert body["error"] == "already_exists"
        assert body["details"]["name"] == "St. Mary's Cathedral"
        assert body["request_id"]

    @pytest.mark.asyncio
    async def test_get_unknown_returns_404(self, test_client):
        response = await test_client.get(f"/api/admin/church/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_malformed_id_returns_422(self, test_client):
        response = await test_client.get("/api/admin/church/not-a-uuid")
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_get_update_delete(self, test_client):
        church = await create_church(test_client)
        url = f"/api/admin/church/{church['id']}"

        update = {
            "name": "St. Mary's Cathedral",
            "diocese": "Orange",
            "address_id": church["address_id"],
            "is_archdiocese": False,
            "is_active": False,
        }
        response = await test_client.put(url, json=update)
        assert response.status_code == 200
        assert response.json()["message"] == "Church updated successfully"

        fetched = (await test_client.get(url)).json()
        assert fetched["diocese"] == "Orange"
        assert fetched["is_active"] is False

        assert (await test_client.delete(url)).status_code == 200
        assert (await test_client.get(url)).status_code == 404
        assert (await test_client.get(f"/api/admin/address/{church['address_id']}")).status_code == 200

    @pytest.mark.asyncio
    async def test_rename_to_taken_name_returns_409(self, test_client):
        await create_church(test_client, name="Holy Family")
        other = await create_church(test_client, name="St. Joseph")

        response = await test_client.put(
            f"/api/admin/church/{other['id']}",
            json={
                "name": "Holy Family",
                "diocese": "Los Angeles",
                "address_id": other["address_id"],
            },
        )

        assert response.status_code == 409
        fetched = (await test_client.get(f"/api/admin/church/{other['id']}")).json()
        assert fetched["name"] == "St. Joseph"

    @pytest.mark.asyncio
    async def test_list_returns_page_and_total(self, test_client):
        for name in ("Holy Family", "St. Joseph", "Our Lady of Sorrows"):
            await create_church(test_client, name=name)

        response = await test_client.post("/api/admin/church/list", json={"limit": 2, "offset": 0})

        assert response.status_code == 200
        body = response.json()
        assert [c["name"] for c in body["churches"]] == ["Holy Family", "Our Lady of Sorrows"]
        assert body["count"] == 3
        assert response.headers["X-Total-Count"] == "3"

    @pytest.mark.asyncio
    async def test_list_no_match(self, test_client):
        response = await test_client.post("/api/admin/church/list", json={"diocese": "Nowhere"})

        assert response.status_code == 200
        assert response.json()["churches"] == []
        assert response.json()["count"] == 0


class TestAddressRoutes:

    @pytest.mark.asyncio
    async def test_create_with_blank_second_line(self, test_client):
        response = await test_client.post(
            "/api/admin/address", json=address_payload(street_line_2="")
        )

        assert response.status_code == 201
        assert response.json()["street_line_2"] is None

    @pytest.mark.asyncio
    async def test_delete_address_in_use_returns_409(self, test_client):
        church = await create_church(test_client)

        response = await test_client.delete(f"/api/admin/address/{church['address_id']}")

        assert response.status_code == 409
        assert response.json()["error"] == "already_exists"

    @pytest.mark.asyncio
    async def test_update_unknown_returns_404(self, test_client):
        response = await test_client.put(
            f"/api/admin/address/{uuid.uuid4()}", json=address_payload()
        )
        assert response.status_code == 404


class TestLookupRoutes:

    @pytest.mark.asyncio
    async def test_industry_lifecycle(self, test_client):
        created = await test_client.post("/api/admin/industry", json={"key": "industry.retail"})
        assert created.status_code == 201
        industry_id = created.json()["id"]

        await test_client.post("/api/admin/industry", json={"key": "industry.energy"})
        listed = (await test_client.get("/api/admin/industry")).json()["industries"]
        assert [i["key"] for i in listed] == ["industry.energy", "industry.retail"]

        duplicate = await test_client.post("/api/admin/industry", json={"key": "industry.energy"})
        assert duplicate.status_code == 409

        renamed = await test_client.put(
            f"/api/admin/industry/{industry_id}", json={"key": "industry.retail_trade"}
        )
        assert renamed.status_code == 200

        assert (await test_client.delete(f"/api/admin/industry/{industry_id}")).status_code == 200
        assert (await test_client.get(f"/api/admin/industry/{industry_id}")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_unknown_industry_returns_404(self, test_client):
        response = await test_client.delete("/api/admin/industry/1")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_out_of_range_lookup_ids_return_404(self, test_client):
        """Ids beyond the SMALLINT column range are unknown, not server errors."""
        responses = [
            await test_client.get("/api/admin/industry/40000"),
            await test_client.delete("/api/admin/industry/40000"),
            await test_client.get("/api/admin/field-of-work/0"),
            await test_client.put("/api/admin/field-of-work/40000", json={"key": "engineering"}),
        ]

        assert [r.status_code for r in responses] == [404, 404, 404, 404]
        assert all(r.json()["error"] == "not_found" for r in responses)

    @pytest.mark.asyncio
    async def test_field_of_work_update(self, test_client):
        created = await test_client.post("/api/admin/field-of-work", json={"key": "engineering"})
        field_id = created.json()["id"]

        response = await test_client.put(
            f"/api/admin/field-of-work/{field_id}", json={"key": "updated_engineering"}
        )

        assert response.status_code == 200
        fetched = await test_client.get(f"/api/admin/field-of-work/{field_id}")
        assert fetched.json()["key"] == "updated_engineering"

    @pytest.mark.asyncio
    async def test_empty_key_rejected(self, test_client):
        response = await test_client.post("/api/admin/field-of-work", json={"key": ""})
        assert response.status_code == 422


class TestErrorsAndGuard:

    @pytest.mark.asyncio
    async def test_missing_admin_key_returns_401(self, anonymous_client):
        response = await anonymous_client.get("/api/admin/industry")

        assert response.status_code == 401
        assert response.json()["error"] == "unauthorized"

    @pytest.mark.asyncio
    async def test_wrong_admin_key_returns_401(self, anonymous_client):
        response = await anonymous_client.get(
            "/api/admin/industry", headers={"X-Admin-Key": "guess"}
        )
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_health_needs_no_key(self, anonymous_client):
        response = await anonymous_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["database"] == "connected"

    @pytest.mark.asyncio
    async def test_internal_error_is_opaque(self, test_app, test_client):
        service = AsyncMock()
        service.get_by_id.side_effect = InternalError(
            context={"action": "get church", "error_type": "OperationalError"}
        )
        test_app.dependency_overrides[get_church_service] = lambda: service

        response = await test_client.get(f"/api/admin/church/{uuid.uuid4()}")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server_error"
        assert body["message"] == "An internal error occurred. Please try again later."
        assert "OperationalError" not in response.text
        assert "details" not in body

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/health", headers={"X-Request-ID": "abc12345"})
        assert response.headers["X-Request-ID"] == "abc12345"
