"""
QuanThink Backend: /calculations Endpoint Tests
================================================

What:  HTTP-level behavior of the calculation routes over a real SQLite DB.

What we test:
    ✅ GET list is 200 even when empty
    ✅ POST → 201 with assigned id; GET by id returns it
    ✅ Unknown ids → 404 for GET and PUT
    ✅ DELETE → 204, then GET → 404; DELETE of unknown id → 204
    ✅ Storage failures on create/delete → bare 500
    ✅ Invalid bodies → 422
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from quanthink.dependencies import get_calculation_service
from quanthink.exceptions import StorageError


class TestCalculationsRead:

    @pytest.mark.asyncio
    async def test_list_empty_is_ok(self, test_client):
        response = await test_client.get("/calculations")
        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_get_unknown_is_404(self, test_client):
        response = await test_client.get("/calculations/999")
        assert response.status_code == 404
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_non_numeric_id_is_422(self, test_client):
        response = await test_client.get("/calculations/abc")
        assert response.status_code == 422


class TestCalculationsWrite:

    @pytest.mark.asyncio
    async def test_create_and_fetch(self, test_client, calculation_data):
        created = await test_client.post("/calculations", json=calculation_data)
        assert created.status_code == 201
        body = created.json()
        assert isinstance(body["id"], int)
        assert body["expression"] == "2 + 2"
        assert body["result"] == "4"
        assert body["library"] == "JAVA"
        assert "created_at" in body

        fetched = await test_client.get(f"/calculations/{body['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == body

        listed = await test_client.get("/calculations")
        assert listed.json() == [body]

    @pytest.mark.asyncio
    async def test_create_requires_expression(self, test_client):
        response = await test_client.post("/calculations", json={"result": "4"})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update(self, test_client, calculation_data):
        created = (await test_client.post("/calculations", json=calculation_data)).json()

        response = await test_client.put(
            f"/calculations/{created['id']}",
            json={"expression": "2 + 3", "result": "5"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == created["id"]
        assert body["expression"] == "2 + 3"
        assert body["result"] == "5"
        assert body["library"] is None

        fetched = (await test_client.get(f"/calculations/{created['id']}")).json()
        assert fetched == body

    @pytest.mark.asyncio
    async def test_update_unknown_is_404(self, test_client, calculation_data):
        response = await test_client.put("/calculations/999", json=calculation_data)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_then_get_is_404(self, test_client, calculation_data):
        created = (await test_client.post("/calculations", json=calculation_data)).json()

        deleted = await test_client.delete(f"/calculations/{created['id']}")
        assert deleted.status_code == 204
        assert deleted.content == b""

        assert (await test_client.get(f"/calculations/{created['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_unknown_is_204(self, test_client):
        response = await test_client.delete("/calculations/999")
        assert response.status_code == 204


class TestCalculationsStorageFailures:

    @pytest.fixture
    def failing_service(self, app):
        service = MagicMock()
        service.create_calculation = AsyncMock(side_effect=StorageError(context={"operation": "create"}))
        service.delete_calculation = AsyncMock(side_effect=StorageError(context={"operation": "delete"}))
        app.dependency_overrides[get_calculation_service] = lambda: service
        return service

    @pytest.mark.asyncio
    async def test_create_failure_is_500(self, test_client, failing_service, calculation_data):
        response = await test_client.post("/calculations", json=calculation_data)
        assert response.status_code == 500
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_delete_failure_is_500(self, test_client, failing_service):
        response = await test_client.delete("/calculations/1")
        assert response.status_code == 500
        failing_service.delete_calculation.assert_awaited_once_with(1)
