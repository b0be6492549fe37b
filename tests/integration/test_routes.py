"""Integration tests for FastAPI routes."""

import pytest
from equipment_registry.context import RegistryContext
from equipment_registry.main import create_app, lifespan
from equipment_registry.models.equipment import EquipmentRecord
from httpx import ASGITransport, AsyncClient

PUMP = {"type": "Pump", "manufacturer": "Acme Inc", "installationDate": 1625097600}


class TestEquipmentRoutes:
    """Tests for equipment registration and lookup."""

    async def test_add_equipment(self, async_client: AsyncClient) -> None:
        """POST /api/equipment returns the new id."""
        response = await async_client.post("/api/equipment", json=PUMP)

        assert response.status_code == 200
        assert response.json() == {"id": 1}

    async def test_get_equipment_uses_wire_field_names(self, async_client: AsyncClient) -> None:
        """GET /api/equipment/{id} returns the full record with defaults."""
        await async_client.post("/api/equipment", json=PUMP)

        response = await async_client.get("/api/equipment/1")

        assert response.status_code == 200
        assert response.json() == {
            "id": 1,
            "type": "Pump",
            "manufacturer": "Acme Inc",
            "installationDate": 1625097600,
            "healthScore": 100,
            "status": "operational",
        }

    async def test_add_equipment_accepts_kebab_case(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/api/equipment",
            json={"type": "Valve", "manufacturer": "Best Valves", "installation-date": 1625184000},
        )

        assert response.status_code == 200
        record = (await async_client.get("/api/equipment/1")).json()
        assert record["installationDate"] == 1625184000

    async def test_add_equipment_ignores_health_and_status(
        self, async_client: AsyncClient
    ) -> None:
        """Caller-supplied health and status are not honored on create."""
        await async_client.post(
            "/api/equipment",
            json={**PUMP, "healthScore": 10, "status": "broken"},
        )

        record = (await async_client.get("/api/equipment/1")).json()
        assert record["healthScore"] == 100
        assert record["status"] == "operational"

    async def test_add_equipment_rejects_negative_date(self, async_client: AsyncClient) -> None:
        response = await async_client.post("/api/equipment", json={**PUMP, "installationDate": -1})

        assert response.status_code == 422

    async def test_add_equipment_rejects_missing_fields(self, async_client: AsyncClient) -> None:
        response = await async_client.post("/api/equipment", json={"type": "Pump"})

        assert response.status_code == 422
        count = (await async_client.get("/api/equipment/count")).json()
        assert count == {"count": 0}

    async def test_get_equipment_not_found(self, async_client: AsyncClient) -> None:
        """GET /api/equipment/{id} returns 404 on an empty store."""
        response = await async_client.get("/api/equipment/999")

        assert response.status_code == 404
        assert response.json()["detail"] == {
            "error": "err-not-found",
            "message": "Equipment 999 not found",
        }

    async def test_count(self, async_client: AsyncClient) -> None:
        """GET /api/equipment/count reflects the number of creates."""
        await async_client.post("/api/equipment", json=PUMP)
        await async_client.post(
            "/api/equipment",
            json={"type": "Valve", "manufacturer": "Best Valves", "installationDate": 1625184000},
        )

        response = await async_client.get("/api/equipment/count")

        assert response.status_code == 200
        assert response.json() == {"count": 2}


class TestUpdateRoutes:
    """Tests for the guarded update routes."""

    @pytest.fixture
    def context(self) -> RegistryContext:
        """Provide a context seeded with one pump."""
        return RegistryContext.for_test(
            records={
                1: EquipmentRecord(
                    id=1,
                    type="Pump",
                    manufacturer="Acme Inc",
                    installation_date=1625097600,
                )
            }
        )

    @pytest.fixture
    async def client(self, context: RegistryContext) -> AsyncClient:
        """Provide an async HTTP client for testing."""
        app = create_app(context=context)
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client

    async def test_update_health_score(self, client: AsyncClient) -> None:
        response = await client.put("/api/equipment/1/health-score", json={"healthScore": 90})

        assert response.status_code == 200
        assert response.json() == {"success": True}
        record = (await client.get("/api/equipment/1")).json()
        assert record["healthScore"] == 90

    async def test_update_health_score_accepts_kebab_case(self, client: AsyncClient) -> None:
        response = await client.put("/api/equipment/1/health-score", json={"health-score": 75})

        assert response.status_code == 200
        assert (await client.get("/api/equipment/1")).json()["healthScore"] == 75

    async def test_update_health_score_above_100(self, client: AsyncClient) -> None:
        """A score over 100 is rejected with the unauthorized code."""
        response = await client.put("/api/equipment/1/health-score", json={"healthScore": 101})

        assert response.status_code == 403
        assert response.json()["detail"]["error"] == "err-unauthorized"
        record = (await client.get("/api/equipment/1")).json()
        assert record["healthScore"] == 100

    async def test_update_health_score_not_found(self, client: AsyncClient) -> None:
        response = await client.put("/api/equipment/2/health-score", json={"healthScore": 101})

        assert response.status_code == 404
        assert response.json()["detail"]["error"] == "err-not-found"

    async def test_update_status(self, client: AsyncClient) -> None:
        response = await client.put("/api/equipment/1/status", json={"status": "maintenance"})

        assert response.status_code == 200
        assert response.json() == {"success": True}
        record = (await client.get("/api/equipment/1")).json()
        assert record["status"] == "maintenance"

    async def test_update_status_not_found(self, client: AsyncClient) -> None:
        response = await client.put("/api/equipment/2/status", json={"status": "maintenance"})

        assert response.status_code == 404
        assert response.json()["detail"]["error"] == "err-not-found"

    async def test_seeded_count(self, client: AsyncClient) -> None:
        assert (await client.get("/api/equipment/count")).json() == {"count": 1}


async def test_production_app_starts_with_empty_registry() -> None:
    """Without an injected context the lifespan handler builds an empty registry."""
    app = create_app()

    async with lifespan(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            await client.post("/api/equipment", json=PUMP)
            response = await client.get("/api/equipment/count")

    assert response.json() == {"count": 1}
