"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator

import pytest
from equipment_registry.context import RegistryContext
from equipment_registry.integrations.equipment_store.memory import InMemoryEquipmentStore
from equipment_registry.main import create_app
from equipment_registry.services.registry_service import EquipmentRegistry
from httpx import ASGITransport, AsyncClient


@pytest.fixture
def equipment_store() -> InMemoryEquipmentStore:
    """Create a fresh InMemoryEquipmentStore."""
    return InMemoryEquipmentStore()


@pytest.fixture
def registry(equipment_store: InMemoryEquipmentStore) -> EquipmentRegistry:
    """Create an EquipmentRegistry over the fresh store."""
    return EquipmentRegistry(equipment_store)


@pytest.fixture
def registry_context(registry: EquipmentRegistry) -> RegistryContext:
    """Create a RegistryContext around the test registry."""
    return RegistryContext(registry=registry)


@pytest.fixture
async def async_client(registry_context: RegistryContext) -> AsyncGenerator[AsyncClient]:
    """Create an async test client bound to the test registry."""
    app = create_app(context=registry_context)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
