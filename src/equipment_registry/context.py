"""Registry context for dependency injection."""

from dataclasses import dataclass

from equipment_registry.integrations.equipment_store.memory import InMemoryEquipmentStore
from equipment_registry.models.equipment import EquipmentRecord
from equipment_registry.services.registry_service import EquipmentRegistry


@dataclass(frozen=True)
class RegistryContext:
    """Registry context containing all dependencies.

    This is a frozen dataclass that holds the registry shared by every
    request. Use for_test() for testing scenarios.
    """

    registry: EquipmentRegistry

    @classmethod
    def create(cls) -> "RegistryContext":
        """Create the production context with an empty in-memory store."""
        return cls(registry=EquipmentRegistry(InMemoryEquipmentStore()))

    @classmethod
    def for_test(
        cls,
        *,
        records: dict[int, EquipmentRecord] | None = None,
        last_id: int | None = None,
    ) -> "RegistryContext":
        """Create a test context, optionally pre-populated.

        Args:
            records: Pre-populated records (id -> EquipmentRecord)
            last_id: Initial counter value (defaults to highest seeded id)

        Returns:
            RegistryContext over a fresh in-memory store
        """
        store = InMemoryEquipmentStore(records=records, last_id=last_id)
        return cls(registry=EquipmentRegistry(store))
