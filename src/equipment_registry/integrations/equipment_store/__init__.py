"""Equipment storage integration."""

from equipment_registry.integrations.equipment_store.abc import EquipmentStore
from equipment_registry.integrations.equipment_store.memory import InMemoryEquipmentStore

__all__ = ["EquipmentStore", "InMemoryEquipmentStore"]
