"""Abstract base class for equipment storage."""

from abc import ABC, abstractmethod

from equipment_registry.models.equipment import EquipmentRecord


class EquipmentStore(ABC):
    """Abstract interface for equipment record storage.

    A store owns the id counter and the id -> record mapping. It applies no
    business rules; validation lives in EquipmentRegistry, which also
    serializes access to the store.

    Implementations include:
    - InMemoryEquipmentStore: process-local dict storage
    """

    @abstractmethod
    def next_id(self) -> int:
        """Advance the counter and return the newly issued id.

        Returns:
            The new id, one greater than the previous last id
        """
        ...

    @abstractmethod
    def last_id(self) -> int:
        """Return the most recently issued id (0 before any create)."""
        ...

    @abstractmethod
    def get(self, equipment_id: int) -> EquipmentRecord | None:
        """Get a record by id.

        Args:
            equipment_id: The record's id

        Returns:
            The EquipmentRecord if found, None otherwise
        """
        ...

    @abstractmethod
    def put(self, record: EquipmentRecord) -> None:
        """Store a record under its id, replacing any previous record.

        Args:
            record: The record to store
        """
        ...
