"""Business rules for the equipment registry."""

import logging
import threading
from dataclasses import replace

from equipment_registry.integrations.equipment_store.abc import EquipmentStore
from equipment_registry.models.equipment import (
    DEFAULT_HEALTH_SCORE,
    DEFAULT_STATUS,
    MAX_HEALTH_SCORE,
    EquipmentRecord,
)
from equipment_registry.results import (
    RegistryError,
    RegistryErrorKind,
    RegistryResult,
    RegistrySuccess,
)

logger = logging.getLogger(__name__)


def _not_found(equipment_id: int) -> RegistryError:
    return RegistryError(
        kind=RegistryErrorKind.NOT_FOUND,
        message=f"Equipment {equipment_id} not found",
    )


class EquipmentRegistry:
    """Issues equipment ids and guards updates to stored records.

    Every operation holds a single lock for its whole duration, so id
    assignment is collision-free and an update's existence check and write
    happen as one step. Failures are returned as RegistryError values,
    never raised.
    """

    def __init__(self, store: EquipmentStore) -> None:
        """Create EquipmentRegistry over a store.

        Args:
            store: Storage holding the id counter and records
        """
        self._store = store
        self._lock = threading.Lock()

    def add_equipment(
        self,
        type: str,
        manufacturer: str,
        installation_date: int,
    ) -> RegistryResult[int]:
        """Register new equipment.

        Health score and status always start at their defaults; the caller
        cannot set them here. Inputs are stored as given.

        Args:
            type: Equipment type label (e.g., "Pump")
            manufacturer: Manufacturer name
            installation_date: Unix timestamp of installation

        Returns:
            Success with the newly issued id
        """
        with self._lock:
            equipment_id = self._store.next_id()
            self._store.put(
                EquipmentRecord(
                    id=equipment_id,
                    type=type,
                    manufacturer=manufacturer,
                    installation_date=installation_date,
                    health_score=DEFAULT_HEALTH_SCORE,
                    status=DEFAULT_STATUS,
                )
            )
        logger.debug("Added equipment %d (%s by %s)", equipment_id, type, manufacturer)
        return RegistrySuccess(equipment_id)

    def update_health_score(self, equipment_id: int, new_score: int) -> RegistryResult[bool]:
        """Overwrite a record's health score.

        Checks run in order: unknown id first, then the upper bound. Only
        the upper bound is enforced.

        Args:
            equipment_id: Id of the record to update
            new_score: New health score, at most 100

        Returns:
            Success(True), NOT_FOUND for an unknown id, or UNAUTHORIZED
            when new_score exceeds 100
        """
        with self._lock:
            record = self._store.get(equipment_id)
            if record is None:
                logger.info("Health update rejected: equipment %d not found", equipment_id)
                return _not_found(equipment_id)
            if new_score > MAX_HEALTH_SCORE:
                logger.info(
                    "Health update rejected: score %d exceeds %d for equipment %d",
                    new_score,
                    MAX_HEALTH_SCORE,
                    equipment_id,
                )
                return RegistryError(
                    kind=RegistryErrorKind.UNAUTHORIZED,
                    message=f"Health score {new_score} exceeds maximum of {MAX_HEALTH_SCORE}",
                )
            self._store.put(replace(record, health_score=new_score))
        logger.debug("Equipment %d health score set to %d", equipment_id, new_score)
        return RegistrySuccess(True)

    def update_status(self, equipment_id: int, new_status: str) -> RegistryResult[bool]:
        """Overwrite a record's status. Any status label is accepted."""
        with self._lock:
            record = self._store.get(equipment_id)
            if record is None:
                logger.info("Status update rejected: equipment %d not found", equipment_id)
                return _not_found(equipment_id)
            self._store.put(replace(record, status=new_status))
        logger.debug("Equipment %d status set to %r", equipment_id, new_status)
        return RegistrySuccess(True)

    def get_equipment(self, equipment_id: int) -> RegistryResult[EquipmentRecord]:
        """Get a record by id, or NOT_FOUND."""
        with self._lock:
            record = self._store.get(equipment_id)
        if record is None:
            return _not_found(equipment_id)
        return RegistrySuccess(record)

    def get_equipment_count(self) -> RegistryResult[int]:
        """Number of records ever created, which is the last issued id."""
        with self._lock:
            return RegistrySuccess(self._store.last_id())
