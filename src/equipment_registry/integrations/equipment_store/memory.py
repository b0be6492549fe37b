"""In-memory equipment store."""

from equipment_registry.integrations.equipment_store.abc import EquipmentStore
from equipment_registry.models.equipment import EquipmentRecord


class InMemoryEquipmentStore(EquipmentStore):
    """Dict-backed store living for the lifetime of the process.

    Initial state may be provided via constructor for tests. When records
    are given without last_id, the counter resumes after the highest
    seeded id so issued ids never collide.
    """

    def __init__(
        self,
        records: dict[int, EquipmentRecord] | None = None,
        last_id: int | None = None,
    ) -> None:
        """Create InMemoryEquipmentStore.

        Args:
            records: Optional initial records (id -> EquipmentRecord)
            last_id: Optional initial counter value

        Raises:
            ValueError: If last_id is below the highest seeded id
        """
        self._records: dict[int, EquipmentRecord] = dict(records) if records else {}
        highest = max(self._records, default=0)
        if last_id is None:
            last_id = highest
        if last_id < highest:
            raise ValueError(f"last_id {last_id} is below highest seeded id {highest}")
        self._last_id = last_id

    @property
    def records(self) -> dict[int, EquipmentRecord]:
        """Get current records for test assertions."""
        return self._records.copy()

    def next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def last_id(self) -> int:
        return self._last_id

    def get(self, equipment_id: int) -> EquipmentRecord | None:
        return self._records.get(equipment_id)

    def put(self, record: EquipmentRecord) -> None:
        self._records[record.id] = record
