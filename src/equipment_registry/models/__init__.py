"""Data models for the equipment registry."""

from equipment_registry.models.equipment import (
    DEFAULT_HEALTH_SCORE,
    DEFAULT_STATUS,
    MAX_HEALTH_SCORE,
    EquipmentRecord,
    EquipmentStatus,
)

__all__ = [
    "DEFAULT_HEALTH_SCORE",
    "DEFAULT_STATUS",
    "MAX_HEALTH_SCORE",
    "EquipmentRecord",
    "EquipmentStatus",
]
