"""Equipment record data model."""

from dataclasses import dataclass
from enum import Enum


class EquipmentStatus(str, Enum):
    """Well-known operational status labels.

    Status is free text in the registry; these are the labels callers use
    most often, not a closed set.
    """

    OPERATIONAL = "operational"
    MAINTENANCE = "maintenance"
    BROKEN = "broken"
    RETIRED = "retired"


MAX_HEALTH_SCORE = 100
DEFAULT_HEALTH_SCORE = MAX_HEALTH_SCORE
DEFAULT_STATUS = EquipmentStatus.OPERATIONAL.value


@dataclass(frozen=True)
class EquipmentRecord:
    """Current state of one piece of equipment.

    Records are immutable; updates store a replacement record under the
    same id.
    """

    id: int
    type: str
    manufacturer: str
    installation_date: int
    health_score: int = DEFAULT_HEALTH_SCORE
    status: str = DEFAULT_STATUS
