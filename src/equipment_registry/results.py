"""Tagged result values returned by registry operations.

Every operation returns either a RegistrySuccess carrying its payload or a
RegistryError carrying one of the two error kinds. Callers branch with
isinstance() or a match statement:

    match registry.get_equipment(equipment_id):
        case RegistrySuccess(value=record):
            ...
        case RegistryError(kind=RegistryErrorKind.NOT_FOUND):
            ...
"""

from dataclasses import dataclass
from enum import Enum


class RegistryErrorKind(str, Enum):
    """Error kinds a registry operation can return.

    Values are the wire codes existing callers expect.
    """

    NOT_FOUND = "err-not-found"
    # Raised for a health score above the maximum. Not a permission check;
    # the name is kept for compatibility with existing callers.
    UNAUTHORIZED = "err-unauthorized"


@dataclass(frozen=True)
class RegistrySuccess[T]:
    """Successful outcome with its payload."""

    value: T

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class RegistryError:
    """Failed outcome with its error kind and a human-readable message."""

    kind: RegistryErrorKind
    message: str

    @property
    def success(self) -> bool:
        return False


type RegistryResult[T] = RegistrySuccess[T] | RegistryError
