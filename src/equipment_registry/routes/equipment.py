"""HTTP route handlers for the equipment registry.

JSON field names follow the wire names existing callers use
(installationDate, healthScore). Request bodies also accept the kebab-case
and snake_case spellings.
"""

from typing import NoReturn

from fastapi import APIRouter, HTTPException, Request
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from equipment_registry.models.equipment import EquipmentRecord
from equipment_registry.results import RegistryError, RegistryErrorKind
from equipment_registry.services.registry_service import EquipmentRegistry

router = APIRouter(prefix="/api/equipment", tags=["equipment"])

_STATUS_CODES: dict[RegistryErrorKind, int] = {
    RegistryErrorKind.NOT_FOUND: 404,
    RegistryErrorKind.UNAUTHORIZED: 403,
}


class AddEquipmentRequest(BaseModel):
    """Request body for registering equipment."""

    type: str
    manufacturer: str
    installation_date: int = Field(
        ge=0,
        validation_alias=AliasChoices("installationDate", "installation-date", "installation_date"),
    )


class AddEquipmentResponse(BaseModel):
    """Response body for equipment registration."""

    id: int


class UpdateHealthScoreRequest(BaseModel):
    """Request body for a health score update."""

    health_score: int = Field(
        validation_alias=AliasChoices("healthScore", "health-score", "health_score"),
    )


class UpdateStatusRequest(BaseModel):
    """Request body for a status update."""

    status: str


class UpdateResponse(BaseModel):
    """Response body for a successful update."""

    success: bool


class CountResponse(BaseModel):
    """Response body for the equipment count."""

    count: int


class EquipmentResponse(BaseModel):
    """Response body for equipment info."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    type: str
    manufacturer: str
    installation_date: int = Field(alias="installationDate")
    health_score: int = Field(alias="healthScore")
    status: str

    @classmethod
    def from_record(cls, record: EquipmentRecord) -> "EquipmentResponse":
        """Create response from EquipmentRecord model."""
        return cls(
            id=record.id,
            type=record.type,
            manufacturer=record.manufacturer,
            installation_date=record.installation_date,
            health_score=record.health_score,
            status=record.status,
        )


def get_registry(request: Request) -> EquipmentRegistry:
    """Get EquipmentRegistry from the application context."""
    return request.app.state.context.registry


def raise_for_error(error: RegistryError) -> NoReturn:
    """Translate a registry error into an HTTP error response."""
    raise HTTPException(
        status_code=_STATUS_CODES[error.kind],
        detail={"error": error.kind.value, "message": error.message},
    )


@router.post("", response_model=AddEquipmentResponse)
def add_equipment(request: Request, body: AddEquipmentRequest) -> AddEquipmentResponse:
    """Register new equipment."""
    result = get_registry(request).add_equipment(
        type=body.type,
        manufacturer=body.manufacturer,
        installation_date=body.installation_date,
    )
    if isinstance(result, RegistryError):
        raise_for_error(result)
    return AddEquipmentResponse(id=result.value)


@router.get("/count", response_model=CountResponse)
def get_equipment_count(request: Request) -> CountResponse:
    """Get the number of equipment records created."""
    result = get_registry(request).get_equipment_count()
    if isinstance(result, RegistryError):
        raise_for_error(result)
    return CountResponse(count=result.value)


@router.get("/{equipment_id}", response_model=EquipmentResponse)
def get_equipment(request: Request, equipment_id: int) -> EquipmentResponse:
    """Get equipment by ID."""
    result = get_registry(request).get_equipment(equipment_id)
    if isinstance(result, RegistryError):
        raise_for_error(result)
    return EquipmentResponse.from_record(result.value)


@router.put("/{equipment_id}/health-score", response_model=UpdateResponse)
def update_health_score(
    request: Request,
    equipment_id: int,
    body: UpdateHealthScoreRequest,
) -> UpdateResponse:
    """Update the health score of existing equipment."""
    result = get_registry(request).update_health_score(equipment_id, body.health_score)
    if isinstance(result, RegistryError):
        raise_for_error(result)
    return UpdateResponse(success=result.value)


@router.put("/{equipment_id}/status", response_model=UpdateResponse)
def update_status(
    request: Request,
    equipment_id: int,
    body: UpdateStatusRequest,
) -> UpdateResponse:
    """Update the status of existing equipment."""
    result = get_registry(request).update_status(equipment_id, body.status)
    if isinstance(result, RegistryError):
        raise_for_error(result)
    return UpdateResponse(success=result.value)
