from __future__ import annotations

from typing import List

from pydantic import Field, field_validator

from registry_api.db.models.enums import BusyLevel
from registry_api.schemas.common import CamelModel, PaginationMeta, Timestamps


class BaseSiteCreate(CamelModel):
    """Create/replace base payload."""
    base_name: str = Field(..., min_length=1, max_length=100, description="Base name")


class BaseSiteRead(BaseSiteCreate, Timestamps):
    """Base read model."""
    base_id: int = Field(..., description="Base ID")


class WorkshopCreate(CamelModel):
    """Create/replace workshop payload."""
    base_id: int = Field(..., ge=1, description="Owning base")
    workshop_name: str = Field(..., min_length=1, max_length=100, description="Workshop name")
    busy_level: BusyLevel = Field(
        ..., description="1 continuous, 2 normal, 3 intermittent, 4 idle operation"
    )

    @field_validator("busy_level", mode="before")
    @classmethod
    def _coerce_busy_level(cls, v):
        # Clients frequently send the level as a number.
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class WorkshopRead(WorkshopCreate, Timestamps):
    """Workshop read model."""
    workshop_id: int = Field(..., description="Workshop ID")


class EquipmentCreate(CamelModel):
    """Create/replace equipment payload."""
    workshop_id: int = Field(..., ge=1, description="Workshop the equipment is located in")
    type_id: int = Field(..., ge=1, description="Equipment type")
    equipment_name: str = Field(..., min_length=1, max_length=100, description="Equipment name")


class EquipmentRead(EquipmentCreate, Timestamps):
    """Equipment read model."""
    equipment_id: int = Field(..., description="Equipment ID")


class EquipmentListItem(EquipmentRead):
    """Equipment row enriched with workshop, type and base names."""
    workshop_name: str = Field(..., description="Workshop name")
    type_name: str = Field(..., description="Equipment type name")
    base_id: int = Field(..., description="Base of the workshop")
    base_name: str = Field(..., description="Base name")


class EquipmentPage(CamelModel):
    """Paginated equipment listing."""
    data: List[EquipmentListItem] = Field(default_factory=list)
    pagination: PaginationMeta
