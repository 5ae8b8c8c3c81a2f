from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import Field, model_validator

from registry_api.db.models.enums import ImportanceLevel
from registry_api.schemas.common import CamelModel, Timestamps


class AssociationCreate(CamelModel):
    """Create/replace equipment-component-spare part association payload."""
    equipment_id: int = Field(..., ge=1)
    component_id: int = Field(..., ge=1)
    spare_part_id: int = Field(..., ge=1)
    quantity: int = Field(1, ge=1, description="Required quantity of the spare part")


class AssociationRead(AssociationCreate, Timestamps):
    """Association read model."""
    id: int = Field(..., description="Association ID")


class AssociationListItem(AssociationRead):
    """Association row joined with equipment, component and spare part details."""
    equipment_name: str
    component_name: str
    importance_level: ImportanceLevel
    material_code: str
    spare_part_name: Optional[str] = Field(None, description="Spare part description")
    specification: Optional[str] = None
    manufacturer: str
    is_custom: bool = False
    supply_cycle_weeks: Optional[int] = Field(
        None, description="Shortest supply cycle among the part's suppliers"
    )


class AssociationQuery(CamelModel):
    """
    Criteria for the advanced association query.

    All criteria are optional and combined with AND. Base, workshop and
    equipment type narrow the equipment side of the association. ``keyword``
    matches material code, description, specification, equipment name or
    component name (any of them).
    """
    base_id: Optional[int] = None
    workshop_id: Optional[int] = None
    type_id: Optional[int] = None
    equipment_id: Optional[int] = None
    component_id: Optional[int] = None
    spare_part_id: Optional[int] = None
    importance_levels: Optional[List[ImportanceLevel]] = None
    supply_cycle_range: Optional[Tuple[int, int]] = None
    is_custom: Optional[bool] = None
    keyword: Optional[str] = None

    @model_validator(mode="after")
    def _check_range(self) -> "AssociationQuery":
        if self.supply_cycle_range is not None:
            low, high = self.supply_cycle_range
            if low > high:
                raise ValueError("supplyCycleRange minimum must not exceed maximum")
        return self
