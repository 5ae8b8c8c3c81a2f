from __future__ import annotations

from typing import Optional

from pydantic import Field

from registry_api.db.models.enums import ImportanceLevel
from registry_api.schemas.common import CamelModel, Timestamps


class EquipmentTypeCreate(CamelModel):
    """Create/replace equipment type payload."""
    type_name: str = Field(..., min_length=1, max_length=100, description="Type name")
    lifecycle_years: Optional[int] = Field(None, ge=0, description="Expected service life in years")


class EquipmentTypeRead(EquipmentTypeCreate, Timestamps):
    """Equipment type read model."""
    type_id: int = Field(..., description="Equipment type ID")


class ComponentCreate(CamelModel):
    """Create/replace component payload."""
    type_id: int = Field(..., ge=1, description="Equipment type the component belongs to")
    component_name: str = Field(..., min_length=1, max_length=100, description="Component name")
    importance_level: ImportanceLevel = Field(..., description="A core, B normal, C unimportant")
    failure_rate: Optional[float] = Field(None, ge=0, le=100, description="Failure rate (percent)")
    lifecycle_years: Optional[int] = Field(None, ge=0)


class ComponentRead(ComponentCreate, Timestamps):
    """Component read model."""
    component_id: int = Field(..., description="Component ID")


class ComponentListItem(ComponentRead):
    """Component row with its equipment type name."""
    type_name: str = Field(..., description="Equipment type name")


class SparePartCreate(CamelModel):
    """Create/replace spare part payload."""
    material_code: str = Field(..., min_length=1, max_length=50, description="Unique material code")
    manufacturer: str = Field(..., min_length=1, max_length=100)
    manufacturer_material_code: Optional[str] = Field(None, max_length=50)
    specification: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = Field(None)
    is_custom: bool = Field(False, description="Custom-made (non catalogue) part")


class SparePartRead(SparePartCreate, Timestamps):
    """Spare part read model."""
    spare_part_id: int = Field(..., description="Spare part ID")


class SupplierCreate(CamelModel):
    """Create/replace spare part supplier payload."""
    spare_part_id: int = Field(..., ge=1, description="Supplied spare part")
    supplier_name: str = Field(..., min_length=1, max_length=100)
    supply_cycle_weeks: int = Field(..., ge=0, description="Delivery lead time in weeks")


class SupplierRead(SupplierCreate, Timestamps):
    """Supplier read model."""
    supplier_id: int = Field(..., description="Supplier ID")


class SupplierListItem(SupplierRead):
    """Supplier row with the supplied part's identification."""
    material_code: str = Field(..., description="Material code of the part")
    manufacturer: str = Field(..., description="Part manufacturer")
    specification: Optional[str] = Field(None)
