from __future__ import annotations

from typing import List

from pydantic import Field

from registry_api.schemas.common import CamelModel


class DashboardStats(CamelModel):
    """Entity counts shown on the dashboard cards."""
    total_bases: int = 0
    total_workshops: int = 0
    total_equipment: int = 0
    total_components: int = 0
    total_spare_parts: int = 0
    total_suppliers: int = 0


class ChartPoint(CamelModel):
    """Named value for bar/pie charts."""
    name: str
    value: int


class DashboardCharts(CamelModel):
    """Distribution series for the dashboard charts."""
    equipment_by_type: List[ChartPoint] = Field(default_factory=list)
    equipment_by_base: List[ChartPoint] = Field(default_factory=list)
    components_by_importance: List[ChartPoint] = Field(default_factory=list)
