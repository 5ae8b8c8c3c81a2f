from __future__ import annotations

from sqlalchemy import func, select

from registry_api.db.models.catalog import Component, EquipmentType
from registry_api.db.models.enums import ImportanceLevel
from registry_api.db.models.location import BaseSite, Equipment, Workshop
from registry_api.repositories.catalog import (
    ComponentRepository,
    SparePartRepository,
    SupplierRepository,
)
from registry_api.repositories.location import BaseSiteRepository, EquipmentRepository, WorkshopRepository
from registry_api.schemas.dashboard import ChartPoint, DashboardCharts, DashboardStats
from registry_api.services.base import BaseService

IMPORTANCE_LABELS = {
    ImportanceLevel.A: "A - core",
    ImportanceLevel.B: "B - normal",
    ImportanceLevel.C: "C - unimportant",
}


class DashboardService(BaseService):
    """Aggregate counts and distributions for the dashboard."""

    # PUBLIC_INTERFACE
    async def compute_stats(self) -> DashboardStats:
        """Count rows of every top-level entity."""
        return DashboardStats(
            total_bases=await BaseSiteRepository(self.session).count(),
            total_workshops=await WorkshopRepository(self.session).count(),
            total_equipment=await EquipmentRepository(self.session).count(),
            total_components=await ComponentRepository(self.session).count(),
            total_spare_parts=await SparePartRepository(self.session).count(),
            total_suppliers=await SupplierRepository(self.session).count(),
        )

    # PUBLIC_INTERFACE
    async def compute_charts(self) -> DashboardCharts:
        """
        Distributions for the dashboard charts.

        - equipment_by_type: equipment count per equipment type (types without equipment omitted)
        - equipment_by_base: equipment count per base
        - components_by_importance: component count per level; A, B and C are always present
        """
        by_type = await self.session.execute(
            select(EquipmentType.type_name, func.count(Equipment.equipment_id))
            .join(Equipment, Equipment.type_id == EquipmentType.type_id)
            .group_by(EquipmentType.type_id, EquipmentType.type_name)
            .order_by(func.count(Equipment.equipment_id).desc(), EquipmentType.type_name)
        )
        by_base = await self.session.execute(
            select(BaseSite.base_name, func.count(Equipment.equipment_id))
            .join(Workshop, Workshop.base_id == BaseSite.base_id)
            .join(Equipment, Equipment.workshop_id == Workshop.workshop_id)
            .group_by(BaseSite.base_id, BaseSite.base_name)
            .order_by(func.count(Equipment.equipment_id).desc(), BaseSite.base_name)
        )
        by_importance = await self.session.execute(
            select(Component.importance_level, func.count(Component.component_id)).group_by(
                Component.importance_level
            )
        )
        importance_counts = {level: count for level, count in by_importance.all()}

        return DashboardCharts(
            equipment_by_type=[ChartPoint(name=name, value=count) for name, count in by_type.all()],
            equipment_by_base=[ChartPoint(name=name, value=count) for name, count in by_base.all()],
            components_by_importance=[
                ChartPoint(name=label, value=int(importance_counts.get(level, 0)))
                for level, label in IMPORTANCE_LABELS.items()
            ],
        )
