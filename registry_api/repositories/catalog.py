from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func, or_, select

from registry_api.db.models.catalog import Component, EquipmentType, SparePart, SparePartSupplier
from .base import CrudRepository


class EquipmentTypeRepository(CrudRepository[EquipmentType]):
    """Repository for equipment types."""

    model = EquipmentType

    async def list_types(self) -> List[EquipmentType]:
        stmt = select(EquipmentType).order_by(EquipmentType.type_name)
        return list(await self.scalars(stmt))


class ComponentRepository(CrudRepository[Component]):
    """Repository for components."""

    model = Component

    async def list_components(self, *, type_id: Optional[int] = None) -> list:
        """Component rows joined with their equipment type name."""
        stmt = (
            select(
                Component.component_id,
                Component.type_id,
                Component.component_name,
                Component.importance_level,
                Component.failure_rate,
                Component.lifecycle_years,
                Component.created_at,
                Component.updated_at,
                EquipmentType.type_name,
            )
            .join(EquipmentType, Component.type_id == EquipmentType.type_id)
        )
        if type_id:
            stmt = stmt.where(Component.type_id == type_id)
        stmt = stmt.order_by(Component.component_name, Component.component_id)
        return await self.rows(stmt)


class SparePartRepository(CrudRepository[SparePart]):
    """Repository for spare parts (materials)."""

    model = SparePart

    async def list_spare_parts(
        self, *, search: Optional[str] = None, is_custom: Optional[bool] = None
    ) -> List[SparePart]:
        stmt = select(SparePart)
        if search:
            like = f"%{search}%"
            stmt = stmt.where(
                or_(
                    SparePart.material_code.ilike(like),
                    SparePart.manufacturer.ilike(like),
                    SparePart.specification.ilike(like),
                    SparePart.description.ilike(like),
                )
            )
        if is_custom is not None:
            stmt = stmt.where(SparePart.is_custom == is_custom)
        stmt = stmt.order_by(SparePart.material_code)
        return list(await self.scalars(stmt))

    async def get_by_material_code(self, material_code: str) -> Optional[SparePart]:
        stmt = select(SparePart).where(SparePart.material_code == material_code)
        return await self.scalar_one_or_none(stmt)


class SupplierRepository(CrudRepository[SparePartSupplier]):
    """Repository for spare part suppliers."""

    model = SparePartSupplier

    async def list_suppliers(self, *, spare_part_id: Optional[int] = None) -> list:
        """Supplier rows joined with the supplied part's code, manufacturer and specification."""
        stmt = (
            select(
                SparePartSupplier.supplier_id,
                SparePartSupplier.spare_part_id,
                SparePartSupplier.supplier_name,
                SparePartSupplier.supply_cycle_weeks,
                SparePartSupplier.created_at,
                SparePartSupplier.updated_at,
                SparePart.material_code,
                SparePart.manufacturer,
                SparePart.specification,
            )
            .join(SparePart, SparePartSupplier.spare_part_id == SparePart.spare_part_id)
        )
        if spare_part_id:
            stmt = stmt.where(SparePartSupplier.spare_part_id == spare_part_id)
        stmt = stmt.order_by(SparePartSupplier.supplier_name, SparePartSupplier.supplier_id)
        return await self.rows(stmt)

    async def shortest_supply_cycle(self, spare_part_id: int) -> Optional[int]:
        stmt = select(func.min(SparePartSupplier.supply_cycle_weeks)).where(
            SparePartSupplier.spare_part_id == spare_part_id
        )
        return await self.scalar_one_or_none(stmt)
