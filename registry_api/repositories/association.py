from __future__ import annotations

from typing import List

from sqlalchemy import and_, func, or_, select

from registry_api.db.models.association import EquipmentComponentSparePart
from registry_api.db.models.catalog import Component, SparePart, SparePartSupplier
from registry_api.db.models.location import Equipment, Workshop
from registry_api.schemas.association import AssociationQuery
from .base import CrudRepository


class AssociationRepository(CrudRepository[EquipmentComponentSparePart]):
    """
    Repository for the equipment x component x spare part association table.

    ``list_associations`` backs both the association listing and the advanced
    query page; every criterion of ``AssociationQuery`` is optional.
    """

    model = EquipmentComponentSparePart

    async def list_associations(self, query: AssociationQuery | None = None) -> list:
        query = query or AssociationQuery()
        assoc = EquipmentComponentSparePart

        cycle_conditions = [SparePartSupplier.spare_part_id == assoc.spare_part_id]
        if query.supply_cycle_range is not None:
            low, high = query.supply_cycle_range
            # reported cycle is the shortest one inside the requested range
            cycle_conditions.append(SparePartSupplier.supply_cycle_weeks.between(low, high))
        shortest_cycle = (
            select(func.min(SparePartSupplier.supply_cycle_weeks))
            .where(*cycle_conditions)
            .correlate(assoc)
            .scalar_subquery()
        )

        stmt = (
            select(
                assoc.id,
                assoc.equipment_id,
                assoc.component_id,
                assoc.spare_part_id,
                assoc.quantity,
                assoc.created_at,
                assoc.updated_at,
                Equipment.equipment_name,
                Component.component_name,
                Component.importance_level,
                SparePart.material_code,
                SparePart.description.label("spare_part_name"),
                SparePart.specification,
                SparePart.manufacturer,
                SparePart.is_custom,
                shortest_cycle.label("supply_cycle_weeks"),
            )
            .select_from(assoc)
            .join(Equipment, assoc.equipment_id == Equipment.equipment_id)
            .join(Workshop, Equipment.workshop_id == Workshop.workshop_id)
            .join(Component, assoc.component_id == Component.component_id)
            .join(SparePart, assoc.spare_part_id == SparePart.spare_part_id)
        )

        conditions = []
        if query.equipment_id:
            conditions.append(assoc.equipment_id == query.equipment_id)
        if query.base_id:
            conditions.append(Workshop.base_id == query.base_id)
        if query.workshop_id:
            conditions.append(Equipment.workshop_id == query.workshop_id)
        if query.type_id:
            conditions.append(Equipment.type_id == query.type_id)
        if query.component_id:
            conditions.append(assoc.component_id == query.component_id)
        if query.spare_part_id:
            conditions.append(assoc.spare_part_id == query.spare_part_id)
        if query.importance_levels:
            conditions.append(Component.importance_level.in_(query.importance_levels))
        if query.supply_cycle_range is not None:
            low, high = query.supply_cycle_range
            # EXISTS keeps one row per association even with several matching suppliers
            conditions.append(
                select(SparePartSupplier.supplier_id)
                .where(
                    SparePartSupplier.spare_part_id == assoc.spare_part_id,
                    SparePartSupplier.supply_cycle_weeks.between(low, high),
                )
                .exists()
            )
        if query.is_custom is not None:
            conditions.append(SparePart.is_custom == query.is_custom)
        if query.keyword:
            like = f"%{query.keyword}%"
            conditions.append(
                or_(
                    SparePart.material_code.ilike(like),
                    SparePart.description.ilike(like),
                    SparePart.specification.ilike(like),
                    Equipment.equipment_name.ilike(like),
                    Component.component_name.ilike(like),
                )
            )
        if conditions:
            stmt = stmt.where(and_(*conditions))

        stmt = stmt.order_by(Equipment.equipment_name, Component.component_name, assoc.id)
        return await self.rows(stmt)

    async def list_for_equipment(self, equipment_id: int) -> List[EquipmentComponentSparePart]:
        stmt = (
            select(EquipmentComponentSparePart)
            .where(EquipmentComponentSparePart.equipment_id == equipment_id)
            .order_by(EquipmentComponentSparePart.id)
        )
        return list(await self.scalars(stmt))
