from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy import Select, and_, func, select

from registry_api.db.models.catalog import EquipmentType
from registry_api.db.models.location import BaseSite, Equipment, Workshop
from .base import CrudRepository

# Public sort keys of the equipment listing mapped to their columns.
EQUIPMENT_SORT_COLUMNS = {
    "equipmentId": Equipment.equipment_id,
    "equipmentName": Equipment.equipment_name,
    "workshopName": Workshop.workshop_name,
    "typeName": EquipmentType.type_name,
    "baseName": BaseSite.base_name,
    "createdAt": Equipment.created_at,
}


class BaseSiteRepository(CrudRepository[BaseSite]):
    """Repository for bases."""

    model = BaseSite

    async def list_bases(self) -> List[BaseSite]:
        stmt = select(BaseSite).order_by(BaseSite.base_name)
        return list(await self.scalars(stmt))


class WorkshopRepository(CrudRepository[Workshop]):
    """Repository for workshops."""

    model = Workshop

    async def list_workshops(self, *, base_id: Optional[int] = None) -> List[Workshop]:
        stmt = select(Workshop)
        if base_id:
            stmt = stmt.where(Workshop.base_id == base_id)
        stmt = stmt.order_by(Workshop.workshop_name, Workshop.workshop_id)
        return list(await self.scalars(stmt))


class EquipmentRepository(CrudRepository[Equipment]):
    """
    Repository for equipment.

    Listings join workshop, equipment type and base so callers get readable
    names without extra lookups.
    """

    model = Equipment

    @staticmethod
    def _joined(stmt: Select) -> Select:
        return (
            stmt.select_from(Equipment)
            .join(Workshop, Equipment.workshop_id == Workshop.workshop_id)
            .join(EquipmentType, Equipment.type_id == EquipmentType.type_id)
            .join(BaseSite, Workshop.base_id == BaseSite.base_id)
        )

    async def list_equipment(
        self,
        *,
        workshop_id: Optional[int] = None,
        type_id: Optional[int] = None,
        base_id: Optional[int] = None,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
        sort_by: str = "equipmentId",
        sort_order: str = "asc",
    ) -> Tuple[list, int]:
        """
        Return one page of equipment rows and the filtered total.

        Rows expose equipment columns plus workshop_name, type_name, base_id and
        base_name. Unknown sort keys fall back to equipmentId.
        """
        conditions = []
        if workshop_id:
            conditions.append(Equipment.workshop_id == workshop_id)
        if type_id:
            conditions.append(Equipment.type_id == type_id)
        if base_id:
            conditions.append(Workshop.base_id == base_id)
        if search:
            conditions.append(Equipment.equipment_name.ilike(f"%{search}%"))
        where = and_(*conditions) if conditions else None

        count_stmt = self._joined(select(func.count(Equipment.equipment_id)))
        if where is not None:
            count_stmt = count_stmt.where(where)
        total = int((await self.execute(count_stmt)).scalar_one())

        stmt = self._joined(
            select(
                Equipment.equipment_id,
                Equipment.workshop_id,
                Equipment.type_id,
                Equipment.equipment_name,
                Equipment.created_at,
                Equipment.updated_at,
                Workshop.workshop_name,
                EquipmentType.type_name,
                Workshop.base_id,
                BaseSite.base_name,
            )
        )
        if where is not None:
            stmt = stmt.where(where)

        column = EQUIPMENT_SORT_COLUMNS.get(sort_by, Equipment.equipment_id)
        ordering = column.desc() if sort_order == "desc" else column.asc()
        # equipment_id breaks ties so consecutive pages never overlap
        stmt = stmt.order_by(ordering, Equipment.equipment_id.asc())
        stmt = stmt.offset((page - 1) * limit).limit(limit)

        return await self.rows(stmt), total

    async def list_by_workshop(self, workshop_id: int) -> List[Equipment]:
        stmt = (
            select(Equipment)
            .where(Equipment.workshop_id == workshop_id)
            .order_by(Equipment.equipment_id)
        )
        return list(await self.scalars(stmt))
