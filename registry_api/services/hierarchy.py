from __future__ import annotations

import logging
from typing import Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from registry_api.repositories.association import AssociationRepository
from registry_api.repositories.catalog import ComponentRepository, SparePartRepository, SupplierRepository
from registry_api.repositories.location import BaseSiteRepository, EquipmentRepository, WorkshopRepository
from registry_api.schemas.catalog import ComponentRead, SparePartRead
from registry_api.schemas.hierarchy import TreeNode
from registry_api.schemas.location import BaseSiteRead, EquipmentRead, WorkshopRead
from registry_api.services.base import BaseService

logger = logging.getLogger(__name__)


def _dump(model) -> dict:
    return model.model_dump(mode="json", by_alias=True)


class HierarchyService(BaseService):
    """
    Builds the tree views of the registry on demand.

    Each level is one query (plus one per child node); nothing is cached.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.bases = BaseSiteRepository(session)
        self.workshops = WorkshopRepository(session)
        self.equipment = EquipmentRepository(session)
        self.components = ComponentRepository(session)
        self.spare_parts = SparePartRepository(session)
        self.suppliers = SupplierRepository(session)
        self.associations = AssociationRepository(session)

    # PUBLIC_INTERFACE
    async def build_base_hierarchy(self, base_id: int) -> Optional[TreeNode]:
        """
        Return base -> workshops -> equipment, or None if the base does not exist.

        Workshops are ordered by name, equipment by id.
        """
        base = await self.bases.get(base_id)
        if base is None:
            return None

        workshop_nodes = []
        for workshop in await self.workshops.list_workshops(base_id=base_id):
            equipment_nodes = [
                TreeNode(
                    id=item.equipment_id,
                    name=item.equipment_name,
                    type="equipment",
                    data=_dump(EquipmentRead.model_validate(item)),
                )
                for item in await self.equipment.list_by_workshop(workshop.workshop_id)
            ]
            workshop_nodes.append(
                TreeNode(
                    id=workshop.workshop_id,
                    name=workshop.workshop_name,
                    type="workshop",
                    data=_dump(WorkshopRead.model_validate(workshop)),
                    children=equipment_nodes,
                )
            )

        logger.debug("Built base hierarchy %s with %d workshops", base_id, len(workshop_nodes))
        return TreeNode(
            id=base.base_id,
            name=base.base_name,
            type="base",
            data=_dump(BaseSiteRead.model_validate(base)),
            children=workshop_nodes,
        )

    # PUBLIC_INTERFACE
    async def build_equipment_hierarchy(self, equipment_id: int) -> Optional[TreeNode]:
        """
        Return equipment -> components -> spare parts, or None if the equipment does not exist.

        Components appear in the order of their first association. Every
        association contributes one spare-part node whose data carries the
        component's importance level, the association quantity and the
        shortest supply cycle among the part's suppliers.
        """
        equipment = await self.equipment.get(equipment_id)
        if equipment is None:
            return None

        component_nodes: Dict[int, TreeNode] = {}
        supply_cycles: Dict[int, Optional[int]] = {}

        for assoc in await self.associations.list_for_equipment(equipment_id):
            node = component_nodes.get(assoc.component_id)
            if node is None:
                component = await self.components.get(assoc.component_id)
                if component is None:
                    continue
                node = TreeNode(
                    id=component.component_id,
                    name=component.component_name,
                    type="component",
                    data=_dump(ComponentRead.model_validate(component)),
                )
                component_nodes[assoc.component_id] = node

            spare_part = await self.spare_parts.get(assoc.spare_part_id)
            if spare_part is None:
                continue
            if spare_part.spare_part_id not in supply_cycles:
                supply_cycles[spare_part.spare_part_id] = await self.suppliers.shortest_supply_cycle(
                    spare_part.spare_part_id
                )

            data = _dump(SparePartRead.model_validate(spare_part))
            data.update(
                {
                    "associationId": assoc.id,
                    "importanceLevel": node.data["importanceLevel"],
                    "quantity": assoc.quantity,
                    "supplyCycleWeeks": supply_cycles[spare_part.spare_part_id],
                }
            )
            node.children.append(
                TreeNode(
                    id=spare_part.spare_part_id,
                    name=spare_part.description or spare_part.material_code,
                    type="spare_part",
                    data=data,
                )
            )

        return TreeNode(
            id=equipment.equipment_id,
            name=equipment.equipment_name,
            type="equipment",
            data=_dump(EquipmentRead.model_validate(equipment)),
            children=list(component_nodes.values()),
        )
