"""
Database seeding utilities for a small demo data set.

Seeds (only when the base table is empty):
- Two bases with a few workshops each
- Equipment types with their components
- Equipment placed in the workshops
- Spare parts, their suppliers and equipment/component/spare part links

Usage:
  python -m registry_api.db.run_migrations upgrade head
  python -m registry_api.db.seed
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from registry_api.db.models import (
    BaseSite,
    BusyLevel,
    Component,
    Equipment,
    EquipmentComponentSparePart,
    EquipmentType,
    ImportanceLevel,
    SparePart,
    SparePartSupplier,
    Workshop,
)
from registry_api.db.session import get_session_maker

logger = logging.getLogger(__name__)

BASES: Dict[str, List[Tuple[str, BusyLevel]]] = {
    "North Plant": [
        ("Stamping", BusyLevel.CONTINUOUS),
        ("Assembly", BusyLevel.NORMAL),
    ],
    "South Plant": [
        ("Machining", BusyLevel.NORMAL),
        ("Packaging", BusyLevel.INTERMITTENT),
    ],
}

# type name -> (lifecycle years, [(component, importance, failure rate %, lifecycle years)])
EQUIPMENT_TYPES: Dict[str, Tuple[int, List[Tuple[str, ImportanceLevel, float, int]]]] = {
    "Hydraulic Press": (
        15,
        [
            ("Main Cylinder", ImportanceLevel.A, 2.5, 10),
            ("Hydraulic Pump", ImportanceLevel.A, 4.0, 8),
            ("Control Panel", ImportanceLevel.B, 1.2, 12),
        ],
    ),
    "CNC Lathe": (
        12,
        [
            ("Spindle", ImportanceLevel.A, 3.1, 8),
            ("Tool Turret", ImportanceLevel.B, 2.0, 10),
            ("Coolant Pump", ImportanceLevel.C, 5.5, 5),
        ],
    ),
    "Belt Conveyor": (
        10,
        [
            ("Drive Motor", ImportanceLevel.B, 3.0, 8),
            ("Conveyor Belt", ImportanceLevel.C, 8.0, 3),
        ],
    ),
}

# (equipment name, workshop name, type name)
EQUIPMENT: List[Tuple[str, str, str]] = [
    ("Press P-01", "Stamping", "Hydraulic Press"),
    ("Press P-02", "Stamping", "Hydraulic Press"),
    ("Line Conveyor C-01", "Assembly", "Belt Conveyor"),
    ("Lathe L-01", "Machining", "CNC Lathe"),
    ("Lathe L-02", "Machining", "CNC Lathe"),
    ("Outfeed Conveyor C-02", "Packaging", "Belt Conveyor"),
]

# (material code, manufacturer, manufacturer code, specification, description, is_custom,
#  [(supplier, supply cycle weeks)])
SPARE_PARTS: List[Tuple[str, str, Optional[str], str, str, bool, List[Tuple[str, int]]]] = [
    ("SP-SEAL-100", "Parker", "PK-5521", "100mm", "Cylinder seal kit", False,
     [("Hydraulics Direct", 2), ("Industrial Supply Co", 4)]),
    ("SP-PUMP-220", "Bosch Rexroth", "A10VSO", "28cc", "Axial piston pump", False,
     [("Hydraulics Direct", 8)]),
    ("SP-BRG-6205", "SKF", "6205-2RS", "25x52x15", "Deep groove ball bearing", False,
     [("Bearing House", 1), ("Industrial Supply Co", 2)]),
    ("SP-BELT-800", "Habasit", None, "800mm", "Conveyor belt section", True,
     [("Belting Works", 6)]),
    ("SP-MTR-4KW", "Siemens", "1LE1001", "4kW", "Drive motor", False,
     [("Drive Systems Ltd", 5)]),
]

# component name -> [(material code, quantity)]
COMPONENT_PARTS: Dict[str, List[Tuple[str, int]]] = {
    "Main Cylinder": [("SP-SEAL-100", 2)],
    "Hydraulic Pump": [("SP-PUMP-220", 1), ("SP-SEAL-100", 1)],
    "Spindle": [("SP-BRG-6205", 2)],
    "Coolant Pump": [("SP-BRG-6205", 1)],
    "Drive Motor": [("SP-MTR-4KW", 1), ("SP-BRG-6205", 2)],
    "Conveyor Belt": [("SP-BELT-800", 4)],
}


# PUBLIC_INTERFACE
async def seed_all(session: AsyncSession | None = None) -> bool:
    """
    Seed the database with the demo data set.

    Does nothing when at least one base already exists.

    Returns:
        True when data was inserted.
    """
    if session is not None:
        return await _seed(session)
    async with get_session_maker()() as own_session:
        return await _seed(own_session)


async def _seed(session: AsyncSession) -> bool:
    existing = (await session.execute(select(func.count()).select_from(BaseSite))).scalar_one()
    if existing:
        logger.info("Seed skipped: %s bases already present", existing)
        return False

    workshops = await _seed_locations(session)
    types, components = await _seed_catalog(session)
    parts = await _seed_spare_parts(session)

    for equipment_name, workshop_name, type_name in EQUIPMENT:
        equipment = Equipment(
            equipment_name=equipment_name,
            workshop_id=workshops[workshop_name],
            type_id=types[type_name],
        )
        session.add(equipment)
        await session.flush()
        for component_name, component_id in components[type_name]:
            for material_code, quantity in COMPONENT_PARTS.get(component_name, []):
                session.add(
                    EquipmentComponentSparePart(
                        equipment_id=equipment.equipment_id,
                        component_id=component_id,
                        spare_part_id=parts[material_code],
                        quantity=quantity,
                    )
                )

    await session.commit()
    logger.info("Seeded %s bases, %s equipment, %s spare parts", len(BASES), len(EQUIPMENT), len(parts))
    return True


async def _seed_locations(session: AsyncSession) -> Dict[str, int]:
    """Insert bases and workshops; return workshop name -> id."""
    workshop_ids: Dict[str, int] = {}
    for base_name, workshops in BASES.items():
        base = BaseSite(base_name=base_name)
        session.add(base)
        await session.flush()
        for workshop_name, busy_level in workshops:
            workshop = Workshop(base_id=base.base_id, workshop_name=workshop_name, busy_level=busy_level)
            session.add(workshop)
            await session.flush()
            workshop_ids[workshop_name] = workshop.workshop_id
    return workshop_ids


async def _seed_catalog(
    session: AsyncSession,
) -> Tuple[Dict[str, int], Dict[str, List[Tuple[str, int]]]]:
    """Insert equipment types and components; return type ids and components per type."""
    type_ids: Dict[str, int] = {}
    components: Dict[str, List[Tuple[str, int]]] = {}
    for type_name, (lifecycle, specs) in EQUIPMENT_TYPES.items():
        eq_type = EquipmentType(type_name=type_name, lifecycle_years=lifecycle)
        session.add(eq_type)
        await session.flush()
        type_ids[type_name] = eq_type.type_id
        components[type_name] = []
        for name, importance, failure_rate, years in specs:
            component = Component(
                type_id=eq_type.type_id,
                component_name=name,
                importance_level=importance,
                failure_rate=failure_rate,
                lifecycle_years=years,
            )
            session.add(component)
            await session.flush()
            components[type_name].append((name, component.component_id))
    return type_ids, components


async def _seed_spare_parts(session: AsyncSession) -> Dict[str, int]:
    """Insert spare parts with their suppliers; return material code -> id."""
    ids: Dict[str, int] = {}
    for code, manufacturer, mfr_code, spec, description, is_custom, suppliers in SPARE_PARTS:
        part = SparePart(
            material_code=code,
            manufacturer=manufacturer,
            manufacturer_material_code=mfr_code,
            specification=spec,
            description=description,
            is_custom=is_custom,
        )
        session.add(part)
        await session.flush()
        ids[code] = part.spare_part_id
        session.add_all(
            SparePartSupplier(spare_part_id=part.spare_part_id, supplier_name=name, supply_cycle_weeks=weeks)
            for name, weeks in suppliers
        )
    return ids


if __name__ == "__main__":
    asyncio.run(seed_all())
