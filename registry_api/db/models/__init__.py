"""
ORM models for the maintenance registry: location hierarchy (base, workshop,
equipment), catalog (equipment types, components, spare parts, suppliers) and
the equipment/component/spare-part association table.

Importing this package ensures model classes are registered with the Base
metadata for Alembic and runtime usage.
"""

from .enums import BusyLevel, ImportanceLevel  # noqa: F401
from .location import (  # noqa: F401
    BaseSite,
    Workshop,
    Equipment,
)
from .catalog import (  # noqa: F401
    EquipmentType,
    Component,
    SparePart,
    SparePartSupplier,
)
from .association import EquipmentComponentSparePart  # noqa: F401
