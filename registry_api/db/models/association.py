from __future__ import annotations

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from registry_api.db.base import Base, TimestampMixin


class EquipmentComponentSparePart(TimestampMixin, Base):
    """Ties one equipment, one of its components and a spare part with a required quantity."""
    __tablename__ = "equipment_component_spare_part"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    equipment_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("equipment.equipment_id", ondelete="RESTRICT"), nullable=False, index=True
    )
    component_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("component.component_id", ondelete="RESTRICT"), nullable=False, index=True
    )
    spare_part_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("spare_part.spare_part_id", ondelete="RESTRICT"), nullable=False, index=True
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1, server_default="1")
