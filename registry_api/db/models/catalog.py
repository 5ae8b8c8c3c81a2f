from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, Enum, ForeignKey, Integer, Numeric, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from registry_api.db.base import Base, TimestampMixin
from registry_api.db.models.enums import ImportanceLevel, enum_values


class EquipmentType(TimestampMixin, Base):
    """Classification shared by equipment and components."""
    __tablename__ = "equipment_type"

    type_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type_name: Mapped[str] = mapped_column(String(100), nullable=False)
    lifecycle_years: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)


class Component(TimestampMixin, Base):
    """Part type belonging to an equipment type, rated by importance."""
    __tablename__ = "component"

    component_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("equipment_type.type_id", ondelete="RESTRICT"), nullable=False, index=True
    )
    component_name: Mapped[str] = mapped_column(String(100), nullable=False)
    importance_level: Mapped[ImportanceLevel] = mapped_column(
        Enum(ImportanceLevel, name="importance_level", values_callable=enum_values), nullable=False
    )
    failure_rate: Mapped[Optional[float]] = mapped_column(Numeric(5, 2), nullable=True)  # percent
    lifecycle_years: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)


class SparePart(TimestampMixin, Base):
    """Stocked material identified by a unique material code."""
    __tablename__ = "spare_part"

    spare_part_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    material_code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    manufacturer: Mapped[str] = mapped_column(String(100), nullable=False)
    manufacturer_material_code: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    specification: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_custom: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())


class SparePartSupplier(TimestampMixin, Base):
    """Supplier of a spare part and its delivery lead time."""
    __tablename__ = "spare_part_supplier"

    supplier_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    spare_part_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("spare_part.spare_part_id", ondelete="RESTRICT"), nullable=False, index=True
    )
    supplier_name: Mapped[str] = mapped_column(String(100), nullable=False)
    supply_cycle_weeks: Mapped[int] = mapped_column(Integer, nullable=False)
