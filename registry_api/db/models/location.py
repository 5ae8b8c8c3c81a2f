from __future__ import annotations

from sqlalchemy import Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from registry_api.db.base import Base, TimestampMixin
from registry_api.db.models.enums import BusyLevel, enum_values


class BaseSite(TimestampMixin, Base):
    """Manufacturing base (site). Root of the location hierarchy."""
    __tablename__ = "base"

    base_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    base_name: Mapped[str] = mapped_column(String(100), nullable=False)


class Workshop(TimestampMixin, Base):
    """Workshop inside a base."""
    __tablename__ = "workshop"

    workshop_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    base_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("base.base_id", ondelete="RESTRICT"), nullable=False, index=True
    )
    workshop_name: Mapped[str] = mapped_column(String(100), nullable=False)
    busy_level: Mapped[BusyLevel] = mapped_column(
        Enum(BusyLevel, name="busy_level", values_callable=enum_values), nullable=False
    )


class Equipment(TimestampMixin, Base):
    """Machine located in a workshop and classified by equipment type."""
    __tablename__ = "equipment"

    equipment_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    workshop_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("workshop.workshop_id", ondelete="RESTRICT"), nullable=False, index=True
    )
    type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("equipment_type.type_id", ondelete="RESTRICT"), nullable=False, index=True
    )
    equipment_name: Mapped[str] = mapped_column(String(100), nullable=False)
