"""Initial maintenance registry schema.

- base
- workshop
- equipment_type
- equipment
- component
- spare_part
- spare_part_supplier
- equipment_component_spare_part

Also creates the busy_level ('1'..'4') and importance_level ('A'..'C') enum types.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "3c1d9a7e5b20"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

NOW = sa.text("now()")

BUSY_LEVEL = postgresql.ENUM("1", "2", "3", "4", name="busy_level", create_type=False)
IMPORTANCE_LEVEL = postgresql.ENUM("A", "B", "C", name="importance_level", create_type=False)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=NOW, nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=NOW, nullable=False),
    ]


def upgrade() -> None:
    bind = op.get_bind()
    BUSY_LEVEL.create(bind, checkfirst=True)
    IMPORTANCE_LEVEL.create(bind, checkfirst=True)

    # Location hierarchy
    op.create_table(
        "base",
        sa.Column("base_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("base_name", sa.String(100), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("base_id", name="pk_base"),
    )

    op.create_table(
        "workshop",
        sa.Column("workshop_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("base_id", sa.Integer(), nullable=False),
        sa.Column("workshop_name", sa.String(100), nullable=False),
        sa.Column("busy_level", BUSY_LEVEL, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("workshop_id", name="pk_workshop"),
        sa.ForeignKeyConstraint(
            ["base_id"], ["base.base_id"], ondelete="RESTRICT", name="fk_workshop_base_id_base"
        ),
    )
    op.create_index("ix_workshop_base_id", "workshop", ["base_id"])

    op.create_table(
        "equipment_type",
        sa.Column("type_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("type_name", sa.String(100), nullable=False),
        sa.Column("lifecycle_years", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("type_id", name="pk_equipment_type"),
    )

    op.create_table(
        "equipment",
        sa.Column("equipment_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("workshop_id", sa.Integer(), nullable=False),
        sa.Column("type_id", sa.Integer(), nullable=False),
        sa.Column("equipment_name", sa.String(100), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("equipment_id", name="pk_equipment"),
        sa.ForeignKeyConstraint(
            ["workshop_id"], ["workshop.workshop_id"], ondelete="RESTRICT",
            name="fk_equipment_workshop_id_workshop",
        ),
        sa.ForeignKeyConstraint(
            ["type_id"], ["equipment_type.type_id"], ondelete="RESTRICT",
            name="fk_equipment_type_id_equipment_type",
        ),
    )
    op.create_index("ix_equipment_workshop_id", "equipment", ["workshop_id"])
    op.create_index("ix_equipment_type_id", "equipment", ["type_id"])

    # Catalog
    op.create_table(
        "component",
        sa.Column("component_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("type_id", sa.Integer(), nullable=False),
        sa.Column("component_name", sa.String(100), nullable=False),
        sa.Column("importance_level", IMPORTANCE_LEVEL, nullable=False),
        sa.Column("failure_rate", sa.Numeric(5, 2), nullable=True),
        sa.Column("lifecycle_years", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("component_id", name="pk_component"),
        sa.ForeignKeyConstraint(
            ["type_id"], ["equipment_type.type_id"], ondelete="RESTRICT",
            name="fk_component_type_id_equipment_type",
        ),
    )
    op.create_index("ix_component_type_id", "component", ["type_id"])

    op.create_table(
        "spare_part",
        sa.Column("spare_part_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("material_code", sa.String(50), nullable=False),
        sa.Column("manufacturer", sa.String(100), nullable=False),
        sa.Column("manufacturer_material_code", sa.String(50), nullable=True),
        sa.Column("specification", sa.String(100), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_custom", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("spare_part_id", name="pk_spare_part"),
        sa.UniqueConstraint("material_code", name="uq_spare_part_material_code"),
    )

    op.create_table(
        "spare_part_supplier",
        sa.Column("supplier_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("spare_part_id", sa.Integer(), nullable=False),
        sa.Column("supplier_name", sa.String(100), nullable=False),
        sa.Column("supply_cycle_weeks", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("supplier_id", name="pk_spare_part_supplier"),
        sa.ForeignKeyConstraint(
            ["spare_part_id"], ["spare_part.spare_part_id"], ondelete="RESTRICT",
            name="fk_spare_part_supplier_spare_part_id_spare_part",
        ),
    )
    op.create_index("ix_spare_part_supplier_spare_part_id", "spare_part_supplier", ["spare_part_id"])

    # Equipment x component x spare part
    op.create_table(
        "equipment_component_spare_part",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("equipment_id", sa.Integer(), nullable=False),
        sa.Column("component_id", sa.Integer(), nullable=False),
        sa.Column("spare_part_id", sa.Integer(), nullable=False),
        sa.Column("quantity", sa.Integer(), server_default=sa.text("1"), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_equipment_component_spare_part"),
        sa.ForeignKeyConstraint(
            ["equipment_id"], ["equipment.equipment_id"], ondelete="RESTRICT",
            name="fk_equipment_component_spare_part_equipment_id_equipment",
        ),
        sa.ForeignKeyConstraint(
            ["component_id"], ["component.component_id"], ondelete="RESTRICT",
            name="fk_equipment_component_spare_part_component_id_component",
        ),
        sa.ForeignKeyConstraint(
            ["spare_part_id"], ["spare_part.spare_part_id"], ondelete="RESTRICT",
            name="fk_equipment_component_spare_part_spare_part_id_spare_part",
        ),
    )
    op.create_index(
        "ix_equipment_component_spare_part_equipment_id",
        "equipment_component_spare_part",
        ["equipment_id"],
    )
    op.create_index(
        "ix_equipment_component_spare_part_component_id",
        "equipment_component_spare_part",
        ["component_id"],
    )
    op.create_index(
        "ix_equipment_component_spare_part_spare_part_id",
        "equipment_component_spare_part",
        ["spare_part_id"],
    )


def downgrade() -> None:
    op.drop_table("equipment_component_spare_part")
    op.drop_table("spare_part_supplier")
    op.drop_table("spare_part")
    op.drop_table("component")
    op.drop_table("equipment")
    op.drop_table("equipment_type")
    op.drop_table("workshop")
    op.drop_table("base")

    bind = op.get_bind()
    IMPORTANCE_LEVEL.drop(bind, checkfirst=True)
    BUSY_LEVEL.drop(bind, checkfirst=True)
