"""Initial schema: transport unit types, locations, transport units, unit errors.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ------------------------------------------------------------------ #
    # 1. REFERENCE LAYER                                                   #
    # ------------------------------------------------------------------ #

    op.create_table(
        "transport_unit_types",
        sa.Column("type_id", sa.Uuid, primary_key=True),
        sa.Column("type", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.UniqueConstraint("type", name="uq_transport_unit_types_type"),
    )

    op.create_table(
        "locations",
        sa.Column("location_id", sa.Uuid, primary_key=True),
        sa.Column("area", sa.Text, nullable=False),
        sa.Column("aisle", sa.Text, nullable=False),
        sa.Column("x", sa.Text, nullable=False),
        sa.Column("y", sa.Text, nullable=False),
        sa.Column("z", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.UniqueConstraint("area", "aisle", "x", "y", "z", name="uq_locations_location_pk"),
    )

    # ------------------------------------------------------------------ #
    # 2. TRANSPORT LAYER                                                   #
    # ------------------------------------------------------------------ #

    op.create_table(
        "transport_units",
        sa.Column("unit_id", sa.Uuid, primary_key=True),
        sa.Column("barcode", sa.Text, nullable=False),
        sa.Column(
            "transport_unit_type_id",
            sa.Uuid,
            sa.ForeignKey("transport_unit_types.type_id"),
            nullable=False,
        ),
        sa.Column(
            "actual_location_id",
            sa.Uuid,
            sa.ForeignKey("locations.location_id"),
            nullable=True,
        ),
        sa.Column(
            "target_location_id",
            sa.Uuid,
            sa.ForeignKey("locations.location_id"),
            nullable=True,
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.UniqueConstraint("barcode", name="uq_transport_units_barcode"),
    )

    op.create_table(
        "unit_errors",
        sa.Column("error_id", sa.Uuid, primary_key=True),
        sa.Column(
            "unit_id",
            sa.Uuid,
            sa.ForeignKey("transport_units.unit_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("position", sa.Integer, nullable=False, server_default="0"),
        sa.Column("error_no", sa.Text, nullable=True),
        sa.Column("error_text", sa.Text, nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_unit_errors_unit_id", "unit_errors", ["unit_id"])


def downgrade() -> None:
    op.drop_index("ix_unit_errors_unit_id", table_name="unit_errors")
    op.drop_table("unit_errors")
    op.drop_table("transport_units")
    op.drop_table("locations")
    op.drop_table("transport_unit_types")
