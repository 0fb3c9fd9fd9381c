"""create users and units tables

Revision ID: 001
Revises:
Create Date: 2025-03-03

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("admission_number", sa.String(50), nullable=False),
        sa.Column("profile_image_url", sa.String(512), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="STUDENT"),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_users_admission_number", "users", ["admission_number"], unique=True)
    op.create_table(
        "units",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("unit_code", sa.String(32), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(64), nullable=False),
    )
    op.create_index("ix_units_unit_code", "units", ["unit_code"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_units_unit_code", table_name="units")
    op.drop_table("units")
    op.drop_index("ix_users_admission_number", table_name="users")
    op.drop_table("users")
