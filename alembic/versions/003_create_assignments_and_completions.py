"""create assignments and completed_assignments tables

Revision ID: 003
Revises: 002
Create Date: 2025-03-04

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "assignments",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("deadline", sa.DateTime(), nullable=False),
        sa.Column("file_url", sa.String(512), nullable=True),
        sa.Column("unit_code", sa.String(32), nullable=False),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_assignments_unit_code", "assignments", ["unit_code"])
    op.create_table(
        "completed_assignments",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column(
            "assignment_id",
            sa.String(36),
            sa.ForeignKey("assignments.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("completed_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("assignment_id", "user_id", name="unique_completion"),
    )
    op.create_index("ix_completed_assignments_assignment_id", "completed_assignments", ["assignment_id"])
    op.create_index("ix_completed_assignments_user_id", "completed_assignments", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_completed_assignments_user_id", table_name="completed_assignments")
    op.drop_index("ix_completed_assignments_assignment_id", table_name="completed_assignments")
    op.drop_table("completed_assignments")
    op.drop_index("ix_assignments_unit_code", table_name="assignments")
    op.drop_table("assignments")
