"""create notes, past_papers and their per-user view tables

Revision ID: 002
Revises: 001
Create Date: 2025-03-03

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "notes",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("file_url", sa.String(512), nullable=True),
        sa.Column("unit_code", sa.String(32), nullable=False),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_notes_unit_code", "notes", ["unit_code"])
    op.create_table(
        "user_note_views",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("note_id", sa.String(36), sa.ForeignKey("notes.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("viewed_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("note_id", "user_id", name="unique_note_view"),
    )
    op.create_index("ix_user_note_views_user_id", "user_note_views", ["user_id"])
    op.create_table(
        "past_papers",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("year", sa.String(10), nullable=False),
        sa.Column("file_url", sa.String(512), nullable=True),
        sa.Column("unit_code", sa.String(32), nullable=False),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_past_papers_unit_code", "past_papers", ["unit_code"])
    op.create_table(
        "user_paper_views",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("paper_id", sa.String(36), sa.ForeignKey("past_papers.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("viewed_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("paper_id", "user_id", name="unique_paper_view"),
    )
    op.create_index("ix_user_paper_views_user_id", "user_paper_views", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_user_paper_views_user_id", table_name="user_paper_views")
    op.drop_table("user_paper_views")
    op.drop_index("ix_past_papers_unit_code", table_name="past_papers")
    op.drop_table("past_papers")
    op.drop_index("ix_user_note_views_user_id", table_name="user_note_views")
    op.drop_table("user_note_views")
    op.drop_index("ix_notes_unit_code", table_name="notes")
    op.drop_table("notes")
