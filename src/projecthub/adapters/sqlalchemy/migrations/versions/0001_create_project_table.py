"""Create the project table.

Revision ID: 0001_create_project_table
Revises:
Create Date: 2025-02-09 10:12:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001_create_project_table"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "project",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("visible", sa.Boolean(), nullable=False),
        sa.Column("order_index", sa.Integer(), nullable=True),
        sa.Column("additional_info", sa.JSON(), nullable=False),
        sa.Column("repository_patterns", sa.JSON(), nullable=False),
        sa.Column("contributions", sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_project")),
    )


def downgrade() -> None:
    op.drop_table("project")
