"""Create project model and repository problem tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

from pomstore.adapters.sqlalchemy.mappings import (
    DependencyListType,
    ParentReferenceType,
    StringListType,
    StringMapType,
    UTCDateTime,
)

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "project_model",
        sa.Column("group_id", sa.String(), nullable=False),
        sa.Column("artifact_id", sa.String(), nullable=False),
        sa.Column("version", sa.String(), nullable=False),
        sa.Column("packaging", sa.String(), nullable=False),
        sa.Column("origin", sa.String(), nullable=True),
        sa.Column("name", sa.String(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("url", sa.String(), nullable=True),
        sa.Column("parent", ParentReferenceType(), nullable=True),
        sa.Column("properties", StringMapType(), nullable=False),
        sa.Column("dependencies", DependencyListType(), nullable=False),
        sa.Column("dependency_management", DependencyListType(), nullable=False),
        sa.Column("modules", StringListType(), nullable=False),
        sa.PrimaryKeyConstraint(
            "group_id", "artifact_id", "version", name=op.f("pk_project_model")
        ),
    )
    op.create_table(
        "repository_problem",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("repository_id", sa.String(), nullable=False),
        sa.Column("path", sa.String(), nullable=False),
        sa.Column("group_id", sa.String(), nullable=False),
        sa.Column("artifact_id", sa.String(), nullable=False),
        sa.Column("version", sa.String(), nullable=False),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("origin", sa.String(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("created_at", UTCDateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_repository_problem")),
    )
    op.create_index(
        "ix_repository_problem_repository_id",
        "repository_problem",
        ["repository_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_repository_problem_repository_id", table_name="repository_problem")
    op.drop_table("repository_problem")
    op.drop_table("project_model")
