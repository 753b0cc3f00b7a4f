"""Create Project and Deliverable tables

Revision ID: 001
Revises:
Create Date: 2026-02-02 21:18:50.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "Project",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="Project_pkey"),
    )
    op.create_index("Project_name_key", "Project", ["name"], unique=True)

    op.create_table(
        "Deliverable",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("projectId", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("dueDate", sa.DateTime(), nullable=False),
        sa.Column("frequency", sa.String(), nullable=True),
        sa.Column("manager", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="Deliverable_pkey"),
        sa.ForeignKeyConstraint(
            ["projectId"],
            ["Project.id"],
            name="Deliverable_projectId_fkey",
            ondelete="RESTRICT",
            onupdate="CASCADE",
        ),
    )
    op.create_index("ix_Deliverable_projectId", "Deliverable", ["projectId"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_Deliverable_projectId", table_name="Deliverable")
    op.drop_table("Deliverable")
    op.drop_index("Project_name_key", table_name="Project")
    op.drop_table("Project")
