"""Initial schema — plans, members, exercises.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

Members and exercises reference plans with ON DELETE RESTRICT: a plan that
still has children cannot be deleted.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "plans",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(20), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("trainer", sa.String(100), nullable=False),
    )

    op.create_table(
        "members",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("age", sa.Integer, nullable=False),
        sa.Column(
            "plan_id", sa.Integer,
            sa.ForeignKey("plans.id", ondelete="RESTRICT"), nullable=False,
        ),
    )
    op.create_index("ix_members_plan_id", "members", ["plan_id"])

    op.create_table(
        "exercises",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(500), nullable=False),
        sa.Column(
            "plan_id", sa.Integer,
            sa.ForeignKey("plans.id", ondelete="RESTRICT"), nullable=False,
        ),
    )
    op.create_index("ix_exercises_plan_id", "exercises", ["plan_id"])


def downgrade() -> None:
    op.drop_index("ix_exercises_plan_id", table_name="exercises")
    op.drop_table("exercises")
    op.drop_index("ix_members_plan_id", table_name="members")
    op.drop_table("members")
    op.drop_table("plans")
