"""Initial schema — citizens, field staff, issues.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Citizens
    op.create_table(
        "citizens",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("name", sa.String(200), nullable=True),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("fcm_token", sa.String(512), nullable=True),
        sa.Column("expo_push_token", sa.String(512), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )

    # Field staff
    op.create_table(
        "field_staff",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("department", sa.String(50), nullable=False),
        sa.Column("duty_status", sa.String(20), nullable=False, server_default="Off Duty"),
        sa.Column("live_lat", sa.Float, nullable=True),
        sa.Column("live_lng", sa.Float, nullable=True),
        sa.Column("current_assignment", sa.String(64), nullable=True),
        sa.Column("fcm_token", sa.String(512), nullable=True),
        sa.Column("expo_push_token", sa.String(512), nullable=True),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index(
        "idx_field_staff_department_duty", "field_staff", ["department", "duty_status"]
    )

    # Issues
    op.create_table(
        "issues",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("latitude", sa.Float, nullable=True),
        sa.Column("longitude", sa.Float, nullable=True),
        sa.Column(
            "reporter_id",
            sa.String(64),
            sa.ForeignKey("citizens.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("status", sa.String(20), nullable=False, server_default="Pending"),
        sa.Column(
            "assigned_to",
            sa.String(64),
            sa.ForeignKey("field_staff.id"),
            nullable=True,
        ),
        sa.Column("assigned_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("idx_issues_status", "issues", ["status"])
    op.create_index("idx_issues_category", "issues", ["category"])


def downgrade() -> None:
    op.drop_table("issues")
    op.drop_table("field_staff")
    op.drop_table("citizens")
