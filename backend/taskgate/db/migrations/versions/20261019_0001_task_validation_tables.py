"""Task type registry and validation audit log."""

from __future__ import annotations

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "task_type_registry",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("display_name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(length=64), nullable=True),
        sa.Column("required_fields", postgresql.JSONB(), nullable=False, server_default="[]"),
        sa.Column("optional_fields", postgresql.JSONB(), nullable=False, server_default="[]"),
        sa.Column("field_schemas", postgresql.JSONB(), nullable=False, server_default="{}"),
        sa.Column("minimum_budget_usd", sa.Numeric(10, 2), nullable=True),
        sa.Column("maximum_duration_hr", sa.Numeric(6, 2), nullable=True),
        sa.Column("prohibited_keywords", postgresql.JSONB(), nullable=False, server_default="[]"),
        sa.Column("requires_address", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_task_type_registry_is_active", "task_type_registry", ["is_active"])

    op.create_table(
        "task_validation_log",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("agent_id", sa.String(length=255), nullable=True),
        sa.Column("task_type_id", sa.String(length=64), nullable=True),
        sa.Column("payload_hash", sa.String(length=64), nullable=False),
        sa.Column("validation_result", sa.String(length=32), nullable=False),
        sa.Column("errors", postgresql.JSONB(), nullable=True),
        sa.Column("policy_flags", postgresql.JSONB(), nullable=True),
        sa.Column("attempt_number", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("dry_run", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_task_validation_log_agent_id", "task_validation_log", ["agent_id"])
    op.create_index("ix_task_validation_log_task_type_id", "task_validation_log", ["task_type_id"])
    op.create_index("ix_task_validation_log_created_at", "task_validation_log", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_task_validation_log_created_at", table_name="task_validation_log")
    op.drop_index("ix_task_validation_log_task_type_id", table_name="task_validation_log")
    op.drop_index("ix_task_validation_log_agent_id", table_name="task_validation_log")
    op.drop_table("task_validation_log")
    op.drop_index("ix_task_type_registry_is_active", table_name="task_type_registry")
    op.drop_table("task_type_registry")
