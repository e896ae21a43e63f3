"""Create the host catalog.

Revision ID: 0002_hosts
Revises: 0001_init
Create Date: 2024-09-12 19:03:11
"""
from alembic import op
import sqlalchemy as sa

revision = "0002_hosts"
down_revision = "0001_init"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "hosts",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("address", sa.String(length=255), nullable=False, unique=True),
        sa.Column("description", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_hosts_id", "hosts", ["id"])


def downgrade() -> None:
    op.drop_index("ix_hosts_id", table_name="hosts")
    op.drop_table("hosts")
