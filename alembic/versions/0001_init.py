"""Create networks, network hosts and network host setups.

Revision ID: 0001_init
Revises:
Create Date: 2024-09-05 21:54:53
"""
from alembic import op
import sqlalchemy as sa

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "networks",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False, unique=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_networks_id", "networks", ["id"])

    op.create_table(
        "network_hosts",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "network_id",
            sa.Integer(),
            sa.ForeignKey("networks.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("address", sa.String(length=255), nullable=False),
        sa.Column("description", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("network_id", "address", name="uq_network_hosts_network_id_address"),
    )
    op.create_index("ix_network_hosts_id", "network_hosts", ["id"])
    op.create_index("ix_network_hosts_network_id", "network_hosts", ["network_id"])

    op.create_table(
        "network_host_setups",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "network_host_id",
            sa.Integer(),
            sa.ForeignKey("network_hosts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("network_host_ip", sa.String(length=255), nullable=False),
        sa.Column("subnet_mask", sa.String(length=255), nullable=False),
        sa.Column("router", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_network_host_setups_network_host_id", "network_host_setups", ["network_host_id"])


def downgrade() -> None:
    op.drop_index("ix_network_host_setups_network_host_id", table_name="network_host_setups")
    op.drop_table("network_host_setups")
    op.drop_index("ix_network_hosts_network_id", table_name="network_hosts")
    op.drop_index("ix_network_hosts_id", table_name="network_hosts")
    op.drop_table("network_hosts")
    op.drop_index("ix_networks_id", table_name="networks")
    op.drop_table("networks")
