"""Initial schema for the sea transport service

Revision ID: 20261017_000000
Revises: None
Create Date: 2026-10-17 00:00:00.000000

Creates the entity tables:
- port (port_name, capacity)
- transport (transport_name, max_weight, speed, deck_size)
- status (status_name)

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261017_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_ID = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    """Create the entity tables."""

    op.create_table(
        "port",
        sa.Column("id", _ID, autoincrement=True, nullable=False),
        sa.Column("port_name", sa.String(255), nullable=False),
        sa.Column("capacity", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_port"),
    )

    op.create_table(
        "transport",
        sa.Column("id", _ID, autoincrement=True, nullable=False),
        sa.Column("transport_name", sa.String(255), nullable=False),
        sa.Column("max_weight", sa.Integer(), nullable=False),
        sa.Column("speed", sa.Integer(), nullable=False),
        sa.Column("deck_size", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_transport"),
    )

    op.create_table(
        "status",
        sa.Column("id", _ID, autoincrement=True, nullable=False),
        sa.Column("status_name", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_status"),
    )


def downgrade() -> None:
    """Drop the entity tables."""

    op.drop_table("status")
    op.drop_table("transport")
    op.drop_table("port")
