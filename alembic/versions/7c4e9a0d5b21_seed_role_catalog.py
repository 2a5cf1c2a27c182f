"""Seed role catalog

Revision ID: 7c4e9a0d5b21
Revises: 3b8d1f6a2c90
Create Date: 2026-10-18 09:20:03.842115

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "7c4e9a0d5b21"
down_revision: Union[str, Sequence[str], None] = "3b8d1f6a2c90"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ROLE_NAMES = ["USER", "MODERATOR", "ADMIN"]

# Define a simple table structure for the data migration.
roles_table = sa.table("roles", sa.column("name", sa.String))


def upgrade() -> None:
    """Seed the canonical roles."""
    op.bulk_insert(roles_table, [{"name": name} for name in ROLE_NAMES])


def downgrade() -> None:
    """Remove the canonical roles."""
    op.execute(roles_table.delete().where(roles_table.c.name.in_(ROLE_NAMES)))
