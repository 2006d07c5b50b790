"""Seed reference data — roles and rarity tiers.

Revision ID: 002_reference_data
Revises: 001_initial
Create Date: 2026-10-18

Reference rows are part of the schema contract: registration needs the
Player role, and items point at rarity tiers by id.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002_reference_data"
down_revision: Union[str, None] = "001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

roles = sa.table(
    "roles",
    sa.column("name", sa.String),
    sa.column("description", sa.Text),
)
rarities = sa.table(
    "rarities",
    sa.column("name", sa.String),
    sa.column("color_code", sa.String),
    sa.column("drop_chance", sa.Numeric(5, 2)),
)


def upgrade() -> None:
    op.bulk_insert(roles, [
        {"name": "Admin", "description": "Administrator with full access"},
        {"name": "Player", "description": "Regular player account"},
    ])
    op.bulk_insert(rarities, [
        {"name": "Common", "color_code": "#AAAAAA", "drop_chance": 70.00},
        {"name": "Uncommon", "color_code": "#00AA00", "drop_chance": 20.00},
        {"name": "Rare", "color_code": "#0000AA", "drop_chance": 8.00},
        {"name": "Epic", "color_code": "#AA00AA", "drop_chance": 1.50},
        {"name": "Legendary", "color_code": "#FFA500", "drop_chance": 0.50},
    ])


def downgrade() -> None:
    op.execute(rarities.delete())
    op.execute(roles.delete())
