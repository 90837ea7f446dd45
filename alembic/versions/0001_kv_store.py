"""Baseline migration - key-value store

Revision ID: 0001_kv_store
Revises:
Create Date: 2026-10-17

Every record type shares the single kv_store table.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_kv_store'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the kv_store table."""
    op.create_table(
        'kv_store',
        sa.Column('key', sa.String(length=255), nullable=False),
        sa.Column('value', sa.JSON(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('key', name='pk_kv_store'),
    )


def downgrade() -> None:
    op.drop_table('kv_store')
