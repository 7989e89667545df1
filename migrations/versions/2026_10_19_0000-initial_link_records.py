"""Initial schema: link_records key-value table

Revision ID: 001_link_records
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect

# revision identifiers, used by Alembic.
revision: str = '001_link_records'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create the link_records table: short id -> canonical record bytes.

    Skipped when the table exists already (the service creates it on open).
    """
    bind = op.get_bind()
    existing_tables = inspect(bind).get_table_names()

    if 'link_records' not in existing_tables:
        op.create_table(
            'link_records',
            sa.Column('key', sa.String(length=64), nullable=False),
            sa.Column('value', sa.LargeBinary(), nullable=False),
            sa.PrimaryKeyConstraint('key')
        )


def downgrade() -> None:
    op.drop_table('link_records')
