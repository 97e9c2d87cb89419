"""create_storage_entries

Revision ID: 3f2b9c1d7e4a
Revises:
Create Date: 2026-10-19 09:12:44.518203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2b9c1d7e4a'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create the key/value table holding every office collection.

    Creates:
    - storage_entries table (one row per collection key)

    Each row holds a whole JSON collection plus a revision counter used
    for optimistic concurrency on writes.
    """
    op.create_table(
        'storage_entries',
        sa.Column('key', sa.String(length=100), nullable=False),
        sa.Column('value', sa.JSON(), nullable=True),
        sa.Column('revision', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('key')
    )


def downgrade() -> None:
    """
    Drop the key/value table.

    WARNING: This deletes all stored office data.
    """
    op.drop_table('storage_entries')
