"""Create planting calendar tables

Revision ID: 001
Revises:
Create Date: 2025-03-01 10:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create plant catalog and calendar entry tables"""

    # 1. Global plant catalog
    op.create_table('plants',
        sa.Column('id', sa.String(200), primary_key=True, nullable=False),
        sa.Column('display_name', sa.String(200), nullable=False),
        sa.Column('normalized_name', sa.String(200), nullable=False),
        sa.Column('sun_preference', sa.String(50), nullable=False),
        sa.Column('watering_preference', sa.String(50), nullable=False),
        sa.Column('general_information', sa.Text(), nullable=False, server_default=''),
        sa.Column('image_url', sa.Text(), nullable=False, server_default=''),
        sa.Column('user_query', sa.String(200), nullable=True),
        sa.Column('created_by', sa.String(128), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    )
    op.create_index('ix_plants_normalized_name', 'plants', ['normalized_name'])

    # 2. Per-user calendar entries, keyed by plant id; date kept as the raw literal
    op.create_table('calendar_entries',
        sa.Column('user_id', sa.String(128), primary_key=True, nullable=False),
        sa.Column('entry_id', sa.String(200), primary_key=True, nullable=False),
        sa.Column('date', sa.String(10), nullable=False),
        sa.Column('plant', sa.JSON(), nullable=False),
        sa.Column('title', sa.String(255), nullable=False, server_default=''),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    )
    op.create_index('ix_calendar_entries_user_date', 'calendar_entries', ['user_id', 'date'])


def downgrade() -> None:
    """Drop planting calendar tables"""
    op.drop_index('ix_calendar_entries_user_date', table_name='calendar_entries')
    op.drop_table('calendar_entries')
    op.drop_index('ix_plants_normalized_name', table_name='plants')
    op.drop_table('plants')
