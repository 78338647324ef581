"""create_shifts_logger_tables

Revision ID: a1c3e5f70001
Revises:
Create Date: 2026-10-19 09:00:00.000000

Create workers, locations and shifts tables.
Shifts reference workers and locations with ON DELETE RESTRICT.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c3e5f70001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'workers',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(254), nullable=True),
        sa.Column('phone_number', sa.String(20), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        'locations',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('address', sa.String(200), nullable=False),
        sa.Column('town', sa.String(100), nullable=False),
        sa.Column('county', sa.String(100), nullable=False),
        sa.Column('post_code', sa.String(20), nullable=False),
        sa.Column('country', sa.String(100), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_locations_country', 'locations', ['country'])

    # Times are naive wall-clock values
    op.create_table(
        'shifts',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('worker_id', sa.Integer(), sa.ForeignKey('workers.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('location_id', sa.Integer(), sa.ForeignKey('locations.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('start_time', sa.DateTime(), nullable=False),
        sa.Column('end_time', sa.DateTime(), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # Overlap lookup: same worker + location, ordered by start
    op.create_index('ix_shifts_worker_location_start', 'shifts', ['worker_id', 'location_id', 'start_time'])


def downgrade() -> None:
    op.drop_index('ix_shifts_worker_location_start', table_name='shifts')
    op.drop_table('shifts')
    op.drop_index('ix_locations_country', table_name='locations')
    op.drop_table('locations')
    op.drop_table('workers')
