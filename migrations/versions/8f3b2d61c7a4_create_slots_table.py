"""create_slots_table

Revision ID: 8f3b2d61c7a4
Revises: 5c1e7a9d2b40
Create Date: 2025-11-03 18:27:41.830552

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8f3b2d61c7a4'
down_revision: Union[str, None] = '5c1e7a9d2b40'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'slots',
        sa.Column('id', sa.UUID(as_uuid=True), primary_key=True),
        sa.Column('date', sa.String(10), nullable=False),
        sa.Column('start_time', sa.String(5), nullable=False),
        sa.Column('end_time', sa.String(5), nullable=False),
        sa.Column('is_booked', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('booked_by', sa.String(), nullable=True),
        sa.Column('creation_date', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
        sa.Column('last_update', sa.DateTime(), server_default=sa.text('now()'), nullable=True),
        sa.UniqueConstraint('date', 'start_time', 'end_time', name='_slot_date_time_uc'),
        sa.CheckConstraint('start_time < end_time', name='_slot_time_order_ck'),
        sa.CheckConstraint(
            '(is_booked AND booked_by IS NOT NULL) OR (NOT is_booked AND booked_by IS NULL)',
            name='_slot_booked_by_ck',
        ),
    )
    op.create_index('ix_slot_date', 'slots', ['date'])
    op.create_index('ix_slot_booked_by', 'slots', ['booked_by'])


def downgrade() -> None:
    op.drop_index('ix_slot_booked_by', table_name='slots')
    op.drop_index('ix_slot_date', table_name='slots')
    op.drop_table('slots')
