"""create_transfer_tables

Revision ID: 3c1e9a7d52b0
Revises:
Create Date: 2026-10-19 10:12:07.318254

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1e9a7d52b0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema: 创建 teams / players / transfers 表。"""
    op.create_table(
        'teams',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('logo', sa.String(), nullable=True),
        sa.Column('country', sa.String(), nullable=True),
    )
    op.create_table(
        'players',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('photo', sa.String(), nullable=True),
        sa.Column('nationality', sa.String(), nullable=True),
        sa.Column('position', sa.String(), nullable=True),
    )
    op.create_table(
        'transfers',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('player_id', sa.String(), sa.ForeignKey('players.id'), nullable=False),
        sa.Column('from_team_id', sa.String(), sa.ForeignKey('teams.id'), nullable=True),
        sa.Column('to_team_id', sa.String(), sa.ForeignKey('teams.id'), nullable=False),
        sa.Column('transfer_date', sa.Date(), nullable=False),
        sa.Column('transfer_fee', sa.Numeric(14, 2), nullable=True),
        sa.Column('transfer_type', sa.String(), nullable=True),
        sa.Column('season', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint('transfer_fee >= 0', name='check_fee_positive'),
        sa.CheckConstraint('from_team_id IS NULL OR from_team_id != to_team_id', name='check_diff_teams'),
    )
    op.create_index('ix_transfers_player_id', 'transfers', ['player_id'])
    op.create_index('ix_transfers_transfer_date', 'transfers', ['transfer_date'])
    op.create_index('ix_transfers_season', 'transfers', ['season'])


def downgrade() -> None:
    """Downgrade schema: 删除转会相关表。"""
    op.drop_index('ix_transfers_season', table_name='transfers')
    op.drop_index('ix_transfers_transfer_date', table_name='transfers')
    op.drop_index('ix_transfers_player_id', table_name='transfers')
    op.drop_table('transfers')
    op.drop_table('players')
    op.drop_table('teams')
