"""Messaging core: users, listings, messages, blocks and reports

Revision ID: 0001_messaging_core
Revises:
Create Date: 2026-03-01 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_messaging_core'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(length=320), nullable=True),
        sa.Column('username', sa.String(length=50), nullable=True),
        sa.Column('display_name', sa.String(length=100), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('suspended_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_user'),
        sa.UniqueConstraint('username', name='uq_user_username'),
    )
    op.create_index('ix_user_email', 'user', ['email'], unique=True)

    op.create_table(
        'listing',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('owner_user_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('is_public', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['owner_user_id'], ['user.id'], name='fk_listing_owner_user_id_user'),
        sa.PrimaryKeyConstraint('id', name='pk_listing'),
    )
    op.create_index('ix_listing_owner_user_id', 'listing', ['owner_user_id'])

    op.create_table(
        'messages',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('listing_id', sa.Integer(), nullable=True),
        sa.Column('sender_user_id', sa.Integer(), nullable=False),
        sa.Column('owner_user_id', sa.Integer(), nullable=False),
        sa.Column('body', sa.Text(), nullable=False),
        sa.Column('read_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['listing_id'], ['listing.id'], name='fk_messages_listing_id_listing', ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['sender_user_id'], ['user.id'], name='fk_messages_sender_user_id_user'),
        sa.ForeignKeyConstraint(['owner_user_id'], ['user.id'], name='fk_messages_owner_user_id_user'),
        sa.PrimaryKeyConstraint('id', name='pk_messages'),
    )
    op.create_index('ix_messages_owner_created', 'messages', ['owner_user_id', 'created_at'])
    op.create_index('ix_messages_pair_created', 'messages', ['sender_user_id', 'owner_user_id', 'created_at'])

    op.create_table(
        'user_blocks',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_a', sa.Integer(), nullable=False),
        sa.Column('user_b', sa.Integer(), nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=False),
        sa.Column('reason', sa.String(length=500), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('user_a < user_b', name='ck_user_blocks_ordered_pair'),
        sa.ForeignKeyConstraint(['user_a'], ['user.id'], name='fk_user_blocks_user_a_user', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_b'], ['user.id'], name='fk_user_blocks_user_b_user', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['created_by'], ['user.id'], name='fk_user_blocks_created_by_user'),
        sa.PrimaryKeyConstraint('id', name='pk_user_blocks'),
        sa.UniqueConstraint('user_a', 'user_b', name='uq_user_blocks_pair'),
    )
    op.create_index('ix_user_blocks_user_a', 'user_blocks', ['user_a'])
    op.create_index('ix_user_blocks_user_b', 'user_blocks', ['user_b'])

    op.create_table(
        'reports',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('reporter_user_id', sa.Integer(), nullable=False),
        sa.Column('reported_user_id', sa.Integer(), nullable=True),
        sa.Column('listing_id', sa.Integer(), nullable=True),
        sa.Column('category', sa.String(length=20), nullable=False),
        sa.Column('reason', sa.String(length=1000), nullable=False),
        sa.Column('details', sa.Text(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('reported_user_id IS NOT NULL OR listing_id IS NOT NULL', name='ck_reports_has_target'),
        sa.ForeignKeyConstraint(['reporter_user_id'], ['user.id'], name='fk_reports_reporter_user_id_user'),
        sa.ForeignKeyConstraint(['reported_user_id'], ['user.id'], name='fk_reports_reported_user_id_user', ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['listing_id'], ['listing.id'], name='fk_reports_listing_id_listing', ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id', name='pk_reports'),
    )
    op.create_index('ix_reports_reporter_user_id', 'reports', ['reporter_user_id'])
    op.create_index('ix_reports_reported_user_id', 'reports', ['reported_user_id'])
    op.create_index('ix_reports_listing_id', 'reports', ['listing_id'])


def downgrade() -> None:
    op.drop_table('reports')
    op.drop_table('user_blocks')
    op.drop_table('messages')
    op.drop_table('listing')
    op.drop_table('user')
