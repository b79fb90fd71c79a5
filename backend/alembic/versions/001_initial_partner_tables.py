"""Create partners, earnings and partner_endpoints tables.

Revision ID: 001
Revises:
Create Date: 2026-10-18
"""
from alembic import op
import sqlalchemy as sa

revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'partners',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('wallet_address', sa.String(64), nullable=False),
        sa.Column('tier', sa.String(50), nullable=False, server_default='builder'),
        sa.Column('twitter', sa.String(255), nullable=True),
        sa.Column('website', sa.String(512), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('revenue_share', sa.Float(), nullable=False, server_default='10'),
        sa.Column('total_earnings', sa.BigInteger(), nullable=False, server_default='0'),
        sa.Column('total_volume', sa.BigInteger(), nullable=False, server_default='0'),
        sa.Column('status', sa.String(50), nullable=False, server_default='active'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('idx_partner_status', 'partners', ['status'])
    op.create_index('idx_partner_name', 'partners', ['name'])
    op.create_index('idx_partner_total_earnings', 'partners', ['total_earnings'])

    op.create_table(
        'earnings',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('partner_id', sa.String(36), sa.ForeignKey('partners.id'), nullable=False),
        sa.Column('amount_ustx', sa.BigInteger(), nullable=False),
        sa.Column('endpoint', sa.String(255), nullable=True),
        sa.Column('tx_id', sa.String(255), nullable=True),
        sa.Column('timestamp', sa.DateTime(), nullable=False),
    )
    op.create_index('idx_earning_partner_id', 'earnings', ['partner_id'])
    op.create_index('idx_earning_timestamp', 'earnings', ['timestamp'])

    op.create_table(
        'partner_endpoints',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('partner_id', sa.String(36), sa.ForeignKey('partners.id'), nullable=False),
        sa.Column('path', sa.String(512), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price_ustx', sa.BigInteger(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('idx_partner_endpoint_partner_id', 'partner_endpoints', ['partner_id'])


def downgrade():
    op.drop_index('idx_partner_endpoint_partner_id', table_name='partner_endpoints')
    op.drop_table('partner_endpoints')
    op.drop_index('idx_earning_timestamp', table_name='earnings')
    op.drop_index('idx_earning_partner_id', table_name='earnings')
    op.drop_table('earnings')
    op.drop_index('idx_partner_total_earnings', table_name='partners')
    op.drop_index('idx_partner_name', table_name='partners')
    op.drop_index('idx_partner_status', table_name='partners')
    op.drop_table('partners')
