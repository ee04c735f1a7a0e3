
from alembic import op
import sqlalchemy as sa

revision = "20260301120000"
down_revision = None

def upgrade():
    # gen_random_bytes() for access_token defaults
    op.execute('CREATE EXTENSION IF NOT EXISTS pgcrypto')
    op.create_table(
        'order_statuses',
        sa.Column('id', sa.Uuid(), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('color', sa.String(length=32), nullable=True),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
    )
    op.create_table(
        'orders',
        sa.Column('id', sa.Uuid(), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column('order_number', sa.String(length=64), nullable=False, server_default=''),
        sa.Column('user_id', sa.Uuid(), nullable=True, index=True),
        sa.Column('access_token', sa.String(length=64), nullable=True, index=True,
                  server_default=sa.text("encode(gen_random_bytes(32), 'hex')")),
        sa.Column('first_name', sa.String(length=120), nullable=False),
        sa.Column('last_name', sa.String(length=120), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('phone', sa.String(length=32), nullable=False, server_default=''),
        sa.Column('delivery_method', sa.String(length=64), nullable=True),
        sa.Column('delivery_address', sa.Text(), nullable=True),
        sa.Column('delivery_city', sa.String(length=120), nullable=True),
        sa.Column('payment_method', sa.String(length=64), nullable=False),
        sa.Column('subtotal', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('total', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('status_id', sa.Uuid(), sa.ForeignKey('order_statuses.id', ondelete='SET NULL'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_table(
        'order_items',
        sa.Column('id', sa.Uuid(), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column('order_id', sa.Uuid(), sa.ForeignKey('orders.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('price', sa.Numeric(12, 2), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('total', sa.Numeric(12, 2), nullable=False),
        sa.Column('product_id', sa.Uuid(), nullable=True),
        sa.Column('modification_id', sa.Uuid(), nullable=True),
        sa.Column('service_id', sa.Uuid(), nullable=True),
    )

def downgrade():
    op.drop_table('order_items')
    op.drop_table('orders')
    op.drop_table('order_statuses')
