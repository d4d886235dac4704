"""initial schema: users, events, tickets

Revision ID: 0001_initial
Revises: 
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table('users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.UniqueConstraint('email'),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'])
    op.create_table('events',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('owner', sa.Integer(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('title', sa.String(length=255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('organized_by', sa.String(length=255), nullable=True),
        sa.Column('event_date', sa.String(length=32), nullable=True),
        sa.Column('event_time', sa.String(length=32), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('ticket_price', sa.Float(), nullable=True),
        sa.Column('likes', sa.Integer(), nullable=True),
        sa.Column('image', sa.String(length=512), nullable=True),
    )
    op.create_index('ix_events_owner', 'events', ['owner'])
    # name/email/event_* are copied at purchase time, not joined
    op.create_table('tickets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('event_id', sa.Integer(), sa.ForeignKey('events.id'), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('event_name', sa.String(length=255), nullable=True),
        sa.Column('event_date', sa.String(length=32), nullable=True),
        sa.Column('event_time', sa.String(length=32), nullable=True),
        sa.Column('ticket_price', sa.Float(), nullable=True),
        sa.Column('qr', sa.Text(), nullable=True),
    )
    op.create_index('ix_tickets_user_id', 'tickets', ['user_id'])

def downgrade():
    op.drop_index('ix_tickets_user_id', table_name='tickets')
    op.drop_table('tickets')
    op.drop_index('ix_events_owner', table_name='events')
    op.drop_table('events')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_id', table_name='users')
    op.drop_table('users')
