"""initial schema: employees, addresses, audit log

Revision ID: 0001_trackr_init
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision = "0001_trackr_init"
down_revision = None
branch_labels = None
depends_on = None


def _table_exists(conn, table_name: str) -> bool:
    return table_name in set(inspect(conn).get_table_names())


def upgrade():
    conn = op.get_bind()

    if not _table_exists(conn, 'employees'):
        op.create_table(
            'employees',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('email', sa.String(255), nullable=False, unique=True),
            sa.Column('first_name', sa.String(255), nullable=True),
            sa.Column('last_name', sa.String(255), nullable=True),
            sa.Column('password_hash', sa.String(255), nullable=False),
            sa.Column('role', sa.String(32), nullable=False),
            sa.Column('is_active', sa.Boolean(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
        )
        op.create_index('ix_employees_email', 'employees', ['email'])

    if not _table_exists(conn, 'addresses'):
        op.create_table(
            'addresses',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('street', sa.String(255), nullable=True),
            sa.Column('house_number', sa.String(255), nullable=True),
            sa.Column('city', sa.String(255), nullable=True),
            sa.Column('zip_code', sa.String(255), nullable=True),
            sa.Column('country', sa.String(255), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.Column('updated_at', sa.DateTime(), nullable=True),
        )
        op.create_index('ix_addresses_city_zip', 'addresses', ['city', 'zip_code'])

    if not _table_exists(conn, 'audit_log'):
        op.create_table(
            'audit_log',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('ts', sa.DateTime(), nullable=True),
            sa.Column('actor', sa.String(255), nullable=True),
            sa.Column('role', sa.String(32), nullable=True),
            sa.Column('ip', sa.String(64), nullable=True),
            sa.Column('method', sa.String(8), nullable=True),
            sa.Column('path', sa.String(255), nullable=True),
            sa.Column('action', sa.String(64), nullable=False),
            sa.Column('payload', sa.JSON(), nullable=True),
        )
        op.create_index('ix_audit_log_ts', 'audit_log', ['ts'])
        op.create_index('ix_audit_log_actor', 'audit_log', ['actor'])
        op.create_index('ix_audit_log_action', 'audit_log', ['action'])


def downgrade():
    op.drop_table('audit_log')
    op.drop_table('addresses')
    op.drop_table('employees')
