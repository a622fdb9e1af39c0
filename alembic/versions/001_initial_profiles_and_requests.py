"""Initial employee profiles and self-service requests

Revision ID: 001_initial_self_service
Revises: 
Create Date: 2026-03-02

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial_self_service'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('CURRENT_TIMESTAMP'),
            nullable=False,
        ),
        sa.Column(
            'updated_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('CURRENT_TIMESTAMP'),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    # Skip if tables already exist (DB created by the app's create_all() on sqlite)
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    existing = inspector.get_table_names()

    if 'employee_profiles' not in existing:
        op.create_table(
            'employee_profiles',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('username', sa.String(), nullable=False),
            sa.Column('username_key', sa.String(), nullable=False),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('employment_type', sa.String(), nullable=False, server_default='Regular'),
            sa.Column('department', sa.String(), nullable=False),
            sa.Column('team', sa.String(), nullable=False),
            sa.Column('position', sa.String(), nullable=False),
            sa.Column('gender', sa.String(), nullable=False, server_default='Male'),
            sa.Column('civil_status', sa.String(), nullable=False, server_default='Single'),
            sa.Column('solo_parent', sa.String(), nullable=False, server_default='No'),
            sa.Column('password_hash', sa.String(), nullable=True),
            *_timestamps(),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_employee_profiles_id'), 'employee_profiles', ['id'], unique=False)
        op.create_index(op.f('ix_employee_profiles_username_key'), 'employee_profiles', ['username_key'], unique=True)

    if 'self_service_requests' not in existing:
        op.create_table(
            'self_service_requests',
            sa.Column('id', sa.String(length=64), nullable=False),
            sa.Column('owner_username', sa.String(), nullable=False),
            sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('type', sa.String(length=40), nullable=False),
            sa.Column('status', sa.String(length=20), nullable=False, server_default='Pending'),
            sa.Column('record_json', sa.JSON(), nullable=False),
            *_timestamps(),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_self_service_requests_owner_username'), 'self_service_requests', ['owner_username'], unique=False)
        op.create_index('ix_self_service_requests_owner_position', 'self_service_requests', ['owner_username', 'position'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_self_service_requests_owner_position', table_name='self_service_requests')
    op.drop_index(op.f('ix_self_service_requests_owner_username'), table_name='self_service_requests')
    op.drop_table('self_service_requests')
    op.drop_index(op.f('ix_employee_profiles_username_key'), table_name='employee_profiles')
    op.drop_index(op.f('ix_employee_profiles_id'), table_name='employee_profiles')
    op.drop_table('employee_profiles')
