"""Initial schema: roles, users, user_roles, notes

Revision ID: 4f1c2a9e7b10
Revises:
Create Date: 2026-10-18 10:12:31.418205

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from notekeep.core.models.types import GUID


# revision identifiers, used by Alembic.
revision: str = '4f1c2a9e7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'roles',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.CheckConstraint('length(name) <= 50', name='ck_roles_name_len'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_table(
        'users',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('length(username) <= 50', name='ck_users_username_len'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
    )
    op.create_index('idx_users_username', 'users', ['username'])
    op.create_table(
        'user_roles',
        sa.Column('user_id', GUID(), nullable=False),
        sa.Column('role_id', GUID(), nullable=False),
        sa.ForeignKeyConstraint(['role_id'], ['roles.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('user_id', 'role_id'),
    )
    op.create_table(
        'notes',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('owner_id', GUID(), nullable=False),
        sa.CheckConstraint('length(title) <= 255', name='ck_notes_title_len'),
        sa.ForeignKeyConstraint(['owner_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_notes_owner_id', 'notes', ['owner_id'])
    op.create_index('idx_notes_owner_updated', 'notes', ['owner_id', 'updated_at'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_notes_owner_updated', table_name='notes')
    op.drop_index('idx_notes_owner_id', table_name='notes')
    op.drop_table('notes')
    op.drop_table('user_roles')
    op.drop_index('idx_users_username', table_name='users')
    op.drop_table('users')
    op.drop_table('roles')
