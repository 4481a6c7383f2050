"""initial skillswap schema

Revision ID: 3a9c1e7b2d40
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import mysql
from sqlmodel.sql.sqltypes import AutoString


# revision identifiers, used by Alembic.
revision: str = '3a9c1e7b2d40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_CATEGORIES = (
    'Technology', 'Arts & Crafts', 'Music', 'Languages', 'Sports & Fitness',
    'Cooking', 'Business', 'Writing', 'Photography', 'Gardening',
    'Repair & Maintenance', 'Teaching', 'Health & Wellness', 'Other',
)
_LEVELS = ('Beginner', 'Intermediate', 'Advanced', 'Expert')
_TIME_FRAMES = ('', '1-2 hours', '3-5 hours', '1 day', '2-3 days', '1 week', '2+ weeks', 'Ongoing')
_SKILL_TYPES = ('offered', 'wanted')
_SWAP_STATUSES = ('pending', 'accepted', 'declined', 'in-progress', 'completed')


def _timestamp() -> sa.types.TypeEngine:
    return sa.DateTime(timezone=True).with_variant(mysql.DATETIME(fsp=6), 'mysql')


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', _timestamp(), nullable=False),
        sa.Column('updated_at', _timestamp(), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', AutoString(), primary_key=True),
        sa.Column('username', AutoString(), nullable=False),
        sa.Column('hashed_password', AutoString(), nullable=False),
        sa.Column('name', AutoString(), nullable=True),
        sa.Column('location', AutoString(), nullable=True),
        sa.Column('bio', AutoString(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_username', 'users', ['username'], unique=True)
    op.create_index('ix_users_created_at', 'users', ['created_at'])

    op.create_table(
        'skills',
        sa.Column('id', AutoString(), primary_key=True),
        sa.Column('owner_id', AutoString(), nullable=False),
        sa.Column('name', AutoString(), nullable=False),
        sa.Column('category', sa.Enum(*_CATEGORIES, name='skill_category'), nullable=False),
        sa.Column('skill_level', sa.Enum(*_LEVELS, name='skill_level'), nullable=False),
        sa.Column('time_frame', sa.Enum(*_TIME_FRAMES, name='skill_time_frame'), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('type', sa.Enum(*_SKILL_TYPES, name='skill_type'), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_skills_id', 'skills', ['id'])
    op.create_index('ix_skills_owner_id', 'skills', ['owner_id'])
    op.create_index('ix_skills_type', 'skills', ['type'])
    op.create_index('ix_skills_is_active', 'skills', ['is_active'])
    op.create_index('ix_skills_created_at', 'skills', ['created_at'])

    op.create_table(
        'swap_requests',
        sa.Column('id', AutoString(), primary_key=True),
        sa.Column('requester_id', AutoString(), nullable=False),
        sa.Column('skill_provider_id', AutoString(), nullable=False),
        sa.Column('skill_requested_id', AutoString(), nullable=False),
        sa.Column('skill_offered_id', AutoString(), nullable=False),
        sa.Column('status', sa.Enum(*_SWAP_STATUSES, name='swap_status'), nullable=False),
        sa.Column('comments', sa.Text(), nullable=True),
        sa.Column('request_message', sa.Text(), nullable=True),
        sa.Column('response_message', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_swap_requests_id', 'swap_requests', ['id'])
    for column in ('requester_id', 'skill_provider_id', 'skill_requested_id', 'skill_offered_id', 'status', 'created_at'):
        op.create_index(f'ix_swap_requests_{column}', 'swap_requests', [column])

    op.create_table(
        'refresh_tokens',
        sa.Column('id', AutoString(), primary_key=True),
        sa.Column('token', AutoString(), nullable=False),
        sa.Column('user_id', AutoString(), nullable=False),
        sa.Column('expires_at', _timestamp(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_refresh_tokens_id', 'refresh_tokens', ['id'])
    op.create_index('ix_refresh_tokens_token', 'refresh_tokens', ['token'], unique=True)
    op.create_index('ix_refresh_tokens_user_id', 'refresh_tokens', ['user_id'])
    op.create_index('ix_refresh_tokens_created_at', 'refresh_tokens', ['created_at'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('refresh_tokens')
    op.drop_table('swap_requests')
    op.drop_table('skills')
    op.drop_table('users')
