"""Initial schema: users, connections, profile views, posts, notifications

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 10:12:31.204118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from linkhub.core.models.types import GUID, StringListType


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('job_title', sa.String(length=100), nullable=True),
        sa.Column('company', sa.String(length=100), nullable=True),
        sa.Column('location', sa.String(length=100), nullable=True),
        sa.Column('skills', StringListType(), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('profile_views', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('last_active', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('length(name) <= 100', name='ck_users_name_len'),
        sa.CheckConstraint("role IN ('member', 'admin')", name='ck_users_role'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )
    op.create_index('idx_users_active', 'users', ['is_active'])
    op.create_index('idx_users_last_active', 'users', ['last_active'])
    op.create_index(op.f('ix_users_created_at'), 'users', ['created_at'])

    op.create_table(
        'connections',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('user_id', GUID(), nullable=False),
        sa.Column('peer_id', GUID(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('is_requester', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('user_id <> peer_id', name='ck_connections_not_self'),
        sa.CheckConstraint("status IN ('pending', 'accepted')", name='ck_connections_status'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['peer_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'peer_id', name='uq_connections_user_peer'),
    )
    op.create_index('idx_connections_user_status', 'connections', ['user_id', 'status'])
    op.create_index(op.f('ix_connections_created_at'), 'connections', ['created_at'])

    op.create_table(
        'profile_views',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('viewed_user_id', GUID(), nullable=False),
        sa.Column('viewer_id', GUID(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['viewed_user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['viewer_id'], ['users.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'idx_profile_views_viewed_created', 'profile_views', ['viewed_user_id', 'created_at']
    )
    op.create_index(op.f('ix_profile_views_created_at'), 'profile_views', ['created_at'])

    op.create_table(
        'posts',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('author_id', GUID(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('is_public', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(trim(content)) > 0', name='ck_posts_content_not_blank'),
        sa.ForeignKeyConstraint(['author_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_posts_author_created', 'posts', ['author_id', 'created_at'])
    op.create_index('idx_posts_public_created', 'posts', ['is_public', 'created_at'])
    op.create_index(op.f('ix_posts_created_at'), 'posts', ['created_at'])

    for table, user_column in (
        ('post_likes', 'user_id'),
        ('post_shares', 'user_id'),
        ('post_comments', 'author_id'),
    ):
        columns = [
            sa.Column('id', GUID(), nullable=False),
            sa.Column('post_id', sa.Integer(), nullable=False),
            sa.Column(user_column, GUID(), nullable=False),
        ]
        constraints = [
            sa.ForeignKeyConstraint(['post_id'], ['posts.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint([user_column], ['users.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id'),
        ]
        if table == 'post_comments':
            columns.append(sa.Column('text', sa.Text(), nullable=False))
        else:
            constraints.append(
                sa.UniqueConstraint('post_id', 'user_id', name=f'uq_{table}_post_user')
            )
        op.create_table(table, *columns, *_timestamps(), *constraints)
        op.create_index(f'idx_{table}_post_id', table, ['post_id'])
        op.create_index(op.f(f'ix_{table}_created_at'), table, ['created_at'])

    op.create_table(
        'notifications',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('recipient_id', GUID(), nullable=False),
        sa.Column('sender_id', GUID(), nullable=False),
        sa.Column('type', sa.String(length=30), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('related_post_id', sa.Integer(), nullable=True),
        sa.Column('is_read', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint(
            "type IN ('like', 'comment', 'connection_request', 'connection_accepted', "
            "'follow', 'post_mention')",
            name='ck_notifications_type',
        ),
        sa.ForeignKeyConstraint(['recipient_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['sender_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['related_post_id'], ['posts.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'idx_notifications_recipient_created', 'notifications', ['recipient_id', 'created_at']
    )
    op.create_index('idx_notifications_recipient_read', 'notifications', ['recipient_id', 'is_read'])
    op.create_index(op.f('ix_notifications_created_at'), 'notifications', ['created_at'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('notifications')
    op.drop_table('post_comments')
    op.drop_table('post_shares')
    op.drop_table('post_likes')
    op.drop_table('posts')
    op.drop_table('profile_views')
    op.drop_table('connections')
    op.drop_table('users')
