"""create_community_tables

Revision ID: 3c1d2e9a7b40
Revises:
Create Date: 2025-06-02 10:12:44.201533

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1d2e9a7b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(soft_delete: bool = False):
    columns = [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]
    if soft_delete:
        columns.append(sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True))
    return columns


def _counters(*names):
    return [sa.Column(name, sa.Integer(), nullable=False, server_default='0') for name in names]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'members',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('github_id', sa.String(50), nullable=False, unique=True),
        sa.Column('email', sa.String(100), nullable=True),
        sa.Column('nickname', sa.String(50), nullable=False),
        sa.Column('generation', sa.Integer(), nullable=True),
        sa.Column('profile_image_url', sa.String(500), nullable=True),
        sa.Column('introduce', sa.String(500), nullable=True),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('authorization_status', sa.String(20), nullable=False, server_default='UNAUTHORIZED'),
        *_timestamps(soft_delete=True),
    )

    op.create_table(
        'feeds',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('content', sa.Text(), nullable=False),
        *_counters('view_count', 'comment_count', 'emoji_count'),
        *_timestamps(soft_delete=True),
    )
    op.create_table(
        'feed_images',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('feed_id', sa.Integer(), sa.ForeignKey('feeds.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('image_url', sa.String(500), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_table(
        'feed_views',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('feed_id', sa.Integer(), sa.ForeignKey('feeds.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_table(
        'feed_emojis',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('feed_id', sa.Integer(), sa.ForeignKey('feeds.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False),
        sa.Column('emoji', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('feed_id', 'member_id', 'emoji', name='uq_feed_emoji'),
    )
    op.create_table(
        'feed_comments',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('feed_id', sa.Integer(), sa.ForeignKey('feeds.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False),
        sa.Column('content', sa.String(1000), nullable=False),
        *_counters('heart_count'),
        *_timestamps(soft_delete=True),
    )
    op.create_table(
        'feed_comment_hearts',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('comment_id', sa.Integer(), sa.ForeignKey('feed_comments.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('comment_id', 'member_id', name='uq_feed_comment_heart'),
    )

    op.create_table(
        'posts',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('category', sa.String(20), nullable=False, index=True),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        *_counters('view_count', 'comment_count', 'emoji_count'),
        *_timestamps(soft_delete=True),
    )
    op.create_table(
        'post_views',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('post_id', sa.Integer(), sa.ForeignKey('posts.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_table(
        'post_emojis',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('post_id', sa.Integer(), sa.ForeignKey('posts.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False),
        sa.Column('emoji', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('post_id', 'member_id', 'emoji', name='uq_post_emoji'),
    )
    op.create_table(
        'post_comments',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('post_id', sa.Integer(), sa.ForeignKey('posts.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False),
        sa.Column('content', sa.String(1000), nullable=False),
        *_counters('heart_count'),
        *_timestamps(soft_delete=True),
    )
    op.create_table(
        'post_comment_hearts',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('comment_id', sa.Integer(), sa.ForeignKey('post_comments.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('comment_id', 'member_id', name='uq_post_comment_heart'),
    )
    op.create_table(
        'hash_tags',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('tag_name', sa.String(50), nullable=False, unique=True),
        sa.Column('color', sa.String(20), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_table(
        'post_hash_tags',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('post_id', sa.Integer(), sa.ForeignKey('posts.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('hash_tag_id', sa.Integer(), sa.ForeignKey('hash_tags.id', ondelete='CASCADE'), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
    )
    op.create_table(
        'post_scraps',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('post_id', sa.Integer(), sa.ForeignKey('posts.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('post_id', 'member_id', name='uq_post_scrap'),
    )

    op.create_table(
        'follows',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('follower_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('following_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('follower_id', 'following_id', name='uq_follow_pair'),
        sa.CheckConstraint('follower_id != following_id', name='ck_follow_not_self'),
    )
    op.create_table(
        'notifications',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('received_member_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('send_member_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False),
        sa.Column('type', sa.String(30), nullable=False),
        sa.Column('feed_id', sa.Integer(), nullable=True),
        sa.Column('post_id', sa.Integer(), nullable=True),
        sa.Column('comment_id', sa.Integer(), nullable=True),
        sa.Column('content', sa.String(255), nullable=False),
        sa.Column('is_read', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )


def downgrade() -> None:
    """Downgrade schema."""
    for table in (
        'notifications', 'follows',
        'post_scraps', 'post_hash_tags', 'hash_tags', 'post_comment_hearts', 'post_comments',
        'post_emojis', 'post_views', 'posts',
        'feed_comment_hearts', 'feed_comments', 'feed_emojis', 'feed_views', 'feed_images', 'feeds',
        'members',
    ):
        op.drop_table(table)
