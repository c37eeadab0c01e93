from typing import Callable, NamedTuple

from app.models.enums import NotificationType
from app.models.feed import Feed, FeedView
from app.models.feed_comment import FeedComment, FeedCommentHeart
from app.models.feed_emoji import FeedEmoji
from app.models.post import Post, PostView
from app.models.post_comment import PostComment, PostCommentHeart
from app.models.post_emoji import PostEmoji
from app.services import domain


class ReactionTarget(NamedTuple):
    """조회수/이모지/댓글이 달리는 대상(피드, 포스트)의 모델 묶음"""
    label: str
    model: type
    view_model: type
    emoji_model: type
    comment_model: type
    heart_model: type
    foreign_key: str
    comment_notification: NotificationType
    emoji_notification: NotificationType
    get_is_not_deleted: Callable

    def column(self, model):
        return getattr(model, self.foreign_key)


FEED = ReactionTarget(
    label="피드",
    model=Feed,
    view_model=FeedView,
    emoji_model=FeedEmoji,
    comment_model=FeedComment,
    heart_model=FeedCommentHeart,
    foreign_key="feed_id",
    comment_notification=NotificationType.CREATE_FEED_COMMENT,
    emoji_notification=NotificationType.CREATE_FEED_EMOJI,
    get_is_not_deleted=domain.get_feed_is_not_deleted,
)

POST = ReactionTarget(
    label="포스트",
    model=Post,
    view_model=PostView,
    emoji_model=PostEmoji,
    comment_model=PostComment,
    heart_model=PostCommentHeart,
    foreign_key="post_id",
    comment_notification=NotificationType.CREATE_POST_COMMENT,
    emoji_notification=NotificationType.CREATE_POST_EMOJI,
    get_is_not_deleted=domain.get_post_is_not_deleted,
)
