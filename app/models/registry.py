# Base.metadata에 모든 테이블을 등록하기 위한 모듈 (alembic, 테스트에서 사용)
from app.models.member import Member
from app.models.feed import Feed, FeedImage, FeedView
from app.models.feed_emoji import FeedEmoji
from app.models.feed_comment import FeedComment, FeedCommentHeart
from app.models.post import Post, PostView
from app.models.post_emoji import PostEmoji
from app.models.post_comment import PostComment, PostCommentHeart
from app.models.hash_tag import HashTag, PostHashTag
from app.models.post_scrap import PostScrap
from app.models.follow import Follow
from app.models.notification import Notification
