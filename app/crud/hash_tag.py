from collections import defaultdict
from typing import Dict, List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from app.models.hash_tag import HashTag, PostHashTag
from app.models.post import Post


def get_hash_tag_by_name(db: Session, tag_name: str) -> Optional[HashTag]:
    return db.query(HashTag).filter(HashTag.tag_name == tag_name).first()


def get_hash_tags_by_post_ids(db: Session, post_ids: List[int]) -> Dict[int, List[dict]]:
    """포스트별 해시태그 목록 (등록 순서 유지)"""
    if not post_ids:
        return {}

    rows = (
        db.query(PostHashTag.post_id, HashTag.id, HashTag.tag_name, HashTag.color)
        .join(HashTag, PostHashTag.hash_tag_id == HashTag.id)
        .filter(PostHashTag.post_id.in_(post_ids))
        .order_by(PostHashTag.post_id, PostHashTag.order)
        .all()
    )

    hash_tags = defaultdict(list)
    for row in rows:
        hash_tags[row.post_id].append({"id": row.id, "tag_name": row.tag_name, "color": row.color})
    return hash_tags


def delete_post_hash_tags(db: Session, post_id: int):
    db.query(PostHashTag).filter(PostHashTag.post_id == post_id).delete(synchronize_session=False)


def search_hash_tags(db: Session, tag_name: str, limit: int = 20):
    """
    tag_name으로 시작하는 해시태그와 각 태그를 사용하는 살아있는 포스트 수를 조회합니다.
    """
    escaped = tag_name.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return (
        db.query(
            HashTag.id,
            HashTag.tag_name,
            HashTag.color,
            func.count(Post.id).label("post_count"),
        )
        .outerjoin(PostHashTag, PostHashTag.hash_tag_id == HashTag.id)
        .outerjoin(Post, (Post.id == PostHashTag.post_id) & Post.deleted_at.is_(None))
        .filter(HashTag.tag_name.like(f"{escaped}%", escape="\\"))
        .group_by(HashTag.id, HashTag.tag_name, HashTag.color)
        .order_by(func.count(Post.id).desc(), HashTag.tag_name)
        .limit(limit)
        .all()
    )
