from collections import defaultdict
from typing import Dict, List, Optional

from sqlalchemy import case
from sqlalchemy.orm import Session
from sqlalchemy.sql import func


def get_emoji_summaries(
    db: Session,
    emoji_model,
    target_column,
    target_ids: List[int],
    member_id: Optional[int] = None,
) -> Dict[int, List[dict]]:
    """
    대상(피드/포스트)별 이모지 집계를 한 번의 쿼리로 가져옵니다.

    반환값은 {대상 ID: [{emoji, count, is_clicked}, ...]} 형태이며,
    이모지는 처음 눌린 순서대로 정렬됩니다.
    """
    if not target_ids:
        return {}

    if member_id is not None:
        clicked = func.max(case((emoji_model.member_id == member_id, 1), else_=0))
    else:
        clicked = func.max(0)

    rows = (
        db.query(
            target_column.label("target_id"),
            emoji_model.emoji,
            func.count(emoji_model.id).label("emoji_count"),
            clicked.label("is_clicked"),
        )
        .filter(target_column.in_(target_ids))
        .group_by(target_column, emoji_model.emoji)
        .order_by(target_column, func.min(emoji_model.id))
        .all()
    )

    summaries = defaultdict(list)
    for row in rows:
        summaries[row.target_id].append({
            "emoji": row.emoji,
            "count": row.emoji_count,
            "is_clicked": bool(row.is_clicked),
        })
    return summaries


def get_member_emoji(db: Session, emoji_model, target_column, target_id: int, member_id: int, emoji: str):
    return db.query(emoji_model).filter(
        target_column == target_id,
        emoji_model.member_id == member_id,
        emoji_model.emoji == emoji
    ).first()
