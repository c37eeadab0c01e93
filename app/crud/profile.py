from typing import Optional

from sqlalchemy import literal
from sqlalchemy.orm import Session, aliased

from app.models.follow import Follow
from app.models.member import Member


def get_others_profile(db: Session, member_id: int, my_member_id: Optional[int]):
    """(회원, 내가 팔로우 중인지 여부) 튜플"""
    query = db.query(Member).filter(Member.id == member_id)

    if my_member_id is None:
        return query.add_columns(literal(False).label("is_followed")).first()

    MyFollow = aliased(Follow)
    return (
        query
        .outerjoin(
            MyFollow,
            (MyFollow.follower_id == my_member_id) & (MyFollow.following_id == Member.id)
        )
        .add_columns(MyFollow.id.isnot(None).label("is_followed"))
        .first()
    )
