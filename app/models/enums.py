from enum import Enum


class AuthorizationStatusType(str, Enum):
    UNAUTHORIZED = "UNAUTHORIZED"
    PENDING = "PENDING"
    AUTHORIZED = "AUTHORIZED"
    REJECTED = "REJECTED"


class CategoryType(str, Enum):
    ALL = "전체"
    NOTICE = "공지사항"
    EVENT = "이벤트"
    SPECIAL_LECTURE = "특강"
    INFORMATION_SHARING = "정보공유"
    TODAYS_QUESTION = "오늘의 질문"


class ListSortBy(str, Enum):
    ALL = "ALL"
    BY_FOLLOW = "BY_FOLLOW"
    BY_GENERATION = "BY_GENERATION"


class NotificationType(str, Enum):
    CREATE_FEED_COMMENT = "CREATE_FEED_COMMENT"
    CREATE_FEED_EMOJI = "CREATE_FEED_EMOJI"
    CREATE_POST_COMMENT = "CREATE_POST_COMMENT"
    CREATE_POST_EMOJI = "CREATE_POST_EMOJI"
    FOLLOW = "FOLLOW"


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"
