from math import ceil
from typing import Generic, List, TypeVar

from fastapi import Query
from pydantic import BaseModel

from app.models.enums import SortOrder

T = TypeVar("T")


class PaginationRequest(BaseModel):
    page: int = 1
    take: int = 10
    order: SortOrder = SortOrder.DESC

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.take

    def ordering(self, *columns):
        """정렬 방향을 적용한 ORDER BY 절 목록"""
        if self.order == SortOrder.ASC:
            return [column.asc() for column in columns]
        return [column.desc() for column in columns]


def get_pagination(
    page: int = Query(1, ge=1, description="1부터 시작하는 페이지 번호"),
    take: int = Query(10, ge=1, le=100, description="페이지 당 항목 수"),
    order: SortOrder = Query(SortOrder.DESC, description="생성일 정렬 방향"),
) -> PaginationRequest:
    return PaginationRequest(page=page, take=take, order=order)


class PaginationMeta(BaseModel):
    page: int
    take: int
    total_count: int
    total_page: int
    has_next_page: bool

    @classmethod
    def of(cls, pagination: PaginationRequest, total_count: int) -> "PaginationMeta":
        total_page = ceil(total_count / pagination.take) if total_count else 0
        return cls(
            page=pagination.page,
            take=pagination.take,
            total_count=total_count,
            total_page=total_page,
            has_next_page=pagination.page < total_page,
        )


class PaginationResponse(BaseModel, Generic[T]):
    data: List[T]
    meta: PaginationMeta

    @classmethod
    def of(cls, data: List[T], pagination: PaginationRequest, total_count: int):
        return cls(data=data, meta=PaginationMeta.of(pagination, total_count))
