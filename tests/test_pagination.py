from app.models.enums import SortOrder
from app.schemas.pagination import PaginationMeta, PaginationRequest


def test_meta_for_partial_last_page():
    meta = PaginationMeta.of(PaginationRequest(page=1, take=10), total_count=25)
    assert meta.total_page == 3
    assert meta.has_next_page is True


def test_meta_on_last_page():
    meta = PaginationMeta.of(PaginationRequest(page=3, take=10), total_count=25)
    assert meta.has_next_page is False


def test_meta_for_empty_result():
    meta = PaginationMeta.of(PaginationRequest(page=1, take=10), total_count=0)
    assert meta.total_page == 0
    assert meta.has_next_page is False


def test_skip():
    assert PaginationRequest(page=3, take=20).skip == 40
    assert PaginationRequest(page=1, take=20, order=SortOrder.ASC).skip == 0


def test_invalid_query_parameters_are_rejected(client):
    assert client.get("/api/feeds/", params={"page": 0}).status_code == 422
    assert client.get("/api/feeds/", params={"take": 101}).status_code == 422
    assert client.get("/api/feeds/", params={"order": "RANDOM"}).status_code == 422
