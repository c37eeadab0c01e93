from app.models.enums import CategoryType


def _create_post(client, headers, member_id, category=CategoryType.EVENT, title="제목", hash_tags=None):
    response = client.post(
        "/api/posts/",
        json={
            "category": category.value,
            "title": title,
            "content": "본문",
            "hash_tags": hash_tags or [],
        },
        headers=headers(member_id),
    )
    assert response.status_code == 201, response.text
    return response.json()["post_id"]


def test_create_post_with_hash_tags_in_order(client, create_member, headers):
    member_id = create_member()
    post_id = _create_post(
        client, headers, member_id,
        hash_tags=[
            {"tag_name": "python", "color": "blue"},
            {"tag_name": "fastapi"},
            {"tag_name": "python"},
        ],
    )

    detail = client.get(f"/api/posts/{post_id}", headers=headers(member_id)).json()
    assert detail["category"] == CategoryType.EVENT.value
    assert [tag["tag_name"] for tag in detail["hash_tags"]] == ["python", "fastapi"]
    assert detail["hash_tags"][0]["color"] == "blue"
    assert detail["is_mine"] is True
    assert detail["is_scraped"] is False


def test_hash_tags_are_reused_across_posts(client, create_member, headers):
    member_id = create_member()
    first = _create_post(client, headers, member_id, hash_tags=[{"tag_name": "study"}])
    second = _create_post(client, headers, member_id, hash_tags=[{"tag_name": "study"}])

    first_tag = client.get(f"/api/posts/{first}").json()["hash_tags"][0]
    second_tag = client.get(f"/api/posts/{second}").json()["hash_tags"][0]
    assert first_tag["id"] == second_tag["id"]


def test_modify_post_replaces_hash_tags(client, create_member, headers):
    member_id = create_member()
    post_id = _create_post(client, headers, member_id, hash_tags=[{"tag_name": "old"}])

    response = client.put(
        f"/api/posts/{post_id}",
        json={
            "category": CategoryType.INFORMATION_SHARING.value,
            "title": "새 제목",
            "content": "새 본문",
            "hash_tags": [{"tag_name": "new"}, {"tag_name": "old"}],
        },
        headers=headers(member_id),
    )
    assert response.status_code == 200

    detail = client.get(f"/api/posts/{post_id}").json()
    assert detail["title"] == "새 제목"
    assert detail["category"] == CategoryType.INFORMATION_SHARING.value
    assert [tag["tag_name"] for tag in detail["hash_tags"]] == ["new", "old"]


def test_notice_requires_admin(client, create_member, headers):
    member_id = create_member()
    admin_id = create_member(is_admin=True)

    response = client.post(
        "/api/posts/",
        json={"category": CategoryType.NOTICE.value, "title": "공지", "content": "공지 내용"},
        headers=headers(member_id),
    )
    assert response.status_code == 403

    _create_post(client, headers, admin_id, category=CategoryType.NOTICE)


def test_category_all_cannot_be_used_for_writing(client, create_member, headers):
    member_id = create_member()
    response = client.post(
        "/api/posts/",
        json={"category": CategoryType.ALL.value, "title": "t", "content": "c"},
        headers=headers(member_id),
    )
    assert response.status_code == 400


def test_post_list_filters_by_category(client, create_member, headers):
    member_id = create_member()
    _create_post(client, headers, member_id, category=CategoryType.EVENT)
    lecture_id = _create_post(client, headers, member_id, category=CategoryType.SPECIAL_LECTURE)

    everything = client.get("/api/posts/").json()
    assert everything["meta"]["total_count"] == 2

    lectures = client.get("/api/posts/", params={"category": CategoryType.SPECIAL_LECTURE.value}).json()
    assert [post["id"] for post in lectures["data"]] == [lecture_id]
    assert lectures["meta"]["total_count"] == 1


def test_follow_and_generation_sorting_require_login(client):
    assert client.get("/api/posts/", params={"sort_by": "BY_FOLLOW"}).status_code == 401
    assert client.get("/api/posts/", params={"sort_by": "BY_GENERATION"}).status_code == 401


def test_post_list_by_follow(client, create_member, headers):
    reader_id = create_member()
    followed_id = create_member()
    stranger_id = create_member()
    followed_post = _create_post(client, headers, followed_id)
    _create_post(client, headers, stranger_id)

    client.post(f"/api/follows/{followed_id}", headers=headers(reader_id))

    response = client.get("/api/posts/", params={"sort_by": "BY_FOLLOW"}, headers=headers(reader_id)).json()
    assert [post["id"] for post in response["data"]] == [followed_post]
    assert response["meta"]["total_count"] == 1


def test_post_list_by_generation(client, create_member, headers):
    reader_id = create_member(generation=5)
    classmate_id = create_member(generation=5)
    senior_id = create_member(generation=4)
    classmate_post = _create_post(client, headers, classmate_id)
    _create_post(client, headers, senior_id)

    response = client.get("/api/posts/", params={"sort_by": "BY_GENERATION"}, headers=headers(reader_id)).json()
    assert [post["id"] for post in response["data"]] == [classmate_post]


def test_generation_sorting_without_generation(client, create_member, headers):
    reader_id = create_member()
    response = client.get("/api/posts/", params={"sort_by": "BY_GENERATION"}, headers=headers(reader_id))
    assert response.status_code == 400


def test_deleted_post(client, create_member, headers):
    writer_id = create_member()
    other_id = create_member()
    post_id = _create_post(client, headers, writer_id)

    assert client.delete(f"/api/posts/{post_id}", headers=headers(other_id)).status_code == 403
    assert client.delete(f"/api/posts/{post_id}", headers=headers(writer_id)).status_code == 200

    assert client.get(f"/api/posts/{post_id}").status_code == 410
    assert client.get("/api/posts/").json()["data"] == []
    assert client.post(
        f"/api/posts/{post_id}/comments", json={"content": "늦은 댓글"}, headers=headers(other_id)
    ).status_code == 410


def test_scrap_post(client, create_member, headers):
    writer_id = create_member()
    reader_id = create_member()
    post_id = _create_post(client, headers, writer_id)

    assert client.post(f"/api/posts/{post_id}/scrap", headers=headers(reader_id)).status_code == 201
    assert client.post(f"/api/posts/{post_id}/scrap", headers=headers(reader_id)).status_code == 400

    assert client.get(f"/api/posts/{post_id}", headers=headers(reader_id)).json()["is_scraped"] is True
    assert client.get("/api/posts/", headers=headers(reader_id)).json()["data"][0]["is_scraped"] is True
    assert client.get("/api/posts/", headers=headers(writer_id)).json()["data"][0]["is_scraped"] is False

    scraps = client.get("/api/profile/me/scraps", headers=headers(reader_id)).json()
    assert [post["id"] for post in scraps["data"]] == [post_id]

    assert client.delete(f"/api/posts/{post_id}/scrap", headers=headers(reader_id)).status_code == 200
    assert client.delete(f"/api/posts/{post_id}/scrap", headers=headers(reader_id)).status_code == 404
    assert client.get("/api/profile/me/scraps", headers=headers(reader_id)).json()["data"] == []


def test_today_question(client, create_member, headers):
    assert client.get("/api/posts/today-question").json() == {"post_id": 0, "title": ""}

    member_id = create_member()
    _create_post(client, headers, member_id, category=CategoryType.EVENT, title="이벤트")
    question_id = _create_post(
        client, headers, member_id, category=CategoryType.TODAYS_QUESTION, title="오늘 무엇을 배웠나요?"
    )

    assert client.get("/api/posts/today-question").json() == {
        "post_id": question_id, "title": "오늘 무엇을 배웠나요?"
    }


def test_search_hash_tags(client, create_member, headers):
    member_id = create_member()
    _create_post(client, headers, member_id, hash_tags=[{"tag_name": "spring"}])
    _create_post(client, headers, member_id, hash_tags=[{"tag_name": "spring"}, {"tag_name": "sprout"}])
    _create_post(client, headers, member_id, hash_tags=[{"tag_name": "python"}])

    results = client.get("/api/posts/hash-tags/search", params={"tag_name": "spr"}).json()
    assert [(tag["tag_name"], tag["post_count"]) for tag in results] == [("spring", 2), ("sprout", 1)]


def test_search_hash_tags_treats_wildcards_literally(client, create_member, headers):
    member_id = create_member()
    _create_post(client, headers, member_id, hash_tags=[{"tag_name": "abc"}])
    assert client.get("/api/posts/hash-tags/search", params={"tag_name": "%"}).json() == []


def test_post_reactions_and_notifications(client, create_member, headers):
    writer_id = create_member(nickname="writer")
    reader_id = create_member(nickname="reader")
    post_id = _create_post(client, headers, writer_id)

    client.post(f"/api/posts/{post_id}/view", headers=headers(reader_id))
    client.post(f"/api/posts/{post_id}/emojis", json={"emoji": "❤️"}, headers=headers(reader_id))
    comment_id = client.post(
        f"/api/posts/{post_id}/comments", json={"content": "질문 있어요"}, headers=headers(reader_id)
    ).json()["comment_id"]
    client.post(f"/api/posts/{post_id}/comments/{comment_id}/hearts", headers=headers(writer_id))

    detail = client.get(f"/api/posts/{post_id}", headers=headers(reader_id)).json()
    assert detail["view_count"] == 1
    assert detail["emoji_count"] == 1
    assert detail["comment_count"] == 1
    assert detail["emojis"] == [{"emoji": "❤️", "count": 1, "is_clicked": True}]

    comment = client.get(f"/api/posts/{post_id}/comments", headers=headers(writer_id)).json()["data"][0]
    assert comment["heart_count"] == 1
    assert comment["is_hearted"] is True
    assert comment["is_mine"] is False

    notifications = client.get("/api/notifications/", headers=headers(writer_id)).json()
    types = [notification["type"] for notification in notifications["data"]]
    assert types == ["CREATE_POST_COMMENT", "CREATE_POST_EMOJI"]
    assert notifications["data"][0]["post_id"] == post_id
    assert notifications["data"][0]["comment_id"] == comment_id
    assert notifications["unread_count"] == 2


def test_own_reactions_do_not_notify(client, create_member, headers):
    writer_id = create_member()
    post_id = _create_post(client, headers, writer_id)

    client.post(f"/api/posts/{post_id}/emojis", json={"emoji": "👀"}, headers=headers(writer_id))
    client.post(f"/api/posts/{post_id}/comments", json={"content": "셀프 댓글"}, headers=headers(writer_id))

    assert client.get("/api/notifications/", headers=headers(writer_id)).json()["meta"]["total_count"] == 0
