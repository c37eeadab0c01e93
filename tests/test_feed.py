def _create_feed(client, headers, member_id, content="오늘의 피드", image_urls=None):
    response = client.post(
        "/api/feeds/",
        json={"content": content, "image_urls": image_urls or []},
        headers=headers(member_id),
    )
    assert response.status_code == 201
    return response.json()["feed_id"]


def test_create_and_get_feed_detail(client, create_member, headers):
    writer_id = create_member(nickname="writer", generation=3)
    feed_id = _create_feed(client, headers, writer_id, image_urls=["https://cdn.example.com/a.png", "https://cdn.example.com/b.png"])

    detail = client.get(f"/api/feeds/{feed_id}", headers=headers(writer_id)).json()
    assert detail["content"] == "오늘의 피드"
    assert detail["image_urls"] == ["https://cdn.example.com/a.png", "https://cdn.example.com/b.png"]
    assert detail["writer"]["nickname"] == "writer"
    assert detail["writer"]["generation"] == 3
    assert detail["is_mine"] is True

    anonymous = client.get(f"/api/feeds/{feed_id}").json()
    assert anonymous["is_mine"] is False


def test_create_feed_requires_login(client):
    assert client.post("/api/feeds/", json={"content": "hi"}).status_code == 401


def test_create_feed_rejects_empty_content(client, create_member, headers):
    member_id = create_member()
    response = client.post("/api/feeds/", json={"content": ""}, headers=headers(member_id))
    assert response.status_code == 422


def test_feed_list_pagination(client, create_member, headers):
    member_id = create_member()
    feed_ids = [_create_feed(client, headers, member_id, content=f"feed {i}") for i in range(3)]

    first_page = client.get("/api/feeds/", params={"page": 1, "take": 2}).json()
    assert [feed["id"] for feed in first_page["data"]] == [feed_ids[2], feed_ids[1]]
    assert first_page["meta"] == {
        "page": 1, "take": 2, "total_count": 3, "total_page": 2, "has_next_page": True
    }

    second_page = client.get("/api/feeds/", params={"page": 2, "take": 2}).json()
    assert [feed["id"] for feed in second_page["data"]] == [feed_ids[0]]
    assert second_page["meta"]["has_next_page"] is False

    ascending = client.get("/api/feeds/", params={"order": "ASC"}).json()
    assert [feed["id"] for feed in ascending["data"]] == feed_ids


def test_modify_feed_replaces_images(client, create_member, headers):
    member_id = create_member()
    feed_id = _create_feed(client, headers, member_id, image_urls=["https://cdn.example.com/old.png"])

    response = client.patch(
        f"/api/feeds/{feed_id}",
        json={"content": "수정된 피드", "image_urls": ["https://cdn.example.com/new.png"]},
        headers=headers(member_id),
    )
    assert response.status_code == 200

    detail = client.get(f"/api/feeds/{feed_id}").json()
    assert detail["content"] == "수정된 피드"
    assert detail["image_urls"] == ["https://cdn.example.com/new.png"]


def test_only_writer_can_modify_or_delete_feed(client, create_member, headers):
    writer_id = create_member()
    other_id = create_member()
    feed_id = _create_feed(client, headers, writer_id)

    assert client.patch(f"/api/feeds/{feed_id}", json={"content": "x"}, headers=headers(other_id)).status_code == 403
    assert client.delete(f"/api/feeds/{feed_id}", headers=headers(other_id)).status_code == 403


def test_deleted_feed_is_gone(client, create_member, headers):
    member_id = create_member()
    feed_id = _create_feed(client, headers, member_id)

    assert client.delete(f"/api/feeds/{feed_id}", headers=headers(member_id)).status_code == 200

    assert client.get(f"/api/feeds/{feed_id}").status_code == 410
    assert client.get("/api/feeds/").json()["meta"]["total_count"] == 0
    assert client.delete(f"/api/feeds/{feed_id}", headers=headers(member_id)).status_code == 410


def test_unknown_feed_returns_404(client):
    assert client.get("/api/feeds/9999").status_code == 404


def test_view_count_ignores_writer(client, create_member, headers):
    writer_id = create_member()
    reader_id = create_member()
    feed_id = _create_feed(client, headers, writer_id)

    client.post(f"/api/feeds/{feed_id}/view", headers=headers(writer_id))
    client.post(f"/api/feeds/{feed_id}/view", headers=headers(reader_id))
    client.post(f"/api/feeds/{feed_id}/view", headers=headers(reader_id))

    assert client.get(f"/api/feeds/{feed_id}").json()["view_count"] == 2


def test_feed_emoji_add_and_remove(client, create_member, headers):
    writer_id = create_member()
    reader_id = create_member()
    feed_id = _create_feed(client, headers, writer_id)

    assert client.post(f"/api/feeds/{feed_id}/emojis", json={"emoji": "👍"}, headers=headers(reader_id)).status_code == 201
    assert client.post(f"/api/feeds/{feed_id}/emojis", json={"emoji": "🎉"}, headers=headers(writer_id)).status_code == 201
    assert client.post(f"/api/feeds/{feed_id}/emojis", json={"emoji": "👍"}, headers=headers(writer_id)).status_code == 201

    detail = client.get(f"/api/feeds/{feed_id}", headers=headers(reader_id)).json()
    assert detail["emoji_count"] == 3
    assert detail["emojis"] == [
        {"emoji": "👍", "count": 2, "is_clicked": True},
        {"emoji": "🎉", "count": 1, "is_clicked": False},
    ]

    anonymous = client.get("/api/feeds/").json()["data"][0]
    assert all(emoji["is_clicked"] is False for emoji in anonymous["emojis"])

    assert client.delete(f"/api/feeds/{feed_id}/emojis/👍", headers=headers(reader_id)).status_code == 200
    detail = client.get(f"/api/feeds/{feed_id}", headers=headers(reader_id)).json()
    assert detail["emoji_count"] == 2
    remaining = {emoji["emoji"]: emoji for emoji in detail["emojis"]}
    assert remaining["👍"] == {"emoji": "👍", "count": 1, "is_clicked": False}
    assert remaining["🎉"]["count"] == 1


def test_duplicate_emoji_is_rejected(client, create_member, headers):
    member_id = create_member()
    feed_id = _create_feed(client, headers, member_id)

    client.post(f"/api/feeds/{feed_id}/emojis", json={"emoji": "🔥"}, headers=headers(member_id))
    response = client.post(f"/api/feeds/{feed_id}/emojis", json={"emoji": "🔥"}, headers=headers(member_id))
    assert response.status_code == 400
    assert client.get(f"/api/feeds/{feed_id}").json()["emoji_count"] == 1


def test_removing_missing_emoji_returns_404(client, create_member, headers):
    member_id = create_member()
    feed_id = _create_feed(client, headers, member_id)
    assert client.delete(f"/api/feeds/{feed_id}/emojis/🔥", headers=headers(member_id)).status_code == 404


def test_feed_comment_lifecycle(client, create_member, headers):
    writer_id = create_member()
    commenter_id = create_member(nickname="commenter")
    feed_id = _create_feed(client, headers, writer_id)

    response = client.post(f"/api/feeds/{feed_id}/comments", json={"content": "좋아요"}, headers=headers(commenter_id))
    assert response.status_code == 201
    comment_id = response.json()["comment_id"]
    assert client.get(f"/api/feeds/{feed_id}").json()["comment_count"] == 1

    comments = client.get(f"/api/feeds/{feed_id}/comments", headers=headers(commenter_id)).json()
    assert comments["meta"]["total_count"] == 1
    assert comments["data"][0]["content"] == "좋아요"
    assert comments["data"][0]["is_mine"] is True
    assert comments["data"][0]["writer"]["nickname"] == "commenter"

    assert client.patch(
        f"/api/feeds/{feed_id}/comments/{comment_id}", json={"content": "수정"}, headers=headers(writer_id)
    ).status_code == 403
    assert client.patch(
        f"/api/feeds/{feed_id}/comments/{comment_id}", json={"content": "수정"}, headers=headers(commenter_id)
    ).status_code == 200
    assert client.get(f"/api/feeds/{feed_id}/comments").json()["data"][0]["content"] == "수정"

    assert client.delete(f"/api/feeds/{feed_id}/comments/{comment_id}", headers=headers(commenter_id)).status_code == 200
    assert client.get(f"/api/feeds/{feed_id}").json()["comment_count"] == 0
    assert client.get(f"/api/feeds/{feed_id}/comments").json()["data"] == []
    assert client.delete(f"/api/feeds/{feed_id}/comments/{comment_id}", headers=headers(commenter_id)).status_code == 410


def test_comment_must_belong_to_feed(client, create_member, headers):
    member_id = create_member()
    feed_id = _create_feed(client, headers, member_id)
    other_feed_id = _create_feed(client, headers, member_id)
    comment_id = client.post(
        f"/api/feeds/{feed_id}/comments", json={"content": "hi"}, headers=headers(member_id)
    ).json()["comment_id"]

    response = client.delete(f"/api/feeds/{other_feed_id}/comments/{comment_id}", headers=headers(member_id))
    assert response.status_code == 404


def test_comment_hearts(client, create_member, headers):
    writer_id = create_member()
    reader_id = create_member()
    feed_id = _create_feed(client, headers, writer_id)
    comment_id = client.post(
        f"/api/feeds/{feed_id}/comments", json={"content": "hi"}, headers=headers(writer_id)
    ).json()["comment_id"]
    heart_url = f"/api/feeds/{feed_id}/comments/{comment_id}/hearts"

    assert client.post(heart_url, headers=headers(reader_id)).status_code == 201
    assert client.post(heart_url, headers=headers(reader_id)).status_code == 400

    comment = client.get(f"/api/feeds/{feed_id}/comments", headers=headers(reader_id)).json()["data"][0]
    assert comment["heart_count"] == 1
    assert comment["is_hearted"] is True

    assert client.delete(heart_url, headers=headers(reader_id)).status_code == 200
    assert client.delete(heart_url, headers=headers(reader_id)).status_code == 404
    comment = client.get(f"/api/feeds/{feed_id}/comments", headers=headers(reader_id)).json()["data"][0]
    assert comment["heart_count"] == 0
    assert comment["is_hearted"] is False


def test_withdrawn_writer_feeds_are_hidden(client, create_member, headers):
    writer_id = create_member()
    feed_id = _create_feed(client, headers, writer_id)

    client.delete("/api/auth/withdraw", headers=headers(writer_id))

    assert client.get("/api/feeds/").json()["meta"]["total_count"] == 0
    assert client.get(f"/api/feeds/{feed_id}").status_code == 410


def test_withdrawn_commenter_keeps_comment_count(client, create_member, headers):
    writer_id = create_member()
    commenter_id = create_member()
    feed_id = _create_feed(client, headers, writer_id)
    client.post(f"/api/feeds/{feed_id}/comments", json={"content": "안녕"}, headers=headers(commenter_id))

    client.delete("/api/auth/withdraw", headers=headers(commenter_id))

    # 댓글 행은 살아 있으므로 카운터는 유지되고, 목록에서만 탈퇴 회원의 댓글이 빠진다
    assert client.get(f"/api/feeds/{feed_id}").json()["comment_count"] == 1
    comments = client.get(f"/api/feeds/{feed_id}/comments").json()
    assert comments["meta"]["total_count"] == 0
    assert comments["data"] == []
