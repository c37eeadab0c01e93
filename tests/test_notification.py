def _notify(client, headers, sender_id, receiver_id, times=1):
    feed_id = client.post("/api/feeds/", json={"content": "feed"}, headers=headers(receiver_id)).json()["feed_id"]
    for i in range(times):
        client.post(f"/api/feeds/{feed_id}/comments", json={"content": f"댓글 {i}"}, headers=headers(sender_id))
    return feed_id


def test_notification_list_and_read(client, create_member, headers):
    sender = create_member()
    receiver = create_member()
    feed_id = _notify(client, headers, sender, receiver, times=2)

    notifications = client.get("/api/notifications/", headers=headers(receiver)).json()
    assert notifications["meta"]["total_count"] == 2
    assert notifications["unread_count"] == 2
    first = notifications["data"][0]
    assert first["type"] == "CREATE_FEED_COMMENT"
    assert first["feed_id"] == feed_id
    assert first["is_read"] is False

    assert client.patch(f"/api/notifications/{first['id']}/read", headers=headers(receiver)).status_code == 200
    assert client.get("/api/notifications/", headers=headers(receiver)).json()["unread_count"] == 1


def test_read_all_notifications(client, create_member, headers):
    sender = create_member()
    receiver = create_member()
    _notify(client, headers, sender, receiver, times=3)

    response = client.patch("/api/notifications/read-all", headers=headers(receiver))
    assert response.status_code == 200
    assert response.json()["message"].startswith("3")

    notifications = client.get("/api/notifications/", headers=headers(receiver)).json()
    assert notifications["unread_count"] == 0
    assert all(notification["is_read"] for notification in notifications["data"])


def test_only_receiver_can_touch_notification(client, create_member, headers):
    sender = create_member()
    receiver = create_member()
    _notify(client, headers, sender, receiver)
    notification_id = client.get("/api/notifications/", headers=headers(receiver)).json()["data"][0]["id"]

    assert client.patch(f"/api/notifications/{notification_id}/read", headers=headers(sender)).status_code == 403
    assert client.delete(f"/api/notifications/{notification_id}", headers=headers(sender)).status_code == 403

    assert client.delete(f"/api/notifications/{notification_id}", headers=headers(receiver)).status_code == 200
    assert client.delete(f"/api/notifications/{notification_id}", headers=headers(receiver)).status_code == 404


def test_notifications_require_login(client):
    assert client.get("/api/notifications/").status_code == 401
