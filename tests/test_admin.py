from app.models.enums import AuthorizationStatusType


def test_admin_routes_reject_regular_members(client, create_member, headers):
    member_id = create_member()

    assert client.get("/api/admin/members", headers=headers(member_id)).status_code == 401
    assert client.patch(
        f"/api/admin/members/{member_id}/authorization",
        json={"status": "AUTHORIZED"},
        headers=headers(member_id),
    ).status_code == 401


def test_admin_lists_pending_members(client, create_member, headers):
    admin_id = create_member(is_admin=True)
    pending_id = create_member(nickname="pending", authorization_status=AuthorizationStatusType.PENDING)
    create_member(authorization_status=AuthorizationStatusType.AUTHORIZED)

    response = client.get("/api/admin/members", headers=headers(admin_id)).json()
    assert [member["id"] for member in response["data"]] == [pending_id]
    assert response["meta"]["total_count"] == 1

    authorized = client.get(
        "/api/admin/members", params={"status": "AUTHORIZED"}, headers=headers(admin_id)
    ).json()
    assert authorized["meta"]["total_count"] == 1


def test_admin_approves_authorization_request(client, create_member, headers):
    admin_id = create_member(is_admin=True)
    member_id = create_member()
    client.post("/api/profile/me/authorization", json={"generation": 3}, headers=headers(member_id))

    response = client.patch(
        f"/api/admin/members/{member_id}/authorization",
        json={"status": "AUTHORIZED"},
        headers=headers(admin_id),
    )
    assert response.status_code == 200
    assert client.get("/api/profile/me", headers=headers(member_id)).json()["authorization_status"] == "AUTHORIZED"

    # 승인된 회원은 다시 요청할 수 없음
    assert client.post(
        "/api/profile/me/authorization", json={"generation": 4}, headers=headers(member_id)
    ).status_code == 400


def test_admin_can_only_approve_or_reject(client, create_member, headers):
    admin_id = create_member(is_admin=True)
    member_id = create_member()

    response = client.patch(
        f"/api/admin/members/{member_id}/authorization",
        json={"status": "PENDING"},
        headers=headers(admin_id),
    )
    assert response.status_code == 400
