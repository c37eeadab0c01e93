import httpx

from app.services import auth as auth_service

TOKEN_PATH = "/login/oauth/access_token"


def _use_transport(monkeypatch, handler):
    transport = httpx.MockTransport(handler)
    monkeypatch.setattr(auth_service, "_github_client", lambda: httpx.Client(transport=transport))


def _github_handler(token_response=None, user_response=None, emails_response=None):
    """경로별로 GitHub 응답을 돌려주는 핸들러"""
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == TOKEN_PATH:
            return token_response or httpx.Response(200, json={"access_token": "gho_token", "token_type": "bearer"})
        if request.url.path == "/user":
            assert request.headers["Authorization"] == "Bearer gho_token"
            return user_response or httpx.Response(
                200, json={"id": 2002, "login": "hubot", "email": "hubot@example.com", "avatar_url": None}
            )
        if request.url.path == "/user/emails":
            return emails_response or httpx.Response(404, json={"message": "Not Found"})
        return httpx.Response(404)

    return handler


def test_callback_logs_in_through_github(client, monkeypatch):
    _use_transport(monkeypatch, _github_handler())

    response = client.get("/api/auth/github/callback", params={"code": "abc"})
    assert response.status_code == 200
    assert response.json()["nickname"] == "hubot"
    assert response.json()["is_new_member"] is True


def test_callback_returns_502_when_github_is_unreachable(client, monkeypatch):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    _use_transport(monkeypatch, handler)

    response = client.get("/api/auth/github/callback", params={"code": "abc"})
    assert response.status_code == 502


def test_callback_returns_502_when_token_endpoint_fails(client, monkeypatch):
    _use_transport(monkeypatch, _github_handler(token_response=httpx.Response(503, text="unavailable")))

    assert client.get("/api/auth/github/callback", params={"code": "abc"}).status_code == 502


def test_callback_returns_401_for_rejected_code(client, monkeypatch):
    _use_transport(monkeypatch, _github_handler(
        token_response=httpx.Response(200, json={"error": "bad_verification_code"})
    ))

    response = client.get("/api/auth/github/callback", params={"code": "expired"})
    assert response.status_code == 401
    assert response.json()["detail"] == "유효하지 않은 GitHub 인증 코드입니다."


def test_callback_returns_502_for_non_json_token_body(client, monkeypatch):
    _use_transport(monkeypatch, _github_handler(token_response=httpx.Response(200, text="<html>oops</html>")))

    response = client.get("/api/auth/github/callback", params={"code": "abc"})
    assert response.status_code == 502
    assert response.json()["detail"] == "GitHub 응답을 해석할 수 없습니다."


def test_callback_returns_401_for_invalid_user_payload(client, monkeypatch):
    _use_transport(monkeypatch, _github_handler(
        user_response=httpx.Response(200, json={"message": "Bad credentials"})
    ))

    response = client.get("/api/auth/github/callback", params={"code": "abc"})
    assert response.status_code == 401
    assert response.json()["detail"] == "유효하지 않은 GitHub 사용자 정보입니다."


def test_callback_returns_502_for_non_json_user_body(client, monkeypatch):
    _use_transport(monkeypatch, _github_handler(user_response=httpx.Response(200, text="not json")))

    assert client.get("/api/auth/github/callback", params={"code": "abc"}).status_code == 502


def test_private_email_falls_back_to_primary_address(client, monkeypatch):
    _use_transport(monkeypatch, _github_handler(
        user_response=httpx.Response(200, json={"id": 3003, "login": "private", "email": None}),
        emails_response=httpx.Response(200, json=[
            {"email": "old@example.com", "primary": False, "verified": True},
            {"email": "main@example.com", "primary": True, "verified": True},
        ]),
    ))

    login = client.get("/api/auth/github/callback", params={"code": "abc"}).json()
    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {login['access_token']}"})
    assert me.json()["email"] == "main@example.com"


def test_email_lookup_failure_does_not_block_login(client, monkeypatch):
    _use_transport(monkeypatch, _github_handler(
        user_response=httpx.Response(200, json={"id": 4004, "login": "quiet", "email": None}),
        emails_response=httpx.Response(403, json={"message": "Resource not accessible"}),
    ))

    login = client.get("/api/auth/github/callback", params={"code": "abc"})
    assert login.status_code == 200
    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {login.json()['access_token']}"})
    assert me.json()["email"] is None
