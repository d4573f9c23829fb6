import pytest

from conftest import ADMIN_EMAIL, ADMIN_PASSWORD


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def test_login_success(client):
    resp = client.post(
        "/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["token"]
    assert body["refreshToken"]
    assert body["token"] != body["refreshToken"]
    assert body["user"] == {"email": ADMIN_EMAIL, "name": "Admin User", "role": "admin"}


def test_login_other_roles(login):
    assert login("agent@crestastream.com", "agent123")["user"]["role"] == "agent"
    assert login("manager@crestastream.com", "manager123")["user"]["role"] == "manager"


def test_login_wrong_password(client):
    resp = client.post(
        "/api/auth/login", json={"email": ADMIN_EMAIL, "password": "wrongpassword"}
    )
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "error": "Invalid credentials"}


def test_login_without_body(client):
    resp = client.post("/api/auth/login")
    assert resp.status_code == 401
    assert resp.json()["success"] is False


@pytest.mark.parametrize(
    "body",
    [
        {"email": ADMIN_EMAIL, "password": 123},
        {"email": ["admin"], "password": ADMIN_PASSWORD},
        ["admin", "admin123"],
        "admin@crestastream.com",
    ],
)
def test_login_with_wrong_typed_body_is_invalid_credentials(client, body):
    resp = client.post("/api/auth/login", json=body)
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "error": "Invalid credentials"}


def test_refresh_with_body_rotates_tokens(client, login):
    session = login()
    resp = client.post("/api/auth/refresh", json={"refreshToken": session["refreshToken"]})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["token"] and body["token"] != session["token"]
    assert body["refreshToken"] != session["refreshToken"]
    assert body["user"]["email"] == ADMIN_EMAIL

    again = client.post("/api/auth/refresh", json={"refreshToken": session["refreshToken"]})
    assert again.status_code == 401
    assert again.json() == {"success": False, "error": "Invalid token"}

    assert client.get("/api/auth/me", headers=_bearer(session["token"])).status_code == 401
    assert client.get("/api/auth/me", headers=_bearer(body["token"])).status_code == 200


def test_refresh_with_bearer_header(client, login):
    session = login()
    resp = client.post("/api/auth/refresh", headers=_bearer(session["refreshToken"]))
    assert resp.status_code == 200
    assert resp.json()["token"]


def test_refresh_rejects_access_token(client, login):
    session = login()
    resp = client.post("/api/auth/refresh", json={"refreshToken": session["token"]})
    assert resp.status_code == 401


def test_refresh_without_token(client):
    resp = client.post("/api/auth/refresh")
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "error": "Invalid token"}


def test_logout_invalidates_access_token(client, login):
    session = login()
    headers = _bearer(session["token"])
    assert client.get("/api/auth/me", headers=headers).status_code == 200

    resp = client.post("/api/auth/logout", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == {"success": True}

    me = client.get("/api/auth/me", headers=headers)
    assert me.status_code == 401
    assert me.json() == {"success": False, "error": "Invalid token"}
    assert client.post("/api/auth/logout", headers=headers).status_code == 401


def test_logout_requires_bearer(client):
    resp = client.post("/api/auth/logout")
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "error": "Missing bearer token"}


def test_me_rejects_refresh_token(client, login):
    session = login()
    resp = client.get("/api/auth/me", headers=_bearer(session["refreshToken"]))
    assert resp.status_code == 401
    assert resp.json()["error"] == "Access token required"


def test_me_returns_profile(client, login):
    session = login("agent@crestastream.com", "agent123")
    resp = client.get("/api/auth/me", headers=_bearer(session["token"]))
    assert resp.json() == {
        "success": True,
        "user": {"email": "agent@crestastream.com", "name": "Test Agent", "role": "agent"},
    }


def test_malformed_authorization_header(client):
    resp = client.get("/api/auth/me", headers={"Authorization": "Token abc"})
    assert resp.status_code == 401


@pytest.mark.parametrize("body", [{"refreshToken": 42}, {"refreshToken": ["x"]}, ["x"]])
def test_refresh_with_wrong_typed_token(client, body):
    resp = client.post("/api/auth/refresh", json=body)
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "error": "Invalid token"}
