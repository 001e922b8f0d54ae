from datetime import datetime, timedelta

import security.session as session_mod
from tests.conftest import bearer


def test_register_returns_token_and_user_role(client):
    resp = client.post("/api/auth/register", json={
        "name": "Asha", "email": "asha@example.com", "phone": "9000000001", "password": "pw1234",
    })
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["role"] == "user"
    assert body["token"]
    assert body["userId"].startswith("user_")
    assert body["message"] == "Registration successful"


def test_register_duplicate_email_conflicts(client, register):
    register(email="dup@example.com")
    resp = client.post("/api/auth/register", json={
        "name": "Other", "email": "DUP@example.com", "phone": "1", "password": "x",
    })
    assert resp.status_code == 409
    assert resp.get_json() == {"message": "Email already exists"}


def test_register_missing_fields(client):
    resp = client.post("/api/auth/register", json={"email": "x@y.com", "password": "pw"})
    assert resp.status_code == 400
    assert "message" in resp.get_json()


def test_login_issues_fresh_token_and_old_one_stays_valid(client, register):
    first = register()
    resp = client.post("/api/auth/login", json={"email": "a@b.com", "password": "pw1234"})
    assert resp.status_code == 200
    second = resp.get_json()

    assert second["userId"] == first["userId"]
    assert second["token"] != first["token"]
    for token in (first["token"], second["token"]):
        me = client.get("/api/auth/me", headers=bearer(token))
        assert me.status_code == 200
        assert me.get_json()["email"] == "a@b.com"


def test_login_wrong_password_is_unauthorized(client, register):
    register()
    resp = client.post("/api/auth/login", json={"email": "a@b.com", "password": "pw12345"})
    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Invalid email or password"


def test_login_unknown_email_is_unauthorized(client):
    resp = client.post("/api/auth/login", json={"email": "ghost@b.com", "password": "pw1234"})
    assert resp.status_code == 401


def test_me_never_exposes_password(client, user_headers):
    body = client.get("/api/auth/me", headers=user_headers).get_json()
    assert set(body) == {"id", "name", "email", "phone", "role"}


def test_me_without_or_with_bad_token(client):
    assert client.get("/api/auth/me").status_code == 401
    assert client.get("/api/auth/me", headers=bearer("nope")).status_code == 401


def test_logout_revokes_only_that_token(client, register):
    first = register()["token"]
    second = client.post("/api/auth/login", json={"email": "a@b.com", "password": "pw1234"}).get_json()["token"]

    assert client.post("/api/auth/logout", headers=bearer(first)).status_code == 200
    assert client.get("/api/auth/me", headers=bearer(first)).status_code == 401
    assert client.get("/api/auth/me", headers=bearer(second)).status_code == 200


def test_token_ttl_expires_sessions(app, client, register, monkeypatch):
    app.config["SESSION_TTL_SECONDS"] = 60
    token = register()["token"]
    assert client.get("/api/auth/me", headers=bearer(token)).status_code == 200

    later = datetime.utcnow() + timedelta(minutes=5)
    real_is_expired = session_mod.is_expired
    monkeypatch.setattr(
        "services.credentials.is_expired",
        lambda expires_at, now=None: real_is_expired(expires_at, later),
    )
    assert client.get("/api/auth/me", headers=bearer(token)).status_code == 401


def test_bootstrap_admin_can_login(client):
    resp = client.post("/api/auth/login", json={"email": "admin@greenfield.com", "password": "admin123"})
    assert resp.status_code == 200
    assert resp.get_json()["role"] == "admin"
    assert resp.get_json()["userId"] == "admin1"


def test_malformed_json_rejected_before_handler(client):
    resp = client.post("/api/auth/login", data="{not json", content_type="application/json")
    assert resp.status_code == 400
    assert resp.get_json() == {"message": "Invalid JSON in request body"}


def test_json_body_must_be_an_object(client):
    for body in (["x"], "s", 5):
        resp = client.post("/api/auth/login", json=body)
        assert resp.status_code == 400
        assert resp.get_json() == {"message": "Invalid JSON in request body"}


def test_login_with_non_string_email_is_rejected(client, register):
    register()
    resp = client.post("/api/auth/login", json={"email": 5, "password": "pw1234"})
    assert resp.status_code in (400, 401)
    assert "message" in resp.get_json()

    resp = client.post("/api/auth/login", json={"email": ["a@b.com"], "password": "pw1234"})
    assert resp.status_code in (400, 401)


def test_ping(client):
    assert client.get("/api/ping").get_json() == {"message": "ping"}
