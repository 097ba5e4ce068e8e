from datetime import timedelta
from urllib.parse import parse_qs, urlparse

from fastapi.testclient import TestClient

from fermentato.config import settings
from fermentato.database import SessionLocal, purge_expired_sessions
from fermentato.main import app
from fermentato.models import User, UserSession
from fermentato.routes.auth import INVALID_CREDENTIALS, SOCIAL_ONLY_ACCOUNT
from fermentato.services import google_oauth
from fermentato.services.auth import create_state_token
from fermentato.utils import generate_id, utcnow

from conftest import PASSWORD


def _register(client, email="ada@example.com", password=PASSWORD):
    return client.post("/api/auth/register", json={"email": email, "password": password, "first_name": "Ada"})


def test_register_logs_in(client):
    resp = _register(client)
    assert resp.status_code == 201
    body = resp.json()
    assert body["email"] == "ada@example.com"
    assert body["roles"] == ["customer"]
    assert body["active_role"] == "customer"
    assert body["is_email_verified"] is False
    assert "hashed_password" not in body
    assert "fermentato.sid" in resp.cookies

    me = client.get("/api/auth/user")
    assert me.status_code == 200
    assert me.json()["id"] == body["id"]


def test_register_normalizes_email_and_rejects_duplicate(client):
    assert _register(client, email="  Ada@Example.COM ").json()["email"] == "ada@example.com"
    resp = _register(TestClient(app), email="ada@example.com")
    assert resp.status_code == 400


def test_register_short_password_is_validation_error(client):
    resp = _register(client, password="short")
    assert resp.status_code == 400
    body = resp.json()
    assert body["detail"] == "Validation error"
    assert any(e["field"] == "password" for e in body["errors"])


def test_login_and_logout(client):
    _register(client)
    fresh = TestClient(app)
    assert fresh.get("/api/auth/user").status_code == 401

    resp = fresh.post("/api/auth/login", json={"email": "ADA@example.com ", "password": PASSWORD})
    assert resp.status_code == 200
    assert fresh.get("/api/auth/user").status_code == 200

    assert fresh.post("/api/auth/logout").status_code == 200
    assert fresh.get("/api/auth/user").status_code == 401


def test_login_wrong_password_and_unknown_email(client):
    _register(client)
    resp = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "wrong-password"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == INVALID_CREDENTIALS

    resp = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": PASSWORD})
    assert resp.status_code == 401
    assert resp.json()["detail"] == INVALID_CREDENTIALS


def test_login_social_only_account(client):
    with SessionLocal() as db:
        db.add(User(id=generate_id(), email="social@example.com", hashed_password=None))
        db.commit()
    resp = client.post("/api/auth/login", json={"email": "social@example.com", "password": PASSWORD})
    assert resp.status_code == 401
    assert resp.json()["detail"] == SOCIAL_ONLY_ACCOUNT


def test_suspended_user_cannot_login_or_use_session(user_client):
    with SessionLocal() as db:
        db.get(User, user_client.user["id"]).is_active = False
        db.commit()
    assert user_client.get("/api/auth/user").status_code == 401

    resp = TestClient(app).post(
        "/api/auth/login", json={"email": user_client.user["email"], "password": PASSWORD}
    )
    assert resp.status_code == 403


def test_get_logout_redirects_to_frontend(user_client):
    resp = user_client.get("/api/auth/logout", follow_redirects=False)
    assert resp.status_code == 302
    assert user_client.get("/api/auth/user").status_code == 401


def test_google_not_configured(client):
    resp = client.get("/api/auth/google", follow_redirects=False)
    assert resp.status_code == 503


def _fake_google(monkeypatch):
    monkeypatch.setattr(google_oauth, "exchange_code", lambda code, redirect_uri: {"access_token": "tok"})
    monkeypatch.setattr(google_oauth, "fetch_userinfo", lambda token: {
        "sub": "google-123",
        "email": "Grace@Example.com",
        "given_name": "Grace",
        "family_name": "Hopper",
    })


def _google_callback(c, state):
    return c.get(
        "/api/auth/google/callback",
        params={"code": "abc", "state": state},
        follow_redirects=False,
    )


def test_google_callback_creates_and_links_user(client, monkeypatch):
    _fake_google(monkeypatch)
    client.cookies.set(settings.oauth_state_cookie_name, "nonce")
    resp = _google_callback(client, create_state_token("nonce"))
    assert resp.status_code == 302
    assert not resp.headers["location"].endswith("invalid_state")
    me = client.get("/api/auth/user").json()
    assert me["email"] == "grace@example.com"
    assert me["is_email_verified"] is True
    assert me["has_password"] is False

    # Second sign-in reuses the linked account
    again = TestClient(app)
    again.cookies.set(settings.oauth_state_cookie_name, "other")
    _google_callback(again, create_state_token("other"))
    assert again.get("/api/auth/user").json()["id"] == me["id"]


def test_google_round_trip_binds_state_to_browser(client, monkeypatch):
    _fake_google(monkeypatch)
    monkeypatch.setattr(settings, "google_client_id", "client-id")
    monkeypatch.setattr(settings, "google_client_secret", "client-secret")

    start = client.get("/api/auth/google", follow_redirects=False)
    assert start.status_code == 302
    assert settings.oauth_state_cookie_name in start.cookies
    state = parse_qs(urlparse(start.headers["location"]).query)["state"][0]

    # A different browser replaying the same state is not signed in
    victim = TestClient(app)
    resp = _google_callback(victim, state)
    assert "error=invalid_state" in resp.headers["location"]
    assert victim.get("/api/auth/user").status_code == 401

    resp = _google_callback(client, state)
    assert resp.headers["location"].endswith("/")
    assert client.get("/api/auth/user").json()["email"] == "grace@example.com"
    assert settings.oauth_state_cookie_name not in client.cookies


def test_google_callback_rejects_mismatched_nonce(client, monkeypatch):
    _fake_google(monkeypatch)
    client.cookies.set(settings.oauth_state_cookie_name, "mine")
    resp = _google_callback(client, create_state_token("someone-else"))
    assert "error=invalid_state" in resp.headers["location"]
    assert client.get("/api/auth/user").status_code == 401


def test_google_callback_rejects_bad_state(client):
    client.cookies.set(settings.oauth_state_cookie_name, "nonce")
    resp = _google_callback(client, "forged")
    assert resp.status_code == 302
    assert "error=invalid_state" in resp.headers["location"]
    assert client.get("/api/auth/user").status_code == 401


def _backdate_sessions(user_id):
    with SessionLocal() as db:
        for row in db.query(UserSession).filter(UserSession.user_id == user_id):
            row.expire = utcnow() - timedelta(minutes=1)
        db.commit()


def test_expired_session_is_ignored(user_client):
    assert user_client.get("/api/auth/user").status_code == 200
    _backdate_sessions(user_client.user["id"])
    assert user_client.get("/api/auth/user").status_code == 401


def test_purge_expired_sessions_removes_only_expired(user_client, new_user):
    other = new_user()
    _backdate_sessions(user_client.user["id"])

    assert purge_expired_sessions() == 1
    with SessionLocal() as db:
        assert db.query(UserSession).filter(UserSession.user_id == user_client.user["id"]).count() == 0
        assert db.query(UserSession).filter(UserSession.user_id == other.user["id"]).count() == 1
    assert other.get("/api/auth/user").status_code == 200
