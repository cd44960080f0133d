from __future__ import annotations

from fastapi.testclient import TestClient

from conftest import API


def _register(client: TestClient, **overrides):
    payload = {"username": "moviefan", "email": "fan@example.com", "password": "hunter22"}
    payload.update(overrides)
    return client.post(f"{API}/auth/register", json=payload)


class TestRegisterAndLogin:
    def test_register_returns_token_and_user(self, anon_client: TestClient):
        response = _register(anon_client)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["token_type"] == "bearer"
        assert data["access_token"]
        assert data["user"]["username"] == "moviefan"
        assert data["user"]["role"] == "user"
        assert "password_hash" not in data["user"]

    def test_duplicate_email(self, anon_client: TestClient):
        _register(anon_client)

        response = _register(anon_client, username="someoneelse")

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "auth:validation_failed"
        assert "email" in body["errors"]

    def test_register_validation(self, anon_client: TestClient):
        response = _register(anon_client, email="not-an-email", password="123")

        assert response.status_code == 422
        assert set(response.json()["errors"]) == {"email", "password"}

    def test_login_and_fetch_current_user(self, anon_client: TestClient):
        _register(anon_client)

        login = anon_client.post(f"{API}/auth/login", json={"email": "fan@example.com", "password": "hunter22"})
        assert login.status_code == 200
        token = login.json()["data"]["access_token"]

        me = anon_client.get(f"{API}/auth/user", headers={"Authorization": f"Bearer {token}"})

        assert me.status_code == 200
        assert me.json()["data"]["email"] == "fan@example.com"

    def test_wrong_password(self, anon_client: TestClient):
        _register(anon_client)

        response = anon_client.post(f"{API}/auth/login", json={"email": "fan@example.com", "password": "nope"})

        assert response.status_code == 401
        assert response.json()["code"] == "auth:invalid_credentials"


class TestAuthGuard:
    def test_protected_route_requires_token(self, anon_client: TestClient):
        response = anon_client.get(f"{API}/favorites")

        assert response.status_code == 401
        assert response.json()["code"] == "auth:unauthenticated"

    def test_rejects_garbage_token(self, anon_client: TestClient):
        response = anon_client.get(f"{API}/tv", headers={"Authorization": "Bearer nonsense"})

        assert response.status_code == 401

    def test_token_reaches_favorites(self, anon_client: TestClient):
        token = _register(anon_client).json()["data"]["access_token"]
        headers = {"Authorization": f"Bearer {token}"}

        added = anon_client.post(f"{API}/favorites", json={"media_id": 550, "media_type": "tv"}, headers=headers)

        assert added.status_code == 200


class TestFallback:
    def test_unmatched_route_is_404_envelope(self, anon_client: TestClient):
        response = anon_client.get(f"{API}/does/not/exist/at/all")

        assert response.status_code == 404
        assert response.json() == {"message": "Not found", "code": "general:not-found", "statusCode": 404}

    def test_health(self, anon_client: TestClient):
        response = anon_client.get(f"{API}/system/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestAppSettings:
    def test_app_debug_follows_settings(self, monkeypatch):
        from movieshelf.core.config import Settings, get_settings
        from movieshelf.main import app

        assert app.debug is get_settings().debug is False

        monkeypatch.setenv("DEBUG", "true")
        assert Settings().debug is True
