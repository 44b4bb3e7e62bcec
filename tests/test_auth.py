# =============================================================================
# tests/test_auth.py - Admin Authentication Tests
# =============================================================================
# Covers local token issue/verify and the login/verify endpoints.
# =============================================================================

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from fastapi import HTTPException
from jose import jwt

from app.auth import create_access_token, decode_admin_token
from app.config import settings


# =============================================================================
# Token Tests
# =============================================================================

class TestLocalTokens:
    """Tests for create_access_token / decode_admin_token."""

    def test_round_trip_claims(self):
        token, expires_at = create_access_token("admin")

        claims = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
        assert claims["sub"] == "admin"
        assert claims["username"] == "admin"
        assert claims["role"] == "admin"
        assert claims["exp"] - claims["iat"] == settings.JWT_EXPIRE_HOURS * 3600

        admin = decode_admin_token(token)
        assert admin.username == "admin"
        assert admin.role == "admin"
        assert abs((admin.expires_at - expires_at).total_seconds()) < 1

    def test_expired_token(self):
        past = datetime.now(timezone.utc) - timedelta(hours=1)
        token = jwt.encode(
            {"sub": "admin", "username": "admin", "role": "admin", "exp": int(past.timestamp())},
            settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
        )

        with pytest.raises(HTTPException) as exc_info:
            decode_admin_token(token)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Token has expired"

    def test_wrong_secret(self):
        token = jwt.encode({"sub": "admin"}, "some-other-secret-value", algorithm="HS256")

        with pytest.raises(HTTPException) as exc_info:
            decode_admin_token(token)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Invalid token"

    def test_garbage_token(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_admin_token("not-a-jwt")
        assert exc_info.value.detail == "Invalid token"


# =============================================================================
# Endpoint Tests
# =============================================================================

class TestLoginEndpoint:
    """Tests for POST/GET /api/admin/login."""

    def test_login_success(self, client):
        response = client.post(
            "/api/admin/login",
            json={"username": "admin", "password": "test-admin-password"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["token"]
        assert body["token_type"] == "bearer"
        assert body["user"] == {"username": "admin", "role": "admin"}
        assert body["message"] == "Login successful"

    def test_login_wrong_password(self, client):
        response = client.post(
            "/api/admin/login",
            json={"username": "admin", "password": "nope"},
        )
        assert response.status_code == 401

    def test_login_missing_fields(self, client):
        response = client.post("/api/admin/login", json={"username": "admin"})

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_get_login_not_allowed(self, client):
        response = client.get("/api/admin/login")

        assert response.status_code == 405
        assert "POST /api/admin/login" in response.json()["suggestion"]


class TestVerifyEndpoint:
    """Tests for GET /api/admin/verify and the admin guard."""

    def test_verify_valid_token(self, client, auth_headers):
        response = client.get("/api/admin/verify", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is True
        assert body["username"] == "admin"
        assert body["expires_at"]

    def test_missing_token(self, client):
        response = client.get("/api/admin/verify")

        assert response.status_code == 401
        assert response.json()["detail"] == "Access token required"

    def test_invalid_token(self, client):
        response = client.get("/api/admin/verify", headers={"Authorization": "Bearer junk"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid token"


class TestSupabaseLogin:
    """Tests for POST /api/admin/login with AUTH_MODE=supabase."""

    EXP = 1900000000

    def _login(self, client, session):
        auth_client = MagicMock()
        auth_client.auth.sign_in_with_password.return_value = SimpleNamespace(session=session)
        with patch.object(settings, "AUTH_MODE", "supabase"), \
                patch("app.auth.routes.create_client", return_value=auth_client):
            return client.post(
                "/api/admin/login",
                json={"username": "Owner@Example.com", "password": "secret"},
            )

    def test_expiry_from_session(self, client):
        session = SimpleNamespace(access_token="opaque", expires_at=self.EXP, expires_in=3600)

        response = self._login(client, session)

        assert response.status_code == 200
        expires_at = datetime.fromisoformat(response.json()["expires_at"].replace("Z", "+00:00"))
        assert expires_at == datetime.fromtimestamp(self.EXP, tz=timezone.utc)

    def test_missing_expires_at_uses_token_exp(self, client):
        token = jwt.encode({"sub": "u1", "exp": self.EXP}, "other-secret", algorithm="HS256")
        session = SimpleNamespace(access_token=token, expires_at=None, expires_in=3600)

        response = self._login(client, session)

        assert response.status_code == 200
        body = response.json()
        assert body["token"] == token
        assert body["user"]["username"] == "owner@example.com"
        expires_at = datetime.fromisoformat(body["expires_at"].replace("Z", "+00:00"))
        assert expires_at == datetime.fromtimestamp(self.EXP, tz=timezone.utc)

    def test_missing_expiry_everywhere_uses_expires_in(self, client):
        session = SimpleNamespace(access_token="not-a-jwt", expires_at=None, expires_in=600)

        response = self._login(client, session)

        assert response.status_code == 200
        expires_at = datetime.fromisoformat(response.json()["expires_at"].replace("Z", "+00:00"))
        remaining = expires_at - datetime.now(timezone.utc)
        assert timedelta(seconds=500) < remaining <= timedelta(seconds=600)

    def test_no_session_rejected(self, client):
        response = self._login(client, None)

        assert response.status_code == 401
