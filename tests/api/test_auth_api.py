"""API tests for authentication endpoints.

- POST /auth/login  (email/password -> bearer token)
- GET  /auth/secret (bearer token required)
"""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from tests.conftest import TEST_SECRET_KEY

pytestmark = pytest.mark.api

CREDENTIALS = {"email": "john@example.com", "password": "Password123!"}


class TestLogin:
    """Tests for POST /auth/login."""

    def test_login_returns_token(self, client, registered_user_id):
        response = client.post("/auth/login", json=CREDENTIALS)

        assert response.status_code == 200
        body = response.json()
        assert body["tokenType"] == "Bearer"
        assert body["expiresIn"] == 3600
        assert body["userId"] == registered_user_id
        assert body["email"] == "john@example.com"
        assert body["role"] == "ROLE_USER"
        assert len(body["token"].split(".")) == 3

    def test_login_email_is_case_insensitive(self, client, registered_user_id):
        response = client.post(
            "/auth/login", json=CREDENTIALS | {"email": "John@EXAMPLE.com"}
        )

        assert response.status_code == 200

    def test_wrong_password_and_unknown_email_look_alike(self, client, registered_user_id):
        wrong_password = client.post(
            "/auth/login", json=CREDENTIALS | {"password": "WrongPass123!"}
        )
        unknown_email = client.post(
            "/auth/login", json=CREDENTIALS | {"email": "ghost@example.com"}
        )

        assert wrong_password.status_code == unknown_email.status_code == 400
        assert wrong_password.text == unknown_email.text == "Invalid email or password"

    def test_invalid_email_is_rejected_before_lookup(self, client):
        response = client.post("/auth/login", json={"email": "", "password": "x"})

        assert response.status_code == 400
        assert response.text == "Email cannot be empty"


class TestSecret:
    """Tests for GET /auth/secret."""

    def _token(self, client) -> str:
        return client.post("/auth/login", json=CREDENTIALS).json()["token"]

    def test_valid_token_passes(self, client, registered_user_id):
        response = client.get(
            "/auth/secret", headers={"Authorization": f"Bearer {self._token(client)}"}
        )

        assert response.status_code == 200
        assert response.text == "You passed the authorization flow!"

    def test_missing_token_is_401(self, client):
        response = client.get("/auth/secret")

        assert response.status_code == 401
        assert response.json()["detail"] == "Not authenticated"
        assert response.headers["www-authenticate"] == "Bearer"

    def test_garbage_token_is_401(self, client):
        response = client.get(
            "/auth/secret", headers={"Authorization": "Bearer not.a.token"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "token_invalid"

    def test_expired_token_is_401(self, client, registered_user_id):
        issued = datetime.now(UTC) - timedelta(hours=2)
        token = jwt.encode(
            {
                "sub": str(registered_user_id),
                "email": "john@example.com",
                "roles": ["ROLE_USER"],
                "iat": int(issued.timestamp()),
                "exp": int((issued + timedelta(hours=1)).timestamp()),
            },
            TEST_SECRET_KEY,
            algorithm="HS256",
        )

        response = client.get(
            "/auth/secret", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "token_expired"
