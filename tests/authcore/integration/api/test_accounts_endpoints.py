"""Integration tests for the account endpoints."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from authcore.services import JWTService, TokenConfig

PASSWORD = "securepassword123"  # noqa: S105
TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # noqa: S105


@pytest.mark.integration
class TestRegisterEndpoint:
    def test_register_returns_profile(self, client, url):
        response = client.post(
            url("/register"),
            json={
                "email": "Jane@Example.com",
                "username": "jane",
                "first_name": "Jane",
                "last_name": "Doe",
                "password": PASSWORD,
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "Jane@Example.com"
        assert body["username"] == "jane"
        assert "password" not in body
        assert "credential" not in body

    def test_duplicate_email_any_case(self, register, client, url):
        register()
        response = client.post(
            url("/register"),
            json={"email": "USER@example.com", "username": "other", "password": PASSWORD},
        )

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_EMAIL"

    def test_duplicate_username(self, register, client, url):
        register()
        response = client.post(
            url("/register"),
            json={"email": "other@example.com", "username": "user", "password": PASSWORD},
        )

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_USERNAME"

    def test_invalid_email(self, client, url):
        response = client.post(
            url("/register"),
            json={"email": "nope", "username": "nope", "password": PASSWORD},
        )

        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_EMAIL_FORMAT"

    def test_weak_password(self, client, url):
        response = client.post(
            url("/register"),
            json={"email": "a@example.com", "username": "a", "password": "1234567"},
        )

        assert response.status_code == 422
        assert response.json()["code"] == "WEAK_PASSWORD"


@pytest.mark.integration
class TestLoginEndpoint:
    def test_login_by_email_and_username(self, register, client, url):
        profile = register()
        jwt_service = JWTService(TokenConfig(secret_key=TEST_JWT_SECRET))

        for identifier in ("user@example.com", "user"):
            response = client.post(
                url("/login"),
                json={"email_or_username": identifier, "password": PASSWORD},
            )
            assert response.status_code == 200
            body = response.json()
            assert body["token_type"] == "bearer"
            assert body["expires_in"] > 6 * 24 * 3600
            payload = jwt_service.verify(body["access_token"])
            assert str(payload.account_id) == profile["id"]

    def test_not_registered(self, client, url):
        response = client.post(
            url("/login"),
            json={"email_or_username": "ghost", "password": PASSWORD},
        )

        assert response.status_code == 409
        assert response.json()["code"] == "NOT_REGISTERED"

    def test_wrong_password(self, register, client, url):
        register()
        response = client.post(
            url("/login"),
            json={"email_or_username": "user", "password": "wrong-password"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "WRONG_CREDENTIALS"


@pytest.mark.integration
class TestAuthenticatedEndpoints:
    def test_requires_token(self, client, url):
        response = client.get(url("/profile"))

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHORIZED"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_rejects_bad_token(self, client, url):
        response = client.get(
            url("/profile"),
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_TOKEN"

    def test_own_profile(self, client, url, auth_headers):
        response = client.get(url("/profile"), headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["username"] == "user"

    def test_profile_by_id(self, client, url, auth_headers, register):
        other = register(email="other@example.com", username="other")

        response = client.get(url(f"/{other['id']}/profile"), headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["username"] == "other"

    def test_profile_by_unknown_id(self, client, url, auth_headers):
        response = client.get(url(f"/{uuid4()}/profile"), headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    def test_check(self, client, url, auth_headers):
        response = client.get(url("/check"), headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["username"] == "user"


@pytest.mark.integration
class TestUpdateEndpoint:
    def test_update_name_requires_password(self, client, url, auth_headers):
        response = client.patch(
            url("/update"),
            headers=auth_headers,
            json={"current_password": "wrong-password", "first_name": "New"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "WRONG_CREDENTIALS"

    def test_update_name(self, client, url, auth_headers):
        response = client.patch(
            url("/update"),
            headers=auth_headers,
            json={"current_password": PASSWORD, "first_name": "New"},
        )

        assert response.status_code == 200
        assert response.json()["first_name"] == "New"
        assert response.json()["last_name"] == "User"

    def test_change_password_then_login(self, client, url, auth_headers):
        response = client.patch(
            url("/update"),
            headers=auth_headers,
            json={"current_password": PASSWORD, "password": "brand-new-password"},
        )
        assert response.status_code == 200

        old = client.post(
            url("/login"),
            json={"email_or_username": "user", "password": PASSWORD},
        )
        new = client.post(
            url("/login"),
            json={"email_or_username": "user", "password": "brand-new-password"},
        )
        assert old.status_code == 400
        assert new.status_code == 200

    def test_update_to_taken_email(self, client, url, auth_headers, register):
        register(email="taken@example.com", username="taken")

        response = client.patch(
            url("/update"),
            headers=auth_headers,
            json={"current_password": PASSWORD, "email": "Taken@Example.com"},
        )

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_EMAIL"


@pytest.mark.integration
class TestDeleteEndpoint:
    def test_wrong_password_is_forbidden(self, client, url, auth_headers):
        response = client.request(
            "DELETE",
            url("/delete"),
            headers=auth_headers,
            json={"password": "wrong-password"},
        )

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"
        assert client.get(url("/profile"), headers=auth_headers).status_code == 200

    def test_delete_then_token_is_unauthorized(self, client, url, auth_headers):
        response = client.request(
            "DELETE",
            url("/delete"),
            headers=auth_headers,
            json={"password": PASSWORD},
        )
        assert response.status_code == 204

        check = client.get(url("/check"), headers=auth_headers)
        assert check.status_code == 401
        assert check.json()["code"] == "UNAUTHORIZED"

        login = client.post(
            url("/login"),
            json={"email_or_username": "user", "password": PASSWORD},
        )
        assert login.status_code == 409


@pytest.mark.integration
class TestStoreUnavailable:
    """A store that fails at commit is reported as transient."""

    @pytest.fixture
    def locked_commit(self, monkeypatch):
        async def _commit(self):
            raise OperationalError("COMMIT", {}, Exception("database is locked"))

        monkeypatch.setattr(AsyncSession, "commit", _commit)

    def test_register_returns_503(self, client, url, locked_commit):
        response = client.post(
            url("/register"),
            json={"email": "user@example.com", "username": "user", "password": PASSWORD},
        )

        assert response.status_code == 503
        assert response.json()["code"] == "STORE_UNAVAILABLE"

    def test_nothing_is_stored(self, client, url, register, monkeypatch):
        async def _commit(self):
            raise OperationalError("COMMIT", {}, Exception("database is locked"))

        with monkeypatch.context() as patch:
            patch.setattr(AsyncSession, "commit", _commit)
            response = client.post(
                url("/register"),
                json={
                    "email": "late@example.com",
                    "username": "late",
                    "password": PASSWORD,
                },
            )
        assert response.status_code == 503

        register(email="late@example.com", username="late")


@pytest.mark.integration
def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
