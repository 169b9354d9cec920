"""
API tests for registration and login.
"""

import pytest

pytestmark = pytest.mark.api


class TestRegister:
    def test_register(self, api_client):
        # Act
        response = api_client.post(
            "/api/users/register", json={"name": "Jane Buyer", "email": "Jane@Shop.io", "password": "secret1"}
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "User registered successfully"
        assert body["user"]["email"] == "jane@shop.io"
        assert body["user"]["isAdmin"] is False
        assert "password" not in str(body).lower()

    def test_duplicate_email_any_case(self, api_client, register_user):
        register_user(email="jane@shop.io")

        response = api_client.post(
            "/api/users/register", json={"name": "Jane Again", "email": "JANE@SHOP.IO", "password": "secret1"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "DUPLICATE_ENTITY"

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "Jo", "email": "jo@shop.io", "password": "secret1"},
            {"name": "Jane Buyer", "email": "not-an-email", "password": "secret1"},
            {"name": "Jane Buyer", "email": "jane@shop.io", "password": "12345"},
            {"name": "Jane Buyer", "email": "jane@shop.io"},
        ],
    )
    def test_register_validation(self, api_client, payload):
        response = api_client.post("/api/users/register", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_registration_never_creates_admins(self, api_client):
        response = api_client.post(
            "/api/users/register",
            json={"name": "Mallory", "email": "mallory@shop.io", "password": "secret1", "isAdmin": True},
        )

        assert response.status_code == 201
        assert response.json()["user"]["isAdmin"] is False


class TestLogin:
    def test_login(self, api_client, register_user):
        user_id, _ = register_user()

        response = api_client.post("/api/users/login", json={"email": "JANE@shop.io", "password": "secret1"})

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["tokenType"] == "bearer"
        assert body["accessToken"]
        assert body["user"]["id"] == user_id
        assert "passwordHash" not in body["user"]

    def test_wrong_password_and_unknown_email_look_alike(self, api_client, register_user):
        register_user()

        wrong_password = api_client.post("/api/users/login", json={"email": "jane@shop.io", "password": "nope123"})
        unknown_email = api_client.post("/api/users/login", json={"email": "ghost@shop.io", "password": "nope123"})

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()

    def test_seeded_admin_can_log_in(self, api_client, settings):
        response = api_client.post(
            "/api/users/login", json={"email": settings.ADMIN_EMAIL, "password": settings.ADMIN_PASSWORD}
        )

        assert response.status_code == 200
        assert response.json()["user"]["isAdmin"] is True
