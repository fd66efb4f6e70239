"""API tests for registration, login and bearer authentication."""

import pytest

from tests.api.conftest import CUSTOMER


@pytest.mark.api
class TestRegister:
    async def test_register_then_login(self, client):
        # Register
        response = await client.post(
            "/api/auth/register",
            json={
                "email": "new.owner@kennel.com",
                "password": "Secret1",
                "first_name": "New",
                "last_name": "Owner",
            },
        )

        assert response.status_code == 200
        assert response.json() == {
            "message": "Account created successfully! You can now login with new.owner@kennel.com."
        }

        # Login
        response = await client.post(
            "/api/auth/login",
            json={"email": "new.owner@kennel.com", "password": "Secret1"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["email"] == "new.owner@kennel.com"
        assert body["role"] == "Customer"
        assert body["token"]

    async def test_register_creates_one_linked_profile(self, client, admin_headers):
        await client.post(
            "/api/auth/register",
            json={
                "email": "new.owner@kennel.com",
                "password": "Secret1",
                "first_name": "New",
                "last_name": "Owner",
            },
        )

        response = await client.get("/api/customers", headers=admin_headers)

        assert response.status_code == 200
        profiles = [c for c in response.json() if c["email"] == "new.owner@kennel.com"]
        assert len(profiles) == 1
        assert profiles[0]["name"] == "New Owner"
        assert profiles[0]["phone"] == ""
        assert profiles[0]["user_id"] is not None

    async def test_duplicate_email(self, client):
        response = await client.post(
            "/api/auth/register",
            json={
                "email": "staff@kennel.com",
                "password": "Secret1",
                "first_name": "Sam",
                "last_name": "Again",
            },
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "An account with email 'staff@kennel.com' already exists. Please login instead."
        }

    async def test_weak_password(self, client):
        response = await client.post(
            "/api/auth/register",
            json={
                "email": "weak@kennel.com",
                "password": "secret",
                "first_name": "Weak",
                "last_name": "Password",
            },
        )

        assert response.status_code == 400
        assert response.json()["error"] == (
            "Password must contain an uppercase letter, a digit."
        )

    async def test_unknown_role(self, client):
        response = await client.post(
            "/api/auth/register",
            json={
                "email": "groomer@kennel.com",
                "password": "Secret1",
                "first_name": "Gus",
                "last_name": "Groomer",
                "role": "Groomer",
            },
        )

        assert response.status_code == 400
        assert "Role 'Groomer' does not exist" in response.json()["error"]

    async def test_malformed_body_is_400_with_error_key(self, client):
        response = await client.post(
            "/api/auth/register",
            json={"email": "not-an-email", "password": "Secret1"},
        )

        assert response.status_code == 400
        assert set(response.json()) == {"error"}
        assert "email" in response.json()["error"]


@pytest.mark.api
class TestLogin:
    async def test_wrong_password(self, client):
        response = await client.post(
            "/api/auth/login",
            json={"email": CUSTOMER[0], "password": "Wrong123"},
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Incorrect password. Please try again."}

    async def test_unknown_email(self, client):
        response = await client.post(
            "/api/auth/login",
            json={"email": "ghost@kennel.com", "password": "Secret1"},
        )

        assert response.status_code == 401
        assert "No account found" in response.json()["error"]


@pytest.mark.api
class TestBearerAuthentication:
    async def test_missing_token(self, client):
        response = await client.get("/api/dogs")

        assert response.status_code == 401
        assert response.json() == {"error": "Authentication required."}

    async def test_invalid_token(self, client):
        response = await client.get(
            "/api/dogs", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid authentication token."}

    async def test_trace_id_is_echoed(self, client):
        response = await client.get(
            "/api/dogs", headers={"X-Trace-Id": "trace-abc"}
        )

        assert response.headers["X-Trace-Id"] == "trace-abc"
