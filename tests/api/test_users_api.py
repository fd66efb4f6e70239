"""API tests for Admin user management."""

import pytest


async def _user_id(client, admin_headers, email: str) -> str:
    response = await client.get("/api/users", headers=admin_headers)
    assert response.status_code == 200
    (user,) = [u for u in response.json() if u["email"] == email]
    return user["id"]


@pytest.mark.api
class TestUsersApi:
    async def test_admin_lists_users_without_password_hashes(self, client, admin_headers):
        response = await client.get("/api/users", headers=admin_headers)

        assert response.status_code == 200
        users = response.json()
        assert {u["email"] for u in users} == {
            "admin@kennel.com",
            "staff@kennel.com",
            "customer@kennel.com",
        }
        assert all("password_hash" not in u for u in users)

    async def test_staff_cannot_manage_users(self, client, staff_headers):
        response = await client.get("/api/users", headers=staff_headers)

        assert response.status_code == 403
        assert response.json() == {"error": "You do not have permission to list users."}

    async def test_customer_reads_own_user_only(
        self, client, admin_headers, customer_headers
    ):
        own_id = await _user_id(client, admin_headers, "customer@kennel.com")
        staff_id = await _user_id(client, admin_headers, "staff@kennel.com")

        own = await client.get(f"/api/users/{own_id}", headers=customer_headers)
        other = await client.get(f"/api/users/{staff_id}", headers=customer_headers)

        assert own.status_code == 200
        assert own.json()["role"] == "Customer"
        assert other.status_code == 403

    async def test_create_customer_user_gets_profile(self, client, admin_headers):
        response = await client.post(
            "/api/users",
            json={
                "email": "owner2@kennel.com",
                "password": "Secret1",
                "first_name": "Olive",
                "last_name": "Owner",
                "role": "Customer",
            },
            headers=admin_headers,
        )
        customers = await client.get("/api/customers", headers=admin_headers)

        assert response.status_code == 201
        assert response.json()["role"] == "Customer"
        linked = [c for c in customers.json() if c["email"] == "owner2@kennel.com"]
        assert linked[0]["user_id"] == response.json()["id"]

    async def test_change_role(self, client, admin_headers, login):
        staff_id = await _user_id(client, admin_headers, "staff@kennel.com")

        response = await client.put(
            f"/api/users/{staff_id}/role", json={"role": "Admin"}, headers=admin_headers
        )
        promoted = await login(("staff@kennel.com", "Staff123!"))
        users = await client.get("/api/users", headers=promoted)

        assert response.status_code == 204
        assert users.status_code == 200

    async def test_change_role_invalid(self, client, admin_headers):
        staff_id = await _user_id(client, admin_headers, "staff@kennel.com")

        response = await client.put(
            f"/api/users/{staff_id}/role", json={"role": "Groomer"}, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "Role 'Groomer' does not exist. Valid roles are: Admin, Staff, Customer."
        }

    async def test_update_user(self, client, admin_headers):
        staff_id = await _user_id(client, admin_headers, "staff@kennel.com")

        response = await client.put(
            f"/api/users/{staff_id}",
            json={
                "id": staff_id,
                "first_name": "Sally",
                "last_name": "Staff",
                "email": "sally@kennel.com",
            },
            headers=admin_headers,
        )
        fetched = await client.get(f"/api/users/{staff_id}", headers=admin_headers)

        assert response.status_code == 204
        assert fetched.json()["email"] == "sally@kennel.com"
        assert fetched.json()["role"] == "Staff"

    async def test_admin_cannot_delete_self(self, client, admin_headers):
        admin_id = await _user_id(client, admin_headers, "admin@kennel.com")

        response = await client.delete(f"/api/users/{admin_id}", headers=admin_headers)

        assert response.status_code == 400
        assert response.json() == {
            "error": "You cannot delete your own account. Please ask another administrator."
        }

    async def test_delete_customer_user_with_dogs_is_blocked(
        self, client, admin_headers, customer_headers
    ):
        await client.post(
            "/api/dogs",
            json={"name": "Biscuit", "breed": "Beagle", "age": 2},
            headers=customer_headers,
        )
        customer_id = await _user_id(client, admin_headers, "customer@kennel.com")

        response = await client.delete(f"/api/users/{customer_id}", headers=admin_headers)

        assert response.status_code == 400
        assert "dog(s) registered" in response.json()["error"]

    async def test_delete_user(self, client, admin_headers):
        staff_id = await _user_id(client, admin_headers, "staff@kennel.com")

        response = await client.delete(f"/api/users/{staff_id}", headers=admin_headers)
        missing = await client.get(f"/api/users/{staff_id}", headers=admin_headers)

        assert response.status_code == 204
        assert missing.status_code == 404
        assert missing.json() == {"error": "User not found."}
