"""
API tests for /api/register and /api/login
"""
from unittest.mock import patch

from storefront.core.exceptions import StorageError


class TestRegisterEndpoint:

    def test_register_success(self, client, sample_registration):
        response = client.post("/api/register", json=sample_registration)

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Registration successful! Please login."
        }

    def test_register_missing_field_is_a_result_not_a_422(self, client, sample_registration):
        del sample_registration["phone"]

        response = client.post("/api/register", json=sample_registration)

        assert response.status_code == 200
        assert response.json() == {"success": False, "message": "All fields are required"}

    def test_register_numeric_phone(self, client, sample_registration):
        sample_registration["phone"] = 8012345678

        response = client.post("/api/register", json=sample_registration)

        assert response.status_code == 200
        assert response.json()["success"] is True
        login = client.post("/api/login", json={
            "email": sample_registration["email"],
            "password": sample_registration["password"]
        }).json()
        assert login["user"]["phone"] == "8012345678"

    def test_register_unparseable_field_is_a_result_not_a_422(self, client, sample_registration):
        sample_registration["name"] = ["Ada", "Obi"]

        response = client.post("/api/register", json=sample_registration)

        assert response.status_code == 200
        assert response.json() == {"success": False, "message": "All fields are required"}
        assert client.app.state.context.users.count() == 0

    def test_register_over_undecodable_users_file(self, client, settings, sample_registration):
        """A users.json that is not UTF-8 reads as an empty store"""
        settings.users_path.write_bytes(b"\xff\xfe\x00garbage")

        response = client.post("/api/register", json=sample_registration)

        assert response.json() == {
            "success": True,
            "message": "Registration successful! Please login."
        }
        assert client.app.state.context.users.count() == 1

    def test_register_duplicate_email(self, client, sample_registration):
        client.post("/api/register", json=sample_registration)

        response = client.post("/api/register", json=dict(sample_registration, name="Other"))

        assert response.json() == {"success": False, "message": "Email already registered"}

    def test_register_storage_failure_is_generic(self, client, sample_registration):
        context = client.app.state.context
        with patch.object(context.users.store, "write", side_effect=StorageError()):
            response = client.post("/api/register", json=sample_registration)

        assert response.status_code == 200
        assert response.json() == {
            "success": False,
            "message": "Registration failed. Please try again."
        }


class TestLoginEndpoint:

    def test_login_success(self, client, sample_registration):
        client.post("/api/register", json=sample_registration)

        response = client.post("/api/login", json={
            "email": sample_registration["email"],
            "password": sample_registration["password"]
        })

        data = response.json()
        assert data["success"] is True
        assert data["message"] == "Login successful!"
        assert data["user"] == {
            "name": "Ada Obi",
            "email": "ada@example.com",
            "phone": "+2348012345678",
            "address": "12 Marina Road, Lagos"
        }
        assert len(data["token"]) == 64

    def test_login_failures_share_one_message(self, client, sample_registration):
        client.post("/api/register", json=sample_registration)

        wrong_password = client.post("/api/login", json={
            "email": sample_registration["email"], "password": "nope"
        }).json()
        unknown_email = client.post("/api/login", json={
            "email": "ghost@example.com", "password": sample_registration["password"]
        }).json()

        assert wrong_password == unknown_email == {
            "success": False,
            "message": "Invalid email or password"
        }

    def test_login_with_empty_body(self, client):
        response = client.post("/api/login", json={})

        assert response.json() == {"success": False, "message": "Invalid email or password"}
