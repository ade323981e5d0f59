"""
API tests for the admin listings (/api/admin/orders, /api/admin/users)
"""
import pytest
from fastapi.testclient import TestClient

from storefront.core.config import Settings
from storefront.main import create_app

ADMIN_PATHS = ["/api/admin/orders", "/api/admin/users"]


class TestAdminAuthorization:

    @pytest.mark.parametrize("path", ADMIN_PATHS)
    @pytest.mark.parametrize("headers", [
        {},
        {"x-admin-key": ""},
        {"x-admin-key": "wrong-key"},
    ])
    def test_rejected_without_matching_key(self, client, path, headers):
        response = client.get(path, headers=headers)

        assert response.status_code == 403
        assert response.json() == {"success": False, "message": "Unauthorized"}

    @pytest.mark.parametrize("path", ADMIN_PATHS)
    def test_unset_admin_key_denies_everyone(self, tmp_path, path):
        settings = Settings(DATA_DIR=str(tmp_path), ADMIN_KEY="", _env_file=None)
        with TestClient(create_app(settings)) as unconfigured:
            assert unconfigured.get(path).status_code == 403
            assert unconfigured.get(path, headers={"x-admin-key": ""}).status_code == 403


class TestAdminOrders:

    def test_lists_every_order_in_storage_order(self, client, admin_headers, sample_order_payload):
        first = client.post("/api/order", json=sample_order_payload).json()["orderNumber"]
        second = client.post(
            "/api/order", json=dict(sample_order_payload, userEmail="bola@example.com")
        ).json()["orderNumber"]

        response = client.get("/api/admin/orders", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert [order["orderNumber"] for order in data["orders"]] == [first, second]


class TestAdminUsers:

    def test_lists_users_without_password(self, client, admin_headers, sample_registration):
        client.post("/api/register", json=sample_registration)
        client.post("/api/register", json=dict(sample_registration, email="bola@example.com"))

        response = client.get("/api/admin/users", headers=admin_headers)

        data = response.json()
        assert data["success"] is True
        assert [user["email"] for user in data["users"]] == ["ada@example.com", "bola@example.com"]
        for user in data["users"]:
            assert set(user) == {"name", "email", "phone", "address", "createdAt"}
