"""
Unit tests for FormspreeConnector

No real HTTP: httpx.post is patched in every test that would send.
"""
import httpx
import pytest
from unittest.mock import MagicMock, patch

from storefront.connectors.formspree_connector import FormspreeConnector
from storefront.core.exceptions import NotificationError
from storefront.domain.catalog import Catalog
from storefront.domain.order import Order

ENDPOINT = "https://formspree.io/f/test-form"


@pytest.fixture
def order():
    return Order.model_validate({
        "orderNumber": "FP1760000000000000123",
        "date": "2026-10-19 10:00:00",
        "customer": {
            "name": "Ada Obi",
            "email": "ada@example.com",
            "phone": "+2348012345678",
            "address": "12 Marina Road, Lagos"
        },
        "items": [
            {"id": "fish_feed", "name": "Fish Feed", "price": 500, "quantity": 12, "subtotal": 6000}
        ],
        "total": 6000,
        "status": "pending"
    })


class TestFormspreeConnector:
    """Test FormspreeConnector.notify"""

    @patch("storefront.connectors.formspree_connector.httpx.post")
    def test_unconfigured_is_a_no_op(self, mock_post, order):
        connector = FormspreeConnector("", Catalog())

        assert connector.is_configured is False
        assert connector.notify(order) is False
        mock_post.assert_not_called()

    @patch("storefront.connectors.formspree_connector.httpx.post")
    def test_posts_order_summary(self, mock_post, order):
        mock_post.return_value = MagicMock()
        connector = FormspreeConnector(ENDPOINT, Catalog(), timeout=3.0)

        assert connector.notify(order) is True

        mock_post.assert_called_once()
        args, kwargs = mock_post.call_args
        assert args[0] == ENDPOINT
        assert kwargs["timeout"] == 3.0
        payload = kwargs["json"]
        assert payload["subject"] == "🐟 New Fish Parque Order - FP1760000000000000123"
        assert "Fish Feed: 12kg @ ₦500/kg = ₦6000" in payload["message"]
        assert "TOTAL: ₦6000" in payload["message"]
        assert "Email: ada@example.com" in payload["message"]

    @patch("storefront.connectors.formspree_connector.httpx.post")
    def test_transport_error_raises_notification_error(self, mock_post, order):
        mock_post.side_effect = httpx.ConnectError("connection refused")
        connector = FormspreeConnector(ENDPOINT, Catalog())

        with pytest.raises(NotificationError):
            connector.notify(order)

    @patch("storefront.connectors.formspree_connector.httpx.post")
    def test_error_status_raises_notification_error(self, mock_post, order):
        request = httpx.Request("POST", ENDPOINT)
        mock_post.return_value = httpx.Response(500, request=request)
        connector = FormspreeConnector(ENDPOINT, Catalog())

        with pytest.raises(NotificationError) as exc_info:
            connector.notify(order)

        assert "500" in exc_info.value.message
