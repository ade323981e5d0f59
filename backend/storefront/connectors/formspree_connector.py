"""
Formspree Connector
Sends a new-order summary to a Formspree form (relayed by email)

Delivery is best-effort: one POST, no retry, no queue.

Author: Fish Parque
Date: 2026-10-19
"""
import logging
from typing import Optional

import httpx

from storefront.core.exceptions import NotificationError
from storefront.domain.catalog import Catalog, format_amount
from storefront.domain.order import Order
from storefront.repositories.order_repository import CURRENCY_SYMBOL

logger = logging.getLogger(__name__)


class FormspreeConnector:
    """
    Connector for the Formspree order notification endpoint

    With no endpoint configured every call is a no-op.
    """

    def __init__(self, endpoint: Optional[str], catalog: Catalog, timeout: float = 10.0):
        """
        Initialize Formspree connector

        Args:
            endpoint: Formspree form URL (FORMSPREE_ENDPOINT); empty disables notifications
            catalog: Used to label item units
            timeout: Seconds before the outbound call is abandoned
        """
        self.endpoint = endpoint or None
        self.catalog = catalog
        self.timeout = timeout
        self.headers = {'Content-Type': 'application/json'}

    @property
    def is_configured(self) -> bool:
        return self.endpoint is not None

    def build_payload(self, order: Order) -> dict:
        """Subject and plain-text body for an order"""
        customer = order.customer
        items_list = "\n".join(
            f"{item.name}: {format_amount(item.quantity)}{self.catalog.unit_for(item.id)} "
            f"@ {CURRENCY_SYMBOL}{format_amount(item.price)}/{self.catalog.unit_for(item.id)} "
            f"= {CURRENCY_SYMBOL}{format_amount(item.subtotal)}"
            for item in order.items
        )

        message = (
            f"Order Number: {order.order_number}\n"
            f"Date: {order.date}\n"
            f"\n"
            f"CUSTOMER INFORMATION:\n"
            f"Name: {customer.name}\n"
            f"Email: {customer.email}\n"
            f"Phone: {customer.phone}\n"
            f"Address: {customer.address}\n"
            f"\n"
            f"ORDER DETAILS:\n"
            f"{items_list}\n"
            f"\n"
            f"TOTAL: {CURRENCY_SYMBOL}{format_amount(order.total)}\n"
            f"\n"
            f"✅ Order saved to database.\n"
        )

        return {
            'subject': f"🐟 New Fish Parque Order - {order.order_number}",
            'message': message,
        }

    def notify(self, order: Order) -> bool:
        """
        POST the order summary

        Returns:
            True if sent, False if no endpoint is configured

        Raises:
            NotificationError: on transport failure or a non-2xx response
        """
        if not self.is_configured:
            logger.debug(f"No notification endpoint configured; skipping order {order.order_number}")
            return False

        try:
            response = httpx.post(
                self.endpoint,
                json=self.build_payload(order),
                headers=self.headers,
                timeout=self.timeout
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NotificationError(
                f"Notification endpoint returned {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise NotificationError(f"Notification request failed: {e}") from e

        logger.info(f"✅ Email sent for order {order.order_number}")
        return True
