"""
Order Service
Accepts cart submissions and turns them into persisted orders

Handles:
- Order validation
- Order number generation
- Persistence to orders.json and the orders.txt backup
- Best-effort notification

Author: Fish Parque
Date: 2026-10-19
"""
import logging
import secrets
import threading
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence, Union

from pydantic import ValidationError as PydanticValidationError

from storefront.connectors.formspree_connector import FormspreeConnector
from storefront.core.exceptions import InvalidOrderError, NotificationError, StorageError
from storefront.domain.catalog import format_amount
from storefront.domain.order import CartItem, Customer, Order, OrderStatus
from storefront.repositories.order_repository import (
    CURRENCY_SYMBOL,
    OrderBackupLog,
    OrderRepository,
)

logger = logging.getLogger(__name__)

ORDER_NUMBER_PREFIX = "FP"
ORDER_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class OrderNumberGenerator:
    """
    Generates order numbers: prefix + microsecond timestamp + 3 random digits.

    The timestamp part never repeats within a process (it is bumped when the
    clock has not advanced), and the random part keeps separate processes
    apart. Collisions across processes are possible and not checked.
    """

    def __init__(
        self,
        prefix: str = ORDER_NUMBER_PREFIX,
        clock_us: Optional[Callable[[], int]] = None,
    ):
        self.prefix = prefix
        self.clock_us = clock_us or (lambda: time.time_ns() // 1000)
        self._last_us = 0
        self._lock = threading.Lock()

    def next(self) -> str:
        with self._lock:
            now_us = self.clock_us()
            if now_us <= self._last_us:
                now_us = self._last_us + 1
            self._last_us = now_us

        return f"{self.prefix}{now_us}{secrets.randbelow(1000):03d}"


@dataclass
class PlacedOrder:
    """Result of a successful order placement"""
    order: Order
    message: str

    @property
    def order_number(self) -> str:
        return self.order.order_number


class OrderService:
    """
    Service for placing and listing orders

    The submitted total, prices and subtotals are stored as sent; they are
    not recomputed against the catalog, and per-item minimum quantities are
    not re-checked here.
    """

    def __init__(
        self,
        orders: OrderRepository,
        backup_log: OrderBackupLog,
        notifier: FormspreeConnector,
        order_numbers: Optional[OrderNumberGenerator] = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.orders = orders
        self.backup_log = backup_log
        self.notifier = notifier
        self.order_numbers = order_numbers or OrderNumberGenerator()
        self.clock = clock

    def place_order(
        self,
        customer_email: Optional[str],
        customer_name: Optional[str],
        customer_phone: Optional[str],
        customer_address: Optional[str],
        line_items: Optional[Sequence[Union[CartItem, dict]]],
        total: Optional[Union[int, float]],
    ) -> PlacedOrder:
        """
        Validate, persist, back up and announce a new order

        Returns:
            PlacedOrder with the stored order and a confirmation message

        Raises:
            InvalidOrderError: missing customer email or empty cart
            StorageError: orders.json could not be written (nothing placed)
        """
        if not customer_email or not str(customer_email).strip():
            raise InvalidOrderError("Invalid order data")
        if not line_items or not isinstance(line_items, (list, tuple)):
            raise InvalidOrderError("Invalid order data")

        try:
            items = [
                item if isinstance(item, CartItem) else CartItem.model_validate(item)
                for item in line_items
            ]
            customer = Customer(
                name=customer_name,
                email=customer_email,
                phone=customer_phone,
                address=customer_address,
            )
            order = Order(
                order_number=self.order_numbers.next(),
                date=self.clock().strftime(ORDER_DATE_FORMAT),
                customer=customer,
                items=items,
                total=total,
                status=OrderStatus.PENDING,
            )
        except PydanticValidationError as e:
            raise InvalidOrderError("Invalid order data") from e

        # Only an order that made it into orders.json counts as placed
        self.orders.append(order)

        try:
            self.backup_log.append(order)
        except StorageError:
            logger.exception(f"Order {order.order_number} saved but backup line failed")

        logger.info(f"✅ Order {order.order_number} saved")

        self._notify(order)

        message = (
            f"Thank you! Your order #{order.order_number} has been placed successfully. "
            f"Total: {CURRENCY_SYMBOL}{format_amount(order.total)}"
        )
        return PlacedOrder(order=order, message=message)

    def _notify(self, order: Order) -> None:
        try:
            self.notifier.notify(order)
        except NotificationError as e:
            logger.error(f"Email error for order {order.order_number}: {e.message}")

    def list_orders_for_customer(self, email: str) -> List[Order]:
        """Orders for one customer email (exact match), oldest first"""
        return self.orders.find_by_customer_email(email)

    def list_all_orders(self) -> List[Order]:
        """Every order, oldest first (admin)"""
        return self.orders.find_all()
