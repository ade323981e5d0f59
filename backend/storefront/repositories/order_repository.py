"""
Order Repository - Data Access Layer for Orders

orders.json holds a JSON array of order records in insertion order.
orders.txt is a human-readable backup with one line per order.

Author: Fish Parque
Date: 2026-10-19
"""
import logging
import threading
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError as PydanticValidationError

from storefront.core.exceptions import StorageError
from storefront.domain.catalog import Catalog, format_amount
from storefront.domain.order import Order
from storefront.repositories.json_store import JsonDocumentStore

logger = logging.getLogger(__name__)

CURRENCY_SYMBOL = "₦"


class OrderRepository:
    """
    Repository for Order data access

    Append-only: orders are never updated or removed. Listings come back in
    storage order; newest-first is a presentation concern.
    """

    def __init__(self, store: JsonDocumentStore):
        self.store = store

    def _load(self) -> List[Order]:
        orders = []
        for index, record in enumerate(self.store.snapshot()):
            try:
                orders.append(Order.model_validate(record))
            except PydanticValidationError as e:
                logger.warning(f"Skipping malformed order record #{index}: {e.error_count()} errors")
        return orders

    def append(self, order: Order) -> None:
        """
        Append an order to orders.json

        Raises:
            StorageError: if the document could not be written
        """
        record = order.to_dict()
        self.store.update(lambda orders: orders.append(record))

    def find_by_customer_email(self, email: str) -> List[Order]:
        """Orders whose customer email matches exactly, oldest first"""
        return [order for order in self._load() if order.customer.email == email]

    def find_all(self) -> List[Order]:
        """Every order, oldest first"""
        return self._load()

    def count(self) -> int:
        return len(self.store.snapshot())


class OrderBackupLog:
    """
    Plain-text, append-only order backup (orders.txt)

    Not transactional with orders.json: a line is only written after the
    JSON append succeeded, and a failed line write does not undo it.
    """

    def __init__(self, path: Union[str, Path], catalog: Catalog):
        self.path = Path(path)
        self.catalog = catalog
        self._lock = threading.Lock()

    def format_line(self, order: Order) -> str:
        customer = order.customer
        items = ", ".join(
            f"{item.name} ({format_amount(item.quantity)}{self.catalog.unit_for(item.id)})"
            for item in order.items
        )
        return (
            f"Order #{order.order_number} | Date: {order.date} | Name: {customer.name} | "
            f"Phone: {customer.phone} | Email: {customer.email} | Address: {customer.address} | "
            f"Total: {CURRENCY_SYMBOL}{format_amount(order.total)} | Items: {items}\n"
        )

    def append(self, order: Order) -> None:
        """
        Append one line for the order

        Raises:
            StorageError: if the line could not be written
        """
        line = self.format_line(order)
        try:
            with self._lock:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with open(self.path, "a", encoding="utf-8") as f:
                    f.write(line)
        except OSError as e:
            logger.error(f"Failed to append to {self.path}: {e}")
            raise StorageError() from e

    def read_lines(self) -> List[str]:
        if not self.path.exists():
            return []
        return self.path.read_text(encoding="utf-8").splitlines()
