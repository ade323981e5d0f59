"""
Order Domain Models

Represents order-related entities in the storefront.
These are the single source of truth for the orders.json record shape.

Author: Fish Parque
Date: 2026-10-19
"""
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field, ConfigDict

Number = Union[int, float]


class OrderStatus(str, Enum):
    """Order lifecycle states. New orders are always PENDING."""
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class CartItem(BaseModel):
    """
    Cart line item as submitted by the client

    Price and subtotal are taken verbatim; nothing recomputes them against
    the catalog. Keys the client sends beyond these are kept as-is.

    Fields:
        id: Catalog product key
        name: Product name at the time it was added
        price: Unit price at the time it was added
        quantity: Ordered quantity (fractional allowed)
        subtotal: quantity x price, as computed by the client
    """

    id: Optional[str] = Field(None, description="Catalog product key")
    name: Optional[str] = Field(None, description="Product name")
    price: Optional[Number] = Field(None, description="Unit price at add time")
    quantity: Optional[Number] = Field(None, description="Quantity ordered")
    subtotal: Optional[Number] = Field(None, description="Line subtotal")

    model_config = ConfigDict(extra="allow")


class Customer(BaseModel):
    """Customer snapshot copied into the order (not a reference to the user)"""

    name: Optional[str] = Field(None, description="Customer name")
    email: str = Field(..., description="Customer email")
    phone: Optional[str] = Field(None, description="Customer phone")
    address: Optional[str] = Field(None, description="Delivery address")


class Order(BaseModel):
    """
    Order domain model - represents a placed order

    Fields:
        order_number: Unique order number ("FP..."), stored as orderNumber
        date: Acceptance time, "YYYY-MM-DD HH:MM:SS" UTC
        customer: Customer snapshot
        items: Cart items, copied from the submission
        total: Order total as submitted
        status: Order status (pending on creation)
    """

    order_number: str = Field(..., alias="orderNumber", description="Order number")
    date: str = Field(..., description="Order timestamp")
    customer: Customer
    items: List[CartItem] = Field(default_factory=list, description="Order items")
    total: Optional[Number] = Field(None, description="Order total")
    status: OrderStatus = Field(OrderStatus.PENDING, description="Order status")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_dict(self) -> dict:
        """Convert to the orders.json / API record shape"""
        return self.model_dump(by_alias=True, mode="json")
