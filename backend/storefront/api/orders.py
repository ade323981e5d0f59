"""
Orders API Endpoints
Order placement (cart checkout) and a customer's order history
"""
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from storefront.core.context import AppContext, get_context
from storefront.core.exceptions import InvalidOrderError

logger = logging.getLogger(__name__)

router = APIRouter()


class PlaceOrderRequest(BaseModel):
    """
    Checkout payload sent by the browser client

    cart and total are passed through untyped; the order service validates
    them and reports "Invalid order data".
    """
    userEmail: Optional[str] = None
    userName: Optional[str] = None
    userPhone: Optional[str] = None
    userAddress: Optional[str] = None
    cart: Optional[Any] = Field(default=None)
    total: Optional[Any] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


@router.post("/order")
def place_order(payload: PlaceOrderRequest, context: AppContext = Depends(get_context)):
    """
    Place an order from the submitted cart

    The total and line subtotals are stored as submitted.
    """
    try:
        placed = context.order_service.place_order(
            customer_email=payload.userEmail,
            customer_name=payload.userName,
            customer_phone=payload.userPhone,
            customer_address=payload.userAddress,
            line_items=payload.cart,
            total=payload.total,
        )
    except InvalidOrderError:
        raise
    except Exception:
        logger.exception("Order error")
        return {"success": False, "message": "Order failed. Please try again."}

    return {
        "success": True,
        "message": placed.message,
        "orderNumber": placed.order_number,
    }


@router.get("/orders/{email}")
def get_customer_orders(email: str, context: AppContext = Depends(get_context)):
    """
    Get every order placed with this email, oldest first

    The client reverses the list to show newest first.
    """
    try:
        orders = context.order_service.list_orders_for_customer(email)
    except Exception:
        logger.exception("Get orders error")
        return {"success": False, "orders": []}

    return {"success": True, "orders": [order.to_dict() for order in orders]}
