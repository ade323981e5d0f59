"""
Admin API - order and user listings

Every route here requires the x-admin-key header to match ADMIN_KEY;
otherwise the request gets a 403.
"""
import logging

from fastapi import APIRouter, Depends

from storefront.core.auth import require_admin_key
from storefront.core.context import AppContext, get_context

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin_key)])


@router.get("/orders")
def list_all_orders(context: AppContext = Depends(get_context)):
    """All orders, unfiltered, in storage order"""
    try:
        orders = context.order_service.list_all_orders()
    except Exception:
        logger.exception("Admin orders error")
        return {"success": False, "orders": []}

    return {"success": True, "orders": [order.to_dict() for order in orders]}


@router.get("/users")
def list_all_users(context: AppContext = Depends(get_context)):
    """All registered users, without password hashes"""
    try:
        users = context.auth_service.list_users()
    except Exception:
        logger.exception("Admin users error")
        return {"success": False, "users": []}

    return {
        "success": True,
        "users": [user.model_dump(by_alias=True) for user in users],
    }
