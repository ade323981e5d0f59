"""
Authentication middleware for the storefront API
Gates admin-only endpoints on the x-admin-key shared secret
"""
from typing import Optional

from fastapi import Depends, Header

from storefront.core.context import AppContext, get_context
from storefront.core.exceptions import UnauthorizedError
from storefront.core.security import is_admin_key_valid


ADMIN_KEY_HEADER = "x-admin-key"


async def require_admin_key(
    x_admin_key: Optional[str] = Header(None, alias=ADMIN_KEY_HEADER),
    context: AppContext = Depends(get_context),
) -> None:
    """
    Dependency that rejects requests without the admin shared secret.

    Usage:
        @router.get("/orders", dependencies=[Depends(require_admin_key)])
        def list_orders(): ...
    """
    if not is_admin_key_valid(context.settings.ADMIN_KEY, x_admin_key):
        raise UnauthorizedError()
