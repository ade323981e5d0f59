"""
Products API Endpoints
Serves the static catalog
"""
from fastapi import APIRouter, Depends

from storefront.core.context import AppContext, get_context

router = APIRouter()


@router.get("/products")
async def get_products(context: AppContext = Depends(get_context)):
    """
    Get the product catalog

    Returns a map of product key -> {name, minQty, price, unit}
    """
    return {"success": True, "products": context.catalog.to_dict()}
