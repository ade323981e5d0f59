"""
Domain Layer - Business Entities

Pydantic models for users and orders, and the static product catalog.

Author: Fish Parque
Date: 2026-10-19
"""
from storefront.domain.catalog import Catalog, Product
from storefront.domain.order import Order, CartItem, Customer, OrderStatus
from storefront.domain.user import User, UserProfile, AdminUserView

__all__ = [
    'Catalog',
    'Product',
    'Order',
    'CartItem',
    'Customer',
    'OrderStatus',
    'User',
    'UserProfile',
    'AdminUserView',
]
