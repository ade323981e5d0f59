"""
Repository Layer - Data Access

Whole-file JSON documents for users and orders, plus the plain-text order
backup. Repositories return domain models.

Author: Fish Parque
Date: 2026-10-19
"""
from storefront.repositories.json_store import JsonDocumentStore
from storefront.repositories.user_repository import UserRepository
from storefront.repositories.order_repository import OrderRepository, OrderBackupLog

__all__ = [
    'JsonDocumentStore',
    'UserRepository',
    'OrderRepository',
    'OrderBackupLog',
]
