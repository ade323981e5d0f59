"""
Application context

Everything a request needs (settings, catalog, stores, services) is built
once in build_context() and attached to app.state by create_app(). Routes
reach it through the get_context dependency.

Author: Fish Parque
Date: 2026-10-19
"""
from dataclasses import dataclass

from fastapi import Request

from storefront.connectors.formspree_connector import FormspreeConnector
from storefront.core.config import Settings
from storefront.domain.catalog import Catalog
from storefront.repositories.json_store import JsonDocumentStore
from storefront.repositories.order_repository import OrderBackupLog, OrderRepository
from storefront.repositories.user_repository import UserRepository
from storefront.services.auth_service import AuthService
from storefront.services.order_service import OrderService


@dataclass
class AppContext:
    settings: Settings
    catalog: Catalog
    users: UserRepository
    orders: OrderRepository
    backup_log: OrderBackupLog
    notifier: FormspreeConnector
    auth_service: AuthService
    order_service: OrderService


def build_context(settings: Settings, catalog: Catalog = None) -> AppContext:
    """Wire stores and services from settings"""
    catalog = catalog or Catalog()

    users = UserRepository(JsonDocumentStore(settings.users_path, dict))
    orders = OrderRepository(JsonDocumentStore(settings.orders_path, list))
    backup_log = OrderBackupLog(settings.orders_backup_path, catalog)
    notifier = FormspreeConnector(
        settings.FORMSPREE_ENDPOINT,
        catalog,
        timeout=settings.NOTIFICATION_TIMEOUT,
    )

    return AppContext(
        settings=settings,
        catalog=catalog,
        users=users,
        orders=orders,
        backup_log=backup_log,
        notifier=notifier,
        auth_service=AuthService(users),
        order_service=OrderService(orders, backup_log, notifier),
    )


def get_context(request: Request) -> AppContext:
    """FastAPI dependency returning the context of the running app"""
    return request.app.state.context
