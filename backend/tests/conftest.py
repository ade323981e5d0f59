"""
Pytest fixtures and configuration for Fish Parque Backend tests

This file provides shared fixtures that can be used across all test modules.
Every test gets its own data directory, so the JSON documents and the
backup log never leak between tests.
"""
import pytest
from fastapi.testclient import TestClient

from storefront.core.config import Settings
from storefront.core.context import build_context
from storefront.domain.catalog import Catalog
from storefront.main import create_app


ADMIN_KEY = "test-admin-key"


@pytest.fixture
def settings(tmp_path):
    """
    Settings pointing at a temporary data directory

    Scope: function (fresh files per test)
    Notifications are disabled unless a test sets FORMSPREE_ENDPOINT.
    """
    return Settings(
        DATA_DIR=str(tmp_path),
        ADMIN_KEY=ADMIN_KEY,
        FORMSPREE_ENDPOINT="",
        _env_file=None,
    )


@pytest.fixture
def catalog():
    """The default product catalog"""
    return Catalog()


@pytest.fixture
def context(settings, catalog):
    """Fully wired application context (stores + services)"""
    return build_context(settings, catalog)


@pytest.fixture
def client(settings, catalog):
    """TestClient bound to an app using the temporary data directory"""
    app = create_app(settings, catalog)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers():
    return {"x-admin-key": ADMIN_KEY}


@pytest.fixture
def sample_registration():
    """
    Provides sample registration data for tests
    """
    return {
        "name": "Ada Obi",
        "email": "ada@example.com",
        "password": "s3cret-pass",
        "phone": "+2348012345678",
        "address": "12 Marina Road, Lagos"
    }


@pytest.fixture
def sample_cart():
    """
    Provides a sample cart (12kg fish feed + 2.5kg catfish)
    """
    return [
        {"id": "fish_feed", "name": "Fish Feed", "price": 500, "quantity": 12, "subtotal": 6000},
        {"id": "catfish", "name": "Catfish", "price": 1500, "quantity": 2.5, "subtotal": 3750},
    ]


@pytest.fixture
def sample_order_payload(sample_registration, sample_cart):
    """
    Provides a checkout payload as the browser client sends it
    """
    return {
        "userEmail": sample_registration["email"],
        "userName": sample_registration["name"],
        "userPhone": sample_registration["phone"],
        "userAddress": sample_registration["address"],
        "cart": sample_cart,
        "total": 9750
    }
