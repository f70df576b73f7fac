"""Pytest configuration and shared fixtures.

Seeded data: admin@eventhub.com is user 1 (admin), john@example.com is
user 2, "Summer Music Festival" is event 2 and John's booking on it is
booking 1.
"""

from collections.abc import Callable

import pytest
from django.apps import apps
from rest_framework.test import APIClient

from ticketing.container import Container

TEST_CONFIG = {
    "STORE_BACKEND": "memory",
    "JWT_SECRET": "test-secret-key-that-is-long-enough-for-hs256",
    "TOKEN_LIFETIME_HOURS": 24,
    "BCRYPT_ROUNDS": 10,
}


@pytest.fixture(autouse=True)
def app_container() -> Container:
    """The container serving HTTP requests, reset to freshly seeded stores."""
    container = apps.get_app_config("ticketing").container
    container.reset()
    container.seed()
    yield container
    container.reset()


@pytest.fixture
def container() -> Container:
    """An isolated, unseeded container for service-level tests."""
    return Container(TEST_CONFIG)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def client_for(app_container: Container) -> Callable[[str, str], APIClient]:
    """Build an APIClient carrying a bearer token for the given credentials."""

    def login(email: str, password: str) -> APIClient:
        _, token = app_container.auth_service.login(email, password)
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        return client

    return login


@pytest.fixture
def admin_client(client_for) -> APIClient:
    return client_for("admin@eventhub.com", "admin123")


@pytest.fixture
def john_client(client_for) -> APIClient:
    return client_for("john@example.com", "user123")
