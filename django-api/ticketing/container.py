"""Explicit construction of stores and services.

No module-level store instances exist; the app config owns one Container and
views receive it through ``as_view(container=...)``.
"""

import logging
from collections.abc import Mapping
from datetime import timedelta
from typing import Any

from django.conf import settings

from ticketing.auth import BcryptPasswordHasher, TokenCodec
from ticketing.seed import seed
from ticketing.services import AuthService, BookingService, CatalogService
from ticketing.stores.interfaces import BookingStore, CatalogStore, UserStore

logger = logging.getLogger(__name__)

MEMORY_BACKEND = "memory"
DJANGO_BACKEND = "django"


class Container:
    """Stores and services for one application instance."""

    users: UserStore
    catalog: CatalogStore
    bookings: BookingStore
    auth_service: AuthService
    catalog_service: CatalogService
    booking_service: BookingService

    def __init__(self, config: Mapping[str, Any]) -> None:
        self.config = dict(config)
        self.hasher = BcryptPasswordHasher(rounds=int(self.config.get("BCRYPT_ROUNDS", 10)))
        self.tokens = TokenCodec(
            secret=self.config["JWT_SECRET"],
            lifetime=timedelta(hours=float(self.config.get("TOKEN_LIFETIME_HOURS", 24))),
            algorithm=self.config.get("JWT_ALGORITHM", "HS256"),
        )
        self.reset()

    @property
    def backend(self) -> str:
        return self.config.get("STORE_BACKEND", MEMORY_BACKEND)

    def reset(self) -> None:
        """Replace stores and services with fresh instances.

        Views hold the container, not the services, so they pick up the new
        instances immediately. With the Django backend the data itself lives
        in the database and is not cleared.
        """
        self.users, self.catalog, self.bookings = self._build_stores()
        self.auth_service = AuthService(self.users, self.hasher, self.tokens)
        self.catalog_service = CatalogService(self.catalog)
        self.booking_service = BookingService(self.bookings, self.catalog)

    def seed(self) -> None:
        seed(self.users, self.catalog, self.bookings)

    def _build_stores(self) -> tuple[UserStore, CatalogStore, BookingStore]:
        if self.backend == MEMORY_BACKEND:
            from ticketing.stores.memory_store import (
                InMemoryBookingStore,
                InMemoryCatalogStore,
                InMemoryUserStore,
            )

            catalog = InMemoryCatalogStore()
            return InMemoryUserStore(self.hasher), catalog, InMemoryBookingStore(catalog)

        if self.backend == DJANGO_BACKEND:
            from ticketing.stores.django_store import (
                DjangoBookingStore,
                DjangoCatalogStore,
                DjangoUserStore,
            )

            catalog = DjangoCatalogStore()
            return DjangoUserStore(self.hasher), catalog, DjangoBookingStore(catalog)

        raise ValueError(f"Unknown store backend: {self.backend!r}")


def build_container(config: Mapping[str, Any] | None = None) -> Container:
    """Build a container from ``config``, defaulting to ``settings.TICKETING``.

    ``SEED_ON_STARTUP`` only seeds the memory backend. This runs during app
    loading, where the database must not be queried; ORM-backed deployments
    use the ``seed_catalog`` management command instead.
    """
    if config is None:
        config = settings.TICKETING
    container = Container(config)
    logger.info("Built ticketing container with %s store backend", container.backend)
    if config.get("SEED_ON_STARTUP", False):
        if container.backend == MEMORY_BACKEND:
            container.seed()
        else:
            logger.warning(
                "SEED_ON_STARTUP ignored for the %s backend; run manage.py seed_catalog",
                container.backend,
            )
    return container
