"""Django ORM implementations of the store interfaces.

Each method queries the ORM and converts rows to domain models; ORM
instances never leave this module.
"""

import logging
from collections.abc import Mapping
from typing import Any

from django.db import IntegrityError, transaction
from django.utils import timezone

from ticketing import models as orm
from ticketing.auth.passwords import BcryptPasswordHasher
from ticketing.domain import (
    Booking,
    BookingId,
    Capacity,
    Category,
    CategoryId,
    Event,
    EventId,
    Money,
    NewEvent,
    NewUser,
    User,
    UserId,
)
from ticketing.domain.errors import DuplicateBookingError, DuplicateEmailError
from ticketing.domain.models import EVENT_MUTABLE_FIELDS
from ticketing.stores.interfaces import BookingStore, CatalogStore, UserStore
from ticketing.stores.references import (
    MAX_REFERENCE_ATTEMPTS,
    ReferenceExhaustedError,
    generate_reference,
)

logger = logging.getLogger(__name__)


def _to_user(row: orm.Account) -> User:
    return User(
        id=UserId(row.id),
        username=row.username,
        password_hash=row.password_hash,
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
        is_admin=row.is_admin,
        created_at=row.created_at,
    )


def _to_category(row: orm.Category) -> Category:
    return Category(id=CategoryId(row.id), name=row.name, icon=row.icon)


def _to_event(row: orm.Event) -> Event:
    return Event(
        id=EventId(row.id),
        name=row.name,
        description=row.description,
        category_id=CategoryId(row.category_id),
        date=row.date,
        venue=row.venue,
        address=row.address,
        price=Money(row.price),
        capacity=Capacity(row.capacity),
        image=row.image,
        created_at=row.created_at,
    )


def _to_booking(row: orm.Booking) -> Booking:
    return Booking(
        id=BookingId(row.id),
        user_id=UserId(row.user_id),
        event_id=EventId(row.event_id),
        reference_number=row.reference_number,
        created_at=row.created_at,
    )


def _event_columns(values: Mapping[str, Any]) -> dict[str, Any]:
    """Unwrap domain value objects into ORM column values."""
    columns = dict(values)
    if "category_id" in columns:
        columns["category_id"] = columns["category_id"].value
    if "price" in columns:
        columns["price"] = columns["price"].amount
    if "capacity" in columns:
        columns["capacity"] = columns["capacity"].value
    return columns


class DjangoUserStore(UserStore):
    """Database-backed user store using Django ORM."""

    def __init__(self, hasher: BcryptPasswordHasher) -> None:
        self._hasher = hasher

    def find_by_id(self, user_id: UserId) -> User | None:
        row = orm.Account.objects.filter(pk=user_id.value).first()
        return _to_user(row) if row else None

    def find_by_email(self, email: str) -> User | None:
        row = orm.Account.objects.filter(email__iexact=email).first()
        return _to_user(row) if row else None

    def create(self, registration: NewUser) -> User:
        password_hash = self._hasher.hash_password(registration.password)
        try:
            with transaction.atomic():
                row = orm.Account.objects.create(
                    username=registration.username,
                    password_hash=password_hash,
                    first_name=registration.first_name,
                    last_name=registration.last_name,
                    email=registration.email,
                    is_admin=registration.is_admin,
                )
        except IntegrityError as exc:
            raise DuplicateEmailError() from exc
        return _to_user(row)


class DjangoCatalogStore(CatalogStore):
    """Database-backed catalog store using Django ORM."""

    def list_categories(self) -> list[Category]:
        return [_to_category(row) for row in orm.Category.objects.order_by("id")]

    def get_category(self, category_id: CategoryId) -> Category | None:
        row = orm.Category.objects.filter(pk=category_id.value).first()
        return _to_category(row) if row else None

    def create_category(self, name: str, icon: str) -> Category:
        return _to_category(orm.Category.objects.create(name=name, icon=icon))

    def list_events(self) -> list[Event]:
        return [_to_event(row) for row in orm.Event.objects.order_by("id")]

    def list_events_by_category(self, category_id: CategoryId) -> list[Event]:
        rows = orm.Event.objects.filter(category_id=category_id.value).order_by("id")
        return [_to_event(row) for row in rows]

    def get_event(self, event_id: EventId) -> Event | None:
        row = orm.Event.objects.filter(pk=event_id.value).first()
        return _to_event(row) if row else None

    def create_event(self, data: NewEvent) -> Event:
        row = orm.Event.objects.create(
            **_event_columns(
                {
                    "name": data.name,
                    "description": data.description,
                    "category_id": data.category_id,
                    "date": data.date,
                    "venue": data.venue,
                    "address": data.address,
                    "price": data.price,
                    "capacity": data.capacity,
                    "image": data.image,
                }
            )
        )
        return _to_event(row)

    def update_event(self, event_id: EventId, changes: Mapping[str, Any]) -> Event | None:
        unknown = set(changes) - EVENT_MUTABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update event fields: {sorted(unknown)}")
        with transaction.atomic():
            row = orm.Event.objects.select_for_update().filter(pk=event_id.value).first()
            if row is None:
                return None
            for field, value in _event_columns(changes).items():
                setattr(row, field, value)
            row.save()
        row.refresh_from_db()
        return _to_event(row)

    def delete_event(self, event_id: EventId) -> bool:
        deleted, _ = orm.Event.objects.filter(pk=event_id.value).delete()
        return deleted > 0


class DjangoBookingStore(BookingStore):
    """Database-backed booking store using Django ORM.

    Unique constraints on (user_id, event_id) and reference_number close the
    check-then-create window left open by callers.
    """

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def list_all(self) -> list[Booking]:
        return [_to_booking(row) for row in orm.Booking.objects.order_by("id")]

    def list_for_user(self, user_id: UserId) -> list[Booking]:
        rows = orm.Booking.objects.filter(user_id=user_id.value).order_by("id")
        return [_to_booking(row) for row in rows]

    def find_for_user_and_event(self, user_id: UserId, event_id: EventId) -> Booking | None:
        row = orm.Booking.objects.filter(
            user_id=user_id.value, event_id=event_id.value
        ).first()
        return _to_booking(row) if row else None

    def get_by_id(self, booking_id: BookingId) -> Booking | None:
        row = orm.Booking.objects.filter(pk=booking_id.value).first()
        return _to_booking(row) if row else None

    def create(
        self,
        user_id: UserId,
        event_id: EventId,
        reference_number: str | None = None,
    ) -> Booking:
        """Insert a booking, regenerating the reference if another insert claims it first.

        An explicit ``reference_number`` is used as given and never regenerated.
        """
        for attempt in range(1, MAX_REFERENCE_ATTEMPTS + 1):
            reference = reference_number or self._new_reference(event_id)
            try:
                with transaction.atomic():
                    row = orm.Booking.objects.create(
                        user_id=user_id.value,
                        event_id=event_id.value,
                        reference_number=reference,
                    )
            except IntegrityError as exc:
                if self.find_for_user_and_event(user_id, event_id) is not None:
                    raise DuplicateBookingError(event_id.value) from exc
                if reference_number:
                    raise
                logger.warning("Booking reference taken concurrently on attempt %d", attempt)
                continue
            return _to_booking(row)
        raise ReferenceExhaustedError("Could not generate a unique booking reference")

    def _new_reference(self, event_id: EventId) -> str:
        event = self._catalog.get_event(event_id)
        return generate_reference(
            event.name if event else None,
            timezone.localdate().year,
            lambda ref: orm.Booking.objects.filter(reference_number=ref).exists(),
        )

    def delete(self, booking_id: BookingId) -> bool:
        deleted, _ = orm.Booking.objects.filter(pk=booking_id.value).delete()
        return deleted > 0
