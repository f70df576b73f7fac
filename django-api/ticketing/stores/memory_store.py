"""In-process, volatile implementations of the store interfaces.

Records live in dicts keyed by integer ID, with per-store counters. Every
public operation holds the store's lock, so each one is atomic with respect
to concurrent requests served by the same process.
"""

import dataclasses
import threading
from collections.abc import Mapping
from typing import Any

from django.utils import timezone

from ticketing.auth.passwords import BcryptPasswordHasher
from ticketing.domain import (
    Booking,
    BookingId,
    Category,
    CategoryId,
    Event,
    EventId,
    NewEvent,
    NewUser,
    User,
    UserId,
)
from ticketing.domain.errors import DuplicateBookingError, DuplicateEmailError
from ticketing.domain.models import EVENT_MUTABLE_FIELDS
from ticketing.stores.interfaces import BookingStore, CatalogStore, UserStore
from ticketing.stores.references import generate_reference


class _Sequence:
    """Monotonic ID counter starting at 1. Deleted IDs are never reused."""

    def __init__(self) -> None:
        self._next = 1

    def take(self) -> int:
        value = self._next
        self._next += 1
        return value


class InMemoryUserStore(UserStore):
    def __init__(self, hasher: BcryptPasswordHasher) -> None:
        self._hasher = hasher
        self._users: dict[int, User] = {}
        self._ids = _Sequence()
        self._lock = threading.RLock()

    def find_by_id(self, user_id: UserId) -> User | None:
        with self._lock:
            return self._users.get(user_id.value)

    def find_by_email(self, email: str) -> User | None:
        wanted = email.lower()
        with self._lock:
            for user in self._users.values():
                if user.email.lower() == wanted:
                    return user
        return None

    def create(self, registration: NewUser) -> User:
        # Hash outside the lock; bcrypt is deliberately slow.
        password_hash = self._hasher.hash_password(registration.password)
        with self._lock:
            if self.find_by_email(registration.email) is not None:
                raise DuplicateEmailError()
            user = User(
                id=UserId(self._ids.take()),
                username=registration.username,
                password_hash=password_hash,
                first_name=registration.first_name,
                last_name=registration.last_name,
                email=registration.email,
                is_admin=registration.is_admin,
                created_at=timezone.now(),
            )
            self._users[user.id.value] = user
            return user


class InMemoryCatalogStore(CatalogStore):
    def __init__(self) -> None:
        self._categories: dict[int, Category] = {}
        self._events: dict[int, Event] = {}
        self._category_ids = _Sequence()
        self._event_ids = _Sequence()
        self._lock = threading.RLock()

    def list_categories(self) -> list[Category]:
        with self._lock:
            return list(self._categories.values())

    def get_category(self, category_id: CategoryId) -> Category | None:
        with self._lock:
            return self._categories.get(category_id.value)

    def create_category(self, name: str, icon: str) -> Category:
        with self._lock:
            category = Category(id=CategoryId(self._category_ids.take()), name=name, icon=icon)
            self._categories[category.id.value] = category
            return category

    def list_events(self) -> list[Event]:
        with self._lock:
            return list(self._events.values())

    def list_events_by_category(self, category_id: CategoryId) -> list[Event]:
        with self._lock:
            return [e for e in self._events.values() if e.category_id == category_id]

    def get_event(self, event_id: EventId) -> Event | None:
        with self._lock:
            return self._events.get(event_id.value)

    def create_event(self, data: NewEvent) -> Event:
        with self._lock:
            event = Event(
                id=EventId(self._event_ids.take()),
                created_at=timezone.now(),
                **{f.name: getattr(data, f.name) for f in dataclasses.fields(data)},
            )
            self._events[event.id.value] = event
            return event

    def update_event(self, event_id: EventId, changes: Mapping[str, Any]) -> Event | None:
        unknown = set(changes) - EVENT_MUTABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update event fields: {sorted(unknown)}")
        with self._lock:
            event = self._events.get(event_id.value)
            if event is None:
                return None
            updated = dataclasses.replace(event, **changes)
            self._events[event_id.value] = updated
            return updated

    def delete_event(self, event_id: EventId) -> bool:
        with self._lock:
            return self._events.pop(event_id.value, None) is not None


class InMemoryBookingStore(BookingStore):
    """Booking store that reads event names from the catalog for references."""

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog
        self._bookings: dict[int, Booking] = {}
        self._ids = _Sequence()
        self._lock = threading.RLock()

    def list_all(self) -> list[Booking]:
        with self._lock:
            return list(self._bookings.values())

    def list_for_user(self, user_id: UserId) -> list[Booking]:
        with self._lock:
            return [b for b in self._bookings.values() if b.user_id == user_id]

    def find_for_user_and_event(self, user_id: UserId, event_id: EventId) -> Booking | None:
        with self._lock:
            for booking in self._bookings.values():
                if booking.user_id == user_id and booking.event_id == event_id:
                    return booking
        return None

    def get_by_id(self, booking_id: BookingId) -> Booking | None:
        with self._lock:
            return self._bookings.get(booking_id.value)

    def create(
        self,
        user_id: UserId,
        event_id: EventId,
        reference_number: str | None = None,
    ) -> Booking:
        now = timezone.now()
        with self._lock:
            if self.find_for_user_and_event(user_id, event_id) is not None:
                raise DuplicateBookingError(event_id.value)
            if not reference_number:
                event = self._catalog.get_event(event_id)
                reference_number = generate_reference(
                    event.name if event else None,
                    timezone.localtime(now).year,
                    self._reference_taken,
                )
            booking = Booking(
                id=BookingId(self._ids.take()),
                user_id=user_id,
                event_id=event_id,
                reference_number=reference_number,
                created_at=now,
            )
            self._bookings[booking.id.value] = booking
            return booking

    def delete(self, booking_id: BookingId) -> bool:
        with self._lock:
            return self._bookings.pop(booking_id.value, None) is not None

    def _reference_taken(self, reference: str) -> bool:
        return any(b.reference_number == reference for b in self._bookings.values())
