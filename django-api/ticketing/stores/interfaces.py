"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Each store is the sole
mutator of its own records; relationships to other stores are by id only.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

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


class UserStore(ABC):
    """Interface for identity and credential persistence."""

    @abstractmethod
    def find_by_id(self, user_id: UserId) -> User | None:
        """Return a user by ID, or None if not found."""
        ...

    @abstractmethod
    def find_by_email(self, email: str) -> User | None:
        """Return the user whose email matches case-insensitively, or None."""
        ...

    @abstractmethod
    def create(self, registration: NewUser) -> User:
        """Hash the plaintext password, assign the next ID and persist.

        Returns the full record including the hash.

        Raises:
            DuplicateEmailError: If the email already belongs to a user.
        """
        ...


class CatalogStore(ABC):
    """Interface for category and event persistence."""

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """Return all categories in insertion order."""
        ...

    @abstractmethod
    def get_category(self, category_id: CategoryId) -> Category | None:
        ...

    @abstractmethod
    def create_category(self, name: str, icon: str) -> Category:
        ...

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events in insertion order."""
        ...

    @abstractmethod
    def list_events_by_category(self, category_id: CategoryId) -> list[Event]:
        """Return events whose category_id equals ``category_id``.

        The category itself is not required to exist.
        """
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def create_event(self, data: NewEvent) -> Event:
        """Assign the next ID, stamp created_at and persist."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, changes: Mapping[str, Any]) -> Event | None:
        """Merge ``changes`` onto the existing event.

        Returns None if no such event exists; never raises for a missing ID.
        """
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Remove the event. Returns True if a record existed.

        Bookings referencing the event are left untouched.
        """
        ...


class BookingStore(ABC):
    """Interface for booking persistence."""

    @abstractmethod
    def list_all(self) -> list[Booking]:
        ...

    @abstractmethod
    def list_for_user(self, user_id: UserId) -> list[Booking]:
        ...

    @abstractmethod
    def find_for_user_and_event(self, user_id: UserId, event_id: EventId) -> Booking | None:
        """Return the live booking for the pair, or None.

        Callers must check this before calling create.
        """
        ...

    @abstractmethod
    def get_by_id(self, booking_id: BookingId) -> Booking | None:
        ...

    @abstractmethod
    def create(
        self,
        user_id: UserId,
        event_id: EventId,
        reference_number: str | None = None,
    ) -> Booking:
        """Assign the next ID, stamp created_at and persist.

        A reference number is generated from the event name when none is given.

        Raises:
            DuplicateBookingError: If the pair already has a live booking.
        """
        ...

    @abstractmethod
    def delete(self, booking_id: BookingId) -> bool:
        """Remove the booking. Returns True if a record existed."""
        ...
