"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in ticketing/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from ticketing.domain.value_objects import (
    BookingId,
    Capacity,
    CategoryId,
    EventId,
    Money,
    UserId,
)


@dataclass(frozen=True)
class User:
    """Domain representation of a registered User.

    ``password_hash`` is carried for credential checks only and must be
    stripped before the record leaves the service layer.
    """

    id: UserId
    username: str
    password_hash: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool
    created_at: datetime


@dataclass(frozen=True)
class NewUser:
    """Registration data; ``password`` is plaintext until the store hashes it."""

    username: str
    password: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool = False


@dataclass(frozen=True)
class Category:
    """Domain representation of a Category."""

    id: CategoryId
    name: str
    icon: str


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    description: str
    category_id: CategoryId
    date: datetime
    venue: str
    address: str
    price: Money
    capacity: Capacity
    image: str
    created_at: datetime


@dataclass(frozen=True)
class NewEvent:
    name: str
    description: str
    category_id: CategoryId
    date: datetime
    venue: str
    address: str
    price: Money
    capacity: Capacity
    image: str


# Fields of Event an administrator may change after creation.
EVENT_MUTABLE_FIELDS = frozenset(
    {"name", "description", "category_id", "date", "venue", "address", "price", "capacity", "image"}
)


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking. Related records are referenced by id only."""

    id: BookingId
    user_id: UserId
    event_id: EventId
    reference_number: str
    created_at: datetime


@dataclass(frozen=True)
class BookingWithEvent:
    """A booking composed with its event; ``event`` is None once the event is deleted."""

    booking: Booking
    event: Event | None
