"""Unit tests for the in-memory store implementations.

Run with: pytest tests/test_stores.py -v
"""

import re
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from django.utils import timezone as dj_timezone

from ticketing.auth import BcryptPasswordHasher
from ticketing.domain import (
    BookingId,
    Capacity,
    CategoryId,
    EventId,
    Money,
    NewEvent,
    NewUser,
    UserId,
)
from ticketing.domain.errors import DuplicateBookingError, DuplicateEmailError
from ticketing.stores.memory_store import (
    InMemoryBookingStore,
    InMemoryCatalogStore,
    InMemoryUserStore,
)

REFERENCE_PATTERN = re.compile(r"^[A-Z]{2}\d{4}-[A-Z0-9]{8}$")


def new_event(name: str = "Summer Music Festival", category: int = 1) -> NewEvent:
    return NewEvent(
        name=name,
        description="Open air concerts all weekend long.",
        category_id=CategoryId(category),
        date=datetime(2025, 8, 20, 14, 0, tzinfo=timezone.utc),
        venue="Central Park",
        address="Central Park, New York, NY 10022",
        price=Money(Decimal("85.00")),
        capacity=Capacity(2000),
        image="https://example.com/festival.jpg",
    )


def new_user(email: str = "alice@example.com") -> NewUser:
    return NewUser(
        username="alice",
        password="secret1",
        first_name="Alice",
        last_name="Smith",
        email=email,
    )


@pytest.fixture
def hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=10)


@pytest.fixture
def users(hasher) -> InMemoryUserStore:
    return InMemoryUserStore(hasher)


@pytest.fixture
def catalog() -> InMemoryCatalogStore:
    return InMemoryCatalogStore()


@pytest.fixture
def bookings(catalog) -> InMemoryBookingStore:
    return InMemoryBookingStore(catalog)


class TestInMemoryUserStore:
    def test_create_hashes_password_and_assigns_sequential_ids(self, users, hasher):
        first = users.create(new_user("a@example.com"))
        second = users.create(new_user("b@example.com"))

        assert (first.id, second.id) == (UserId(1), UserId(2))
        assert first.password_hash != "secret1"
        assert first.password_hash.startswith("$2b$10$")
        assert hasher.verify_password("secret1", first.password_hash)
        assert first.created_at is not None
        assert first.is_admin is False

    def test_find_by_email_is_case_insensitive(self, users):
        created = users.create(new_user("A@B.com"))

        assert users.find_by_email("a@b.com") == created
        assert users.find_by_email("A@B.COM") == created

    def test_find_missing_returns_none(self, users):
        assert users.find_by_email("nobody@example.com") is None
        assert users.find_by_id(UserId(99)) is None

    def test_create_rejects_duplicate_email_in_other_case(self, users):
        users.create(new_user("alice@example.com"))

        with pytest.raises(DuplicateEmailError):
            users.create(new_user("ALICE@example.com"))


class TestInMemoryCatalogStore:
    def test_categories_keep_insertion_order(self, catalog):
        catalog.create_category("Music", "fas fa-music")
        catalog.create_category("Technology", "fas fa-laptop-code")

        assert [c.name for c in catalog.list_categories()] == ["Music", "Technology"]
        assert catalog.get_category(CategoryId(2)).icon == "fas fa-laptop-code"

    def test_create_event_assigns_id_and_timestamp(self, catalog):
        event = catalog.create_event(new_event())

        assert event.id == EventId(1)
        assert event.created_at is not None
        assert catalog.get_event(EventId(1)) == event

    def test_list_events_by_category_filters_without_checking_category(self, catalog):
        catalog.create_event(new_event("Jazz Night", category=1))
        catalog.create_event(new_event("PyCon", category=2))
        catalog.create_event(new_event("Orphan", category=99))

        assert [e.name for e in catalog.list_events_by_category(CategoryId(1))] == ["Jazz Night"]
        assert [e.name for e in catalog.list_events_by_category(CategoryId(99))] == ["Orphan"]

    def test_update_event_merges_fields(self, catalog):
        event = catalog.create_event(new_event())

        updated = catalog.update_event(event.id, {"venue": "Madison Square Garden"})

        assert updated.venue == "Madison Square Garden"
        assert updated.name == event.name
        assert updated.created_at == event.created_at
        assert catalog.get_event(event.id).venue == "Madison Square Garden"

    def test_update_missing_event_returns_none(self, catalog):
        assert catalog.update_event(EventId(42), {"name": "Ghost"}) is None

    def test_update_rejects_unknown_fields(self, catalog):
        event = catalog.create_event(new_event())

        with pytest.raises(ValueError):
            catalog.update_event(event.id, {"id": EventId(7)})

    def test_delete_event(self, catalog):
        event = catalog.create_event(new_event())

        assert catalog.delete_event(event.id) is True
        assert catalog.delete_event(event.id) is False
        assert catalog.get_event(event.id) is None

    def test_ids_are_not_reused_after_delete(self, catalog):
        first = catalog.create_event(new_event())
        catalog.delete_event(first.id)

        assert catalog.create_event(new_event()).id == EventId(2)


class TestInMemoryBookingStore:
    def test_create_generates_reference_from_event_name(self, catalog, bookings):
        event = catalog.create_event(new_event("Summer Music Festival"))

        booking = bookings.create(UserId(1), event.id)

        year = dj_timezone.localdate().year
        assert booking.id == BookingId(1)
        assert booking.reference_number.startswith(f"SU{year}-")
        assert REFERENCE_PATTERN.match(booking.reference_number)

    def test_create_falls_back_to_ev_for_unknown_event(self, bookings):
        booking = bookings.create(UserId(1), EventId(404))

        assert booking.reference_number.startswith("EV")
        assert REFERENCE_PATTERN.match(booking.reference_number)

    def test_create_keeps_supplied_reference(self, bookings):
        booking = bookings.create(UserId(1), EventId(2), reference_number="MF2023-ABCD1234")

        assert booking.reference_number == "MF2023-ABCD1234"

    def test_create_rejects_second_booking_for_same_pair(self, catalog, bookings):
        event = catalog.create_event(new_event())
        bookings.create(UserId(1), event.id)

        with pytest.raises(DuplicateBookingError):
            bookings.create(UserId(1), event.id)

    def test_lookups(self, catalog, bookings):
        event = catalog.create_event(new_event())
        mine = bookings.create(UserId(1), event.id)
        theirs = bookings.create(UserId(2), event.id)

        assert bookings.list_all() == [mine, theirs]
        assert bookings.list_for_user(UserId(2)) == [theirs]
        assert bookings.find_for_user_and_event(UserId(1), event.id) == mine
        assert bookings.find_for_user_and_event(UserId(3), event.id) is None
        assert bookings.get_by_id(theirs.id) == theirs

    def test_delete_frees_the_pair_for_rebooking(self, catalog, bookings):
        event = catalog.create_event(new_event())
        booking = bookings.create(UserId(1), event.id)

        assert bookings.delete(booking.id) is True
        assert bookings.delete(booking.id) is False
        assert bookings.find_for_user_and_event(UserId(1), event.id) is None
        assert bookings.create(UserId(1), event.id).id == BookingId(2)

    def test_reference_collision_is_regenerated(self, catalog, bookings, monkeypatch):
        from ticketing.domain import ReferenceNumber

        event = catalog.create_event(new_event("Summer Music Festival"))
        bookings.create(UserId(1), event.id, reference_number="SU2030-AAAAAAAA")
        candidates = iter(["SU2030-AAAAAAAA", "SU2030-BBBBBBBB"])
        monkeypatch.setattr(
            ReferenceNumber,
            "generate",
            classmethod(lambda cls, name, year: cls(next(candidates))),
        )

        booking = bookings.create(UserId(2), event.id)

        assert booking.reference_number == "SU2030-BBBBBBBB"

    def test_deleting_event_leaves_bookings_in_place(self, catalog, bookings):
        event = catalog.create_event(new_event())
        booking = bookings.create(UserId(1), event.id)

        catalog.delete_event(event.id)

        assert bookings.get_by_id(booking.id) == booking
