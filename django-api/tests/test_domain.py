"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import re
from decimal import Decimal

import pytest

from ticketing.domain import BookingId, Capacity, EventId, Money, ReferenceNumber, UserId
from ticketing.domain.errors import DuplicateBookingError, ErrorCode, EventNotFoundError

REFERENCE_PATTERN = re.compile(r"^[A-Z]{2}\d{4}-[A-Z0-9]{8}$")


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        assert Money(Decimal("85")).amount == Decimal("85")

    def test_money_accepts_zero(self):
        assert Money(Decimal("0")).amount == 0

    def test_money_rejects_negative_amount(self):
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))

    def test_money_str_format(self):
        assert str(Money(Decimal("199"))) == "199.00"


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_positive_value(self):
        assert Capacity(500).value == 500

    def test_capacity_rejects_zero(self):
        with pytest.raises(ValueError):
            Capacity(0)

    def test_capacity_rejects_negative_value(self):
        with pytest.raises(ValueError):
            Capacity(-1)


class TestIds:
    """Tests for integer identifier value objects."""

    def test_from_string_valid_integer(self):
        assert EventId.from_string("42") == EventId(42)

    @pytest.mark.parametrize("raw", ["abc", "", "-3", "0", "1.5"])
    def test_from_string_rejects_non_positive_integers(self, raw):
        with pytest.raises(ValueError):
            EventId.from_string(raw)

    def test_rejects_bool(self):
        with pytest.raises(ValueError):
            UserId(True)

    def test_ids_of_different_kinds_are_not_equal(self):
        assert UserId(1) != BookingId(1)

    def test_str_is_bare_integer(self):
        assert str(BookingId(7)) == "7"


class TestReferenceNumber:
    """Tests for booking reference generation."""

    def test_generate_uses_event_name_prefix_and_year(self):
        ref = ReferenceNumber.generate("Summer Music Festival", 2024)

        assert ref.value.startswith("SU2024-")
        assert REFERENCE_PATTERN.match(ref.value)

    def test_generate_falls_back_to_ev_without_event(self):
        ref = ReferenceNumber.generate(None, 2024)

        assert ref.value.startswith("EV2024-")
        assert REFERENCE_PATTERN.match(ref.value)

    def test_generated_tokens_differ(self):
        refs = {ReferenceNumber.generate("Fitness Expo", 2024).value for _ in range(20)}

        assert len(refs) > 1

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            ReferenceNumber("")


class TestDomainErrors:
    def test_error_carries_code_and_safe_message(self):
        error = EventNotFoundError(9)

        assert error.code is ErrorCode.EVENT_NOT_FOUND
        assert error.message == "Event not found"
        assert error.event_id == 9
        assert str(error) == "EVENT_NOT_FOUND: Event not found"

    def test_duplicate_booking_message(self):
        assert DuplicateBookingError(2).message == "You have already booked this event"
