"""Booking workflow: one live booking per user and event, owner-or-admin cancellation.

Events are looked up independently and composed with bookings here; the
booking store never resolves related records.
"""

import logging

from ticketing.auth import Identity
from ticketing.domain import Booking, BookingId, BookingWithEvent, EventId
from ticketing.domain.errors import (
    BookingForbiddenError,
    BookingNotFoundError,
    DuplicateBookingError,
    EventNotFoundError,
)
from ticketing.services.parsing import parse_id
from ticketing.stores.interfaces import BookingStore, CatalogStore

logger = logging.getLogger(__name__)


class BookingService:
    """Service for booking operations.

    Capacity is deliberately not compared with the number of bookings.
    """

    def __init__(self, bookings: BookingStore, catalog: CatalogStore) -> None:
        self._bookings = bookings
        self._catalog = catalog

    def list_bookings(self, identity: Identity) -> list[BookingWithEvent]:
        """Return the caller's bookings, or every booking for an admin, joined with events."""
        if identity.is_admin:
            bookings = self._bookings.list_all()
        else:
            bookings = self._bookings.list_for_user(identity.user_id)
        return [self._with_event(b) for b in bookings]

    def book_event(self, identity: Identity, event_id: str | int) -> BookingWithEvent:
        """Book ``event_id`` for the caller.

        Raises:
            EventNotFoundError: If the event does not exist or the ID is malformed.
            DuplicateBookingError: If the caller already booked the event.
        """
        parsed = parse_id(EventId, event_id)
        event = self._catalog.get_event(parsed) if parsed is not None else None
        if event is None:
            raise EventNotFoundError(event_id)

        if self._bookings.find_for_user_and_event(identity.user_id, parsed) is not None:
            logger.warning("User %s already booked event %s", identity.user_id, parsed)
            raise DuplicateBookingError(parsed.value)

        booking = self._bookings.create(identity.user_id, parsed)
        logger.info(
            "User %s booked event %s ref=%s", identity.user_id, parsed, booking.reference_number
        )
        return BookingWithEvent(booking=booking, event=event)

    def cancel_booking(self, identity: Identity, booking_id: str | int) -> None:
        """Cancel a booking owned by the caller, or any booking for an admin.

        Raises:
            BookingNotFoundError: If the booking does not exist or the ID is malformed.
            BookingForbiddenError: If the caller is neither owner nor admin.
        """
        parsed = parse_id(BookingId, booking_id)
        booking = self._bookings.get_by_id(parsed) if parsed is not None else None
        if booking is None:
            raise BookingNotFoundError(booking_id)

        if not identity.can_manage(booking.user_id):
            logger.warning("User %s may not cancel booking %s", identity.user_id, parsed)
            raise BookingForbiddenError(parsed.value)

        if not self._bookings.delete(parsed):
            # Removed concurrently between lookup and delete.
            raise BookingNotFoundError(parsed.value)
        logger.info("Booking %s cancelled by user %s", parsed, identity.user_id)

    def check_booking(self, identity: Identity, event_id: str | int) -> Booking | None:
        """Return the caller's booking for ``event_id``, if any. A malformed ID is never booked."""
        parsed = parse_id(EventId, event_id)
        if parsed is None:
            return None
        return self._bookings.find_for_user_and_event(identity.user_id, parsed)

    def _with_event(self, booking: Booking) -> BookingWithEvent:
        return BookingWithEvent(booking=booking, event=self._catalog.get_event(booking.event_id))
