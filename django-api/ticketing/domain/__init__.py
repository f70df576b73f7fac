from ticketing.domain.models import (
    Booking,
    BookingWithEvent,
    Category,
    Event,
    NewEvent,
    NewUser,
    User,
)
from ticketing.domain.value_objects import (
    BookingId,
    Capacity,
    CategoryId,
    EventId,
    Money,
    ReferenceNumber,
    UserId,
)

__all__ = [
    "Booking",
    "BookingWithEvent",
    "Category",
    "Event",
    "NewEvent",
    "NewUser",
    "User",
    "BookingId",
    "CategoryId",
    "EventId",
    "UserId",
    "Money",
    "Capacity",
    "ReferenceNumber",
]
