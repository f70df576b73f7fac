"""Reference data loaded into a fresh set of stores."""

import logging
from datetime import datetime
from decimal import Decimal

from django.utils import timezone

from ticketing.domain import Capacity, CategoryId, Money, NewEvent, NewUser
from ticketing.stores.interfaces import BookingStore, CatalogStore, UserStore

logger = logging.getLogger(__name__)

SEED_USERS = [
    NewUser(
        username="admin",
        password="admin123",
        first_name="Admin",
        last_name="User",
        email="admin@eventhub.com",
        is_admin=True,
    ),
    NewUser(
        username="johndoe",
        password="user123",
        first_name="John",
        last_name="Doe",
        email="john@example.com",
    ),
]

SEED_CATEGORIES = [
    ("Music", "fas fa-music"),
    ("Technology", "fas fa-laptop-code"),
    ("Food & Drink", "fas fa-utensils"),
    ("Education", "fas fa-graduation-cap"),
    ("Business", "fas fa-briefcase"),
    ("Health & Fitness", "fas fa-dumbbell"),
]

_UNSPLASH = "https://images.unsplash.com/{}?auto=format&fit=crop&w=800&h=500"

# (name, description, category, date, venue, address, price, capacity, image)
SEED_EVENTS = [
    (
        "Annual Tech Conference 2023",
        "Join us for the biggest tech event of the year featuring keynotes, workshops, "
        "and networking opportunities with industry leaders from around the world.",
        2,
        datetime(2023, 10, 15, 9, 0),
        "Tech Center",
        "123 Tech Avenue, New York, NY 10001",
        "199",
        500,
        _UNSPLASH.format("photo-1540575467063-178a50c2df87"),
    ),
    (
        "Summer Music Festival",
        "Experience the best music under the summer sky with top artists and bands "
        "from around the world.",
        1,
        datetime(2023, 8, 20, 14, 0),
        "Central Park",
        "Central Park, New York, NY 10022",
        "85",
        2000,
        _UNSPLASH.format("photo-1540039155733-5bb30b53aa14"),
    ),
    (
        "Food & Wine Festival 2023",
        "Taste exceptional cuisine from award-winning chefs paired with the finest "
        "wines from around the world.",
        3,
        datetime(2023, 9, 10, 12, 0),
        "Grand Hotel",
        "500 Hotel Drive, Boston, MA 02108",
        "75",
        1000,
        _UNSPLASH.format("photo-1414235077428-338989a2e8c0"),
    ),
    (
        "Business Leadership Workshop",
        "Develop your leadership skills with industry experts in this intensive "
        "one-day workshop for professionals.",
        5,
        datetime(2023, 11, 5, 9, 0),
        "Business Center",
        "789 Corporate Boulevard, Chicago, IL 60601",
        "120",
        100,
        _UNSPLASH.format("photo-1558403194-611308249627"),
    ),
    (
        "Fitness Expo 2023",
        "Discover the latest in fitness trends, equipment, supplements, and workout "
        "techniques from top trainers.",
        6,
        datetime(2023, 10, 28, 10, 0),
        "Sports Arena",
        "123 Stadium Way, Los Angeles, CA 90001",
        "50",
        800,
        _UNSPLASH.format("photo-1571019613454-1cb2f99b2d8b"),
    ),
    (
        "Future of AI Education Seminar",
        "Explore how artificial intelligence is transforming education with leading "
        "researchers and educators.",
        4,
        datetime(2023, 12, 12, 13, 0),
        "University Hall",
        "100 University Drive, San Francisco, CA 94103",
        "0",
        200,
        _UNSPLASH.format("photo-1524178232363-1fb2b075b655"),
    ),
]

SEED_BOOKING_REFERENCE = "MF2023-ABCD1234"


def seed(users: UserStore, catalog: CatalogStore, bookings: BookingStore) -> None:
    """Load demo users, categories, events and one booking.

    With empty stores the seeded IDs start at 1, so "Summer Music Festival" is event 2.
    """
    created_users = [users.create(u) for u in SEED_USERS]

    for name, icon in SEED_CATEGORIES:
        catalog.create_category(name, icon)

    tz = timezone.get_current_timezone()
    created_events = []
    for name, description, category, date, venue, address, price, capacity, image in SEED_EVENTS:
        event = catalog.create_event(
            NewEvent(
                name=name,
                description=description,
                category_id=CategoryId(category),
                date=timezone.make_aware(date, tz),
                venue=venue,
                address=address,
                price=Money(Decimal(price)),
                capacity=Capacity(capacity),
                image=image,
            )
        )
        created_events.append(event)

    john, festival = created_users[1], created_events[1]
    bookings.create(john.id, festival.id, reference_number=SEED_BOOKING_REFERENCE)
    logger.info(
        "Seeded %d users, %d categories, %d events",
        len(SEED_USERS),
        len(SEED_CATEGORIES),
        len(SEED_EVENTS),
    )
