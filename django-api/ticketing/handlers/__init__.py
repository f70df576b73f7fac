from ticketing.handlers.views import (
    BookingCheckView,
    BookingDetailView,
    BookingListView,
    CategoryListView,
    EventDetailView,
    EventListView,
    LoginView,
    MeView,
    RegisterView,
)

__all__ = [
    "BookingCheckView",
    "BookingDetailView",
    "BookingListView",
    "CategoryListView",
    "EventDetailView",
    "EventListView",
    "LoginView",
    "MeView",
    "RegisterView",
]
