from django.apps import apps
from django.urls import path

from ticketing.container import Container
from ticketing.handlers import (
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


def build_urlpatterns(container: Container) -> list:
    """Route table with every view bound to ``container``."""

    def view(cls):
        return cls.as_view(container=container)

    return [
        path("auth/register", view(RegisterView), name="auth-register"),
        path("auth/login", view(LoginView), name="auth-login"),
        path("auth/me", view(MeView), name="auth-me"),
        path("categories", view(CategoryListView), name="category-list"),
        path("events", view(EventListView), name="event-list"),
        path("events/<str:event_id>", view(EventDetailView), name="event-detail"),
        path("bookings", view(BookingListView), name="booking-list"),
        path(
            "bookings/check/<str:event_id>",
            view(BookingCheckView),
            name="booking-check",
        ),
        path("bookings/<str:booking_id>", view(BookingDetailView), name="booking-detail"),
    ]


urlpatterns = build_urlpatterns(apps.get_app_config("ticketing").container)
