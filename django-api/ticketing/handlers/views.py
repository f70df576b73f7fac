"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Let domain errors propagate to the exception handler for HTTP mapping
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.serializers import Serializer
from rest_framework.views import APIView

from ticketing.container import Container
from ticketing.domain.errors import ValidationError
from ticketing.handlers.authentication import (
    AdminOrReadOnly,
    BearerTokenAuthentication,
    RequiresIdentity,
)
from ticketing.handlers.serializers import (
    BookingCreateSerializer,
    BookingSerializer,
    BookingWithEventSerializer,
    CategorySerializer,
    EventInputSerializer,
    EventSerializer,
    LoginSerializer,
    RegisterSerializer,
    UserSerializer,
    first_error_message,
)


def validated(serializer: Serializer) -> Serializer:
    """Run validation, surfacing only the first violation."""
    if not serializer.is_valid():
        raise ValidationError(first_error_message(serializer.errors))
    return serializer


class TicketingView(APIView):
    """Base view wired to a Container through ``as_view(container=...)``."""

    container: Container | None = None
    failure_messages: dict[str, str] = {}

    def get_authenticators(self):
        return [BearerTokenAuthentication(self.container.tokens)]


class RegisterView(TicketingView):
    """Handler for POST /api/auth/register"""

    failure_messages = {"POST": "Failed to register user"}

    def post(self, request: Request) -> Response:
        serializer = validated(RegisterSerializer(data=request.data))
        user, token = self.container.auth_service.register(serializer.to_new_user())
        return Response(
            {"user": UserSerializer(user).data, "token": token},
            status=status.HTTP_201_CREATED,
        )


class LoginView(TicketingView):
    """Handler for POST /api/auth/login"""

    failure_messages = {"POST": "Failed to log in"}

    def post(self, request: Request) -> Response:
        serializer = validated(LoginSerializer(data=request.data))
        user, token = self.container.auth_service.login(
            serializer.validated_data["email"], serializer.validated_data["password"]
        )
        return Response({"user": UserSerializer(user).data, "token": token})


class MeView(TicketingView):
    """Handler for GET /api/auth/me"""

    permission_classes = [RequiresIdentity]
    failure_messages = {"GET": "Failed to get user info"}

    def get(self, request: Request) -> Response:
        user = self.container.auth_service.me(request.user)
        return Response(UserSerializer(user).data)


class CategoryListView(TicketingView):
    """Handler for GET /api/categories"""

    failure_messages = {"GET": "Failed to fetch categories"}

    def get(self, request: Request) -> Response:
        categories = self.container.catalog_service.list_categories()
        return Response(CategorySerializer(categories, many=True).data)


class EventListView(TicketingView):
    """Handler for GET and POST /api/events"""

    permission_classes = [AdminOrReadOnly]
    failure_messages = {"GET": "Failed to fetch events", "POST": "Failed to create event"}

    def get(self, request: Request) -> Response:
        events = self.container.catalog_service.list_events(
            category_id=request.query_params.get("categoryId"),
            search=request.query_params.get("search"),
        )
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = validated(EventInputSerializer(data=request.data))
        event = self.container.catalog_service.create_event(serializer.to_new_event())
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(TicketingView):
    """Handler for GET, PUT and DELETE /api/events/{event_id}"""

    permission_classes = [AdminOrReadOnly]
    failure_messages = {
        "GET": "Failed to fetch event",
        "PUT": "Failed to update event",
        "DELETE": "Failed to delete event",
    }

    def get(self, request: Request, event_id: str) -> Response:
        event = self.container.catalog_service.get_event(event_id)
        return Response(EventSerializer(event).data)

    def put(self, request: Request, event_id: str) -> Response:
        serializer = validated(EventInputSerializer(data=request.data, partial=True))
        event = self.container.catalog_service.update_event(event_id, serializer.to_changes())
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        self.container.catalog_service.delete_event(event_id)
        return Response({"message": "Event deleted successfully"})


class BookingListView(TicketingView):
    """Handler for GET and POST /api/bookings"""

    permission_classes = [RequiresIdentity]
    failure_messages = {"GET": "Failed to fetch bookings", "POST": "Failed to create booking"}

    def get(self, request: Request) -> Response:
        bookings = self.container.booking_service.list_bookings(request.user)
        return Response(BookingWithEventSerializer(bookings, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = validated(BookingCreateSerializer(data=request.data))
        booking = self.container.booking_service.book_event(
            request.user, serializer.validated_data["event_id"]
        )
        return Response(BookingWithEventSerializer(booking).data, status=status.HTTP_201_CREATED)


class BookingDetailView(TicketingView):
    """Handler for DELETE /api/bookings/{booking_id}"""

    permission_classes = [RequiresIdentity]
    failure_messages = {"DELETE": "Failed to cancel booking"}

    def delete(self, request: Request, booking_id: str) -> Response:
        self.container.booking_service.cancel_booking(request.user, booking_id)
        return Response({"message": "Booking cancelled successfully"})


class BookingCheckView(TicketingView):
    """Handler for GET /api/bookings/check/{event_id}"""

    permission_classes = [RequiresIdentity]
    failure_messages = {"GET": "Failed to check booking status"}

    def get(self, request: Request, event_id: str) -> Response:
        booking = self.container.booking_service.check_booking(request.user, event_id)
        body = {"isBooked": booking is not None}
        if booking is not None:
            body["booking"] = BookingSerializer(booking).data
        return Response(body)

