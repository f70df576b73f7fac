"""Serializers for request validation and for rendering domain models.

Wire keys are camelCase; ``source`` maps them onto snake_case domain fields.
"""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from rest_framework import serializers

from ticketing.domain import Capacity, CategoryId, Money, NewEvent, NewUser


def _messages(label: str, **extra: str) -> dict[str, str]:
    missing = f"{label} is required"
    return {"required": missing, "blank": missing, "null": missing, **extra}


def first_error_message(errors: Any) -> str:
    """Return the first message from DRF's nested ``serializer.errors``."""
    if isinstance(errors, Mapping):
        for value in errors.values():
            return first_error_message(value)
    elif isinstance(errors, (list, tuple)):
        for value in errors:
            return first_error_message(value)
    elif errors:
        return str(errors)
    return "Invalid request"


# Output


class UserSerializer(serializers.Serializer):
    """Serializer for User domain model. The password hash is never rendered."""

    id = serializers.IntegerField(source="id.value")
    username = serializers.CharField()
    firstName = serializers.CharField(source="first_name")
    lastName = serializers.CharField(source="last_name")
    email = serializers.EmailField()
    isAdmin = serializers.BooleanField(source="is_admin")
    createdAt = serializers.DateTimeField(source="created_at")


class CategorySerializer(serializers.Serializer):
    """Serializer for Category domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    icon = serializers.CharField()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    categoryId = serializers.IntegerField(source="category_id.value")
    date = serializers.DateTimeField()
    venue = serializers.CharField()
    address = serializers.CharField()
    price = serializers.DecimalField(
        source="price.amount", max_digits=10, decimal_places=2, coerce_to_string=False
    )
    capacity = serializers.IntegerField(source="capacity.value")
    image = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.IntegerField(source="id.value")
    userId = serializers.IntegerField(source="user_id.value")
    eventId = serializers.IntegerField(source="event_id.value")
    referenceNumber = serializers.CharField(source="reference_number")
    createdAt = serializers.DateTimeField(source="created_at")


class BookingWithEventSerializer(serializers.Serializer):
    """Booking fields flattened, with the joined event nested under ``event``."""

    id = serializers.IntegerField(source="booking.id.value")
    userId = serializers.IntegerField(source="booking.user_id.value")
    eventId = serializers.IntegerField(source="booking.event_id.value")
    referenceNumber = serializers.CharField(source="booking.reference_number")
    createdAt = serializers.DateTimeField(source="booking.created_at")
    event = EventSerializer(allow_null=True)


# Input


class RegisterSerializer(serializers.Serializer):
    username = serializers.CharField(
        min_length=3,
        error_messages=_messages(
            "Username", min_length="Username must be at least 3 characters"
        ),
    )
    firstName = serializers.CharField(source="first_name", error_messages=_messages("First name"))
    lastName = serializers.CharField(source="last_name", error_messages=_messages("Last name"))
    email = serializers.EmailField(
        error_messages=_messages("Email", invalid="Please enter a valid email address")
    )
    password = serializers.CharField(
        min_length=6,
        trim_whitespace=False,
        error_messages=_messages(
            "Password", min_length="Password must be at least 6 characters"
        ),
    )
    confirmPassword = serializers.CharField(
        source="confirm_password",
        trim_whitespace=False,
        error_messages=_messages("Password confirmation"),
    )

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        if attrs["password"] != attrs["confirm_password"]:
            raise serializers.ValidationError({"confirmPassword": "Passwords don't match"})
        return attrs

    def to_new_user(self) -> NewUser:
        data = self.validated_data
        return NewUser(
            username=data["username"],
            password=data["password"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            email=data["email"],
        )


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField(
        error_messages=_messages("Email", invalid="Please enter a valid email address")
    )
    password = serializers.CharField(
        min_length=6,
        trim_whitespace=False,
        error_messages=_messages(
            "Password", min_length="Password must be at least 6 characters"
        ),
    )


class EventInputSerializer(serializers.Serializer):
    """Validates event payloads. Use ``partial=True`` for updates."""

    name = serializers.CharField(
        min_length=3,
        error_messages=_messages(
            "Event name", min_length="Event name must be at least 3 characters"
        ),
    )
    description = serializers.CharField(
        min_length=10,
        error_messages=_messages(
            "Description", min_length="Description must be at least 10 characters"
        ),
    )
    categoryId = serializers.IntegerField(
        source="category_id",
        min_value=1,
        error_messages=_messages(
            "Category",
            invalid="Please select a category",
            min_value="Please select a category",
        ),
    )
    date = serializers.DateTimeField(
        error_messages=_messages("Date", invalid="Please provide a valid date")
    )
    venue = serializers.CharField(
        min_length=3,
        error_messages=_messages("Venue", min_length="Venue must be at least 3 characters"),
    )
    address = serializers.CharField(
        min_length=5,
        error_messages=_messages(
            "Address", min_length="Address must be at least 5 characters"
        ),
    )
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0"),
        error_messages=_messages(
            "Price",
            invalid="Price must be a number",
            min_value="Price must be a positive number",
            max_decimal_places="Price must have at most 2 decimal places",
            max_digits="Price is too large",
            max_whole_digits="Price is too large",
        ),
    )
    capacity = serializers.IntegerField(
        min_value=1,
        error_messages=_messages(
            "Capacity",
            invalid="Capacity must be a whole number",
            min_value="Capacity must be at least 1",
        ),
    )
    image = serializers.URLField(
        max_length=1000,
        error_messages=_messages("Image", invalid="Please provide a valid image URL"),
    )

    def to_changes(self) -> dict[str, Any]:
        """Validated fields converted to domain values, keyed by domain field name."""
        changes = dict(self.validated_data)
        if "category_id" in changes:
            changes["category_id"] = CategoryId(changes["category_id"])
        if "price" in changes:
            changes["price"] = Money(changes["price"])
        if "capacity" in changes:
            changes["capacity"] = Capacity(changes["capacity"])
        return changes

    def to_new_event(self) -> NewEvent:
        return NewEvent(**self.to_changes())


class BookingCreateSerializer(serializers.Serializer):
    eventId = serializers.IntegerField(
        source="event_id",
        min_value=1,
        error_messages=_messages(
            "Event ID", invalid="Invalid event ID format", min_value="Invalid event ID format"
        ),
    )
