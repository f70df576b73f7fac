"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models
from django.db.models.functions import Lower


class Account(models.Model):
    """Persistence model for registered users."""

    username = models.CharField(max_length=150)
    password_hash = models.CharField(max_length=128)
    first_name = models.CharField(max_length=150)
    last_name = models.CharField(max_length=150)
    email = models.EmailField(max_length=254)
    is_admin = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(Lower("email"), name="account_email_ci_unique"),
        ]

    def __str__(self) -> str:
        return self.email


class Category(models.Model):
    """Persistence model for event categories."""

    name = models.CharField(max_length=100)
    icon = models.CharField(max_length=100)

    class Meta:
        ordering = ["id"]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name


class Event(models.Model):
    """Persistence model for events.

    ``category_id`` is a plain column: events may reference categories that
    do not exist.
    """

    name = models.CharField(max_length=255)
    description = models.TextField()
    category_id = models.PositiveIntegerField()
    date = models.DateTimeField()
    venue = models.CharField(max_length=255)
    address = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    capacity = models.PositiveIntegerField()
    image = models.URLField(max_length=1000)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["category_id"], name="event_category_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class Booking(models.Model):
    """Persistence model for bookings.

    User and event are referenced by id without foreign keys, so deleting an
    event leaves its bookings in place.
    """

    user_id = models.PositiveIntegerField()
    event_id = models.PositiveIntegerField()
    reference_number = models.CharField(max_length=32, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["user_id", "event_id"], name="booking_user_event_unique"
            ),
        ]
        indexes = [
            models.Index(fields=["user_id"], name="booking_user_idx"),
        ]

    def __str__(self) -> str:
        return self.reference_number
