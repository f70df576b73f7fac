"""Domain primitives that enforce validity at creation time."""

import secrets
import string
from dataclasses import dataclass
from decimal import Decimal
from typing import Self


@dataclass(frozen=True)
class _IntId:
    """Positive integer identifier assigned sequentially by a store."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Identifier must be an integer")
        if self.value < 1:
            raise ValueError("Identifier must be positive")

    @classmethod
    def from_string(cls, value: str) -> Self:
        text = str(value).strip()
        if not text.isdigit():
            raise ValueError(f"Invalid identifier: {value!r}")
        return cls(value=int(text))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UserId(_IntId):
    """Unique identifier for a User."""


@dataclass(frozen=True)
class CategoryId(_IntId):
    """Unique identifier for a Category."""


@dataclass(frozen=True)
class EventId(_IntId):
    """Unique identifier for an Event."""


@dataclass(frozen=True)
class BookingId(_IntId):
    """Unique identifier for a Booking."""


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Strictly positive number of attendees an event admits."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Capacity must be at least 1")


REFERENCE_ALPHABET = string.ascii_uppercase + string.digits
REFERENCE_TOKEN_LENGTH = 8
FALLBACK_REFERENCE_PREFIX = "EV"


@dataclass(frozen=True)
class ReferenceNumber:
    """Human-readable booking reference, e.g. ``SU2024-7KQ2ZP1M``.

    Not cryptographically unique: the random token only makes collisions
    unlikely, stores are responsible for rejecting duplicates.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Reference number cannot be empty")

    @classmethod
    def generate(cls, event_name: str | None, year: int) -> Self:
        prefix = event_name[:2].upper() if event_name else FALLBACK_REFERENCE_PREFIX
        token = "".join(
            secrets.choice(REFERENCE_ALPHABET) for _ in range(REFERENCE_TOKEN_LENGTH)
        )
        return cls(value=f"{prefix}{year}-{token}")

    def __str__(self) -> str:
        return self.value
