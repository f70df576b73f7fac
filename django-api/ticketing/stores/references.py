"""Booking reference generation shared by every BookingStore backend."""

import logging
from collections.abc import Callable

from ticketing.domain import ReferenceNumber

logger = logging.getLogger(__name__)

MAX_REFERENCE_ATTEMPTS = 5


class ReferenceExhaustedError(RuntimeError):
    """Every generated reference collided with an existing booking."""


def generate_reference(
    event_name: str | None,
    year: int,
    is_taken: Callable[[str], bool],
) -> str:
    """Return a reference for ``event_name`` that ``is_taken`` reports as free."""
    for attempt in range(1, MAX_REFERENCE_ATTEMPTS + 1):
        candidate = str(ReferenceNumber.generate(event_name, year))
        if not is_taken(candidate):
            return candidate
        logger.warning("Booking reference collision on attempt %d", attempt)
    raise ReferenceExhaustedError("Could not generate a unique booking reference")
