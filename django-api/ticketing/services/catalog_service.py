"""Catalog service - categories and events.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from typing import Any

from ticketing.domain import Category, CategoryId, Event, EventId, NewEvent
from ticketing.domain.errors import EventNotFoundError
from ticketing.services.parsing import parse_id
from ticketing.stores.interfaces import CatalogStore

logger = logging.getLogger(__name__)


class CatalogService:
    """Service for event catalog operations."""

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    def list_categories(self) -> list[Category]:
        return self._store.list_categories()

    def list_events(
        self,
        category_id: str | int | None = None,
        search: str | None = None,
    ) -> list[Event]:
        """Return events, optionally narrowed by category and a search term.

        A category_id that is not a positive integer applies no filter. The
        search is a case-insensitive substring match on name and description,
        applied after the category filter.
        """
        category = parse_id(CategoryId, category_id)
        if category is not None:
            events = self._store.list_events_by_category(category)
        else:
            events = self._store.list_events()

        term = (search or "").strip().lower()
        if term:
            events = [
                e for e in events if term in e.name.lower() or term in e.description.lower()
            ]
        return events

    def get_event(self, event_id: str | int) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist or the ID is malformed.
        """
        parsed = parse_id(EventId, event_id)
        event = self._store.get_event(parsed) if parsed is not None else None
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def create_event(self, data: NewEvent) -> Event:
        event = self._store.create_event(data)
        logger.info("Created event %s (%s)", event.id, event.name)
        return event

    def update_event(self, event_id: str | int, changes: Mapping[str, Any]) -> Event:
        """Apply a partial update.

        Raises:
            EventNotFoundError: If the event does not exist or the ID is malformed.
        """
        parsed = parse_id(EventId, event_id)
        event = self._store.update_event(parsed, changes) if parsed is not None else None
        if event is None:
            raise EventNotFoundError(event_id)
        logger.info("Updated event %s fields=%s", parsed, sorted(changes))
        return event

    def delete_event(self, event_id: str | int) -> None:
        """Delete an event. Existing bookings for it are kept.

        Raises:
            EventNotFoundError: If the event does not exist or the ID is malformed.
        """
        parsed = parse_id(EventId, event_id)
        if parsed is None or not self._store.delete_event(parsed):
            raise EventNotFoundError(event_id)
        logger.info("Deleted event %s", parsed)
