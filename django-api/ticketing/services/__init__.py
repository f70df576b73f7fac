from ticketing.services.auth_service import AuthService
from ticketing.services.booking_service import BookingService
from ticketing.services.catalog_service import CatalogService

__all__ = ["AuthService", "BookingService", "CatalogService"]
