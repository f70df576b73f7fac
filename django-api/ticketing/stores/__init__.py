from ticketing.stores.interfaces import BookingStore, CatalogStore, UserStore

__all__ = ["BookingStore", "CatalogStore", "UserStore"]
