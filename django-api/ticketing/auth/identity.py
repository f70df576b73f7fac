from dataclasses import dataclass

from ticketing.domain.value_objects import UserId


@dataclass(frozen=True)
class Identity:
    """Caller resolved from a verified session token.

    Attached to ``request.user`` by the bearer authentication class; anonymous
    requests carry ``None`` instead.
    """

    user_id: UserId
    is_admin: bool

    @property
    def is_authenticated(self) -> bool:
        return True

    def can_manage(self, owner_id: UserId) -> bool:
        """Owner-or-admin rule for records belonging to ``owner_id``."""
        return self.is_admin or self.user_id == owner_id
